import sys
import types
from types import SimpleNamespace

import pytest


def make_completion(content="{}", *, usage=(30, 20, 10), n_choices=1):
    """Build an object shaped like an OpenAI ChatCompletion."""
    total, prompt, completion = usage if usage is not None else (None, None, None)
    return SimpleNamespace(
        usage=(
            SimpleNamespace(
                total_tokens=total, prompt_tokens=prompt, completion_tokens=completion
            )
            if usage is not None
            else None
        ),
        choices=[
            SimpleNamespace(message=SimpleNamespace(content=content))
            for _ in range(n_choices)
        ],
    )


class FakeOpenAIController:
    """Records constructed clients and requests; serves a canned response."""

    def __init__(self):
        self.response = make_completion()
        self.error = None
        self.client_kwargs: list[dict] = []
        self.requests: list[dict] = []

    def respond_with(self, content, **kwargs):
        self.response = make_completion(content, **kwargs)

    def build_module(self) -> types.ModuleType:
        controller = self

        class _Completions:
            def create(self, **kwargs):
                controller.requests.append(kwargs)
                if controller.error is not None:
                    raise controller.error
                return controller.response

        class OpenAI:
            def __init__(self, **kwargs):
                controller.client_kwargs.append(kwargs)
                self.chat = SimpleNamespace(completions=_Completions())

        openai = types.ModuleType("openai")
        openai.OpenAI = OpenAI  # type: ignore[attr-defined]
        return openai


@pytest.fixture
def fake_openai(monkeypatch):
    """Replace the `openai` SDK with a stub that never touches the network."""
    controller = FakeOpenAIController()
    monkeypatch.setitem(sys.modules, "openai", controller.build_module())
    return controller
