class LLMError(RuntimeError):
    pass


class LLMValidationError(LLMError):
    """Raised when the model output cannot be decoded into the requested type."""
