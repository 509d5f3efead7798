from typing import Any

from jsonmode.schema import json_schema_of

STRUCTURED_PROMPT_TEMPLATE = """{instructions}

--- {data_label} ---
{data}

--- output json schema ---
{schema}
"""


def structured_prompt(
    instructions: str, data: str, target_type: Any, *, data_label: str = "input"
) -> str:
    """
    Build a prompt asking for JSON that follows the schema of `target_type`.

    Example:
        prompt = structured_prompt(
            "Parse the following sentence into English and return the results "
            "in JSON according to the following JSON schema.",
            sentence,
            Entries,
            data_label="sentence",
        )
        result = send_prompt(api_key, "gpt-4o-mini", prompt, Entries)
    """
    return STRUCTURED_PROMPT_TEMPLATE.format(
        instructions=instructions.strip(),
        data_label=data_label,
        data=data,
        schema=json_schema_of(target_type),
    )
