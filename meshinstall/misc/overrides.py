import re
from typing import List, Mapping, Union

TOKEN_PATTERN = re.compile(r"@@([A-Z0-9_]+)@@")


def token(name: str) -> str:
    return f"@@{name}@@"


def format_bool(value: bool) -> str:
    # chart values expect YAML booleans, not Python's repr
    return "true" if value else "false"


def render_overrides(
    template: str, tokens: Mapping[str, Union[str, bool]]
) -> str:
    """
    Replace every occurrence of the given tokens in an overrides template.

    Boolean values are written as lowercase YAML literals. Tokens not present
    in the mapping are left as they are; an empty mapping returns the template
    unchanged.
    """
    rendered = template
    for name, value in tokens.items():
        if isinstance(value, bool):
            value = format_bool(value)
        rendered = rendered.replace(token(name), value)
    return rendered


def unresolved_tokens(text: str) -> List[str]:
    return TOKEN_PATTERN.findall(text)

