"""Named placeholder substitution for translated messages."""

from typing import Any, Mapping, Optional

PLACEHOLDER_PREFIX = ":"


def replace_named_variables(
    text: str, variables: Optional[Mapping[str, Any]] = None
) -> str:
    """Replace ``:name`` placeholders in ``text``.

    Each variable is applied in turn as a plain substring replacement of
    ``:name`` by ``str(value)``, in the order the mapping yields them. A
    variable ``id`` therefore also rewrites the start of ``:identifier``,
    and a replacement value may itself be rewritten by a later variable.

    Args:
        text: Message holding ``:name`` placeholders.
        variables: Mapping of placeholder name to replacement value.

    Returns:
        Message with placeholders replaced. Placeholders without a matching
        variable are left as they are.

    Example:
        replace_named_variables("Hello :name", {"name": "Ann"})
        # "Hello Ann"
    """
    if not variables:
        return text

    for name, value in variables.items():
        text = text.replace(f"{PLACEHOLDER_PREFIX}{name}", str(value))
    return text
