"""Field-level parsers shared by the record schemas."""

import re

from lupo.domain.errors import NumberFormatError

_DECIMAL_PATTERN = re.compile(
    r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)


def parse_number(text: str) -> float:
    """Parse a decimal literal into a float.

    Args:
        text: Cell content, already trimmed.

    Returns:
        float: Parsed value.

    Raises:
        NumberFormatError: If the text is not a plain decimal literal.
    """
    # float() would also take "inf", "nan" and "1_000".
    if not _DECIMAL_PATTERN.fullmatch(text):
        raise NumberFormatError(text)
    return float(text)


def parse_optional_number(text: str | None) -> float | None:
    """Parse a decimal literal, treating an empty or absent cell as None."""
    if text is None or text == "":
        return None
    return parse_number(text)


__all__ = ["parse_number", "parse_optional_number"]
