"""Command-line value validators for Histogrammer."""

from histogrammer.core.errors import InvalidArgumentError
from histogrammer.core.models import MAX_LAYOUT_VALUE


def parse_count(flag: str, value: str, maximum: int = MAX_LAYOUT_VALUE) -> int:
    """Parse the value of a numeric flag.

    Only plain ASCII digits are accepted: no sign, whitespace, separators or
    trailing garbage. Zero passes here and is left to layout validation.

    Args:
        flag: Flag the value belongs to, used in the error message
        value: Raw string from the command line
        maximum: Largest accepted value

    Returns:
        Parsed integer

    Raises:
        InvalidArgumentError: If the value is not a run of decimal digits or exceeds ``maximum``
    """
    if not value or not (value.isascii() and value.isdigit()):
        raise InvalidArgumentError(flag=flag, value=value)

    # Length check first: int() refuses very long digit strings
    significant = value.lstrip("0") or "0"
    if len(significant) > len(str(maximum)) or int(significant) > maximum:
        raise InvalidArgumentError(flag=flag, value=value, reason=f"'{value}' exceeds the maximum of {maximum}")

    return int(significant)
