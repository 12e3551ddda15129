"""Binary byte-unit formatting for repository sizes."""

import math

_SUFFIXES = ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei")


def format_byte_unit(num_bytes: int) -> str:
    """Format a byte count with a binary prefix.

    Whole values are printed without decimals, fractional ones with three
    (``512 B``, ``1 MiB``, ``1.500 GiB``). Negative counts print ``off``.

    Args:
        num_bytes: Size in bytes

    Returns:
        Human readable size
    """
    if num_bytes < 0:
        return "off"

    scaled = float(num_bytes)
    index = 0
    while index < len(_SUFFIXES) - 1 and num_bytes >= 1 << (10 * (index + 1)):
        index += 1
    if index:
        scaled = num_bytes / (1 << (10 * index))

    if math.floor(scaled) == scaled:
        value = f"{scaled:.0f}"
    else:
        value = f"{scaled:.3f}"
    return f"{value} {_SUFFIXES[index]}B"
