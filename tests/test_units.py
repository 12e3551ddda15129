import pytest

from mirrorstamp.utils.units import format_byte_unit


@pytest.mark.parametrize(
    "num_bytes, expected",
    [
        (0, "0 B"),
        (1, "1 B"),
        (1023, "1023 B"),
        (1024, "1 KiB"),
        (1025, "1.001 KiB"),
        (1536, "1.500 KiB"),
        (1048576, "1 MiB"),
        (3 * 1024**3 // 2, "1.500 GiB"),
        (5 * 1024**4, "5 TiB"),
        (1024**5, "1 PiB"),
        (1024**6, "1 EiB"),
    ],
)
def test_format_byte_unit(num_bytes: int, expected: str) -> None:
    assert format_byte_unit(num_bytes) == expected


def test_format_byte_unit_negative_is_off() -> None:
    assert format_byte_unit(-1) == "off"
