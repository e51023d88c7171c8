import pytest

from device_monitor_gui.models.units import ZERO_BYTES, format_bytes, format_count


def test_zero_bytes_literal() -> None:
    assert format_bytes(0) == "Zero KB"
    assert ZERO_BYTES == "Zero KB"


@pytest.mark.parametrize(
    "n, expected",
    [
        (1, "1 byte"),
        (999, "999 bytes"),
        (1000, "1 KB"),
        (1499, "1 KB"),
        (1500, "2 KB"),
        (2000, "2 KB"),
        (999_999, "1 MB"),
        (1_550_000, "1.6 MB"),
        (2_000_000, "2 MB"),
        (1_234_567_890, "1.23 GB"),
        (380_000_000_000, "380 GB"),
        (500_000_000_000, "500 GB"),
        (1_000_000_000_000, "1 TB"),
        (2**63 - 1, "9.22 EB"),
    ],
)
def test_format_bytes_decimal_file_style(n: int, expected: str) -> None:
    assert format_bytes(n) == expected


def test_format_bytes_distinguishes_magnitudes() -> None:
    assert format_bytes(2_000_000) != format_bytes(2000)


def test_format_bytes_monotonic() -> None:
    scale = {"bytes": 1, "byte": 1, "KB": 10**3, "MB": 10**6, "GB": 10**9, "TB": 10**12}

    def shown(n: int) -> float:
        text = format_bytes(n)
        if text == ZERO_BYTES:
            return 0.0
        number, unit = text.split(" ")
        return float(number) * scale[unit]

    samples = [0, 1, 2, 999, 1000, 1499, 1500, 999_499, 999_500, 10**6, 1_049_999, 10**9, 10**12, 5 * 10**12]
    values = [shown(n) for n in samples]
    assert values == sorted(values)
    assert all(format_bytes(n) for n in samples)


def test_format_bytes_rejects_negative() -> None:
    with pytest.raises(ValueError):
        format_bytes(-1)


def test_format_count_groups_thousands() -> None:
    assert format_count(0) == "0"
    assert format_count(1234567) == "1,234,567"
