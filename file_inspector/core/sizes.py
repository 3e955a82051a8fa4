"""Decimal size classification."""

from dataclasses import dataclass


# (threshold, divisor, unit) per style, largest first; thresholds are inclusive
SIZE_TIERS = {
    'long': [
        (1_000_000_000, 1e9, 'gigabytes'),
        (1_000_000, 1e6, 'megabytes'),
    ],
    'short': [
        (1_000_000_000, 1e9, 'GB'),
        (1_000_000, 1e6, 'MB'),
        (1_000, 1e3, 'KB'),
    ],
}


@dataclass(frozen=True)
class ScaledSize:
    """A byte count expressed in a human unit."""
    magnitude: float
    unit: str

    def __str__(self) -> str:
        if self.magnitude.is_integer():
            return f"{int(self.magnitude)} {self.unit}"
        return f"{self.magnitude!r} {self.unit}"


def scale_size(size_bytes: int, style: str = 'long') -> ScaledSize:
    """Express a byte count in the largest fitting decimal unit.

    Args:
        size_bytes: Size in bytes.
        style: 'long' for gigabytes/megabytes/bytes, 'short' for GB/MB/KB/bytes.

    Returns:
        ScaledSize with the unscaled float magnitude and unit label.
    """
    if style not in SIZE_TIERS:
        raise ValueError(f"Unknown unit style: {style}")

    for threshold, divisor, unit in SIZE_TIERS[style]:
        if size_bytes >= threshold:
            return ScaledSize(size_bytes / divisor, unit)
    return ScaledSize(float(size_bytes), 'bytes')
