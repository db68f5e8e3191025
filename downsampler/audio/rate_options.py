"""Target rate choices offered for a source recording."""

from __future__ import annotations

from dataclasses import dataclass

from ..common.constants import SUPPORTED_SAMPLE_RATES


@dataclass(frozen=True)
class RateOption:
    """One entry of the target rate selector."""

    rate: int
    enabled: bool  # only rates at or below the source rate can be chosen
    selected: bool


def rate_options(source_rate: int) -> list[RateOption]:
    """Build the selector state for a file recorded at ``source_rate``.

    Returns one option per supported rate, ascending. The source rate itself
    is preselected when it is one of the supported rates.
    """
    return [
        RateOption(
            rate=rate,
            enabled=rate <= source_rate,
            selected=rate == source_rate,
        )
        for rate in SUPPORTED_SAMPLE_RATES
    ]


def selectable_rates(source_rate: int) -> list[int]:
    """Supported target rates not above ``source_rate``."""
    return [option.rate for option in rate_options(source_rate) if option.enabled]


def rate_from_index(index: int | str) -> int:
    """Map a selector index (as stored on the control) to its sample rate."""
    try:
        position = int(index)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid sample rate index: {index!r}")
    if not 0 <= position < len(SUPPORTED_SAMPLE_RATES):
        raise ValueError(f"Sample rate index out of range: {position}")
    return SUPPORTED_SAMPLE_RATES[position]
