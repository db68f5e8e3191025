"""Result and parameter types for the downsampler."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RateCheck(Enum):
    """Outcome of validating a source/target rate pair."""

    VALID = None
    INVALID_SOURCE = "Original sample rate is not valid."
    INVALID_TARGET = "Requested sample rate is not valid."
    TARGET_EXCEEDS_SOURCE = (
        "Requested sample rate is greater than original sample rate."
    )

    @property
    def is_valid(self) -> bool:
        return self is RateCheck.VALID

    @property
    def message(self) -> str | None:
        """Human-readable failure reason, or None when valid."""
        return self.value


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of a single downsample call.

    ``length`` is the number of samples written to the output buffer; only
    that prefix of the buffer is valid.
    """

    success: bool
    length: int
    error: str | None = None

    @classmethod
    def ok(cls, length: int) -> ConversionResult:
        return cls(success=True, length=length, error=None)

    @classmethod
    def failed(cls, error: str) -> ConversionResult:
        return cls(success=False, length=0, error=error)


@dataclass(frozen=True)
class DownsampleParameters:
    """Integer constants driving one conversion, derived from the rate pair."""

    divider: int  # raw samples averaged into each output sample
    raw_rate: int  # divider * target rate
    step: float  # input advance per raw tick, in (0, 1]
    length_divider: int
    length_multiplier: int

    def output_length(self, input_length: int) -> int:
        """Exact number of output samples produced from ``input_length`` inputs."""
        if input_length < 0:
            raise ValueError(f"Input length must be non-negative: {input_length}")
        return (input_length // self.length_divider) * self.length_multiplier
