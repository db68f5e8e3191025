"""Downsample integer PCM audio between a fixed set of sample rates.

Example usage:

    from downsampler import downsample, output_length

    out = [0] * output_length(len(samples), 48000, 8000)
    result = downsample(samples, 48000, out, 8000)
    if not result.success:
        print(result.error)
"""

from .audio.pcm import (
    check_rates,
    derive_parameters,
    downsample,
    downsample_array,
    output_length,
    round_half_away_from_zero,
)
from .audio.rate_options import RateOption, rate_from_index, rate_options, selectable_rates
from .common.constants import SUPPORTED_SAMPLE_RATES
from .common.types import ConversionResult, DownsampleParameters, RateCheck

__all__ = [
    "ConversionResult",
    "DownsampleParameters",
    "RateCheck",
    "RateOption",
    "SUPPORTED_SAMPLE_RATES",
    "check_rates",
    "derive_parameters",
    "downsample",
    "downsample_array",
    "output_length",
    "rate_from_index",
    "rate_options",
    "round_half_away_from_zero",
    "selectable_rates",
]
