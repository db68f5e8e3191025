"""Integer PCM downsampling by linear interpolation and block averaging."""

from __future__ import annotations

import logging
import math
from collections.abc import MutableSequence, Sequence
from typing import Any

import numpy as np
import numpy.typing as npt

from ..common.constants import (
    HERTZ_IN_KILOHERTZ,
    PCM16_DTYPE,
    PCM16_MAX,
    PCM16_MIN,
    PCM16_SAMPLE_WIDTH,
    SUPPORTED_SAMPLE_RATE_SET,
)
from ..common.types import ConversionResult, DownsampleParameters, RateCheck


def check_rates(source_rate: int, target_rate: int) -> RateCheck:
    """Validate a rate pair.

    Failures are reported in a fixed order: invalid source, then invalid
    target, then target above source.
    """
    if source_rate not in SUPPORTED_SAMPLE_RATE_SET:
        return RateCheck.INVALID_SOURCE
    if target_rate not in SUPPORTED_SAMPLE_RATE_SET:
        return RateCheck.INVALID_TARGET
    if target_rate > source_rate:
        return RateCheck.TARGET_EXCEEDS_SOURCE
    return RateCheck.VALID


def derive_parameters(source_rate: int, target_rate: int) -> DownsampleParameters:
    """Compute the loop constants for a validated rate pair.

    Raises:
        ValueError: If the rate pair does not pass ``check_rates``.
    """
    check = check_rates(source_rate, target_rate)
    if not check.is_valid:
        raise ValueError(check.message)

    source_rate = int(source_rate)
    target_rate = int(target_rate)

    # Ceiling keeps the raw rate an integer multiple of the target rate
    divider = -(-source_rate // target_rate)
    raw_rate = divider * target_rate

    source_khz = source_rate // HERTZ_IN_KILOHERTZ
    target_khz = target_rate // HERTZ_IN_KILOHERTZ
    gcd = math.gcd(source_khz, target_khz)

    return DownsampleParameters(
        divider=divider,
        raw_rate=raw_rate,
        step=source_rate / raw_rate,
        length_divider=source_khz // gcd,
        length_multiplier=target_khz // gcd,
    )


def output_length(input_length: int, source_rate: int, target_rate: int) -> int:
    """Number of samples a conversion of ``input_length`` samples will write."""
    return derive_parameters(source_rate, target_rate).output_length(input_length)


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, ties away from zero for either sign."""
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return -whole if value < 0 else whole


def downsample(
    samples: Sequence[int],
    source_rate: int,
    output: MutableSequence[Any],
    target_rate: int,
    logger: logging.Logger | None = None,
) -> ConversionResult:
    """Downsample ``samples`` into the caller's ``output`` buffer.

    Each output sample is the mean of ``divider`` consecutive values linearly
    interpolated at the raw rate, rounded half away from zero. The input is
    scanned once, front to back, with constant extra state.

    Args:
        samples: Mono integer samples at ``source_rate``.
        source_rate: Source rate in Hz, one of the supported rates.
        output: Pre-allocated buffer of at least ``output_length(...)`` slots.
        target_rate: Target rate in Hz, one of the supported rates and not
            above ``source_rate``.
        logger: Optional logger receiving DEBUG summaries of the call.

    Returns:
        A ConversionResult. Invalid rate pairs give a failed result with
        length 0; they are never raised.

    Raises:
        ValueError: If ``output`` is shorter than the computed length.
    """
    check = check_rates(source_rate, target_rate)
    if not check.is_valid:
        if logger is not None:
            logger.debug(
                f"Downsampler rejected {source_rate} Hz -> {target_rate} Hz: "
                f"{check.message}"
            )
        return ConversionResult.failed(check.message or "")

    params = derive_parameters(source_rate, target_rate)
    input_length = len(samples)
    length = params.output_length(input_length)

    if logger is not None:
        logger.debug(f"Downsampler input: {input_length} samples at {source_rate} Hz")
        logger.debug(f"Downsampler output: {length} samples at {target_rate} Hz")

    if length == 0:
        return ConversionResult.ok(0)

    if len(output) < length:
        raise ValueError(
            f"Output buffer holds {len(output)} samples, {length} required"
        )

    divider = params.divider
    step = params.step

    count = 0
    total = 0.0
    position = 0.0
    input_index = 1
    output_index = 0
    next_sample = int(samples[0])

    while output_index < length:
        current_sample = next_sample
        if input_index == input_length:
            # Final tick can bracket one sample past the end; hold the last one
            next_sample = current_sample
        else:
            next_sample = int(samples[input_index])
        input_index += 1

        while position < 1.0 and output_index < length:
            total += current_sample + position * (next_sample - current_sample)
            count += 1

            if count == divider:
                output[output_index] = round_half_away_from_zero(total / divider)
                output_index += 1
                total = 0.0
                count = 0

            position += step

        position -= 1.0

    return ConversionResult.ok(length)


def downsample_array(
    samples: npt.NDArray[np.integer[Any]],
    source_rate: int,
    target_rate: int,
    logger: logging.Logger | None = None,
) -> npt.NDArray[np.integer[Any]]:
    """Downsample a numpy array, returning a new array of the same dtype.

    Raises:
        ValueError: If the rate pair is not valid.
    """
    samples = np.asarray(samples)
    if samples.ndim != 1:
        raise ValueError(f"Expected mono samples, got shape {samples.shape}")

    check = check_rates(source_rate, target_rate)
    if not check.is_valid:
        raise ValueError(check.message)

    out = np.zeros(
        output_length(len(samples), source_rate, target_rate), dtype=samples.dtype
    )
    result = downsample(samples, source_rate, out, target_rate, logger=logger)
    return out[: result.length]


def pcm16_from_bytes(data: bytes) -> npt.NDArray[np.int16]:
    """Decode little-endian signed 16-bit mono PCM."""
    if len(data) % PCM16_SAMPLE_WIDTH:
        raise ValueError(
            f"PCM16 data length {len(data)} is not a multiple of {PCM16_SAMPLE_WIDTH}"
        )
    return np.frombuffer(data, dtype=PCM16_DTYPE).astype(np.int16)


def pcm16_to_bytes(samples: npt.NDArray[np.integer[Any]]) -> bytes:
    """Encode samples as little-endian signed 16-bit PCM, clipping to range."""
    clipped = np.clip(np.asarray(samples, dtype=np.int64), PCM16_MIN, PCM16_MAX)
    return clipped.astype(PCM16_DTYPE).tobytes()
