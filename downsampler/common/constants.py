"""Shared constants for sample rate conversion."""

HERTZ_IN_KILOHERTZ = 1000

# Closed set of rates accepted as either source or target, ascending
SUPPORTED_SAMPLE_RATES: tuple[int, ...] = (
    8000,
    16000,
    32000,
    48000,
    96000,
    192000,
    250000,
    384000,
)
SUPPORTED_SAMPLE_RATE_SET: frozenset[int] = frozenset(SUPPORTED_SAMPLE_RATES)

# Raw PCM16 stream format used by the command line tool
PCM16_DTYPE = "<i2"
PCM16_SAMPLE_WIDTH = 2
PCM16_MIN = -32768
PCM16_MAX = 32767
