"""Conversion of AtCoder Problems difficulty into a Codeforces-equivalent rating."""

import math

# Calibration anchors for the linear remap: AtCoder X maps to Codeforces Y.
X1 = 0
X2 = 3900
Y1 = -1000 + 60
Y2 = 4130 + 85

CLIP_THRESHOLD = 400


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def clip_difficulty(difficulty: float) -> int:
    """
    Map raw difficulty into a positive range.

    Values below 400 are compressed with ``400 / e^(1 - d/400)`` so that
    negative model outputs still yield a usable rating.
    """
    if difficulty >= CLIP_THRESHOLD:
        return _round_half_up(difficulty)
    return _round_half_up(CLIP_THRESHOLD / math.exp(1.0 - difficulty / CLIP_THRESHOLD))


def to_codeforces_rating(clipped: float) -> int:
    """Linear remap through the anchor points, truncated toward zero."""
    result = (X2 * (clipped - Y1) + X1 * (Y2 - clipped)) / (Y2 - Y1)
    return int(result)


def convert_rating(source_difficulty: float) -> int:
    """Convert an AtCoder difficulty to a Codeforces rating."""
    return to_codeforces_rating(clip_difficulty(source_difficulty))
