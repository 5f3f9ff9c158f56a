"""
scaling.py: Derives the resolution-independent scale factor.
"""

import math

from .constants import REFERENCE_HEIGHT


def resolve_scale(height: float, reference_height: float = REFERENCE_HEIGHT) -> float:
    """
    Returns sqrt(height / reference_height).

    The caller must guarantee a positive height; anything else is rejected
    rather than clamped.
    """
    if height <= 0:
        raise ValueError(f"playfield height must be positive, got {height}")
    return math.sqrt(height / reference_height)
