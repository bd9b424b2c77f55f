import math

from folksonomy.config.defaults import WEIGHT_CLASS_PREFIX
from folksonomy.errors import InvalidConfigurationError
from folksonomy.models import Scaling


def compute_step(min_count: int, max_count: int, scaling: Scaling, gradations: int) -> float:
    """
    Width of one weight bucket, in counts (linear) or decades (logarithmic).

    A step of 0 means the counts have no usable spread; see ``weight_for``.
    """
    if gradations < 2:
        raise InvalidConfigurationError(f"[Scaler] gradations must be at least 2, got {gradations}")

    spread = max_count - min_count

    if scaling == Scaling.LINEAR:
        return spread / (gradations - 1)

    if spread <= 0:
        return 0.0
    return math.log10(spread) / (gradations - 1)


def weight_for(count: int, min_count: int, scaling: Scaling, step: float) -> int:
    """
    Bucket number (1..gradations) for a single count.

    The count is measured from ``min_count`` and floored at 1, so the least
    used tag still lands in bucket 1 and log10 never sees 0.
    """
    if step <= 0:
        return 1

    adjusted = max(count - min_count, 1)

    if scaling == Scaling.LINEAR:
        return round(adjusted / step + 1)
    return round(math.log10(adjusted) / step + 1)


def weight_class(weight: int) -> str:
    return f"{WEIGHT_CLASS_PREFIX}{weight}"
