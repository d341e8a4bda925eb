"""
Tolerance tiers and numeric thresholds.

Defines precision expectations for the different kinds of result the
library produces:
- EXACT: eliminations over small integers, exact in binary floating point
- FP64: well-conditioned double precision results
- FP64_ILL_CONDITIONED: relaxed for ill-conditioned inputs

Used by the test suite, by M_tolerate's default, and by the elimination
engine's pivot check.
"""

from dataclasses import dataclass
from typing import Final

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Reductions of small integer matrices with power-of-two pivots
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Bit-exact, small integer inputs',
)

# Well-conditioned double precision
FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision, well-conditioned',
)

# Double precision, ill-conditioned problems (cond > 1e4)
FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='fp64_ill_conditioned',
    description='Double precision, ill-conditioned (cond > 1e4)',
)

# Condition number above which FP64_ILL_CONDITIONED applies.
ILL_CONDITIONED_THRESHOLD: Final[float] = 1e4

# Default snapping distance for M_tolerate. Large enough to absorb the
# cos(pi/2) residue in rotation matrices.
TOLERATE_EPSILON: Final[float] = 1e-3


def select_tolerance(is_ill_conditioned: bool = False) -> ToleranceTier:
    """
    Select the tolerance tier for a double precision result.

    Callers decide ill-conditioning by comparing the condition number of
    the input against ILL_CONDITIONED_THRESHOLD.
    """
    if is_ill_conditioned:
        return FP64_ILL_CONDITIONED
    return FP64


def pivot_tolerance(shape: tuple[int, ...], scale: float) -> float:
    """
    Magnitude at or below which a pivot is treated as zero.

    Same rule LAPACK-style rank estimates use: the largest dimension times
    machine epsilon times the largest absolute entry.

    Args:
        shape: Shape of the matrix being reduced
        scale: Largest absolute entry of the reduced region

    Returns:
        Non-negative threshold; 0.0 for an all-zero matrix
    """
    return max(shape) * float(np.finfo(np.float64).eps) * float(scale)
