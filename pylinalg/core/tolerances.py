"""
Tolerance tiers for approximate comparison.

Exact equality (``==`` / ``equals``) is bit-for-bit. These tiers back the
``allclose`` methods, which are the right tool when comparing results of
floating point arithmetic against hand-computed values.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Same verdict as equals() for finite entries
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='No tolerance; entries must be identical',
)

# Double precision reference
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='Double precision, a few ulps of accumulated rounding',
)
