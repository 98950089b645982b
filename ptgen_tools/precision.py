# ptgen_tools/precision.py
"""
Shared precision model.

Every point that takes part in equality, hashing or set membership goes
through make_precise() first, so two paths to the same vertex compare equal.
"""

PRECISION = 8


def make_precise(value, precision=PRECISION):
    """Round a float, or both parts of a complex point, to the shared precision."""
    if isinstance(value, complex):
        return complex(round(value.real, precision), round(value.imag, precision))
    return round(value, precision)


def make_precise_all(points, precision=PRECISION):
    return [make_precise(p, precision) for p in points]
