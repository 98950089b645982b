# ptgen_tools/errors.py


class DegenerateGeometryError(ValueError):
    """Raised for geometry queries with no unique answer, e.g. two parallel strips."""


class InvariantViolation(AssertionError):
    """Raised when the tiling construction breaks one of its own invariants."""
