"""
Exceptions raised by spherogeo calculations.
"""


class GeodesyError(Exception):
    """Base class for calculation failures."""

    pass


class CoincidentPointsError(GeodesyError, ValueError):
    """Raised when a path is requested between two identical points."""

    pass


class IntersectionError(GeodesyError):
    """Base class for failures to find a unique path intersection."""

    pass


class InfiniteIntersectionError(IntersectionError):
    """Raised when both paths lie on the same great circle."""

    pass


class AmbiguousIntersectionError(IntersectionError):
    """Raised when the paths diverge and no forward intersection can be chosen."""

    pass
