"""Error kinds raised by the triangle solver."""

from __future__ import annotations


class GeometryError(ValueError):
    """Base class for caller-supplied geometric impossibilities and bad input."""

    @property
    def kind(self) -> str:
        return type(self).__name__


class MalformedName(GeometryError):
    pass


class MalformedSideName(MalformedName):
    """Raised when a side token parses to neither one vertex letter nor two vertex names."""


class MalformedTriangleName(MalformedName):
    """Raised when a triangle name does not split into three distinct vertex names."""


class UnknownVertex(GeometryError):
    """Raised when a referenced vertex name is not part of the triangle."""


class ConflictingConstraint(GeometryError):
    """Raised when side constraints disagree or cannot be combined."""


class InvalidAngle(GeometryError):
    pass


class InvalidLength(GeometryError):
    pass


class Degenerate(GeometryError):
    """Raised when the requested measurements admit no non-degenerate triangle."""


class DegenerateLine(GeometryError):
    pass


__all__ = [
    "GeometryError",
    "MalformedName",
    "MalformedSideName",
    "MalformedTriangleName",
    "UnknownVertex",
    "ConflictingConstraint",
    "InvalidAngle",
    "InvalidLength",
    "Degenerate",
    "DegenerateLine",
]
