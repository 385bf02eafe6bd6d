"""Exceptions raised by mtgtools."""
from __future__ import annotations


class MTGError(Exception):
    """Base class for all mtgtools errors."""


class VertexNotFoundError(MTGError, KeyError):
    """A vertex id is absent from the structure being queried."""

    def __init__(self, vid: int, where: str = "tree"):
        self.vid = vid
        self.where = where
        super().__init__(vid)

    def __str__(self) -> str:
        return f"vertex {self.vid!r} not found in {self.where}"


class InvalidScaleQueryError(MTGError, ValueError):
    """A target scale cannot be reached by climbing complex relations."""

    def __init__(self, vid: int, scale: int, reason: str):
        self.vid = vid
        self.scale = scale
        super().__init__(f"vertex {vid!r}, scale {scale!r}: {reason}")


class StructuralPreconditionError(MTGError, ValueError):
    """A mutation was requested on a structure that cannot accept it."""
