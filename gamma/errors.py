"""Exceptions raised by the game engine."""

from __future__ import annotations


class GammaError(Exception):
    """Base class for engine errors."""


class InvalidParamsError(GammaError):
    """Game parameters are not positive 32-bit integers."""


class OutOfMemoryError(GammaError):
    """The board for the requested game could not be allocated."""


class RegionLimitError(GammaError):
    """A fresh region id was requested for a player who has none left."""
