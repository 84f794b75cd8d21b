"""Pydantic models for game parameters and the batch command language."""

from __future__ import annotations

import re
from typing import Annotated, Literal

from pydantic import BaseModel, Field, ValidationError

UINT32_MAX = 2**32 - 1

UInt32 = Annotated[int, Field(strict=True, ge=0, le=UINT32_MAX)]
PositiveUInt32 = Annotated[int, Field(strict=True, gt=0, le=UINT32_MAX)]

# Token separators of the batch language. A newline only ends the line.
SEPARATORS = " \t\v\f\r"
_SPLIT_RE = re.compile(f"[{re.escape(SEPARATORS)}]+")
_NUMBER_RE = re.compile(r"0|[1-9][0-9]*")


class GameParams(BaseModel):
    width: PositiveUInt32
    height: PositiveUInt32
    players: PositiveUInt32
    max_regions: PositiveUInt32


# ---------------------------------------------------------------------------
# Mode selection
# ---------------------------------------------------------------------------

class ModeSelectionCmd(BaseModel):
    mode: Literal["B", "I"]
    width: UInt32
    height: UInt32
    players: UInt32
    max_regions: UInt32


# ---------------------------------------------------------------------------
# Batch commands
# ---------------------------------------------------------------------------

class MoveCmd(BaseModel):
    type: Literal["m"] = "m"
    player: UInt32
    x: UInt32
    y: UInt32


class GoldenMoveCmd(BaseModel):
    type: Literal["g"] = "g"
    player: UInt32
    x: UInt32
    y: UInt32


class BusyFieldsCmd(BaseModel):
    type: Literal["b"] = "b"
    player: UInt32


class FreeFieldsCmd(BaseModel):
    type: Literal["f"] = "f"
    player: UInt32


class GoldenPossibleCmd(BaseModel):
    type: Literal["q"] = "q"
    player: UInt32


class PrintBoardCmd(BaseModel):
    type: Literal["p"] = "p"


Command = MoveCmd | GoldenMoveCmd | BusyFieldsCmd | FreeFieldsCmd | GoldenPossibleCmd | PrintBoardCmd

_COMMANDS: dict[str, tuple[type[BaseModel], tuple[str, ...]]] = {
    "m": (MoveCmd, ("player", "x", "y")),
    "g": (GoldenMoveCmd, ("player", "x", "y")),
    "b": (BusyFieldsCmd, ("player",)),
    "f": (FreeFieldsCmd, ("player",)),
    "q": (GoldenPossibleCmd, ("player",)),
    "p": (PrintBoardCmd, ()),
}

_MODE_FIELDS = ("width", "height", "players", "max_regions")


def tokenize(line: str) -> list[str] | None:
    """Split a raw input line into tokens, or None if the line is malformed.

    The line must end with a newline and must not start with whitespace.
    """
    if not line.endswith("\n"):
        return None
    body = line[:-1]
    if not body or body[0].isspace() or "\n" in body:
        return None
    return [token for token in _SPLIT_RE.split(body) if token]


def _numbers(tokens: list[str], names: tuple[str, ...]) -> dict[str, int] | None:
    if len(tokens) != len(names):
        return None
    if not all(_NUMBER_RE.fullmatch(token) for token in tokens):
        return None
    return {name: int(token) for name, token in zip(names, tokens)}


def parse_mode_selection(line: str) -> ModeSelectionCmd | None:
    """Parse ``B|I width height players areas``, or return None if invalid."""
    tokens = tokenize(line)
    if not tokens:
        return None
    values = _numbers(tokens[1:], _MODE_FIELDS)
    if values is None:
        return None
    try:
        return ModeSelectionCmd(mode=tokens[0], **values)
    except ValidationError:
        return None


def parse_command(line: str) -> Command | None:
    """Parse a batch command line into a typed command, or None if invalid."""
    tokens = tokenize(line)
    if not tokens:
        return None
    entry = _COMMANDS.get(tokens[0])
    if entry is None:
        return None
    model, names = entry
    values = _numbers(tokens[1:], names)
    if values is None:
        return None
    try:
        return model.model_validate(values)  # type: ignore[return-value]
    except ValidationError:
        return None
