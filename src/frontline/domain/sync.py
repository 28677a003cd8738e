"""Application of inbound update envelopes to a grid."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from pydantic import ValidationError

from frontline.schemas.update import TilePatch, UpdateEnvelope

from .cell import Cell, validate_count
from .enums import IMPASSABLE, CellType, decode_cell_type
from .errors import DecodeError, InvalidIndexError, InvalidUpdate
from .grid import Grid

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("height", "width", "players", "tiles", "turn")


def parse_envelope(payload: Mapping[str, object] | UpdateEnvelope) -> UpdateEnvelope:
    """Validate a decoded JSON object against the envelope schema."""

    if isinstance(payload, UpdateEnvelope):
        return payload
    if not isinstance(payload, Mapping):
        raise InvalidUpdate(f"expected an object, got {type(payload).__name__}")
    for key in REQUIRED_FIELDS:
        if key not in payload:
            raise InvalidUpdate(f"{key} missing")
    try:
        return UpdateEnvelope.model_validate(payload)
    except ValidationError as exc:
        raise InvalidUpdate(str(exc)) from exc


def apply_update(grid: Grid, payload: Mapping[str, object] | UpdateEnvelope) -> UpdateEnvelope:
    """
    Validate ``payload`` and apply its tiles to ``grid``.

    The whole envelope is checked before any cell is touched: schema errors
    raise ``InvalidUpdate``, out-of-range indices ``InvalidIndexError`` and
    out-of-domain units or owners ``CellValidationError``. A rejected envelope
    leaves the grid exactly as it was.

    An empty grid is sized from the envelope. A non-empty grid keeps its
    dimensions even if the envelope reports others.
    """
    envelope = parse_envelope(payload)

    if grid.length() == 0:
        length = envelope.height * envelope.width
    else:
        length = grid.length()
        if (envelope.height, envelope.width) != (grid.height(), grid.width()):
            logger.warning(
                "ignoring resize from %dx%d to %dx%d; grid dimensions are fixed once allocated",
                grid.height(),
                grid.width(),
                envelope.height,
                envelope.width,
            )

    for index, patch in envelope.tiles:
        if not 0 <= index < length:
            raise InvalidIndexError(index, length)
        if patch is not None:
            validate_count("units", patch.units)
            validate_count("owner", patch.owner)

    if grid.length() == 0:
        grid.init(envelope.height, envelope.width)

    for index, patch in envelope.tiles:
        apply_tile(grid.get_cell(index), patch)

    logger.debug("applied %d tile(s) for turn %r", len(envelope.tiles), envelope.turn)
    return envelope


def apply_tile(cell: Cell, patch: TilePatch | None) -> None:
    """Apply one tile patch; None hides the cell behind impassable terrain."""

    if patch is None:
        cell.reset(IMPASSABLE)
        return
    cell.kind = _tolerant_kind(patch.kind)
    cell.units = patch.units
    cell.owner = patch.owner


def _tolerant_kind(code: object) -> CellType | None:
    if code is None:
        return None
    try:
        return decode_cell_type(code)
    except DecodeError:
        logger.debug("unknown cell type %r, falling back to the default", code)
        return None
