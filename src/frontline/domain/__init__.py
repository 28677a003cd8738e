"""Client-side grid model for Frontline.

This package holds everything that has invariants:

* Cell types, directions and their string codecs (see :mod:`enums`).
* The row-major coordinate system (see :mod:`coordinates`).
* Validated cell records and the grid that owns them and the selection.
* Application of server update envelopes (see :mod:`sync`).
* The selection/move state machine (see :mod:`interaction`).

Only the leaf modules are imported here; :mod:`sync` and :mod:`interaction`
depend on the wire schemas, which in turn import :mod:`enums`.
"""

from . import (
    cell,
    coordinates,
    enums,
    errors,
    grid,
)

__all__ = [
    "cell",
    "coordinates",
    "enums",
    "errors",
    "grid",
]
