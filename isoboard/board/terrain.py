"""Terrain kinds and the lookup capability consumed by searches."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Hashable, Mapping, Optional, Protocol

from .directions import Position
from .position_index import PositionIndex


class TerrainKind(str, Enum):
    """Passability class of a terrain marker."""

    NORMAL = "normal"
    WATER = "water"

    def blocks(self, is_airborne: bool) -> bool:
        """Water stops every mover that cannot fly over it."""
        return self is TerrainKind.WATER and not is_airborne


class TerrainLookup(Protocol):
    """Resolves the terrain kind of the marker at a position, if any."""

    def lookup(self, position: Position) -> Optional[TerrainKind]:
        ...


class MarkerTerrainLookup:
    """``TerrainLookup`` backed by a marker index and a marker -> kind table.

    The board's terrain index only stores opaque marker handles; the kind of
    each marker lives with whoever spawned it. A marker without a known kind
    behaves like an unmarked cell.
    """

    def __init__(self, markers: PositionIndex, kinds: Optional[Mapping[Hashable, TerrainKind]] = None):
        self.markers = markers
        self.kinds: Dict[Hashable, TerrainKind] = dict(kinds or {})

    def register(self, marker: Hashable, kind: TerrainKind) -> None:
        self.kinds[marker] = kind

    def lookup(self, position: Position) -> Optional[TerrainKind]:
        marker = self.markers.get(position)
        if marker is None:
            return None
        return self.kinds.get(marker)


class NoTerrain:
    """``TerrainLookup`` for boards without terrain markers."""

    def lookup(self, position: Position) -> Optional[TerrainKind]:
        return None
