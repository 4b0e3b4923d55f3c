"""Pydantic schemas for level layouts.

A level loader hands the board a finished ``BoardLayout``; these models make
sure the layout is consistent (positive size, every tile on the board, one
terrain marker per cell) before any index is built from it.
"""

from __future__ import annotations

from typing import List, Tuple

from pydantic import BaseModel, Field, model_validator

from .terrain import TerrainKind


class TerrainPlacement(BaseModel):
    """One terrain marker on the board."""

    position: Tuple[int, int]
    kind: TerrainKind = TerrainKind.NORMAL


class BoardLayout(BaseModel):
    """Initial layout of a level: size, terrain markers and deployment tiles."""

    width: int = Field(..., gt=0, description="Number of columns (x)")
    height: int = Field(..., gt=0, description="Number of rows (y)")
    terrain: List[TerrainPlacement] = Field(
        default_factory=list,
        description="Terrain markers; cells without one are plain passable ground",
    )
    deployment_zone: List[Tuple[int, int]] = Field(
        default_factory=list,
        description="Tiles where units may be placed before the battle",
    )

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def contains(self, position: Tuple[int, int]) -> bool:
        x, y = position
        return 0 <= x < self.width and 0 <= y < self.height

    @model_validator(mode="after")
    def _check_positions(self) -> "BoardLayout":
        seen = set()
        for placement in self.terrain:
            if not self.contains(placement.position):
                raise ValueError(
                    f"Terrain at {placement.position} is outside the "
                    f"{self.width}x{self.height} board"
                )
            if placement.position in seen:
                raise ValueError(f"Duplicate terrain marker at {placement.position}")
            seen.add(placement.position)

        for position in self.deployment_zone:
            if not self.contains(position):
                raise ValueError(
                    f"Deployment tile {position} is outside the "
                    f"{self.width}x{self.height} board"
                )
        return self
