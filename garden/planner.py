"""Bed arrangement planner.

Places a requested set of plants into the squares of a bed so that no
two enemies touch (edges *or* corners), preferring squares next to
companions.  Two modes:

1. **Exact**: every selection is placed exactly ``ceil(quantity)``
   times, or the request fails.

2. **Fill**: quantities are minimums; after they are placed the
   remaining free squares are topped up with more of the selected
   plants, keeping the counts roughly even.

The search is a single greedy pass with no backtracking.  Plants with
the most enemies go first, and each plant takes the free square with
the most companion neighbours (first square in row-major order on a
tie).  A placement is never revisited, so the planner can report
failure for a bed that does have a valid arrangement.  It will never
return an arrangement containing an enemy adjacency.
"""

import logging
import math
import numbers
from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass, field

from .errors import (
    ConstraintError,
    InsufficientSpaceError,
    InvalidDimensionsError,
    InvalidSelectionError,
    MinimumQuantityError,
)
from .grid import BedGrid, empty_mask

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlantSelection:
    """A request for *quantity* squares of *plant_id*."""

    plant_id: str
    quantity: float = 1


@dataclass(frozen=True)
class Placement:
    plant_id: str
    row: int
    col: int


@dataclass
class Arrangement:
    """Result of a generation call.

    ``grid`` is a new grid owned by the arrangement; ``placements`` lists
    the squares in the order they were filled.
    """

    grid: BedGrid
    placements: list[Placement] = field(default_factory=list)
    success: bool = True
    unplaced_plants: list[str] = field(default_factory=list)

    def counts(self) -> Counter:
        """Number of placed squares per plant ID."""
        return Counter(p.plant_id for p in self.placements)

    def to_dict(self) -> dict:
        return {
            "width": self.grid.width,
            "height": self.grid.height,
            "grid": [row[:] for row in self.grid.cells],
            "placements": [
                {"plant_id": p.plant_id, "row": p.row, "col": p.col}
                for p in self.placements
            ],
            "success": self.success,
            "unplaced_plants": list(self.unplaced_plants),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Arrangement":
        return cls(
            grid=BedGrid.from_matrix(data.get("grid") or []),
            placements=[
                Placement(p["plant_id"], int(p["row"]), int(p["col"]))
                for p in data.get("placements", [])
            ],
            success=bool(data.get("success", True)),
            unplaced_plants=list(data.get("unplaced_plants", [])),
        )


class BedPlanner:
    """Generates plant arrangements for a single bed.

    Args:
        catalog: a :class:`garden.catalog.PlantCatalog` answering
            compatibility and companion questions.
    """

    def __init__(self, catalog):
        self.catalog = catalog

    # ----- adjacency checks -----

    def is_valid_placement(self, plant_id: str, row: int, col: int, grid: BedGrid) -> bool:
        """True if no plant next to *(row, col)* is an enemy of *plant_id*.

        Enemy declarations are honoured in both directions.
        """
        for _, _, neighbor_id in grid.neighbor_plants(row, col):
            if not self.catalog.are_compatible(plant_id, neighbor_id):
                return False
        return True

    def count_companion_adjacencies(self, plant_id: str, row: int, col: int, grid: BedGrid) -> int:
        """Number of squares next to *(row, col)* holding one of *plant_id*'s companions."""
        return sum(
            1
            for _, _, neighbor_id in grid.neighbor_plants(row, col)
            if self.catalog.is_declared_companion(plant_id, neighbor_id)
        )

    # ----- ranking -----

    def get_constraint_difficulty(self, plant_id: str) -> int:
        return self.catalog.enemy_count(plant_id)

    def sort_by_constraint_difficulty(self, plant_selections) -> list[str]:
        """Expand selections into one plant ID per square, most enemies first.

        Unknown plant IDs are dropped.  Fractional quantities round up.
        The sort is stable, so plants with equal enemy counts keep their
        selection order.
        """
        expanded = []
        for selection in map(_coerce_selection, plant_selections):
            if selection.plant_id not in self.catalog:
                logger.debug("Skipping unknown plant %r", selection.plant_id)
                continue
            expanded.extend([selection.plant_id] * math.ceil(selection.quantity))

        return sorted(expanded, key=self.get_constraint_difficulty, reverse=True)

    # ----- placement search -----

    def find_best_position(self, plant_id: str, grid: BedGrid, locked=None):
        """Find the best free square for *plant_id*.

        Scans row-major, skipping occupied, locked and enemy-adjacent
        squares, and returns the first square with the highest companion
        score as ``(row, col)``, or ``None`` if nothing is feasible.
        """
        best_position = None
        best_score = -1

        for row in range(grid.height):
            for col in range(grid.width):
                if not grid.is_empty(row, col):
                    continue
                if locked is not None and locked[row][col]:
                    continue
                if not self.is_valid_placement(plant_id, row, col, grid):
                    continue

                score = self.count_companion_adjacencies(plant_id, row, col, grid)
                if score > best_score:
                    best_score = score
                    best_position = (row, col)

        return best_position

    # ----- generation -----

    def generate_arrangement(self, width, height, plant_selections, locked_squares=None) -> Arrangement:
        """Place every selected plant exactly once per requested square.

        Args:
            width:  Bed width in squares (>= 1).
            height: Bed height in squares (>= 1).
            plant_selections: list of :class:`PlantSelection` (or dicts
                with ``plant_id`` and ``quantity``).
            locked_squares: optional ``height`` x ``width`` list of bools;
                ``True`` squares are never planted.

        Returns:
            An :class:`Arrangement`.

        Raises:
            InvalidDimensionsError, InvalidSelectionError,
            InsufficientSpaceError, ConstraintError
        """
        grid, locked, selections = self._prepare(width, height, plant_selections, locked_squares)
        placements = self._place_minimums(grid, locked, selections, ConstraintError)

        logger.info(
            "Placed %d squares in %dx%d bed", len(placements), width, height
        )
        return Arrangement(grid=grid, placements=placements)

    def generate_arrangement_with_fill(
        self, width, height, plant_selections, locked_squares=None, fill_mode=False
    ) -> Arrangement:
        """Like :meth:`generate_arrangement`, optionally filling spare squares.

        With *fill_mode* the requested quantities are minimums.  Once they
        are placed, each free square goes to the selected plant with the
        lowest share of the squares placed so far that still has a valid
        square.  Filling stops quietly when no selected plant fits
        anywhere.

        Raises:
            InvalidDimensionsError, InvalidSelectionError,
            InsufficientSpaceError, MinimumQuantityError (fill mode) or
            ConstraintError (exact mode)
        """
        if not fill_mode:
            return self.generate_arrangement(width, height, plant_selections, locked_squares)

        grid, locked, selections = self._prepare(width, height, plant_selections, locked_squares)
        placements = self._place_minimums(grid, locked, selections, MinimumQuantityError)
        minimum_count = len(placements)

        # Distinct known plants, in selection order
        candidates = []
        for selection in selections:
            if selection.plant_id in self.catalog and selection.plant_id not in candidates:
                candidates.append(selection.plant_id)

        counts = Counter(p.plant_id for p in placements)
        remaining = _count_unlocked(locked) - minimum_count

        for i in range(remaining):
            chosen = None
            chosen_position = None
            lowest_ratio = float("inf")

            for plant_id in candidates:
                ratio = counts[plant_id] / (minimum_count + i + 1)
                if ratio < lowest_ratio:
                    position = self.find_best_position(plant_id, grid, locked)
                    if position is not None:
                        lowest_ratio = ratio
                        chosen = plant_id
                        chosen_position = position

            if chosen is None:
                logger.info(
                    "Fill stopped with %d free squares: no selected plant fits",
                    remaining - i,
                )
                break

            row, col = chosen_position
            grid.cells[row][col] = chosen
            placements.append(Placement(chosen, row, col))
            counts[chosen] += 1
            logger.debug("Fill: %s at (%d, %d)", chosen, row, col)

        logger.info(
            "Placed %d squares (%d minimum) in %dx%d bed with fill",
            len(placements), minimum_count, width, height,
        )
        return Arrangement(grid=grid, placements=placements)

    # ----- internal helpers -----

    def _prepare(self, width, height, plant_selections, locked_squares):
        """Validate inputs and allocate a fresh grid and lock mask."""
        _check_dimensions(width, height)
        if not isinstance(plant_selections, (list, tuple)):
            raise InvalidSelectionError("Plant selections must be a list")
        selections = [_coerce_selection(s) for s in plant_selections]
        locked = _copy_mask(locked_squares, width, height)
        return BedGrid(width, height), locked, selections

    def _place_minimums(self, grid, locked, selections, error_cls):
        """Greedily place every requested square; raise *error_cls* on leftovers."""
        available = _count_unlocked(locked)
        required = sum(
            max(0, math.ceil(s.quantity)) for s in selections if s.plant_id in self.catalog
        )
        if required > available:
            raise InsufficientSpaceError(required, available)

        plants_to_place = self.sort_by_constraint_difficulty(selections)

        placements = []
        unplaced = []
        for plant_id in plants_to_place:
            position = self.find_best_position(plant_id, grid, locked)
            if position is None:
                unplaced.append(plant_id)
                continue
            row, col = position
            grid.cells[row][col] = plant_id
            placements.append(Placement(plant_id, row, col))
            logger.debug("Placed %s at (%d, %d)", plant_id, row, col)

        if unplaced:
            unique_unplaced = list(dict.fromkeys(unplaced))
            logger.warning(
                "%d squares could not be placed: %s",
                len(unplaced), ", ".join(unique_unplaced),
            )
            raise error_cls(
                unique_unplaced,
                [self.catalog.name_of(pid) for pid in unique_unplaced],
            )

        return placements


def _check_dimensions(width, height):
    for value in (width, height):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 1:
            raise InvalidDimensionsError(f"Invalid bed dimensions: {width!r}x{height!r}")


def _coerce_selection(entry) -> PlantSelection:
    if isinstance(entry, PlantSelection):
        selection = entry
    elif isinstance(entry, Mapping) and "plant_id" in entry:
        selection = PlantSelection(entry["plant_id"], entry.get("quantity", 1))
    else:
        raise InvalidSelectionError(f"Not a plant selection: {entry!r}")

    if isinstance(selection.quantity, bool) or not isinstance(selection.quantity, numbers.Real):
        raise InvalidSelectionError(
            f"Quantity for {selection.plant_id!r} must be a number, "
            f"got {selection.quantity!r}"
        )
    if not math.isfinite(selection.quantity):
        raise InvalidSelectionError(
            f"Quantity for {selection.plant_id!r} must be finite, "
            f"got {selection.quantity!r}"
        )
    return selection


def _copy_mask(locked_squares, width, height) -> list[list[bool]]:
    if locked_squares is None:
        return empty_mask(width, height)
    if len(locked_squares) != height or any(len(row) != width for row in locked_squares):
        raise InvalidDimensionsError(
            f"Locked squares must be a {width}x{height} grid"
        )
    return [[bool(v) for v in row] for row in locked_squares]


def _count_unlocked(locked) -> int:
    return sum(1 for row in locked for v in row if not v)
