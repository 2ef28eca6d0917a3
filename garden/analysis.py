"""Read-only checks over a finished (or hand-edited) bed grid.

Every function here takes the grid plus the catalog to consult and
never modifies either.  Grids may be :class:`~garden.grid.BedGrid`
instances or plain row-major lists of plant IDs / ``None``.  Plant IDs
missing from the catalog are treated as having no relationships.
"""

from dataclasses import dataclass, field

from .grid import BedGrid

# Direction name -> (row offset, col offset)
_DIRECTIONS = {
    "top": (-1, 0),
    "right": (0, 1),
    "bottom": (1, 0),
    "left": (0, -1),
    "top_left": (-1, -1),
    "top_right": (-1, 1),
    "bottom_left": (1, -1),
    "bottom_right": (1, 1),
}


@dataclass(frozen=True)
class Violation:
    row: int
    col: int
    plant_id: str
    enemy_plant_id: str


@dataclass
class ValidationResult:
    valid: bool
    violations: list[Violation] = field(default_factory=list)


@dataclass
class ArrangementStats:
    total_squares: int
    filled_squares: int
    empty_squares: int
    companion_adjacencies: int
    unique_plants: int


@dataclass
class SquareStatus:
    has_companion: bool = False
    has_enemy: bool = False
    companions: list[str] = field(default_factory=list)
    enemies: list[str] = field(default_factory=list)


def _as_grid(grid) -> BedGrid:
    return grid if isinstance(grid, BedGrid) else BedGrid.from_matrix(grid)


# -----------------------------------------------------------------------
# Validation and statistics
# -----------------------------------------------------------------------

def validate_arrangement(grid, catalog) -> ValidationResult:
    """Report every pair of adjacent enemies in *grid*.

    Each offending pair of squares appears once, reported from the
    square reached first in row-major order.
    """
    grid = _as_grid(grid)
    violations = []
    seen: set[tuple[tuple[int, int], tuple[int, int]]] = set()

    for row, col, plant_id in grid.filled_cells():
        for nr, nc, neighbor_id in grid.neighbor_plants(row, col):
            if catalog.are_compatible(plant_id, neighbor_id):
                continue
            pair = (min((row, col), (nr, nc)), max((row, col), (nr, nc)))
            if pair in seen:
                continue
            seen.add(pair)
            violations.append(Violation(row, col, plant_id, neighbor_id))

    return ValidationResult(valid=not violations, violations=violations)


def get_arrangement_stats(grid, catalog) -> ArrangementStats:
    """Occupancy and companion-adjacency counts for *grid*.

    Each square counts its neighbours that it lists as companions; the
    total is halved (rounded down) so mutual pairs count once.
    """
    grid = _as_grid(grid)
    total = grid.width * grid.height
    filled = 0
    companion_total = 0
    plants = set()

    for row, col, plant_id in grid.filled_cells():
        filled += 1
        plants.add(plant_id)
        companion_total += sum(
            1
            for _, _, neighbor_id in grid.neighbor_plants(row, col)
            if catalog.is_declared_companion(plant_id, neighbor_id)
        )

    return ArrangementStats(
        total_squares=total,
        filled_squares=filled,
        empty_squares=total - filled,
        companion_adjacencies=companion_total // 2,
        unique_plants=len(plants),
    )


# -----------------------------------------------------------------------
# Bridge plants
# -----------------------------------------------------------------------

def is_bridge_plant(candidate_id: str, enemy_id1: str, enemy_id2: str, catalog) -> bool:
    """True if the two plants are enemies and *candidate_id* gets on with both."""
    if catalog.are_compatible(enemy_id1, enemy_id2):
        return False
    return (
        catalog.are_compatible(candidate_id, enemy_id1)
        and catalog.are_compatible(candidate_id, enemy_id2)
    )


def find_bridge_plants(enemy_id1: str, enemy_id2: str, candidates, catalog) -> list[str]:
    """Filter *candidates* down to plants that can separate two enemies."""
    return [
        plant_id
        for plant_id in candidates
        if is_bridge_plant(plant_id, enemy_id1, enemy_id2, catalog)
    ]


# -----------------------------------------------------------------------
# Per-square feedback
# -----------------------------------------------------------------------

def square_companion_status(grid, row: int, col: int, catalog) -> SquareStatus:
    """Names of the companion and enemy plants touching one square.

    Empty squares, unknown plants and out-of-range positions get an
    empty status.  Unknown neighbours are ignored.
    """
    grid = _as_grid(grid)
    if not grid.in_bounds(row, col):
        return SquareStatus()
    if grid.is_empty(row, col):
        return SquareStatus()
    plant_id = grid.cells[row][col]
    if plant_id not in catalog:
        return SquareStatus()

    status = SquareStatus()
    for _, _, neighbor_id in grid.neighbor_plants(row, col):
        if neighbor_id not in catalog:
            continue
        name = catalog.name_of(neighbor_id)
        if not catalog.are_compatible(plant_id, neighbor_id):
            if name not in status.enemies:
                status.enemies.append(name)
        elif catalog.are_companions(plant_id, neighbor_id):
            if name not in status.companions:
                status.companions.append(name)

    status.has_companion = bool(status.companions)
    status.has_enemy = bool(status.enemies)
    return status


def square_edge_borders(grid, row: int, col: int, catalog):
    """Relationship with the neighbour in each of the 8 directions.

    Returns a dict keyed by direction name (``top``, ``top_left`` ...)
    whose values are ``"enemy"``, ``"companion"`` or ``None``, or
    ``None`` altogether for an empty or unknown square.
    """
    grid = _as_grid(grid)
    if not grid.in_bounds(row, col):
        return None
    if grid.is_empty(row, col):
        return None
    plant_id = grid.cells[row][col]
    if plant_id not in catalog:
        return None

    borders = {}
    for direction, (dr, dc) in _DIRECTIONS.items():
        nr, nc = row + dr, col + dc
        neighbor_id = grid.cells[nr][nc] if grid.in_bounds(nr, nc) else None
        if neighbor_id is None or neighbor_id not in catalog:
            borders[direction] = None
        elif not catalog.are_compatible(plant_id, neighbor_id):
            borders[direction] = "enemy"
        elif catalog.are_companions(plant_id, neighbor_id):
            borders[direction] = "companion"
        else:
            borders[direction] = None
    return borders
