"""Square-foot garden bed planning package.

Exports the main classes and functions so consumers can do::

    from garden import BedPlanner, PlantSelection, default_catalog
"""

from .grid import BedGrid, adjacent_positions, empty_mask
from .catalog import Plant, PlantCatalog
from .plant_library import PLANT_LIBRARY, default_catalog
from .planner import Arrangement, BedPlanner, Placement, PlantSelection
from .analysis import (
    ArrangementStats,
    SquareStatus,
    ValidationResult,
    Violation,
    find_bridge_plants,
    get_arrangement_stats,
    is_bridge_plant,
    square_companion_status,
    square_edge_borders,
    validate_arrangement,
)
from .errors import (
    ArrangementError,
    ConstraintError,
    InsufficientSpaceError,
    InvalidDimensionsError,
    InvalidSelectionError,
    MinimumQuantityError,
)
from .persistence import (
    save_grid_csv,
    load_grid_csv,
    save_locked_csv,
    load_locked_csv,
    save_arrangement_json,
    load_arrangement_json,
)
