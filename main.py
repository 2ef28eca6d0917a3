"""Bed planner: demonstration and entry point.

Arranges a sample plant selection in a 4x4 raised bed, once with exact
quantities and once in fill mode, then displays and saves the results.
"""

import logging
import os
import sys

# Ensure project root is on the path so ``garden`` can be imported
# regardless of the working directory.
_PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, _PROJECT_ROOT)

from garden import (
    ArrangementError,
    BedPlanner,
    PlantSelection,
    default_catalog,
    find_bridge_plants,
    get_arrangement_stats,
    load_arrangement_json,
    save_arrangement_json,
    save_grid_csv,
    save_locked_csv,
    validate_arrangement,
)

_DATA_DIR = os.path.join(_PROJECT_ROOT, "data")


# -------------------------------------------------------------------
# Helpers
# -------------------------------------------------------------------

def display_arrangement(title: str, arrangement, catalog):
    """Pretty-print an arrangement with its stats to stdout."""
    print(f"\n{'=' * 55}")
    print(f"  {title}")
    print(f"{'=' * 55}\n")
    print(arrangement.grid.display())

    stats = get_arrangement_stats(arrangement.grid, catalog)
    print(
        f"\nSquares: {stats.filled_squares}/{stats.total_squares} filled, "
        f"{stats.unique_plants} plant types, "
        f"{stats.companion_adjacencies} companion pairs"
    )
    for plant_id, count in sorted(arrangement.counts().items()):
        print(f"  {catalog.name_of(plant_id):14s} x{count}")

    result = validate_arrangement(arrangement.grid, catalog)
    print(f"Valid: {result.valid}")
    for v in result.violations:
        print(f"  ({v.row}, {v.col}) {v.plant_id} next to {v.enemy_plant_id}")


# -------------------------------------------------------------------
# Main
# -------------------------------------------------------------------

def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    os.makedirs(_DATA_DIR, exist_ok=True)

    catalog = default_catalog()
    planner = BedPlanner(catalog)

    selections = [
        PlantSelection("tomato", 2),
        PlantSelection("basil", 2),
        PlantSelection("carrot", 1.5),
        PlantSelection("onion", 1),
    ]
    locked = [[False] * 4 for _ in range(4)]
    locked[3][3] = True  # rain barrel

    # ---- 1. Exact quantities ----
    exact = planner.generate_arrangement(4, 4, selections, locked)
    display_arrangement("Exact quantities", exact, catalog)

    # ---- 2. Fill mode ----
    filled = planner.generate_arrangement_with_fill(4, 4, selections, locked, fill_mode=True)
    display_arrangement("Fill mode", filled, catalog)

    # ---- 3. A request that cannot work ----
    print("\nTrying tomato + potato in a 1x2 bed...")
    try:
        planner.generate_arrangement(2, 1, [PlantSelection("tomato"), PlantSelection("potato")])
    except ArrangementError as e:
        print(f"  {e}")

    bridges = find_bridge_plants("tomato", "cabbage", catalog.ids(), catalog)
    print(f"\nPlants that can separate tomato and cabbage: {', '.join(bridges)}")

    # ---- 4. Persist ----
    grid_path = os.path.join(_DATA_DIR, "bed.csv")
    locked_path = os.path.join(_DATA_DIR, "bed_locked.csv")
    plan_path = os.path.join(_DATA_DIR, "arrangement.json")

    save_grid_csv(filled.grid, grid_path)
    save_locked_csv(locked, locked_path)
    save_arrangement_json(filled, plan_path)
    print(f"\nArrangement saved to {plan_path}")

    reloaded = load_arrangement_json(plan_path)
    assert reloaded.grid == filled.grid, "Round-trip mismatch!"


if __name__ == "__main__":
    main()
