"""Save and load bed grids, lock masks and arrangements.

Grid format (CSV):
    Plain matrix, one row per line, comma-separated plant IDs.  Empty
    squares are empty fields, so a saved bed opens cleanly in any
    spreadsheet tool.

Lock mask format (CSV):
    Same shape as the grid, ``1`` for locked squares and ``0`` otherwise.

Arrangement format (JSON):
    The dict produced by ``Arrangement.to_dict``.
"""

import csv
import json
import os

from .grid import BedGrid
from .planner import Arrangement


def _ensure_parent(filepath: str):
    os.makedirs(os.path.dirname(filepath) or ".", exist_ok=True)


# ---------------------------------------------------------------------------
# Grid persistence (CSV)
# ---------------------------------------------------------------------------

def save_grid_csv(grid: BedGrid, filepath: str):
    """Write a BedGrid to a CSV file (one row per line)."""
    _ensure_parent(filepath)
    with open(filepath, "w", newline="") as f:
        writer = csv.writer(f)
        for row in grid.cells:
            writer.writerow(["" if v is BedGrid.EMPTY else v for v in row])


def load_grid_csv(filepath: str) -> BedGrid:
    """Read a BedGrid from a CSV file produced by *save_grid_csv*."""
    with open(filepath, "r", newline="") as f:
        reader = csv.reader(f)
        matrix = [[v.strip() or None for v in row] for row in reader if row]
    return BedGrid.from_matrix(matrix)


def save_locked_csv(locked: list[list[bool]], filepath: str):
    """Write a lock mask as rows of 1/0."""
    _ensure_parent(filepath)
    with open(filepath, "w", newline="") as f:
        writer = csv.writer(f)
        for row in locked:
            writer.writerow([1 if v else 0 for v in row])


def load_locked_csv(filepath: str) -> list[list[bool]]:
    """Read a lock mask written by *save_locked_csv*."""
    with open(filepath, "r", newline="") as f:
        reader = csv.reader(f)
        return [[v.strip() == "1" for v in row] for row in reader if row]


# ---------------------------------------------------------------------------
# Arrangement persistence (JSON)
# ---------------------------------------------------------------------------

def save_arrangement_json(arrangement: Arrangement, filepath: str):
    """Write an arrangement to a JSON file."""
    _ensure_parent(filepath)
    with open(filepath, "w") as f:
        json.dump(arrangement.to_dict(), f, indent=2)


def load_arrangement_json(filepath: str) -> Arrangement:
    """Read an arrangement written by *save_arrangement_json*."""
    with open(filepath, "r") as f:
        return Arrangement.from_dict(json.load(f))
