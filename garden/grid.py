"""Bed grid representation.

A raised bed is modeled as a 2D grid of one-foot squares.  Each cell
holds either a plant ID string or ``None`` (empty):

    tomato  basil   None
    None    carrot  None

Cells are addressed as ``(row, col)`` with row 0 at the top.  Two cells
are *adjacent* when they touch on an edge or a corner, so an interior
square has eight neighbours.
"""


def adjacent_positions(row: int, col: int, width: int, height: int):
    """Return the (row, col) cells touching *(row, col)*, diagonals included.

    Positions outside ``[0, height) x [0, width)`` are dropped, so a
    corner yields 3 cells, an edge 5, an interior cell 8 and a 1x1 grid
    none.  Results come back in row-major order.
    """
    positions = []
    for dr in (-1, 0, 1):
        for dc in (-1, 0, 1):
            if dr == 0 and dc == 0:
                continue
            nr, nc = row + dr, col + dc
            if 0 <= nr < height and 0 <= nc < width:
                positions.append((nr, nc))
    return positions


def empty_mask(width: int, height: int) -> list[list[bool]]:
    """All-unlocked mask for a *width* x *height* bed."""
    return [[False] * width for _ in range(height)]


class BedGrid:
    """2D grid of squares representing one garden bed.

    Attributes:
        width:  Number of columns.
        height: Number of rows.
        cells:  2D list (row-major) of plant IDs or ``None``.
    """

    EMPTY = None

    def __init__(self, width: int, height: int):
        """Create a grid with every square empty."""
        self.width = width
        self.height = height
        self.cells = [[self.EMPTY] * width for _ in range(height)]

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_matrix(cls, matrix):
        """Create a BedGrid from an existing 2D list.

        Falsy cell values (``""``, ``None``) are read as empty squares.

        Args:
            matrix: list[list[str | None]], each inner list is one row.

        Returns:
            A new BedGrid instance.
        """
        height = len(matrix)
        width = len(matrix[0]) if height > 0 else 0
        grid = cls(width, height)
        grid.cells = [[v or cls.EMPTY for v in row] for row in matrix]
        return grid

    def copy(self) -> "BedGrid":
        return BedGrid.from_matrix(self.cells)

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def set_cell(self, row: int, col: int, plant_id):
        """Set a single square.

        Raises IndexError if (row, col) is out of bounds.
        """
        if not self.in_bounds(row, col):
            raise IndexError(
                f"Cell ({row}, {col}) out of bounds for "
                f"{self.width}x{self.height} grid"
            )
        self.cells[row][col] = plant_id or self.EMPTY

    def get_cell(self, row: int, col: int):
        """Return the plant ID in a single square (``None`` if empty).

        Raises IndexError if (row, col) is out of bounds.
        """
        if not self.in_bounds(row, col):
            raise IndexError(
                f"Cell ({row}, {col}) out of bounds for "
                f"{self.width}x{self.height} grid"
            )
        return self.cells[row][col]

    def is_empty(self, row: int, col: int) -> bool:
        return self.get_cell(row, col) is self.EMPTY

    # ------------------------------------------------------------------
    # Neighbourhood queries
    # ------------------------------------------------------------------

    def neighbors(self, row: int, col: int):
        """Return the in-bounds cells adjacent to *(row, col)* (8-connectivity)."""
        return adjacent_positions(row, col, self.width, self.height)

    def neighbor_plants(self, row: int, col: int):
        """Yield ``(row, col, plant_id)`` for every occupied neighbour."""
        for nr, nc in self.neighbors(row, col):
            plant_id = self.cells[nr][nc]
            if plant_id is not self.EMPTY:
                yield nr, nc, plant_id

    def filled_cells(self):
        """Yield ``(row, col, plant_id)`` for every occupied square, row-major."""
        for r in range(self.height):
            for c in range(self.width):
                plant_id = self.cells[r][c]
                if plant_id is not self.EMPTY:
                    yield r, c, plant_id

    def count_filled(self) -> int:
        return sum(1 for _ in self.filled_cells())

    # ------------------------------------------------------------------
    # Manual edits
    # ------------------------------------------------------------------

    def swap(self, a: tuple[int, int], b: tuple[int, int], locked=None) -> "BedGrid":
        """Return a new grid with the contents of squares *a* and *b* exchanged.

        This is the drag-and-drop edit: the original grid is left
        untouched.  Raises IndexError for out-of-bounds squares and
        ValueError if either square is locked in *locked*.
        """
        for r, c in (a, b):
            if not self.in_bounds(r, c):
                raise IndexError(
                    f"Cell ({r}, {c}) out of bounds for "
                    f"{self.width}x{self.height} grid"
                )
            if locked is not None and locked[r][c]:
                raise ValueError(f"Cell ({r}, {c}) is locked")

        swapped = self.copy()
        (ar, ac), (br, bc) = a, b
        swapped.cells[ar][ac], swapped.cells[br][bc] = (
            self.cells[br][bc],
            self.cells[ar][ac],
        )
        return swapped

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def display(self) -> str:
        """Return a human-readable string of the grid.

        Empty squares are shown as '.' for clarity.
        """
        w = max(
            (len(v) for row in self.cells for v in row if v is not self.EMPTY),
            default=1,
        )
        w = max(w, 3)

        lines = []
        for row in self.cells:
            parts = []
            for v in row:
                parts.append(".".rjust(w) if v is self.EMPTY else v.rjust(w))
            lines.append(" ".join(parts))
        return "\n".join(lines)

    def __eq__(self, other):
        if not isinstance(other, BedGrid):
            return NotImplemented
        return self.cells == other.cells

    def __repr__(self):
        return f"BedGrid(width={self.width}, height={self.height})"
