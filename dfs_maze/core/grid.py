from array import array
from typing import Iterator, List, Tuple

from dfs_maze.core.errors import InvalidSizeError

class Grid:
    # Bitmask Constants
    TOP    = 0b00000001
    RIGHT  = 0b00000010
    BOTTOM = 0b00000100
    LEFT   = 0b00001000

    # Flags
    VISITED = 0b00010000

    # All walls present by default (T|R|B|L) = 15
    ALL_WALLS = TOP | RIGHT | BOTTOM | LEFT

    # Direction Helpers
    DR = {TOP: -1, BOTTOM: 1, RIGHT: 0, LEFT: 0}
    DC = {TOP: 0, BOTTOM: 0, RIGHT: 1, LEFT: -1}
    OPPOSITE = {TOP: BOTTOM, BOTTOM: TOP, RIGHT: LEFT, LEFT: RIGHT}

    __slots__ = ('size', 'cells', 'boundary_opened')

    def __init__(self, size: int):
        if isinstance(size, bool) or not isinstance(size, int):
            raise InvalidSizeError(f"Grid size must be an integer, got {size!r}")
        if size <= 0:
            raise InvalidSizeError(f"Grid size must be positive, got {size}")

        self.size = size
        self.boundary_opened = False
        # Initialize with all walls present (value 15)
        # using 'B' (unsigned char) -> 1 byte per cell
        self.cells = array('B', [self.ALL_WALLS] * (size * size))

    def get_index(self, row: int, col: int) -> int:
        if 0 <= row < self.size and 0 <= col < self.size:
            return row * self.size + col
        raise IndexError(f"Coordinate ({row}, {col}) out of bounds")

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def cell(self, row: int, col: int) -> "Cell":
        self.get_index(row, col)
        return Cell(self, row, col)

    def cells_iter(self) -> Iterator["Cell"]:
        for row in range(self.size):
            for col in range(self.size):
                yield Cell(self, row, col)

    def entry(self) -> "Cell":
        return Cell(self, 0, 0)

    def exit(self) -> "Cell":
        return Cell(self, self.size - 1, self.size - 1)

    def carve_path(self, row: int, col: int, dir_bit: int):
        """
        Removes the wall between cell (row, col) and the neighbor in 'dir_bit'.
        Also removes the OPPOSITE wall from the neighbor, so both cells
        always agree about the wall they share.
        """
        idx1 = self.get_index(row, col)

        nrow = row + self.DR[dir_bit]
        ncol = col + self.DC[dir_bit]
        if not self.in_bounds(nrow, ncol):
            return # Cannot carve into void

        idx2 = nrow * self.size + ncol

        # Remove wall from cell 1
        self.cells[idx1] &= ~dir_bit
        # Remove opposite wall from cell 2
        self.cells[idx2] &= ~self.OPPOSITE[dir_bit]

    def open_boundary(self):
        """
        Opens the maze frame: the entry loses its top and left walls and the
        exit loses its bottom and right walls. Only outer walls are touched.
        """
        entry = self.get_index(0, 0)
        exit_ = self.get_index(self.size - 1, self.size - 1)
        self.cells[entry] &= ~(self.TOP | self.LEFT)
        self.cells[exit_] &= ~(self.BOTTOM | self.RIGHT)
        self.boundary_opened = True

    def has_wall(self, row: int, col: int, dir_bit: int) -> bool:
        return (self.cells[self.get_index(row, col)] & dir_bit) != 0

    def direction_between(self, a: Tuple[int, int], b: Tuple[int, int]) -> int:
        """Wall bit of cell 'a' that faces the adjacent cell 'b'."""
        dr = b[0] - a[0]
        dc = b[1] - a[1]
        if dc == 1 and dr == 0:
            return self.RIGHT
        elif dc == -1 and dr == 0:
            return self.LEFT
        elif dr == 1 and dc == 0:
            return self.BOTTOM
        elif dr == -1 and dc == 0:
            return self.TOP
        raise ValueError(f"Cells {a} and {b} are not adjacent")

    def wall_between(self, a: Tuple[int, int], b: Tuple[int, int]) -> bool:
        return self.has_wall(a[0], a[1], self.direction_between(a, b))

    def set_visited(self, row: int, col: int):
        self.cells[self.get_index(row, col)] |= self.VISITED

    def is_visited(self, row: int, col: int) -> bool:
        return (self.cells[self.get_index(row, col)] & self.VISITED) != 0

    def get_neighbors(self, row: int, col: int) -> Iterator[Tuple[int, int, int]]:
        """
        Yields (nrow, ncol, direction_to_neighbor) for all valid grid neighbors,
        in the order up, down, left, right.
        Does NOT check walls (that's for pathfinding).
        """
        if row > 0:
            yield (row - 1, col, self.TOP)
        if row < self.size - 1:
            yield (row + 1, col, self.BOTTOM)
        if col > 0:
            yield (row, col - 1, self.LEFT)
        if col < self.size - 1:
            yield (row, col + 1, self.RIGHT)

    def get_open_neighbors(self, row: int, col: int) -> Iterator[Tuple[int, int]]:
        """
        Yields (nrow, ncol) for neighbors that are NOT blocked by a wall.
        """
        val = self.cells[self.get_index(row, col)]
        for nrow, ncol, dir_bit in self.get_neighbors(row, col):
            if not (val & dir_bit):
                yield (nrow, ncol)


class Cell:
    """
    Read-only view of one grid cell. Holds no state of its own, so it always
    reflects the current wall and visited bits of its grid.
    """
    __slots__ = ('grid', 'row', 'col')

    def __init__(self, grid: Grid, row: int, col: int):
        self.grid = grid
        self.row = row
        self.col = col

    @property
    def coords(self) -> Tuple[int, int]:
        return (self.row, self.col)

    def _flag(self, bit: int) -> bool:
        return (self.grid.cells[self.row * self.grid.size + self.col] & bit) != 0

    @property
    def top(self) -> bool:
        return self._flag(Grid.TOP)

    @property
    def right(self) -> bool:
        return self._flag(Grid.RIGHT)

    @property
    def bottom(self) -> bool:
        return self._flag(Grid.BOTTOM)

    @property
    def left(self) -> bool:
        return self._flag(Grid.LEFT)

    @property
    def visited(self) -> bool:
        return self._flag(Grid.VISITED)

    @property
    def neighbors(self) -> List["Cell"]:
        return [Cell(self.grid, r, c) for r, c, _ in self.grid.get_neighbors(self.row, self.col)]

    def __eq__(self, other):
        if not isinstance(other, Cell):
            return NotImplemented
        return self.grid is other.grid and self.row == other.row and self.col == other.col

    def __hash__(self):
        return hash((id(self.grid), self.row, self.col))

    def __repr__(self):
        return f"Cell({self.row}, {self.col})"
