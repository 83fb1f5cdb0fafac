from typing import Iterable, List, Optional
from dfs_maze.core.grid import Cell, Grid

class TextRenderer:
    """ASCII view of a grid, used for headless runs."""
    CORNER = "+"
    H_WALL = "---"
    V_WALL = "|"
    PATH_MARK = " * "
    EMPTY = "   "

    def __init__(self, grid: Grid):
        self.grid = grid

    def render(self, path: Optional[Iterable[Cell]] = None) -> str:
        on_path = {c.coords for c in path} if path else set()
        size = self.grid.size
        lines: List[str] = []

        for row in range(size):
            top = [self.CORNER]
            mid = [self.V_WALL if self.grid.has_wall(row, 0, Grid.LEFT) else " "]
            for col in range(size):
                top.append(self.H_WALL if self.grid.has_wall(row, col, Grid.TOP) else self.EMPTY)
                top.append(self.CORNER)
                mid.append(self.PATH_MARK if (row, col) in on_path else self.EMPTY)
                mid.append(self.V_WALL if self.grid.has_wall(row, col, Grid.RIGHT) else " ")
            lines.append("".join(top))
            lines.append("".join(mid))

        bottom = [self.CORNER]
        for col in range(size):
            bottom.append(self.H_WALL if self.grid.has_wall(size - 1, col, Grid.BOTTOM) else self.EMPTY)
            bottom.append(self.CORNER)
        lines.append("".join(bottom))

        return "\n".join(lines)
