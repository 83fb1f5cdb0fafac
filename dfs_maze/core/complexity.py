from dfs_maze.core.grid import Grid

class MazeStats:
    @staticmethod
    def count_open_edges(grid: Grid) -> int:
        """Internal passages, each counted once (looking right and down only)."""
        edges = 0
        for row in range(grid.size):
            for col in range(grid.size):
                val = grid.cells[row * grid.size + col]
                if col < grid.size - 1 and not (val & Grid.RIGHT):
                    edges += 1
                if row < grid.size - 1 and not (val & Grid.BOTTOM):
                    edges += 1
        return edges

    @staticmethod
    def reachable_count(grid: Grid) -> int:
        """Number of cells reachable from the entry through open edges."""
        seen = {(0, 0)}
        stack = [(0, 0)]
        while stack:
            row, col = stack.pop()
            for n in grid.get_open_neighbors(row, col):
                if n not in seen:
                    seen.add(n)
                    stack.append(n)
        return len(seen)

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        total = grid.size * grid.size
        return (MazeStats.reachable_count(grid) == total
                and MazeStats.count_open_edges(grid) == total - 1)

    @staticmethod
    def calculate_stats(grid: Grid):
        dead_ends = 0
        intersections = 0 # 0, 1 walls
        corridors = 0 # 2 walls
        isolated = 0 # 4 walls, never carved

        # Only internal walls count, so the opened entry/exit frame
        # does not turn a dead end into a corridor.
        for row in range(grid.size):
            for col in range(grid.size):
                walls = 0
                for nrow, ncol, dir_bit in grid.get_neighbors(row, col):
                    if grid.has_wall(row, col, dir_bit):
                        walls += 1
                # Missing neighbors at the edge behave like walls
                walls += 4 - len(list(grid.get_neighbors(row, col)))

                if walls == 3: dead_ends += 1
                elif walls == 2: corridors += 1
                elif walls <= 1: intersections += 1
                else: isolated += 1

        total = grid.size * grid.size
        return {
            "dead_ends": dead_ends,
            "corridors": corridors,
            "intersections": intersections,
            "isolated": isolated,
            "open_edges": MazeStats.count_open_edges(grid),
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
        }
