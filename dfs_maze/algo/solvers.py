import logging
from typing import Dict, Iterator, List, Optional, Tuple
from dfs_maze.core.grid import Cell, Grid
from dfs_maze.core.errors import UnreachableExitError
from dfs_maze.algo.base import Solver

logger = logging.getLogger(__name__)

class DepthFirstSolver(Solver):
    """
    Iterative DFS from the entry to the exit over open edges.

    Every cell gets its predecessor recorded the moment it is pushed, so each
    cell enters the stack at most once. In a perfect maze the predecessor
    chain from the exit is the only simple path back to the entry.
    The grid is only read, never modified.
    """

    def run(self) -> Iterator[str]:
        start = (0, 0)
        end = (self.grid.size - 1, self.grid.size - 1)

        stack = [start]
        parents: Dict[Tuple[int, int], Optional[Tuple[int, int]]] = {start: None}
        self.visited_count = 1

        while stack:
            curr = stack.pop()

            if curr == end:
                self.path = self.reconstruct_path(parents, end)
                logger.debug(f"Solved: path {len(self.path)}, visited {self.visited_count}")
                yield "Solved"
                return

            cr, cc = curr
            for nr, nc, dir_bit in self.grid.get_neighbors(cr, cc):
                n = (nr, nc)
                if n not in parents and not self.grid.has_wall(cr, cc, dir_bit):
                    parents[n] = curr
                    self.visited_count += 1
                    stack.append(n)

            yield f"Stack: {len(stack)}"

        raise UnreachableExitError(
            f"Exit {end} not reachable from {start} "
            f"({self.visited_count} of {self.grid.size ** 2} cells explored)"
        )

    def reconstruct_path(self, parents, end) -> List[Cell]:
        path = []
        curr = end
        while curr is not None:
            path.append(self.grid.cell(*curr))
            curr = parents[curr]
        path.reverse()
        return path

def solve(grid: Grid) -> List[Cell]:
    """Entry-to-exit path through a carved grid."""
    return DepthFirstSolver(grid).solve()
