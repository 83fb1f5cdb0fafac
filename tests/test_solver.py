import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from dfs_maze.core.grid import Grid
from dfs_maze.core.errors import UnreachableExitError
from dfs_maze.algo.dfs import RecursiveBacktracker
from dfs_maze.algo.solvers import DepthFirstSolver, solve

def all_simple_paths(grid, start, end):
    """Brute-force enumeration of every simple path through open edges."""
    paths = []

    def walk(curr, trail, seen):
        if curr == end:
            paths.append(list(trail))
            return
        for n in grid.get_open_neighbors(*curr):
            if n not in seen:
                seen.add(n)
                trail.append(n)
                walk(n, trail, seen)
                trail.pop()
                seen.remove(n)

    walk(start, [start], {start})
    return paths

class TestSolvers(unittest.TestCase):
    def create_simple_maze(self):
        # 5x5 maze, single corridor
        grid = Grid(5)
        # (0,0) -> (1,0) -> (2,0) -> (2,1) -> (2,2) -> (2,3) -> (2,4) -> (3,4) -> (4,4)
        grid.carve_path(0, 0, Grid.BOTTOM)
        grid.carve_path(1, 0, Grid.BOTTOM)
        grid.carve_path(2, 0, Grid.RIGHT)
        grid.carve_path(2, 1, Grid.RIGHT)
        grid.carve_path(2, 2, Grid.RIGHT)
        grid.carve_path(2, 3, Grid.RIGHT)
        grid.carve_path(2, 4, Grid.BOTTOM)
        grid.carve_path(3, 4, Grid.BOTTOM)
        return grid

    def assert_valid_path(self, grid, path):
        self.assertEqual(path[0], grid.entry())
        self.assertEqual(path[-1], grid.exit())
        coords = [c.coords for c in path]
        self.assertEqual(len(coords), len(set(coords)), "Path repeats a cell")
        for a, b in zip(coords, coords[1:]):
            self.assertFalse(grid.wall_between(a, b), f"Wall between {a} and {b}")

    def test_simple_corridor(self):
        grid = self.create_simple_maze()
        path = solve(grid)

        self.assertEqual([c.coords for c in path], [
            (0, 0), (1, 0), (2, 0), (2, 1), (2, 2), (2, 3), (2, 4), (3, 4), (4, 4)
        ])

    def test_solver_ignores_dead_ends(self):
        grid = self.create_simple_maze()
        # Side branches off the corridor
        grid.carve_path(0, 0, Grid.RIGHT)
        grid.carve_path(0, 1, Grid.RIGHT)
        grid.carve_path(2, 2, Grid.TOP)
        path = solve(grid)
        self.assertEqual(len(path), 9)
        self.assert_valid_path(grid, path)

    def test_generated_mazes(self):
        for n in (2, 5, 10, 25):
            for seed in range(3):
                grid = Grid(n)
                RecursiveBacktracker(grid, seed=seed).run_all()
                self.assert_valid_path(grid, solve(grid))

    def test_path_is_unique_tree_path(self):
        for n in (2, 3, 4):
            for seed in range(5):
                grid = Grid(n)
                RecursiveBacktracker(grid, seed=seed).run_all()

                paths = all_simple_paths(grid, (0, 0), (n - 1, n - 1))
                self.assertEqual(len(paths), 1)
                self.assertEqual([c.coords for c in solve(grid)], paths[0])

    def test_single_cell(self):
        grid = Grid(1)
        RecursiveBacktracker(grid, seed=0).run_all()
        path = solve(grid)
        self.assertEqual(path, [grid.entry()])
        self.assertEqual(grid.entry(), grid.exit())

    def test_no_path(self):
        grid = Grid(5) # All walls
        with self.assertRaises(UnreachableExitError):
            solve(grid)

    def test_partially_carved_grid(self):
        grid = Grid(6)
        algo = RecursiveBacktracker(grid, seed=8)
        for _ in range(5):
            algo.step()
        with self.assertRaises(UnreachableExitError):
            solve(grid)

    def test_stepping_api(self):
        grid = Grid(8)
        RecursiveBacktracker(grid, seed=2).run_all()

        solver = DepthFirstSolver(grid)
        statuses = list(solver.run())
        self.assertEqual(statuses[-1], "Solved")
        self.assertGreater(solver.visited_count, 0)
        self.assertLessEqual(solver.visited_count, 64)
        self.assertEqual(solver.path, solve(grid))

    def test_solver_does_not_mutate_grid(self):
        grid = Grid(9)
        RecursiveBacktracker(grid, seed=13).run_all()
        before = grid.cells.tobytes()
        solve(grid)
        self.assertEqual(grid.cells.tobytes(), before)

    def test_unreachable_after_partial_stepping(self):
        grid = Grid(3)
        solver = DepthFirstSolver(grid)
        steps = solver.run()
        self.assertEqual(next(steps), "Stack: 0")
        with self.assertRaises(UnreachableExitError):
            next(steps)

if __name__ == '__main__':
    unittest.main()
