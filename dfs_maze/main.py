import argparse
import sys
import os
import logging

# Ensure project root is in path so we can import 'dfs_maze' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from dfs_maze.core.errors import InvalidSizeError, UnreachableExitError

INVALID_SIZE_MESSAGE = "Invalid input. Please enter a valid number."

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def parse_size(text) -> int:
    """Grid size from user input. Non-numeric or non-positive input is rejected."""
    try:
        size = int(str(text).strip())
    except ValueError:
        raise InvalidSizeError(f"Not a number: {text!r}") from None
    if size <= 0:
        raise InvalidSizeError(f"Grid size must be positive, got {size}")
    return size

def positive_int(text) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return value

def build_parser():
    parser = argparse.ArgumentParser(description="Maze: randomized DFS generator and solver")
    parser.add_argument("size", nargs="?", help="Grid size N (prompted for when omitted)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    parser.add_argument("--headless", action="store_true", help="Print the solved maze instead of opening a window")
    parser.add_argument("--steps-per-frame", type=positive_int, default=1, help="Generator steps per animation frame")
    parser.add_argument("--cell-size", type=positive_int, default=20, help="Cell size in pixels")
    parser.add_argument("--record", action="store_true", help="Record the animation to an mp4 file")
    return parser

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("dfs_maze")

    raw_size = args.size
    if raw_size is None:
        raw_size = input("Enter the grid size: ")

    try:
        size = parse_size(raw_size)
    except InvalidSizeError as e:
        logger.debug(f"Rejected size input: {e}")
        print(INVALID_SIZE_MESSAGE)
        return 2

    from dfs_maze.core.grid import Grid
    from dfs_maze.algo.dfs import RecursiveBacktracker
    from dfs_maze.algo.solvers import solve
    from dfs_maze.core.complexity import MazeStats

    logger.info(f"Generating {size}x{size} maze (seed={args.seed})...")
    grid = Grid(size)
    generator = RecursiveBacktracker(grid, seed=args.seed)

    if args.headless:
        generator.run_all()
        logger.info(f"Stats: {MazeStats.calculate_stats(grid)}")
        try:
            path = solve(grid)
        except UnreachableExitError as e:
            logger.error(f"Solve failed: {e}")
            return 1

        from dfs_maze.viz.text import TextRenderer
        print(TextRenderer(grid).render(path))
        print(f"\nDone. Path Length: {len(path)}")
        return 0

    logger.info("Visual mode enabled - Opening window...")
    from dfs_maze.viz.renderer import Renderer
    renderer = Renderer(
        grid,
        generator=generator,
        cell_size=args.cell_size,
        steps_per_frame=args.steps_per_frame,
        record=args.record,
        show_hud=args.verbose,
    )
    if args.record:
        logger.info(f"Recording video to {renderer.recorder.output_file}")

    renderer.init_window()
    try:
        renderer.run_loop()
    except UnreachableExitError as e:
        logger.error(f"Solve failed: {e}")
        return 1

    if generator.finished:
        logger.info(f"Stats: {MazeStats.calculate_stats(grid)}")
    else:
        logger.info("Window closed before generation finished.")
    return 0

if __name__ == "__main__":
    sys.exit(main())
