import logging
import pygame
from dfs_maze.core.grid import Grid
from dfs_maze.core.events import Done, WallRemoved
from dfs_maze.algo.solvers import DepthFirstSolver

logger = logging.getLogger(__name__)

class Renderer:
    COLOR_BG = (255, 255, 255)
    COLOR_WALL = (0, 0, 0)
    COLOR_VISITED = (0, 255, 255) # Cyan
    COLOR_SOLUTION = (255, 0, 255) # Magenta
    COLOR_HUD = (90, 90, 90)

    DEFAULT_CELL_SIZE = 20
    MAX_WINDOW = 960
    FPS = 60

    def __init__(self, grid: Grid, generator=None, solver_cls=DepthFirstSolver,
                 cell_size=DEFAULT_CELL_SIZE, steps_per_frame=1, record=False, record_file=None, show_hud=False):
        if steps_per_frame < 1:
            raise ValueError(f"steps_per_frame must be at least 1, got {steps_per_frame}")
        if cell_size < 1:
            raise ValueError(f"cell_size must be at least 1, got {cell_size}")

        self.grid = grid
        self.generator = generator
        self.solver_cls = solver_cls
        self.steps_per_frame = steps_per_frame
        self.show_hud = show_hud

        # Window follows the grid, shrunk to fit large mazes
        side = min(grid.size * cell_size, self.MAX_WINDOW)
        self.screen_width = side
        self.screen_height = side
        self.cell_size = side / grid.size

        from dfs_maze.viz.recorder import VideoRecorder
        self.recorder = VideoRecorder(active=record, output_file=record_file, grid_size=grid.size)

        self.path = []
        self.font = None
        self.running = True
        self.clock = None
        self.surface = None
        self.gen_finished = generator is None or generator.finished
        self.solved = False

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Maze - {self.grid.size}x{self.grid.size}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height))
        self.clock = pygame.time.Clock()
        if self.show_hud:
            self.font = pygame.font.SysFont("Consolas", 14)

    def world_to_screen(self, row, col):
        sx = col * self.cell_size
        sy = row * self.cell_size
        return sx, sy

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False

    def draw_grid(self):
        self.surface.fill(self.COLOR_BG)
        size = int(self.cell_size) + 1
        on_path = {c.coords for c in self.path}

        # 1. Backgrounds
        for cell in self.grid.cells_iter():
            px, py = self.world_to_screen(cell.row, cell.col)
            if cell.coords in on_path:
                pygame.draw.rect(self.surface, self.COLOR_SOLUTION, (int(px), int(py), size, size))
            elif cell.visited:
                pygame.draw.rect(self.surface, self.COLOR_VISITED, (int(px), int(py), size, size))

        # 2. Walls
        for cell in self.grid.cells_iter():
            px, py = self.world_to_screen(cell.row, cell.col)
            x0, y0 = int(px), int(py)
            x1, y1 = int(px + self.cell_size), int(py + self.cell_size)
            if cell.top:
                pygame.draw.line(self.surface, self.COLOR_WALL, (x0, y0), (x1, y0), 1)
            if cell.left:
                pygame.draw.line(self.surface, self.COLOR_WALL, (x0, y0), (x0, y1), 1)
            if cell.bottom:
                pygame.draw.line(self.surface, self.COLOR_WALL, (x0, y1 - 1), (x1, y1 - 1), 1)
            if cell.right:
                pygame.draw.line(self.surface, self.COLOR_WALL, (x1 - 1, y0), (x1 - 1, y1), 1)

    def draw_hud(self):
        if not self.font:
            return
        status = "Solved" if self.solved else ("Solving" if self.gen_finished else "Carving")
        steps = self.generator.step_count if self.generator else 0
        lbl = self.font.render(f"{status} | steps: {steps}", True, self.COLOR_HUD)
        self.surface.blit(lbl, (4, 4))

    def advance(self):
        """
        Steps the generator for one frame, then solves once it is done.
        When recording, every carved wall becomes one video frame and the
        solved maze is held at the end.
        """
        if not self.gen_finished:
            for _ in range(self.steps_per_frame):
                result = self.generator.step()
                if isinstance(result, Done):
                    self.gen_finished = True
                    break
                if isinstance(result, WallRemoved) and self.recorder.active:
                    self.draw_grid()
                    self.recorder.capture_frame(self.surface)
        elif not self.solved:
            self.path = self.solver_cls(self.grid).solve()
            self.solved = True
            logger.info(f"Solution length: {len(self.path)}")
            if self.recorder.active:
                self.draw_grid()
                self.recorder.hold(self.surface)

    def run_loop(self):
        try:
            while self.running:
                self.handle_input()
                self.advance()

                self.draw_grid()
                self.draw_hud()
                pygame.display.flip()

                self.clock.tick(self.FPS)
        finally:
            self.recorder.stop()
            pygame.quit()
