import pygame
import pygame.gfxdraw

from .grid import CELL_BLOCKED, DOWN, LEFT, RIGHT, UP, FlatGrid


class MazeRenderer:
    """
    Draws a MazeSession onto a pygame Surface. Drawing reads session state only,
    so rendering the same state twice yields the same pixels.
    """

    # Colors
    COLOR_BG = (16, 20, 28)
    COLOR_BOARD = (24, 30, 40)
    COLOR_WALL = (217, 226, 236)
    COLOR_BLOCK = (60, 70, 86)
    COLOR_EXIT = (0, 212, 143)
    COLOR_EXIT_FILL = (0, 212, 143, 51)
    COLOR_PLAYER = (110, 168, 254)
    COLOR_PLAYER_RING = (255, 255, 255)
    COLOR_SOLUTION = (255, 107, 107)
    COLOR_HINT = (255, 204, 102)
    COLOR_TEXT = (220, 226, 236)
    COLOR_MUTED = (140, 150, 165)
    COLOR_WIN = (0, 212, 143)
    COLOR_TOAST_BG = (40, 48, 62)

    WALL_WIDTH = 2
    SOLUTION_WIDTH = 3
    HINT_WIDTH = 4

    HUD_HEIGHT = 56
    FOOTER_HEIGHT = 44
    MARGIN = 12

    def __init__(self, width, height):
        self.width = width
        self.height = height
        pygame.font.init()
        self.font_small = pygame.font.SysFont("monospace", 16, bold=True)
        self.font_large = pygame.font.SysFont("monospace", 22, bold=True)

    # --- Geometry ---

    def board_area(self):
        return pygame.Rect(
            self.MARGIN,
            self.HUD_HEIGHT,
            self.width - 2 * self.MARGIN,
            self.height - self.HUD_HEIGHT - self.FOOTER_HEIGHT,
        )

    def layout(self, rows, cols):
        """Returns (cell_size, offset_x, offset_y) for a centred board."""
        area = self.board_area()
        cell = max(1, min(area.width, area.height) // max(rows, cols))
        offset_x = area.x + (area.width - cell * cols) // 2
        offset_y = area.y + (area.height - cell * rows) // 2
        return cell, offset_x, offset_y

    def cell_center(self, pos, geometry):
        cell, ox, oy = geometry
        r, c = pos
        return (ox + c * cell + cell // 2, oy + r * cell + cell // 2)

    # --- Drawing ---

    def draw(self, surface, session):
        surface.fill(self.COLOR_BG)
        if session.grid is not None:
            geometry = self.layout(session.rows, session.cols)
            self._render_board(surface, session, geometry)
        self._render_ui(surface, session)

    def _render_board(self, surface, session, geometry):
        cell, ox, oy = geometry
        grid = session.grid
        board = pygame.Rect(ox, oy, cell * session.cols, cell * session.rows)
        pygame.draw.rect(surface, self.COLOR_BOARD, board)

        if isinstance(grid, FlatGrid):
            self._render_blocks(surface, grid, geometry)
        else:
            self._render_walls(surface, grid, geometry)

        # Exit
        tx, ty = self.cell_center(session.target, geometry)
        radius = int(max(8, cell * 0.28))
        pygame.gfxdraw.filled_circle(surface, tx, ty, radius, self.COLOR_EXIT_FILL)
        pygame.draw.circle(surface, self.COLOR_EXIT, (tx, ty), radius, 2)

        # Solution path (only while toggled on)
        path = session.solution_path()
        if path and len(path) >= 2:
            points = [self.cell_center(p, geometry) for p in path]
            pygame.draw.lines(surface, self.COLOR_SOLUTION, False, points, self.SOLUTION_WIDTH)

        # Hint, one step only
        if session.hint_segment:
            a, b = session.hint_segment
            pygame.draw.line(
                surface, self.COLOR_HINT,
                self.cell_center(a, geometry), self.cell_center(b, geometry),
                self.HINT_WIDTH,
            )

        # Player
        px, py = self.cell_center(session.player, geometry)
        radius = int(max(6, cell * 0.28))
        pygame.draw.circle(surface, self.COLOR_PLAYER, (px, py), radius)
        pygame.draw.circle(surface, self.COLOR_PLAYER_RING, (px, py), radius, 1)

    def _render_walls(self, surface, grid, geometry):
        cell, ox, oy = geometry
        for r in range(grid.rows):
            for c in range(grid.cols):
                x, y = ox + c * cell, oy + r * cell
                walls = grid.walls[r, c]
                if walls[UP]:
                    pygame.draw.line(surface, self.COLOR_WALL, (x, y), (x + cell, y), self.WALL_WIDTH)
                if walls[RIGHT]:
                    pygame.draw.line(surface, self.COLOR_WALL, (x + cell, y), (x + cell, y + cell), self.WALL_WIDTH)
                if walls[DOWN]:
                    pygame.draw.line(surface, self.COLOR_WALL, (x, y + cell), (x + cell, y + cell), self.WALL_WIDTH)
                if walls[LEFT]:
                    pygame.draw.line(surface, self.COLOR_WALL, (x, y), (x, y + cell), self.WALL_WIDTH)

    def _render_blocks(self, surface, grid, geometry):
        cell, ox, oy = geometry
        for r in range(grid.rows):
            for c in range(grid.cols):
                if grid.cells[r, c] == CELL_BLOCKED:
                    rect = pygame.Rect(ox + c * cell, oy + r * cell, cell, cell)
                    pygame.draw.rect(surface, self.COLOR_BLOCK, rect)

    def _render_ui(self, surface, session):
        # Elapsed time
        time_text = self.font_large.render(f"Time: {session.elapsed}s", True, self.COLOR_TEXT)
        surface.blit(time_text, (self.MARGIN + 8, 8))

        # Board size
        size_text = self.font_small.render(f"{session.rows}x{session.cols}", True, self.COLOR_MUTED)
        size_rect = size_text.get_rect(right=self.width - self.MARGIN - 8, y=12)
        surface.blit(size_text, size_rect)

        # Status line
        if session.status:
            color = self.COLOR_WIN if session.won and not session.used_solution else self.COLOR_MUTED
            status_text = self.font_small.render(session.status, True, color)
            status_rect = status_text.get_rect(centerx=self.width // 2, y=34)
            surface.blit(status_text, status_rect)

        # Toast, or the controls when there is none
        if session.toast.text:
            toast_text = self.font_small.render(session.toast.text, True, self.COLOR_TEXT)
            toast_rect = toast_text.get_rect(centerx=self.width // 2, bottom=self.height - 12)
            pygame.draw.rect(surface, self.COLOR_TOAST_BG, toast_rect.inflate(24, 10), border_radius=6)
            surface.blit(toast_text, toast_rect)
        else:
            help_str = f"Enter: start  H: hint  S: {session.solution_label}  N: new maze  Esc: exit"
            help_text = self.font_small.render(help_str, True, self.COLOR_MUTED)
            help_rect = help_text.get_rect(centerx=self.width // 2, bottom=self.height - 12)
            surface.blit(help_text, help_rect)
