# gridpath/app/viewer.py
#!/usr/bin/env python3
"""
Grid Pathfinding Viewer: click walls, run a search, watch it play back.

- Mouse:
    [LEFT CLICK] -> toggle wall (start/goal can't be walled)
- Keyboard:
    [SPACE]      -> run selected algorithm
    [D]/[A]      -> select algorithm (Dijkstra / A*)
    [C]          -> clear visited + path overlays
    [R]          -> reset grid (remove all walls)
    [N]          -> skip the rest of the animation
    [+]/[-]      -> playback speed
    [Q]/[ESC]    -> quit

Settings: see gridpath.app.settings (GRIDPATH_* env, --key=value CLI).
"""

import sys, time
import logging
from typing import List, Tuple, Optional, Set
import pygame

from gridpath.app.playback import Playback
from gridpath.app.settings import Settings, resolve_settings
from gridpath.core.maps import load_map
from gridpath.core.search import search
from gridpath.core.types import Cell, Grid, GridError, SearchResult

logger = logging.getLogger(__name__)

# ---------- Config ----------
PANEL_W = 320            # right band: metrics + buttons
GRID_MARGIN = 16
CELL_SIZE_DEFAULT = 28
FONT_NAME = None  # default pygame font
SPEEDS = (0.25, 0.5, 1.0, 2.0, 4.0, 8.0)

ALGO_LABELS = {"dijkstra": "Dijkstra", "astar": "A*"}

# Colors
WHITE       = (255,255,255)
BLACK       = (  0,  0,  0)
BLUE        = ( 70,130,180)
RED         = (220, 50, 47)
OPEN_GRAY   = (200,200,200)
WALL_DARK   = ( 40, 44, 52)
VISITED_A   = (0,150,255,110)
PATH_MINT   = (0,255,200)

CARD_BG     = (24,28,36,220)
CARD_HI     = (255,255,255,18)
TEXT_LIGHT  = (230,235,240)
ACCENT_GOLD = (255,210,0)


# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback, *, togglable: bool = False):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.hover = False
        self.togglable = togglable
        self.active = False  # highlight state

    def set_active(self, value: bool):
        self.active = bool(value)

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        base = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        bg_idle   = (36, 40, 48, 220)
        bg_hover  = (46, 50, 60, 230)
        bg_active = (58, 86, 160, 235)
        border_active = (120, 170, 255, 255)

        if self.active and self.togglable:
            bg = bg_active
        elif self.hover:
            bg = bg_hover
        else:
            bg = bg_idle
        pygame.draw.rect(base, bg, base.get_rect(), border_radius=10)

        # subtle highlight top band
        hi = pygame.Surface((self.rect.width, 18), pygame.SRCALPHA)
        pygame.draw.rect(hi, (255,255,255,20), hi.get_rect(), border_radius=10)
        base.blit(hi, (0,0))
        screen.blit(base, self.rect.topleft)

        if self.active and self.togglable:
            pygame.draw.rect(screen, border_active, self.rect, width=2, border_radius=10)

        text = font.render(self.label, True, (235,238,242))
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()
                return True
        return False


# ---------- Viewer ----------
class Viewer:
    def __init__(self, grid: Grid, algo: str = "dijkstra"):
        pygame.init()

        self.grid = grid
        self.font_small = pygame.font.Font(FONT_NAME, 14)
        self.font = pygame.font.Font(FONT_NAME, 18)
        self.font_big = pygame.font.Font(FONT_NAME, 22)

        grid_px_w = GRID_MARGIN*2 + grid.cols * CELL_SIZE_DEFAULT
        grid_px_h = GRID_MARGIN*2 + grid.rows * CELL_SIZE_DEFAULT
        win_w = grid_px_w + PANEL_W
        win_h = max(grid_px_h, 560)

        self.screen = pygame.display.set_mode((win_w, win_h), pygame.RESIZABLE)
        pygame.display.set_caption("Grid Pathfinding")

        self._buttons: list[UIButton] = []
        self.visited: Set[Cell] = set()
        self.path: List[Cell] = []
        self.playback: Optional[Playback] = None
        self.result: Optional[SearchResult] = None
        self.speed_idx = SPEEDS.index(1.0)
        self.state = "Idle"
        self.selected_algo = "astar" if algo in ("astar", "a*", "heuristic") else "dijkstra"
        self.clock = pygame.time.Clock()

        self._layout(win_w, win_h)

    # ---------- layout ----------
    def _layout(self, win_w: int, win_h: int):
        """Compute integer cell_size that fits window and center the grid."""
        avail_w = max(1, win_w - PANEL_W - 2 * GRID_MARGIN)
        avail_h = max(1, win_h - 2 * GRID_MARGIN)

        cs_by_w = avail_w // self.grid.cols
        cs_by_h = avail_h // self.grid.rows
        self.cell_size = int(max(4, min(cs_by_w, cs_by_h)))

        grid_plate_w = self.grid.cols * self.cell_size + 2 * GRID_MARGIN
        grid_plate_h = self.grid.rows * self.cell_size + 2 * GRID_MARGIN

        left_x = max(0, (win_w - (grid_plate_w + PANEL_W)) // 2)
        top_y  = max(0, (win_h - grid_plate_h) // 2)

        self.canvas_rect = pygame.Rect(left_x, top_y, grid_plate_w, grid_plate_h)
        self._grid_origin = (self.canvas_rect.x + GRID_MARGIN,
                             self.canvas_rect.y + GRID_MARGIN)
        self._right_band = pygame.Rect(self.canvas_rect.right, 0,
                                       max(PANEL_W, win_w - self.canvas_rect.right),
                                       win_h)
        self._build_buttons()

    def _cell_at(self, pos: Tuple[int, int]) -> Optional[Cell]:
        ox, oy = self._grid_origin
        x, y = pos
        if x < ox or y < oy:
            return None
        c = ((y - oy) // self.cell_size, (x - ox) // self.cell_size)
        return c if self.grid.in_bounds(c) else None

    def run(self):
        while True:
            self._handle_events()
            self._tick_playback()
            self._draw()
            self.clock.tick(60)

    @property
    def speed(self) -> float:
        return SPEEDS[self.speed_idx]

    # ---------- search + playback ----------
    def _start_search(self):
        if self.state == "Playing":
            return
        self._clear_overlays()
        try:
            self.result = search(self.grid.copy(), algorithm=self.selected_algo)
        except (GridError, ValueError) as ex:
            logger.error("Search failed: %s", ex)
            self.state = "Error"
            return
        logger.info("%s: %s, visited %d cells, path length %d",
                    self.result.algo, "found" if self.result.found else "no path",
                    len(self.result.visited), len(self.result.path))
        self.playback = Playback(self.result, self.grid.start, self.grid.goal, speed=self.speed)
        self.state = "Playing"

    def _tick_playback(self):
        if self.playback is None:
            return
        self._apply_frames(self.playback.advance(time.monotonic()))

    def _apply_frames(self, frames):
        for fr in frames:
            if fr.kind == "visited":
                self.visited.add(fr.cell)
            else:
                self.path.append(fr.cell)
        if self.playback is not None and self.playback.done:
            self.playback = None
            self.state = "Done" if self.result and self.result.found else "No path"
            self._refresh_active_states()

    def _skip_playback(self):
        if self.playback is not None:
            self._apply_frames(self.playback.finish())

    def _clear_overlays(self):
        self.playback = None
        self.result = None
        self.visited.clear()
        self.path = []
        self.state = "Idle"

    def _reset(self):
        self._clear_overlays()
        self.grid.clear_walls()

    def _switch_algo(self, algo: str):
        if self.state == "Playing":
            return
        self.selected_algo = algo
        self._clear_overlays()
        self._refresh_active_states()

    def _bump_speed(self, dv: int):
        self.speed_idx = max(0, min(len(SPEEDS) - 1, self.speed_idx + dv))
        if self.playback is not None:
            self.playback.speed = self.speed

    def _toggle_wall_at(self, pos: Tuple[int, int]):
        if self.state == "Playing":
            return
        c = self._cell_at(pos)
        if c is None:
            return
        if self.result is not None:
            self._clear_overlays()
        self.grid.toggle_wall(c)

    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    pygame.quit(); sys.exit(0)
                elif e.key == pygame.K_SPACE:
                    self._start_search()
                elif e.key == pygame.K_c:
                    self._clear_overlays()
                elif e.key == pygame.K_r:
                    self._reset()
                elif e.key == pygame.K_n:
                    self._skip_playback()
                elif e.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    self._bump_speed(+1)
                elif e.key in (pygame.K_MINUS, pygame.K_UNDERSCORE):
                    self._bump_speed(-1)
                elif e.key == pygame.K_d:
                    self._switch_algo("dijkstra")
                elif e.key == pygame.K_a:
                    self._switch_algo("astar")
            elif e.type == pygame.VIDEORESIZE:
                w, h = max(480, e.w), max(360, e.h)
                self.screen = pygame.display.set_mode((w, h), pygame.RESIZABLE)
                self._layout(w, h)
            elif e.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN):
                hit = False
                for b in self._buttons:
                    hit = b.handle_mouse(e) or hit
                if not hit and e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                    self._toggle_wall_at(e.pos)

    # ---------- drawing ----------
    def _draw(self):
        self._draw_backdrop()
        self._draw_grid()
        self._draw_metrics_and_buttons()
        pygame.display.flip()

    def _draw_backdrop(self):
        w, h = self.screen.get_size()
        top = (24, 26, 32); bot = (36, 40, 48)
        for y in range(h):
            t = y / max(1, h-1)
            c = (
                int(top[0] + (bot[0]-top[0]) * t),
                int(top[1] + (bot[1]-top[1]) * t),
                int(top[2] + (bot[2]-top[2]) * t),
            )
            pygame.draw.line(self.screen, c, (0, y), (w, y))

    def _draw_grid(self):
        cs = self.cell_size
        ox, oy = self._grid_origin

        for row in range(self.grid.rows):
            for col in range(self.grid.cols):
                rect = pygame.Rect(ox + col*cs, oy + row*cs, cs, cs)
                color = WALL_DARK if self.grid.is_block((row, col)) else OPEN_GRAY
                pygame.draw.rect(self.screen, color, rect)
                pygame.draw.rect(self.screen, BLACK, rect, 1)

        overlay = pygame.Surface((cs, cs), pygame.SRCALPHA)
        overlay.fill(VISITED_A)
        for (row, col) in self.visited:
            self.screen.blit(overlay, (ox + col*cs, oy + row*cs))

        # path grows cell by cell; draw it from start through what's released
        if self.path:
            pts = [self._center(self.grid.start)] + [self._center(c) for c in self.path]
            if self.result is not None and self.result.found and self.playback is None:
                pts.append(self._center(self.grid.goal))
            if len(pts) >= 2:
                pygame.draw.lines(self.screen, PATH_MINT, False, pts, max(2, cs // 5))

        self._draw_badge(self.grid.start, BLUE, "S")
        self._draw_badge(self.grid.goal,  RED,  "G")

    def _center(self, cell: Cell) -> Tuple[int, int]:
        cs = self.cell_size
        ox, oy = self._grid_origin
        row, col = cell
        return (ox + col*cs + cs//2, oy + row*cs + cs//2)

    def _draw_badge(self, cell: Cell, color: Tuple[int,int,int], label: str):
        cx, cy = self._center(cell)
        pygame.draw.circle(self.screen, color, (cx, cy), max(4, self.cell_size//2 - 2))
        txt = self.font_small.render(label, True, WHITE)
        self.screen.blit(txt, txt.get_rect(center=(cx, cy)))

    # ---------- buttons + metrics ----------
    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + 230  # leaves space for metrics card above
        w = max(160, rb.width - 32)
        h = 36
        gap = 10

        def add(label, cb, *, togglable=False, store_as: str | None = None):
            rect = pygame.Rect(x, y, w, h)
            btn = UIButton(label, rect, cb, togglable=togglable)
            self._buttons.append(btn)
            if store_as:
                setattr(self, store_as, btn)

        add("Run", self._start_search); y += h + gap
        add("Skip Animation", self._skip_playback); y += h + gap
        add("Clear Path", self._clear_overlays); y += h + gap
        add("Reset Grid", self._reset); y += h + gap

        minus_rect = pygame.Rect(x, y, (w-8)//2, h)
        plus_rect  = pygame.Rect(x + (w-8)//2 + 8, y, (w-8)//2, h)
        self._buttons.append(UIButton("Speed -", minus_rect, lambda: self._bump_speed(-1)))
        self._buttons.append(UIButton("Speed +", plus_rect,  lambda: self._bump_speed(+1)))
        y += h + gap

        add("Algo: Dijkstra", lambda: self._switch_algo("dijkstra"), togglable=True, store_as="btn_algo_d"); y += h + gap
        add("Algo: A*",       lambda: self._switch_algo("astar"),    togglable=True, store_as="btn_algo_a")

        self._refresh_active_states()

    def _refresh_active_states(self):
        if hasattr(self, "btn_algo_d"):
            self.btn_algo_d.set_active(self.selected_algo == "dijkstra")
        if hasattr(self, "btn_algo_a"):
            self.btn_algo_a.set_active(self.selected_algo == "astar")

    def _draw_metrics_and_buttons(self):
        rb = self._right_band

        card_h = 210
        card = pygame.Surface((rb.width - 20, card_h), pygame.SRCALPHA)
        pygame.draw.rect(card, CARD_BG, card.get_rect(), border_radius=14)
        hi = pygame.Surface((card.get_width(), 24), pygame.SRCALPHA)
        pygame.draw.rect(hi, CARD_HI, hi.get_rect(), border_radius=14)
        card.blit(hi, (0,0))
        self.screen.blit(card, (rb.x + 10, rb.y + 10))

        x0 = rb.x + 24
        y0 = rb.y + 18

        def line(text, big=False, color=TEXT_LIGHT):
            nonlocal y0
            f = self.font_big if big else self.font
            surf = f.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        line("Metrics", big=True, color=ACCENT_GOLD)
        m = self.result.metrics if self.result else {}
        line(f"Algo: {ALGO_LABELS[self.selected_algo]}")
        line(f"State: {self.state}")
        line(f"Popped: {m.get('popped', 0)}")
        line(f"Visited: {len(self.visited)}")
        line(f"Path Len: {m.get('path_len', 0)}")
        if m.get("total_cost") is not None:
            line(f"Total Cost: {m['total_cost']}")
        line(f"Speed: x{self.speed:g}")

        for b in self._buttons:
            b.draw(self.screen, self.font)


# ---------- main ----------
def build_grid(settings: Settings) -> Grid:
    if settings.map_path:
        try:
            return load_map(settings.map_path)
        except (OSError, ValueError) as ex:
            logger.error("Failed to load map %s: %s", settings.map_path, ex)
    grid = Grid.empty(settings.rows, settings.cols)
    try:
        grid.validate()
    except GridError as ex:
        logger.warning("%s; falling back to a 20x20 grid", ex)
        grid = Grid.empty()
    return grid


def main():
    try:
        settings = resolve_settings()
    except ValueError as ex:
        logging.basicConfig(level=logging.INFO)
        logger.error("%s", ex)
        sys.exit(2)
    logging.basicConfig(level=settings.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    Viewer(build_grid(settings), settings.algo).run()


if __name__ == "__main__":
    main()
