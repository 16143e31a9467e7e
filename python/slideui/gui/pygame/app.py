"""Pygame GUI frontend, fully self-contained.

Includes main menu with size selection, gameplay and a win screen.
Clicking any tile in the blank's row or column slides the whole segment.
"""

from __future__ import annotations

import enum

import pygame

from slidecore.config import MAX_SIZE, MIN_SIZE, GameConfig
from slidecore.engine.gameplay import BoardSnapshot, GamePlay, MoveResult, SolvedEvent
from slidecore.models.board import Direction

# ---------------------------------------------------------------------------
# Catppuccin Mocha palette
# ---------------------------------------------------------------------------
COL_BASE = (30, 30, 46)
COL_MANTLE = (24, 24, 37)
COL_SURFACE0 = (49, 50, 68)
COL_SURFACE1 = (69, 71, 90)
COL_OVERLAY0 = (108, 112, 134)
COL_TEXT = (205, 214, 244)
COL_SUBTEXT = (166, 173, 200)
COL_BLUE = (137, 180, 250)
COL_LAVENDER = (180, 190, 254)
COL_GREEN = (166, 227, 161)
COL_PINK = (245, 194, 231)
COL_YELLOW = (249, 226, 175)
COL_RED = (243, 139, 168)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 500, 640
TILE_GAP = 4
MARGIN = 20
BOARD_TOP = 76
BOARD_MAX = WIN_W - 2 * MARGIN  # max board width/height in px

_TICK_EVENT = pygame.USEREVENT + 1


class _Screen(enum.Enum):
    MENU = "menu"
    PLAYING = "playing"
    WIN = "win"


# ---------------------------------------------------------------------------
# Simple clickable button
# ---------------------------------------------------------------------------
class _Btn:
    __slots__ = ("rect", "text", "font", "bg", "hover", "fg", "_hot")

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        font: pygame.font.Font,
        *,
        bg: tuple = COL_SURFACE0,
        hover: tuple = COL_SURFACE1,
        fg: tuple = COL_TEXT,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self.bg = bg
        self.hover = hover
        self.fg = fg
        self._hot = False

    def draw(self, surf: pygame.Surface) -> None:
        pygame.draw.rect(surf, self.hover if self._hot else self.bg, self.rect, border_radius=8)
        lbl = self.font.render(self.text, True, self.fg)
        surf.blit(
            lbl,
            (
                self.rect.centerx - lbl.get_width() // 2,
                self.rect.centery - lbl.get_height() // 2,
            ),
        )

    def motion(self, pos: tuple[int, int]) -> None:
        self._hot = self.rect.collidepoint(pos)

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)


def _cx(w: int) -> int:
    return (WIN_W - w) // 2


def _blit_center(surf: pygame.Surface, rendered: pygame.Surface, y: int) -> None:
    surf.blit(rendered, (_cx(rendered.get_width()), y))


def _fmt(seconds: int) -> str:
    m, s = divmod(seconds, 60)
    return f"{m:02d}:{s:02d}"


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    def __init__(self, config: GameConfig) -> None:
        self._config = config
        self._sel_size = config.size

        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("Sliding Puzzle")
        self._clock = pygame.time.Clock()

        self._f_big = pygame.font.SysFont("Helvetica", 38, bold=True)
        self._f_title = pygame.font.SysFont("Helvetica", 22, bold=True)
        self._f_body = pygame.font.SysFont("Helvetica", 16)
        self._f_btn = pygame.font.SysFont("Helvetica", 17, bold=True)
        self._f_btn_sm = pygame.font.SysFont("Helvetica", 14, bold=True)
        self._f_small = pygame.font.SysFont("Helvetica", 13)

        self._screen = _Screen.MENU
        self._game: GamePlay | None = None
        self._snap: BoardSnapshot | None = None
        self._solved: SolvedEvent | None = None

        self._build_menu_btns()
        self._build_game_btns()
        self._build_win_btns()

    # ── buttons ─────────────────────────────────────────────────────────────

    def _build_menu_btns(self) -> None:
        sizes = range(MIN_SIZE, MAX_SIZE + 1)
        bw, gap = 46, 6
        sx = _cx(len(sizes) * bw + (len(sizes) - 1) * gap)
        self._size_btns: dict[int, _Btn] = {
            s: _Btn((sx + i * (bw + gap), 250, bw, 46), f"{s}×{s}", self._f_btn_sm)
            for i, s in enumerate(sizes)
        }
        bw_lg = 220
        self._play_btn = _Btn(
            (_cx(bw_lg), 330, bw_lg, 50),
            "P L A Y",
            self._f_btn,
            bg=COL_BLUE,
            hover=COL_LAVENDER,
            fg=COL_BASE,
        )
        self._quit_btn = _Btn(
            (_cx(bw_lg), 394, bw_lg, 42),
            "Q U I T",
            self._f_btn_sm,
            bg=COL_RED,
            hover=(255, 170, 185),
            fg=COL_BASE,
        )
        self._menu_all = [*self._size_btns.values(), self._play_btn, self._quit_btn]

    def _build_game_btns(self) -> None:
        bw, gap = 130, 10
        sx = _cx(2 * bw + gap)
        self._reshuffle_btn = _Btn(
            (sx, 0, bw, 36), "RESHUFFLE (R)", self._f_btn_sm,
            bg=COL_PINK, hover=(245, 210, 227), fg=COL_BASE,
        )
        self._menu_btn = _Btn((sx + bw + gap, 0, bw, 36), "MENU (M)", self._f_btn_sm)
        self._game_btns = [self._reshuffle_btn, self._menu_btn]

    def _build_win_btns(self) -> None:
        bw = 220
        self._win_again = _Btn(
            (_cx(bw), 420, bw, 50),
            "PLAY AGAIN",
            self._f_btn,
            bg=COL_GREEN,
            hover=(190, 240, 190),
            fg=COL_BASE,
        )
        self._win_menu = _Btn((_cx(bw), 488, bw, 46), "M E N U", self._f_btn_sm)

    # ── layout ──────────────────────────────────────────────────────────────

    def _tile_layout(self, size: int) -> tuple[int, int, int, int]:
        """Return (tile_px, origin_x, origin_y, total_px) for a board size."""
        tile_px = (BOARD_MAX - (size + 1) * TILE_GAP) // size
        total = size * tile_px + (size + 1) * TILE_GAP
        return tile_px, _cx(total) + TILE_GAP, BOARD_TOP + TILE_GAP, total

    @staticmethod
    def _tile_rect(r: int, c: int, tpx: int, ox: int, oy: int) -> pygame.Rect:
        return pygame.Rect(ox + c * (tpx + TILE_GAP), oy + r * (tpx + TILE_GAP), tpx, tpx)

    def _cell_at(self, pos: tuple[int, int]) -> tuple[int, int] | None:
        snap = self._snap
        assert snap is not None
        tpx, ox, oy, _ = self._tile_layout(snap.size)
        for r in range(snap.size):
            for c in range(snap.size):
                if self._tile_rect(r, c, tpx, ox, oy).collidepoint(pos):
                    return r, c
        return None

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw_menu(self) -> None:
        self._surf.fill(COL_BASE)
        _blit_center(self._surf, self._f_big.render("SLIDING  PUZZLE", True, COL_TEXT), 80)
        _blit_center(self._surf, self._f_body.render("Select board size", True, COL_SUBTEXT), 210)
        for s, btn in self._size_btns.items():
            btn.bg = COL_GREEN if s == self._sel_size else COL_SURFACE0
            btn.fg = COL_BASE if s == self._sel_size else COL_TEXT
            btn.draw(self._surf)
        self._play_btn.draw(self._surf)
        self._quit_btn.draw(self._surf)

    def _draw_game(self) -> None:
        self._surf.fill(COL_BASE)
        snap = self._snap
        assert snap is not None
        sz = snap.size
        tpx, ox, oy, total = self._tile_layout(sz)
        f_tile = pygame.font.SysFont("Helvetica", max(14, tpx // 3), bold=True)

        _blit_center(
            self._surf,
            self._f_title.render(f"Sliding Puzzle  {sz}×{sz}", True, COL_TEXT),
            14,
        )
        _blit_center(
            self._surf,
            self._f_body.render(
                f"Moves: {snap.moves}    Time: {_fmt(snap.elapsed_seconds)}",
                True,
                COL_PINK,
            ),
            44,
        )

        pygame.draw.rect(
            self._surf,
            COL_MANTLE,
            pygame.Rect(_cx(total), BOARD_TOP, total, total),
            border_radius=10,
        )

        # Tiles are placed from the id → position mapping, never by value search.
        for tile_id, (r, c) in snap.positions.items():
            val = snap.values[tile_id]
            rect = self._tile_rect(r, c, tpx, ox, oy)
            col = COL_GREEN if (r, c) in snap.correct else COL_BLUE
            pygame.draw.rect(self._surf, col, rect, border_radius=6)
            lbl = f_tile.render(str(val), True, COL_BASE)
            self._surf.blit(
                lbl,
                (rect.centerx - lbl.get_width() // 2, rect.centery - lbl.get_height() // 2),
            )

        btn_y = BOARD_TOP + total + 10
        for btn in self._game_btns:
            btn.rect.y = btn_y
            btn.draw(self._surf)

        _blit_center(
            self._surf,
            self._f_small.render(
                "Click a tile in the blank's row or column     Arrows  step     Esc  menu",
                True,
                COL_OVERLAY0,
            ),
            btn_y + 48,
        )

    def _draw_win(self) -> None:
        self._surf.fill(COL_BASE)
        event = self._solved
        assert event is not None
        _blit_center(self._surf, self._f_big.render("★  S O L V E D  ★", True, COL_GREEN), 100)
        info = [
            (f"Grid:   {event.size}×{event.size}", COL_SUBTEXT),
            (f"Moves:  {event.moves}", COL_YELLOW),
            (f"Time:   {_fmt(event.elapsed_seconds)}", COL_YELLOW),
        ]
        y = 200
        for txt, col in info:
            _blit_center(self._surf, self._f_title.render(txt, True, col), y)
            y += 44
        self._win_again.draw(self._surf)
        self._win_menu.draw(self._surf)

    # ── event handling ──────────────────────────────────────────────────────

    def _ev_menu(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            for b in self._menu_all:
                b.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            for s, b in self._size_btns.items():
                if b.hit(ev.pos):
                    self._sel_size = s
                    return True
            if self._play_btn.hit(ev.pos):
                self._start_game()
            elif self._quit_btn.hit(ev.pos):
                return False
        elif ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_RETURN:
                self._start_game()
            elif ev.key == pygame.K_LEFT:
                self._sel_size = max(MIN_SIZE, self._sel_size - 1)
            elif ev.key == pygame.K_RIGHT:
                self._sel_size = min(MAX_SIZE, self._sel_size + 1)
            elif ev.key in (pygame.K_q, pygame.K_ESCAPE):
                return False
        return True

    def _ev_game(self, ev: pygame.event.Event) -> bool:
        game = self._game
        assert game is not None
        if ev.type == _TICK_EVENT:
            if game.tick():
                self._snap = game.snapshot()
        elif ev.type == pygame.MOUSEMOTION:
            for btn in self._game_btns:
                btn.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._reshuffle_btn.hit(ev.pos):
                self._start_game()
            elif self._menu_btn.hit(ev.pos):
                self._leave_game()
            else:
                cell = self._cell_at(ev.pos)
                if cell is not None:
                    self._apply(game.activate(*cell))
        elif ev.type == pygame.KEYDOWN:
            _dirs = {
                pygame.K_UP: Direction.UP,
                pygame.K_w: Direction.UP,
                pygame.K_DOWN: Direction.DOWN,
                pygame.K_s: Direction.DOWN,
                pygame.K_LEFT: Direction.LEFT,
                pygame.K_a: Direction.LEFT,
                pygame.K_RIGHT: Direction.RIGHT,
                pygame.K_d: Direction.RIGHT,
            }
            if ev.key in _dirs:
                self._apply(game.move(_dirs[ev.key]))
            elif ev.key == pygame.K_r:
                self._start_game()
            elif ev.key in (pygame.K_m, pygame.K_ESCAPE):
                self._leave_game()
        return True

    def _ev_win(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            self._win_again.motion(ev.pos)
            self._win_menu.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._win_again.hit(ev.pos):
                self._start_game()
            elif self._win_menu.hit(ev.pos):
                self._screen = _Screen.MENU
        elif ev.type == pygame.KEYDOWN:
            if ev.key in (pygame.K_r, pygame.K_RETURN):
                self._start_game()
            elif ev.key in (pygame.K_m, pygame.K_ESCAPE):
                self._screen = _Screen.MENU
        return True

    # ── game state ──────────────────────────────────────────────────────────

    def _start_game(self) -> None:
        if self._game is None or self._game.size != self._sel_size:
            self._game = GamePlay(self._sel_size, self._config)
            self._snap = self._game.snapshot()
        else:
            self._snap = self._game.initialize()
        self._solved = None
        # Restarting the timer realigns ticks with the fresh game.
        pygame.time.set_timer(_TICK_EVENT, 1000)
        self._screen = _Screen.PLAYING

    def _leave_game(self) -> None:
        if self._game is not None:
            self._game.stop()
        pygame.time.set_timer(_TICK_EVENT, 0)
        self._screen = _Screen.MENU

    def _apply(self, result: MoveResult) -> None:
        self._snap = result.snapshot
        if result.solved_event is not None:
            pygame.time.set_timer(_TICK_EVENT, 0)
            self._solved = result.solved_event
            self._screen = _Screen.WIN

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        _dispatch = {
            _Screen.MENU: self._ev_menu,
            _Screen.PLAYING: self._ev_game,
            _Screen.WIN: self._ev_win,
        }
        _draw = {
            _Screen.MENU: self._draw_menu,
            _Screen.PLAYING: self._draw_game,
            _Screen.WIN: self._draw_win,
        }

        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT:
                    running = False
                    break
                if not _dispatch[self._screen](ev):
                    running = False
                    break

            _draw[self._screen]()
            pygame.display.flip()
            self._clock.tick(30)

        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(config: GameConfig) -> None:
    """Launch the Pygame GUI (opens directly to the menu)."""
    PygameApp(config).run_loop()
