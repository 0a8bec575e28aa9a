"""Pygame UI shell for the Stroop Trainer.

Screens:
- Main menu (Classic / Timed / Endless, best scores, rules)
- Game screen (play + results for the running session)
- Best scores
- How to play

Deterministic timing/scoring/RNG/state lives in stroop_trainer/* (core modules);
this module only draws snapshots and forwards input.
"""

from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

import pygame

from .clock import RealClock
from .game_core import Feedback, GameMode, GamePhase
from .ledger import BestRecord
from .results import session_result_from_session
from .round_generator import COLORS, ColorName
from .session import GameSnapshot, NewRecord, StroopSession, build_stroop_session


class Screen(Protocol):
    def handle_event(self, event: pygame.event.Event) -> None: ...
    def render(self, surface: pygame.Surface) -> None: ...


@dataclass(frozen=True, slots=True)
class MenuItem:
    label: str
    action: Callable[[], None]


@dataclass(frozen=True, slots=True)
class _Toast:
    title: str
    body: str
    expires_at_ms: int


WINDOW_SIZE = (960, 540)
TARGET_FPS = 60
TOAST_MS = 2500

BG = (3, 9, 78)
PANEL_BG = (8, 18, 104)
HEADER_BG = (18, 30, 118)
BORDER = (226, 236, 255)
TEXT_MAIN = (238, 245, 255)
TEXT_MUTED = (186, 200, 224)
GOOD = (70, 200, 110)
BAD = (230, 80, 80)

INK_RGB: dict[ColorName, tuple[int, int, int]] = {
    ColorName.RED: (236, 64, 64),
    ColorName.BLUE: (72, 128, 246),
    ColorName.GREEN: (56, 196, 96),
    ColorName.YELLOW: (244, 212, 48),
}

MODE_TITLES: dict[GameMode, str] = {
    GameMode.CLASSIC: "Classic",
    GameMode.TIMED: "Timed",
    GameMode.ENDLESS: "Endless",
}

RULES_TEXT = [
    "How to play",
    "",
    "1. A colour word appears, printed in some ink colour.",
    "2. Pick the colour of the ink, not the word you read.",
    "3. Example: the word BLUE printed in red -> the answer is red.",
    "4. Faster and more accurate answers give a better result.",
    "",
    "Modes",
    "Classic: 20 rounds, score as many as you can.",
    "Timed: as many correct answers as possible in 60 seconds.",
    "Endless: practise without limits; Esc ends the run.",
    "",
    "Answer with the mouse, keys 1-4, or R / B / G / Y.",
]

_ANSWER_KEYS: dict[int, ColorName] = {
    pygame.K_1: COLORS[0],
    pygame.K_2: COLORS[1],
    pygame.K_3: COLORS[2],
    pygame.K_4: COLORS[3],
    pygame.K_r: ColorName.RED,
    pygame.K_b: ColorName.BLUE,
    pygame.K_g: ColorName.GREEN,
    pygame.K_y: ColorName.YELLOW,
}


def _color_label(color: ColorName) -> str:
    return color.value.upper()


def _fmt_pct(value: float | None) -> str:
    return "no data" if value is None else f"{value:.1f}%"


def _fmt_ms(value: float | None) -> str:
    return "-" if value is None else f"{value:.0f} ms"


class App:
    def __init__(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        self._surface = surface
        self._font = font
        self._screens: list[Screen] = []
        self._running = True
        self._toast: _Toast | None = None
        self._toast_title_font = pygame.font.Font(None, 30)
        self._toast_body_font = pygame.font.Font(None, 24)

    @property
    def running(self) -> bool:
        return self._running

    @property
    def font(self) -> pygame.font.Font:
        return self._font

    def push(self, screen: Screen) -> None:
        self._screens.append(screen)

    def pop(self) -> None:
        # Never pop the last/root screen; root handles its own quit/back behavior.
        if len(self._screens) > 1:
            self._screens.pop()

    def quit(self) -> None:
        self._running = False

    def show_toast(self, title: str, body: str) -> None:
        self._toast = _Toast(title=title, body=body, expires_at_ms=pygame.time.get_ticks() + TOAST_MS)

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.quit()
            return
        if not self._screens:
            return
        self._screens[-1].handle_event(event)

    def render(self) -> None:
        if not self._screens:
            return
        self._screens[-1].render(self._surface)
        self._render_toast(self._surface)

    def _render_toast(self, surface: pygame.Surface) -> None:
        if self._toast is None:
            return
        if pygame.time.get_ticks() >= self._toast.expires_at_ms:
            self._toast = None
            return

        title = self._toast_title_font.render(self._toast.title, True, TEXT_MAIN)
        body = self._toast_body_font.render(self._toast.body, True, TEXT_MUTED)
        w = max(title.get_width(), body.get_width()) + 32
        h = title.get_height() + body.get_height() + 24
        box = pygame.Rect(surface.get_width() - w - 20, surface.get_height() - h - 20, w, h)
        pygame.draw.rect(surface, (14, 60, 36), box, border_radius=8)
        pygame.draw.rect(surface, GOOD, box, 2, border_radius=8)
        surface.blit(title, (box.x + 16, box.y + 10))
        surface.blit(body, (box.x + 16, box.y + 14 + title.get_height()))


def _draw_frame(
    surface: pygame.Surface,
    title: str,
    tag: str,
    font: pygame.font.Font,
    tag_font: pygame.font.Font,
) -> pygame.Rect:
    """Draw the shared window frame + header; return the content rect."""

    w, h = surface.get_size()
    surface.fill(BG)

    frame_margin = max(10, min(26, w // 34))
    frame = pygame.Rect(
        frame_margin,
        frame_margin,
        max(260, w - frame_margin * 2),
        max(220, h - frame_margin * 2),
    )
    pygame.draw.rect(surface, PANEL_BG, frame)
    pygame.draw.rect(surface, BORDER, frame, 2)

    header_h = max(34, min(52, h // 8))
    header = pygame.Rect(frame.x + 2, frame.y + 2, frame.w - 4, header_h)
    pygame.draw.rect(surface, HEADER_BG, header)
    pygame.draw.line(surface, BORDER, (header.x, header.bottom), (header.right, header.bottom), 1)

    tag_surf = tag_font.render(tag, True, TEXT_MUTED)
    surface.blit(tag_surf, (header.x + 12, header.y + (header.h - tag_surf.get_height()) // 2))
    title_surf = font.render(title, True, TEXT_MAIN)
    surface.blit(title_surf, title_surf.get_rect(center=(frame.centerx, header.centery)))

    return pygame.Rect(frame.x + 16, header.bottom + 12, frame.w - 32, frame.bottom - header.bottom - 24)


class MenuScreen:
    def __init__(self, app: App, title: str, items: list[MenuItem], *, is_root: bool = False) -> None:
        self._app = app
        self._title = title
        self._items = items
        self._selected = 0
        self._is_root = is_root
        self._title_font = pygame.font.Font(None, 42)
        self._item_font = pygame.font.Font(None, 32)
        self._hint_font = pygame.font.Font(None, 22)

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            self._handle_key(event.key)
            return

        if event.type == pygame.JOYHATMOTION:
            _, y = event.value
            if y == 1:
                self._move(-1)
            elif y == -1:
                self._move(1)
            return

        if event.type == pygame.JOYBUTTONDOWN:
            # Common mapping: 0 = select, 1 = back/cancel.
            if event.button == 0:
                self._activate()
            elif event.button == 1:
                self._back()

    def _handle_key(self, key: int) -> None:
        if key in (pygame.K_UP, pygame.K_w):
            self._move(-1)
        elif key in (pygame.K_DOWN, pygame.K_s):
            self._move(1)
        elif key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE):
            self._activate()
        elif key in (pygame.K_ESCAPE, pygame.K_BACKSPACE):
            self._back()

    def _move(self, delta: int) -> None:
        if not self._items:
            return
        self._selected = (self._selected + delta) % len(self._items)

    def _activate(self) -> None:
        if not self._items:
            return
        self._items[self._selected].action()

    def _back(self) -> None:
        if self._is_root:
            self._app.quit()
        else:
            self._app.pop()

    def _fit_label(self, font: pygame.font.Font, label: str, max_width: int) -> str:
        if max_width <= 0:
            return ""
        if font.size(label)[0] <= max_width:
            return label
        clipped = label
        while clipped and font.size(f"{clipped}...")[0] > max_width:
            clipped = clipped[:-1]
        return f"{clipped}..." if clipped else "..."

    def render(self, surface: pygame.Surface) -> None:
        content = _draw_frame(surface, self._title, "MENU", self._title_font, self._hint_font)
        h = surface.get_height()

        list_rect = pygame.Rect(content.x, content.y, content.w, max(120, content.h - 32))
        pygame.draw.rect(surface, (6, 13, 92), list_rect)
        pygame.draw.rect(surface, (78, 102, 170), list_rect, 1)

        item_count = max(1, len(self._items))
        gap = max(4, min(10, list_rect.h // max(10, item_count * 3)))
        row_h = max(30, min(44, (list_rect.h - gap * (item_count + 1)) // item_count))
        total_h = row_h * item_count + gap * (item_count - 1)
        y = list_rect.y + max(8, (list_rect.h - total_h) // 2)

        for idx, item in enumerate(self._items):
            row = pygame.Rect(list_rect.x + 12, y, list_rect.w - 24, row_h)
            selected = idx == self._selected
            if selected:
                pygame.draw.rect(surface, (244, 248, 255), row)
                pygame.draw.rect(surface, (120, 142, 196), row, 2)
            else:
                pygame.draw.rect(surface, (9, 20, 106), row)
                pygame.draw.rect(surface, (62, 84, 152), row, 1)

            color = (14, 26, 74) if selected else TEXT_MAIN
            label = self._fit_label(self._item_font, item.label, row.w - 20)
            text = self._item_font.render(label, True, color)
            surface.blit(text, (row.x + 10, row.y + (row.h - text.get_height()) // 2))
            y += row_h + gap

        footer = "Enter/Space: Select  |  Esc/Backspace: Back  |  D-pad + Button0/1"
        foot = self._hint_font.render(footer, True, TEXT_MUTED)
        surface.blit(foot, foot.get_rect(midbottom=(surface.get_width() // 2, h - 30)))


class GameScreen:
    """Play + results screen bound to one long-lived StroopSession."""

    def __init__(self, app: App, session: StroopSession) -> None:
        self._app = app
        self._session = session
        self._answer_hitboxes: dict[ColorName, pygame.Rect] = {}

        self._title_font = pygame.font.Font(None, 42)
        self._small_font = pygame.font.Font(None, 26)
        self._tiny_font = pygame.font.Font(None, 20)
        self._word_font = pygame.font.Font(None, 132)
        self._button_font = pygame.font.Font(None, 36)
        self._stat_font = pygame.font.Font(None, 56)

    def handle_event(self, event: pygame.event.Event) -> None:
        phase = self._session.phase

        if event.type == pygame.KEYDOWN:
            if phase is GamePhase.PLAYING:
                color = _ANSWER_KEYS.get(event.key)
                if color is not None:
                    self._session.submit_answer(color)
                elif event.key in (pygame.K_ESCAPE, pygame.K_BACKSPACE):
                    self._exit_playing()
            elif phase is GamePhase.FINISHED:
                if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE):
                    self._restart()
                elif event.key in (pygame.K_ESCAPE, pygame.K_BACKSPACE):
                    self._back_to_menu()
            else:
                self._app.pop()
            return

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and phase is GamePhase.PLAYING:
            for color, rect in self._answer_hitboxes.items():
                if rect.collidepoint(event.pos):
                    self._session.submit_answer(color)
                    return
            return

        if event.type == pygame.JOYBUTTONDOWN:
            if phase is GamePhase.PLAYING and 0 <= event.button < len(COLORS):
                self._session.submit_answer(COLORS[event.button])
            elif phase is GamePhase.FINISHED:
                if event.button == 0:
                    self._restart()
                elif event.button == 1:
                    self._back_to_menu()

    def _exit_playing(self) -> None:
        # Endless has no budget: leaving it is how the run ends and gets scored.
        if self._session.mode is GameMode.ENDLESS:
            self._session.end_game()
            return
        self._back_to_menu()

    def _restart(self) -> None:
        mode = self._session.mode
        if mode is not None:
            self._session.start_game(mode)

    def _back_to_menu(self) -> None:
        self._session.reset_to_menu()
        self._app.pop()

    def render(self, surface: pygame.Surface) -> None:
        self._session.update()
        snap = self._session.snapshot()

        mode_title = "" if snap.mode is None else MODE_TITLES[snap.mode]
        if snap.phase is GamePhase.PLAYING and snap.round is not None:
            content = _draw_frame(surface, f"Stroop Test: {mode_title}", "PLAY", self._title_font, self._tiny_font)
            self._render_playing(surface, content, snap)
        elif snap.phase is GamePhase.FINISHED:
            content = _draw_frame(surface, "Game over!", "RESULTS", self._title_font, self._tiny_font)
            self._render_results(surface, content, mode_title)
        else:
            surface.fill(BG)

    def _render_playing(self, surface: pygame.Surface, content: pygame.Rect, snap: GameSnapshot) -> None:
        assert snap.round is not None

        exit_hint = "Esc: finish" if snap.mode is GameMode.ENDLESS else "Esc: exit"
        surface.blit(self._tiny_font.render(exit_hint, True, TEXT_MUTED), (content.x, content.y))

        budget = ""
        if snap.rounds_left is not None and snap.rounds_total is not None:
            budget = f"Rounds: {snap.rounds_left} / {snap.rounds_total}"
        elif snap.time_left_s is not None:
            budget = f"Time: {snap.time_left_s}s"
        if budget:
            budget_surf = self._small_font.render(budget, True, TEXT_MAIN)
            surface.blit(budget_surf, budget_surf.get_rect(midtop=(content.centerx, content.y)))

        score = self._small_font.render(f"{snap.stats.correct} / {snap.stats.total}", True, TEXT_MAIN)
        surface.blit(score, score.get_rect(topright=(content.right, content.y)))

        y = content.y + 30
        if snap.rounds_total is not None:
            bar = pygame.Rect(content.x, y, content.w, 8)
            pygame.draw.rect(surface, (30, 44, 120), bar)
            fill_w = int(bar.w * min(1.0, snap.stats.total / snap.rounds_total))
            if fill_w > 0:
                pygame.draw.rect(surface, TEXT_MAIN, pygame.Rect(bar.x, bar.y, fill_w, bar.h))
        y += 18

        card_h = int(content.h * (0.62 if snap.mode is GameMode.ENDLESS else 0.78))
        card = pygame.Rect(content.x, y, content.w, max(180, card_h))
        pygame.draw.rect(surface, (6, 13, 92), card)
        border_color = (78, 102, 170)
        if snap.feedback is Feedback.CORRECT:
            border_color = GOOD
        elif snap.feedback is Feedback.WRONG:
            border_color = BAD
        pygame.draw.rect(surface, border_color, card, 4 if snap.feedback is not None else 1)

        word = self._word_font.render(_color_label(snap.round.word), True, INK_RGB[snap.round.color])
        surface.blit(word, word.get_rect(center=(card.centerx, card.y + card.h // 3)))

        self._render_answer_buttons(surface, card, locked=snap.answer_locked)

        if snap.mode is GameMode.ENDLESS:
            panel = pygame.Rect(content.x, card.bottom + 10, content.w, max(40, content.bottom - card.bottom - 10))
            self._render_endless_panel(surface, panel, snap)

    def _render_answer_buttons(self, surface: pygame.Surface, card: pygame.Rect, *, locked: bool) -> None:
        self._answer_hitboxes = {}
        grid_w = min(460, card.w - 40)
        btn_h = 52
        gap = 14
        btn_w = (grid_w - gap) // 2
        left = card.centerx - grid_w // 2
        top = card.y + card.h // 2 + 10

        for idx, color in enumerate(COLORS):
            col = idx % 2
            row = idx // 2
            rect = pygame.Rect(left + col * (btn_w + gap), top + row * (btn_h + gap), btn_w, btn_h)
            self._answer_hitboxes[color] = rect
            ink = INK_RGB[color]
            pygame.draw.rect(surface, (9, 20, 106), rect, border_radius=6)
            pygame.draw.rect(surface, (90, 100, 140) if locked else ink, rect, 2, border_radius=6)
            label = self._button_font.render(f"{idx + 1}  {_color_label(color)}", True, ink)
            surface.blit(label, label.get_rect(center=rect.center))

    def _render_endless_panel(self, surface: pygame.Surface, panel: pygame.Rect, snap: GameSnapshot) -> None:
        pygame.draw.rect(surface, (6, 13, 92), panel)
        pygame.draw.rect(surface, (78, 102, 170), panel, 1)
        cells = [
            (str(snap.stats.correct), "Correct", GOOD),
            (str(snap.stats.total), "Total", TEXT_MAIN),
            (_fmt_ms(snap.stats.avg_reaction_time_ms), "Avg time", TEXT_MAIN),
        ]
        cell_w = panel.w // len(cells)
        for i, (value, caption, color) in enumerate(cells):
            cx = panel.x + cell_w * i + cell_w // 2
            v = self._small_font.render(value, True, color)
            c = self._tiny_font.render(caption, True, TEXT_MUTED)
            surface.blit(v, v.get_rect(midtop=(cx, panel.y + 6)))
            surface.blit(c, c.get_rect(midtop=(cx, panel.y + 10 + v.get_height())))

    def _render_results(self, surface: pygame.Surface, content: pygame.Rect, mode_title: str) -> None:
        result = session_result_from_session(self._session)

        sub = self._small_font.render(f"{mode_title}  |  {result.correct} / {result.attempted}", True, TEXT_MUTED)
        surface.blit(sub, sub.get_rect(midtop=(content.centerx, content.y + 6)))

        cells = [
            (str(result.correct), "Correct", GOOD),
            (_fmt_pct(result.accuracy_pct), "Accuracy", TEXT_MAIN),
            (_fmt_ms(result.mean_rt_ms), "Average", TEXT_MAIN),
        ]
        cell_w = content.w // len(cells)
        y = content.y + 70
        for i, (value, caption, color) in enumerate(cells):
            cx = content.x + cell_w * i + cell_w // 2
            v = self._stat_font.render(value, True, color)
            c = self._small_font.render(caption, True, TEXT_MUTED)
            surface.blit(v, v.get_rect(midtop=(cx, y)))
            surface.blit(c, c.get_rect(midtop=(cx, y + v.get_height() + 6)))

        interference = "-" if result.interference_ms is None else f"{result.interference_ms:+.0f} ms"
        lines = [
            f"Median RT: {_fmt_ms(result.median_rt_ms)}",
            f"Congruent mean: {_fmt_ms(result.congruent_mean_rt_ms)}   "
            f"Incongruent mean: {_fmt_ms(result.incongruent_mean_rt_ms)}",
            f"Stroop interference: {interference}",
        ]
        ly = y + 120
        for line in lines:
            txt = self._small_font.render(line, True, TEXT_MAIN)
            surface.blit(txt, txt.get_rect(midtop=(content.centerx, ly)))
            ly += 30

        hint = self._tiny_font.render("Enter: play again  |  Esc: menu", True, TEXT_MUTED)
        surface.blit(hint, hint.get_rect(midbottom=(content.centerx, content.bottom)))


class RecordsScreen:
    def __init__(self, app: App, session: StroopSession) -> None:
        self._app = app
        self._session = session
        self._title_font = pygame.font.Font(None, 42)
        self._head_font = pygame.font.Font(None, 34)
        self._small_font = pygame.font.Font(None, 26)
        self._tiny_font = pygame.font.Font(None, 20)

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN and event.key in (
            pygame.K_ESCAPE,
            pygame.K_BACKSPACE,
            pygame.K_RETURN,
        ):
            self._app.pop()
        elif event.type == pygame.JOYBUTTONDOWN and event.button == 1:
            self._app.pop()

    def render(self, surface: pygame.Surface) -> None:
        content = _draw_frame(surface, "Best scores", "STATS", self._title_font, self._tiny_font)
        records = self._session.best_records.items()
        gap = 12
        col_w = (content.w - gap * (len(records) - 1)) // len(records)
        for i, (mode, record) in enumerate(records):
            col = pygame.Rect(content.x + i * (col_w + gap), content.y, col_w, content.h - 30)
            pygame.draw.rect(surface, (6, 13, 92), col)
            pygame.draw.rect(surface, (78, 102, 170), col, 1)
            head = self._head_font.render(MODE_TITLES[mode], True, TEXT_MAIN)
            surface.blit(head, (col.x + 14, col.y + 12))
            self._render_record(surface, col, record)

        hint = self._tiny_font.render("Esc: back", True, TEXT_MUTED)
        surface.blit(hint, hint.get_rect(midbottom=(content.centerx, content.bottom)))

    def _render_record(self, surface: pygame.Surface, col: pygame.Rect, record: BestRecord | None) -> None:
        if record is None:
            none = self._small_font.render("No results", True, TEXT_MUTED)
            surface.blit(none, none.get_rect(center=col.center))
            return
        rows = [
            ("Correct:", str(record.score)),
            ("Accuracy:", _fmt_pct(record.accuracy_pct)),
            ("Avg time:", _fmt_ms(record.avg_time_ms)),
        ]
        y = col.y + 60
        for label, value in rows:
            l_surf = self._small_font.render(label, True, TEXT_MUTED)
            v_surf = self._small_font.render(value, True, TEXT_MAIN)
            surface.blit(l_surf, (col.x + 14, y))
            surface.blit(v_surf, v_surf.get_rect(topright=(col.right - 14, y)))
            y += 32


class RulesScreen:
    def __init__(self, app: App) -> None:
        self._app = app
        self._title_font = pygame.font.Font(None, 42)
        self._small_font = pygame.font.Font(None, 26)
        self._tiny_font = pygame.font.Font(None, 20)

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN and event.key in (
            pygame.K_ESCAPE,
            pygame.K_BACKSPACE,
            pygame.K_RETURN,
        ):
            self._app.pop()
        elif event.type == pygame.JOYBUTTONDOWN and event.button == 1:
            self._app.pop()

    def render(self, surface: pygame.Surface) -> None:
        content = _draw_frame(surface, "Rules", "HELP", self._title_font, self._tiny_font)
        y = content.y + 4
        for line in RULES_TEXT:
            if line:
                txt = self._small_font.render(line, True, TEXT_MAIN)
                surface.blit(txt, (content.x + 8, y))
            y += 26


def _init_joysticks() -> None:
    # Safe on platforms with no joystick support.
    try:
        count = pygame.joystick.get_count()
    except pygame.error:
        return

    for i in range(count):
        try:
            pygame.joystick.Joystick(i).init()
        except pygame.error:
            continue


def _new_seed() -> int:
    return random.SystemRandom().randint(1, 2**31 - 1)


def run(*, max_frames: int | None = None, event_injector: Callable[[int], None] | None = None) -> int:
    pygame.init()
    _init_joysticks()

    pygame.display.set_caption("Stroop Trainer")
    surface = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)

    font = pygame.font.Font(None, 36)
    clock = pygame.time.Clock()

    app = App(surface=surface, font=font)

    def announce_record(notice: NewRecord) -> None:
        app.show_toast("New record!", f"{MODE_TITLES[notice.mode]}: {notice.score} correct")

    session = build_stroop_session(clock=RealClock(), seed=_new_seed(), on_new_record=announce_record)
    game_screen = GameScreen(app, session)
    records_screen = RecordsScreen(app, session)
    rules_screen = RulesScreen(app)

    def play(mode: GameMode) -> Callable[[], None]:
        def action() -> None:
            if session.start_game(mode):
                app.push(game_screen)

        return action

    main_items = [
        MenuItem("Classic (20 rounds)", play(GameMode.CLASSIC)),
        MenuItem("Timed (60 seconds)", play(GameMode.TIMED)),
        MenuItem("Endless (no limits)", play(GameMode.ENDLESS)),
        MenuItem("Best scores", lambda: app.push(records_screen)),
        MenuItem("How to play", lambda: app.push(rules_screen)),
        MenuItem("Quit", app.quit),
    ]

    app.push(MenuScreen(app, "Stroop Test", main_items, is_root=True))

    frame = 0
    try:
        while app.running:
            if event_injector is not None:
                event_injector(frame)

            for event in pygame.event.get():
                app.handle_event(event)

            app.render()

            pygame.display.flip()

            frame += 1
            if max_frames is not None and frame >= max_frames:
                break

            clock.tick(TARGET_FPS)
    finally:
        pygame.quit()

    return 0
