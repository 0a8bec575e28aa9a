from __future__ import annotations

import os


def _key(key: int) -> None:
    import pygame

    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, {"key": key, "unicode": ""}))


def test_ui_smoke_play_classic_then_browse_records_and_rules() -> None:
    # Headless SDL for CI.
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

    import pygame

    from stroop_trainer.app import run

    script = {
        1: pygame.K_RETURN,  # Classic
        2: pygame.K_1,  # answer
        3: pygame.K_2,  # ignored: feedback lock
        5: pygame.K_ESCAPE,  # abandon -> menu
        6: pygame.K_DOWN,
        7: pygame.K_DOWN,
        8: pygame.K_DOWN,
        9: pygame.K_RETURN,  # Best scores
        10: pygame.K_ESCAPE,
        11: pygame.K_DOWN,
        12: pygame.K_RETURN,  # How to play
        13: pygame.K_ESCAPE,
    }

    def inject(frame: int) -> None:
        key = script.get(frame)
        if key is not None:
            _key(key)

    assert run(max_frames=20, event_injector=inject) == 0


def test_ui_smoke_endless_finish_shows_results() -> None:
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

    import pygame

    from stroop_trainer.app import run

    script = {
        1: pygame.K_DOWN,
        2: pygame.K_DOWN,
        3: pygame.K_RETURN,  # Endless
        4: pygame.K_r,
        6: pygame.K_ESCAPE,  # end run -> results (+ record toast)
        8: pygame.K_RETURN,  # play again
        10: pygame.K_ESCAPE,  # end again
        12: pygame.K_ESCAPE,  # back to menu
    }

    def inject(frame: int) -> None:
        key = script.get(frame)
        if key is not None:
            _key(key)

    assert run(max_frames=16, event_injector=inject) == 0
