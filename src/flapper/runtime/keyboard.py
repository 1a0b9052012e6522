from __future__ import annotations

from typing import Iterable

import pygame

from flapper.game.input import GameInput

KEY_BINDINGS: dict[int, GameInput] = {
    pygame.K_p: GameInput.START,
    pygame.K_q: GameInput.QUIT,
    pygame.K_SPACE: GameInput.JUMP,
}


def translate_events(
    events: Iterable[pygame.event.Event],
    bindings: dict[int, GameInput] = KEY_BINDINGS,
) -> GameInput | None:
    """Reduce a frame's events to at most one input.

    The first bound key press wins; closing the window always means quit.
    """

    resolved: GameInput | None = None
    for event in events:
        if event.type == pygame.QUIT:
            return GameInput.QUIT
        if event.type == pygame.KEYDOWN and resolved is None:
            resolved = bindings.get(event.key)
    return resolved


class KeyboardInput:
    def __init__(self, bindings: dict[int, GameInput] | None = None) -> None:
        self._bindings = dict(KEY_BINDINGS if bindings is None else bindings)

    def poll(self) -> GameInput | None:
        return translate_events(pygame.event.get(), self._bindings)
