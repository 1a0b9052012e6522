from __future__ import annotations

import pygame
from reactivex.subject import Subject

from flapper.display.grid import GlyphGrid
from flapper.game.commands import RenderCommands
from flapper.game.provider import FrameInput, GameSessionProvider
from flapper.game.session import GameSession
from flapper.runtime.keyboard import KeyboardInput
from flapper.runtime.presenter import PygamePresenter
from flapper.utilities.env import Configuration
from flapper.utilities.logging import get_logger

logger = get_logger(__name__)


class GameLoop:
    def __init__(
        self,
        session: GameSession,
        presenter: PygamePresenter,
        keyboard: KeyboardInput | None = None,
        max_fps: int | None = None,
    ) -> None:
        self.session = session
        self.presenter = presenter
        self.keyboard = keyboard or KeyboardInput()
        self.max_fps = max_fps or Configuration.max_fps()
        self.grid = GlyphGrid()
        self.frames: Subject[FrameInput] = Subject()
        self.provider = GameSessionProvider(session, self.frames)
        self.running = False

    def _present(self, commands: RenderCommands) -> None:
        self.presenter.present(self.grid.apply(commands))

    def _stop(self) -> None:
        logger.info("Exit requested, leaving main loop.")
        self.running = False

    def start(self) -> None:
        logger.info("Starting GameLoop at up to %d fps", self.max_fps)
        self.presenter.initialize(self.grid.width, self.grid.height)
        clock = pygame.time.Clock()
        show_fps = Configuration.show_fps()
        subscription = self.provider.observable().subscribe(
            on_next=self._present,
            on_completed=self._stop,
        )

        self.running = True
        try:
            while self.running:
                elapsed_ms = float(clock.tick(self.max_fps))
                self.frames.on_next(FrameInput(elapsed_ms=elapsed_ms, key=self.keyboard.poll()))
                if show_fps:
                    self.presenter.set_fps(clock.get_fps())
        finally:
            logger.info("Shutting down GameLoop.")
            subscription.dispose()
            pygame.quit()
