from __future__ import annotations

from dataclasses import dataclass

import reactivex
from reactivex import operators as ops

from flapper.game.commands import RenderCommands
from flapper.game.input import GameInput
from flapper.game.session import GameSession
from flapper.utilities.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class FrameInput:
    elapsed_ms: float
    key: GameInput | None = None


class GameSessionProvider:
    """Drive a session from a stream of frames, emitting one command set per frame."""

    def __init__(
        self,
        session: GameSession,
        frames: reactivex.Observable[FrameInput],
    ) -> None:
        self._session = session
        self._frames = frames
        self._command_stream: reactivex.Observable[RenderCommands] | None = None

    @property
    def session(self) -> GameSession:
        return self._session

    def _advance(self, frame: FrameInput) -> RenderCommands:
        return self._session.advance(frame.key, frame.elapsed_ms)

    def _build_command_stream(self) -> reactivex.Observable[RenderCommands]:
        return self._frames.pipe(
            ops.map(self._advance),
            # The exit request itself still reaches subscribers.
            ops.take_while(lambda commands: not commands.request_exit, inclusive=True),
            ops.do_action(on_completed=lambda: logger.info("Command stream completed")),
            ops.share(),
        )

    def observable(self) -> reactivex.Observable[RenderCommands]:
        if self._command_stream is None:
            self._command_stream = self._build_command_stream()
        return self._command_stream
