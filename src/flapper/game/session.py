from __future__ import annotations

from flapper.game.commands import RenderCommands
from flapper.game.input import GameInput
from flapper.game.obstacles import ObstacleStream
from flapper.game.render import project_menu, project_over, project_playing
from flapper.game.rng import RandomNumberGenerator, RandomRange
from flapper.game.state import FRAME_DURATION, SCREEN_HEIGHT, GameMode, Player
from flapper.utilities.env import Configuration, SpawnGapStrategy
from flapper.utilities.logging import get_logger

logger = get_logger(__name__)


class GameSession:
    """Owns the whole simulation and advances it one rendered frame at a time.

    The session is created once and mutated in place. Each call to
    :meth:`advance` runs the routine for the mode that is active when the call
    starts, so the frame in which the player dies is still drawn as a playing
    frame and the frame in which the player restarts is still drawn as a menu.
    """

    def __init__(
        self,
        rng: RandomRange | None = None,
        *,
        spawn_gap_strategy: SpawnGapStrategy | None = None,
    ) -> None:
        self.rng: RandomRange = rng or RandomNumberGenerator(Configuration.seed())
        self.mode = GameMode.MENU
        self.player = Player()
        self.accumulated_time_ms = 0.0
        self.obstacles = ObstacleStream(
            spawn_gap_strategy=spawn_gap_strategy or Configuration.spawn_gap_strategy()
        )
        self.score = 0

    def advance(self, key: GameInput | None, elapsed_ms: float) -> RenderCommands:
        if elapsed_ms < 0:
            raise ValueError(f"elapsed_ms must be non-negative, got {elapsed_ms}")

        match self.mode:
            case GameMode.MENU:
                return self._menu(key)
            case GameMode.PLAYING:
                return self._play(key, elapsed_ms)
            case GameMode.OVER:
                return self._over(key)

    def restart(self) -> None:
        self.mode = GameMode.PLAYING
        self.player = Player()
        self.accumulated_time_ms = 0.0
        self.obstacles.clear()
        self.score = 0
        logger.info("Session restarted")

    def advance_accumulator(self, elapsed_ms: float) -> bool:
        """Fold ``elapsed_ms`` into the accumulator, stepping physics at most once.

        Time beyond the threshold is discarded rather than caught up, so a long
        stall still produces a single step.
        """

        self.accumulated_time_ms += elapsed_ms
        if self.accumulated_time_ms > FRAME_DURATION:
            self.accumulated_time_ms = 0.0
            self.player.update()
            return True
        return False

    def _menu(self, key: GameInput | None) -> RenderCommands:
        commands = project_menu(self)
        self._handle_prompt(key, commands)
        return commands

    def _over(self, key: GameInput | None) -> RenderCommands:
        commands = project_over(self)
        self._handle_prompt(key, commands)
        return commands

    def _handle_prompt(self, key: GameInput | None, commands: RenderCommands) -> None:
        if key == GameInput.START:
            self.restart()
        elif key == GameInput.QUIT:
            logger.info("Exit requested from %s", self.mode)
            commands.request_exit = True

    def _play(self, key: GameInput | None, elapsed_ms: float) -> RenderCommands:
        self.advance_accumulator(elapsed_ms)

        if self.obstacles.evict_passed(self.player.world_x):
            self.score += 1

        self.obstacles.spawn_ahead(self.player.world_x, self.score, self.rng)

        if key == GameInput.JUMP:
            self.player.flap()

        commands = project_playing(self)

        if self.player.y > SCREEN_HEIGHT:
            self._game_over("fell out of bounds")
        if self.obstacles.hits(self.player):
            self._game_over("hit an obstacle")
        return commands

    def _game_over(self, reason: str) -> None:
        if self.mode == GameMode.OVER:
            return
        self.mode = GameMode.OVER
        logger.info(
            "Game over: player %s at world_x=%d y=%d with score %d",
            reason,
            self.player.world_x,
            self.player.y,
            self.score,
        )
