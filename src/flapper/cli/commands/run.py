import typer

from flapper.game.rng import RandomNumberGenerator
from flapper.game.session import GameSession
from flapper.runtime.game_loop import GameLoop
from flapper.runtime.presenter import PygamePresenter
from flapper.utilities.env import Configuration
from flapper.utilities.logging import get_logger

logger = get_logger(__name__)


def run_command(
    seed: int | None = typer.Option(
        None,
        "--seed",
        help="Seed the obstacle generator. Defaults to FLAPPER_SEED.",
    ),
    max_fps: int | None = typer.Option(
        None,
        "--max-fps",
        min=1,
        help="Frame cap for the window. Defaults to FLAPPER_MAX_FPS.",
    ),
    cell_size: int | None = typer.Option(
        None,
        "--cell-size",
        min=4,
        help="Pixel size of one character cell. Defaults to FLAPPER_CELL_SIZE.",
    ),
) -> None:
    try:
        resolved_seed = seed if seed is not None else Configuration.seed()
        session = GameSession(rng=RandomNumberGenerator(resolved_seed))
        loop = GameLoop(
            session,
            PygamePresenter(cell_size=cell_size),
            max_fps=max_fps,
        )
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        raise typer.Exit(code=1) from exc
    loop.start()
