import typer
from reactivex.subject import Subject

from flapper.display.grid import GlyphGrid
from flapper.game.commands import RenderCommands
from flapper.game.input import GameInput
from flapper.game.provider import FrameInput, GameSessionProvider
from flapper.game.rng import RandomNumberGenerator
from flapper.game.session import GameSession
from flapper.game.state import FRAME_DURATION
from flapper.utilities.logging import get_logger

logger = get_logger(__name__)


def scripted_frames(frames: int, elapsed_ms: float, jump_every: int) -> list[FrameInput]:
    """Start on the first frame, then jump every ``jump_every`` frames."""

    script = [FrameInput(elapsed_ms=elapsed_ms, key=GameInput.START)]
    for index in range(1, frames):
        jump = jump_every > 0 and index % jump_every == 0
        script.append(
            FrameInput(elapsed_ms=elapsed_ms, key=GameInput.JUMP if jump else None)
        )
    return script


def simulate(
    session: GameSession,
    script: list[FrameInput],
    grid: GlyphGrid | None = None,
) -> GlyphGrid:
    """Feed ``script`` through a session headlessly and return the last frame."""

    grid = grid or GlyphGrid()
    frames: Subject[FrameInput] = Subject()
    provider = GameSessionProvider(session, frames)

    def _draw(commands: RenderCommands) -> None:
        grid.apply(commands)

    subscription = provider.observable().subscribe(on_next=_draw)
    try:
        for frame in script:
            frames.on_next(frame)
    finally:
        subscription.dispose()
    return grid


def simulate_command(
    frames: int = typer.Option(200, "--frames", min=1, help="Frames to simulate."),
    elapsed_ms: float = typer.Option(
        FRAME_DURATION + 1.0,
        "--elapsed-ms",
        min=0.0,
        help="Elapsed time reported for every frame.",
    ),
    jump_every: int = typer.Option(
        4, "--jump-every", min=0, help="Jump on every Nth frame; 0 never jumps."
    ),
    seed: int = typer.Option(0, "--seed", help="Seed for the obstacle generator."),
) -> None:
    """Run the game without a window and print the final frame."""

    session = GameSession(rng=RandomNumberGenerator(seed))
    grid = simulate(session, scripted_frames(frames, elapsed_ms, jump_every))
    logger.info("Simulated %d frames", frames)
    typer.echo(grid.to_text())
    typer.echo(f"mode={session.mode} score={session.score}")
