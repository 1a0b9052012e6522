from typer.testing import CliRunner

from flapper.cli.commands.simulate import scripted_frames, simulate
from flapper.game.input import GameInput
from flapper.game.rng import RandomNumberGenerator
from flapper.game.session import GameSession
from flapper.game.state import GameMode
from flapper.loop import app

runner = CliRunner()


class TestScriptedFrames:
    def test_starts_then_jumps_on_schedule(self) -> None:
        """The script opens with start and jumps on every Nth frame."""
        script = scripted_frames(frames=7, elapsed_ms=80.0, jump_every=3)

        assert [frame.key for frame in script] == [
            GameInput.START,
            None,
            None,
            GameInput.JUMP,
            None,
            None,
            GameInput.JUMP,
        ]
        assert all(frame.elapsed_ms == 80.0 for frame in script)

    def test_zero_never_jumps(self) -> None:
        """A zero interval disables jumping."""
        script = scripted_frames(frames=5, elapsed_ms=80.0, jump_every=0)

        assert [frame.key for frame in script][1:] == [None] * 4


class TestSimulate:
    def test_headless_run_draws_player(self) -> None:
        """A short headless run ends mid-play with the player drawn in column zero."""
        session = GameSession(rng=RandomNumberGenerator(3))

        grid = simulate(session, scripted_frames(frames=5, elapsed_ms=80.0, jump_every=4))

        assert session.mode == GameMode.PLAYING
        assert session.player.world_x == 9
        assert grid.glyph_at(0, session.player.y) == "@"

    def test_simulate_command_prints_grid(self) -> None:
        """The simulate command prints the final frame and a summary line."""
        result = runner.invoke(app, ["simulate", "--frames", "5", "--seed", "3"])

        assert result.exit_code == 0
        assert "mode=playing score=0" in result.output
        assert "Press SPACE to flap... Score: 0" in result.output

    def test_run_command_rejects_bad_configuration(self) -> None:
        """Invalid environment settings exit with an error before a window opens."""
        result = runner.invoke(app, ["run"], env={"FLAPPER_MAX_FPS": "abc"})

        assert result.exit_code == 1
