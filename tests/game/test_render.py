from helpers.rng import ScriptedRng

from flapper.game.commands import (BLACK, NAVY, RED, YELLOW, ClearBackground,
                                   ClearScreen, PrintText, SetGlyph)
from flapper.game.render import (project_menu, project_over, project_playing,
                                 status_line)
from flapper.game.session import GameSession
from flapper.game.state import Obstacle


def _playing(*obstacles: Obstacle) -> GameSession:
    session = GameSession(rng=ScriptedRng())
    session.restart()
    for obstacle in obstacles:
        session.obstacles.append(obstacle)
    return session


class TestProjections:
    """Projections describe frames without touching the session."""

    def test_menu_prompts_are_centered(self) -> None:
        """Menu text is centered on the fixed prompt rows."""
        commands = project_menu(GameSession(rng=ScriptedRng()))

        assert isinstance(commands.commands[0], ClearScreen)
        assert commands.of_type(PrintText) == [
            PrintText(col=30, row=4, text="Welcome to Flapper!"),
            PrintText(col=31, row=6, text="Press [P] to start"),
            PrintText(col=31, row=9, text="Press [Q] to exit"),
        ]

    def test_playing_draws_player_and_status(self) -> None:
        """The player sits in column zero and the score is on the first row."""
        session = _playing()
        session.player.y = 12
        session.score = 4

        commands = project_playing(session)

        assert commands.commands[0] == ClearBackground(NAVY)
        assert SetGlyph(0, 12, "@", YELLOW, BLACK) in commands.commands
        assert PrintText(0, 0, status_line(4)) in commands.commands
        assert status_line(4) == "Press SPACE to flap... Score: 4"

    def test_obstacle_bar_skips_gap_rows(self) -> None:
        """A bar covers every row except the inclusive gap."""
        session = _playing(Obstacle(world_x=85, gap_center_y=25, gap_size=20))

        glyphs = [
            command
            for command in project_playing(session).of_type(SetGlyph)
            if command.glyph == "|"
        ]

        rows = {glyph.row for glyph in glyphs}
        assert len(glyphs) == 50 - 21
        assert rows.isdisjoint(range(15, 36))
        assert {glyph.col for glyph in glyphs} == {80}
        assert all(glyph.fg == RED for glyph in glyphs)

    def test_obstacles_past_right_edge_are_not_drawn(self) -> None:
        """Columns beyond the screen width are left out."""
        session = _playing(Obstacle(world_x=86, gap_center_y=25, gap_size=20))

        glyphs = [c for c in project_playing(session).of_type(SetGlyph) if c.glyph == "|"]

        assert glyphs == []

    def test_projection_does_not_mutate(self) -> None:
        """Projecting leaves player, score and obstacles untouched."""
        session = _playing(Obstacle(world_x=40, gap_center_y=25, gap_size=20))
        before = (
            session.player.world_x,
            session.player.y,
            session.player.velocity,
            session.score,
            list(session.obstacles),
        )

        project_playing(session)
        project_menu(session)
        project_over(session)

        assert before == (
            session.player.world_x,
            session.player.y,
            session.player.velocity,
            session.score,
            list(session.obstacles),
        )

    def test_over_reports_score(self) -> None:
        """Game over text carries the final score."""
        session = _playing()
        session.score = 12

        texts = project_over(session).texts()

        assert texts == ["You are dead! Score: 12", "Press [P] to start", "Press [Q] to exit"]
