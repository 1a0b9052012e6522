"""Pure projections of a session onto draw instructions.

Nothing here mutates the session. Each mode routine in
:mod:`flapper.game.session` picks the projection for the mode that was
active when the frame started.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from flapper.game.commands import (BLACK, NAVY, RED, YELLOW, ClearBackground,
                                   ClearScreen, PrintText, RenderCommands,
                                   SetGlyph)
from flapper.game.state import SCREEN_HEIGHT, SCREEN_WIDTH

if TYPE_CHECKING:
    from flapper.game.session import GameSession

PLAYER_GLYPH = "@"
OBSTACLE_GLYPH = "|"
PLAYER_COLUMN = 0

TITLE = "Welcome to Flapper!"
START_PROMPT = "Press [P] to start"
EXIT_PROMPT = "Press [Q] to exit"


def centered(row: int, text: str) -> PrintText:
    return PrintText(col=max(0, (SCREEN_WIDTH - len(text)) // 2), row=row, text=text)


def status_line(score: int) -> str:
    return f"Press SPACE to flap... Score: {score}"


def game_over_line(score: int) -> str:
    return f"You are dead! Score: {score}"


def project_menu(session: GameSession) -> RenderCommands:
    commands = RenderCommands()
    commands.add(ClearScreen())
    commands.add(centered(4, TITLE))
    commands.add(centered(6, START_PROMPT))
    commands.add(centered(9, EXIT_PROMPT))
    return commands


def project_playing(session: GameSession) -> RenderCommands:
    player = session.player
    commands = RenderCommands()
    commands.add(ClearBackground(NAVY))
    commands.add(SetGlyph(PLAYER_COLUMN, player.y, PLAYER_GLYPH, YELLOW, BLACK))
    commands.add(PrintText(0, 0, status_line(session.score)))
    for screen_x, obstacle in session.obstacles.visible(player.world_x):
        for row in range(SCREEN_HEIGHT):
            if obstacle.blocks_row(row):
                commands.add(SetGlyph(screen_x, row, OBSTACLE_GLYPH, RED, BLACK))
    return commands


def project_over(session: GameSession) -> RenderCommands:
    commands = RenderCommands()
    commands.add(ClearScreen())
    commands.add(centered(5, game_over_line(session.score)))
    commands.add(centered(6, START_PROMPT))
    commands.add(centered(9, EXIT_PROMPT))
    return commands
