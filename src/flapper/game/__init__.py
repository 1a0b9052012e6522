from flapper.game.commands import RenderCommands as RenderCommands
from flapper.game.input import GameInput as GameInput
from flapper.game.session import GameSession as GameSession
from flapper.game.state import GameMode as GameMode
