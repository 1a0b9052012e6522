"""Environment configuration helpers."""

from flapper.utilities.env.enums import SpawnGapStrategy as SpawnGapStrategy
from flapper.utilities.env.display import DisplayConfiguration
from flapper.utilities.env.game import GameConfiguration


class Configuration(GameConfiguration, DisplayConfiguration):
    """Aggregate environment configuration helpers."""
