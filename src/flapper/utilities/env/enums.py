from enum import StrEnum


class SpawnGapStrategy(StrEnum):
    CLAMP = "clamp"
    LEGACY = "legacy"
