from enum import StrEnum


class GameInput(StrEnum):
    START = "start"
    QUIT = "quit"
    JUMP = "jump"

    @classmethod
    def parse(cls, value: str | None) -> "GameInput | None":
        """Resolve a symbol to an input, ignoring anything unrecognised."""

        if value is None:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None
