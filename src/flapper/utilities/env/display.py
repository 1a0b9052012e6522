from flapper.utilities.env.parsing import _env_flag, _env_int

DEFAULT_MAX_FPS = 60
DEFAULT_CELL_SIZE = 12


class DisplayConfiguration:
    @classmethod
    def max_fps(cls) -> int:
        return _env_int("FLAPPER_MAX_FPS", default=DEFAULT_MAX_FPS, minimum=1)

    @classmethod
    def cell_size(cls) -> int:
        return _env_int("FLAPPER_CELL_SIZE", default=DEFAULT_CELL_SIZE, minimum=4)

    @classmethod
    def show_fps(cls) -> bool:
        return _env_flag("FLAPPER_SHOW_FPS")
