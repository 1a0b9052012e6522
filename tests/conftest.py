import pytest
from helpers.rng import ScriptedRng
from hypothesis import HealthCheck, settings

from flapper.game.session import GameSession
from flapper.utilities.env import SpawnGapStrategy

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("default")


@pytest.fixture(autouse=True, scope="session")
def configure_sdl_video_driver() -> None:
    """Force pygame to use the dummy SDL driver so headless tests remain stable."""

    patcher = pytest.MonkeyPatch()
    patcher.setenv("SDL_VIDEODRIVER", "dummy")
    try:
        yield
    finally:
        patcher.undo()


@pytest.fixture(autouse=True)
def isolated_log_directory(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FLAPPER_LOG_DIR", str(tmp_path / "logs"))
    yield


@pytest.fixture
def scripted_rng() -> ScriptedRng:
    return ScriptedRng()


@pytest.fixture
def playing_session(scripted_rng: ScriptedRng) -> GameSession:
    """A session already restarted into playing mode with a scripted generator."""

    session = GameSession(rng=scripted_rng, spawn_gap_strategy=SpawnGapStrategy.CLAMP)
    session.restart()
    return session
