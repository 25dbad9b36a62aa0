import pytest

from jscheck.config import Settings
from jscheck.validators.context import EngineContext

from tests.fakes import FakeEngine


@pytest.fixture
def settings():
    return Settings(_env_file=None, LOG_TIMINGS=True)


@pytest.fixture
def fake_engine():
    return FakeEngine()


@pytest.fixture
def fake_context(fake_engine, settings):
    return EngineContext(engine_factory=lambda: fake_engine, settings=settings)


@pytest.fixture(scope="session")
def shared_context():
    """One real V8 context for the whole run; loading the program is the slow part."""
    return EngineContext(settings=Settings(_env_file=None))
