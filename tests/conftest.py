import pytest

from risp.interpreter import Interpreter
from risp.types.environment import Environment


@pytest.fixture
def env():
    """Fresh, empty evaluation environment."""
    return Environment()


@pytest.fixture
def interp():
    """Interpreter with default depth limit and the erroring underflow policy."""
    return Interpreter(max_depth=500, underflow="error")


@pytest.fixture(autouse=True)
def _clean_config(monkeypatch):
    # Keep the developer's shell settings out of the default runtime context
    monkeypatch.delenv("RISP_MAX_DEPTH", raising=False)
    monkeypatch.delenv("RISP_UNDERFLOW", raising=False)
