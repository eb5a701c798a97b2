import pytest

from minilisp.interpreter import Interpreter

# Every test gets a fresh session: its own symbol table and global frame.


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(interp):
    """Evaluate source text and return the printed form of the last value."""
    def _run(code: str) -> str:
        return interp.to_string(interp.eval(code))
    return _run
