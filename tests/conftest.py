import numpy as np
import pytest

from flip_buffer import FlipSession


class ScriptedSink:
    """Console stand-in: feeds scripted input lines and records everything written"""

    def __init__(self, lines=(), end_of_input=EOFError):
        self.lines = list(lines)
        self.end_of_input = end_of_input
        self.chunks = []
        self.pauses = 0
        self.clears = 0

    def write(self, text="", end="\n"):
        self.chunks.append(text + end)

    def read_line(self, prompt=""):
        if not self.lines:
            raise self.end_of_input
        return self.lines.pop(0)

    def pause(self):
        # pauses do not consume scripted lines
        self.pauses += 1

    def clear(self):
        self.clears += 1

    @property
    def output(self):
        return "".join(self.chunks)


class FixedSource:
    """Outcome source returning prepared sequences, one per draw()"""

    def __init__(self, *sequences):
        self.sequences = [np.asarray(s, dtype=np.uint8) for s in sequences]

    def draw(self, count):
        flips = self.sequences.pop(0)
        assert len(flips) == count
        return flips


@pytest.fixture
def sink():
    return ScriptedSink()


@pytest.fixture
def make_sink():
    return ScriptedSink


@pytest.fixture
def fixed_session():
    def _make(*sequences):
        return FlipSession(FixedSource(*sequences))
    return _make
