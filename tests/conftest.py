import pytest


class FakeTerminal:
    """Stands in for builtins.input: hands out canned lines and records prompts."""

    def __init__(self, lines):
        self._lines = list(lines)
        self.prompts = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self._lines:
            raise AssertionError(f"unexpected extra prompt: {prompt!r}")
        line = self._lines.pop(0)
        if isinstance(line, BaseException) or (isinstance(line, type) and issubclass(line, BaseException)):
            raise line
        return line

    @property
    def remaining(self):
        return len(self._lines)


@pytest.fixture
def terminal(monkeypatch):
    def install(*lines):
        fake = FakeTerminal(lines)
        monkeypatch.setattr("builtins.input", fake)
        return fake
    return install


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    monkeypatch.setenv("PROMPTENGINE_COLOR_DISABLED", "1")
