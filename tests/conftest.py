"""Shared fixtures: stubbed judge website and stubbed toolchain."""

import subprocess
from pathlib import Path

import pytest


class FakeResponse:
    def __init__(self, text: str = "", status_code: int = 200):
        self.text = text
        self.status_code = status_code


class FakeSession:
    """Serves canned pages keyed by URL."""

    def __init__(self, pages=None):
        self.pages = pages or {}
        self.requested = []

    def get(self, url, **kwargs):
        self.requested.append(url)
        page = self.pages.get(url)
        if isinstance(page, Exception):
            raise page
        if page is None:
            return FakeResponse("Not found", status_code=404)
        return FakeResponse(page)


class FakeToolchain:
    """
    Stands in for subprocess.run: "compiles" by creating the output
    file and "runs" the binary by applying solve() to its stdin.
    Setting compile_error or run_error makes the matching call raise it;
    a run takes run_seconds and times out past the given timeout.
    """

    def __init__(self, solve=None):
        self.solve = solve or (lambda data: data)
        self.compile_returncode = 0
        self.run_returncode = 0
        self.compile_error = None
        self.run_error = None
        self.run_seconds = 0.0
        self.compile_commands = []
        self.inputs = []
        self.timeouts = []

    def __call__(self, cmd, stdin=None, stdout=None, stderr=None, cwd=None, timeout=None):
        if not cmd[0].endswith("a.out"):
            self.compile_commands.append(cmd)
            if self.compile_error is not None:
                raise self.compile_error
            if self.compile_returncode == 0:
                Path(cmd[-1]).write_bytes(b"binary")
            return subprocess.CompletedProcess(cmd, self.compile_returncode, b"", b"error: expected ';'")

        self.timeouts.append(timeout)
        if self.run_error is not None:
            raise self.run_error
        if timeout is not None and self.run_seconds > timeout:
            raise subprocess.TimeoutExpired(cmd, timeout)

        data = stdin.read().decode("utf-8")
        self.inputs.append(data)
        stdout.write(self.solve(data).encode("utf-8"))
        return subprocess.CompletedProcess(cmd, self.run_returncode)


def square(data: str) -> str:
    return str(int(data) ** 2)


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def toolchain(monkeypatch):
    chain = FakeToolchain(square)
    monkeypatch.setattr("acf.runner.subprocess.run", chain)
    return chain


@pytest.fixture
def home(monkeypatch, tmp_path):
    """Isolated home directory so the user's config is never read."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    return home_dir


@pytest.fixture
def samples_dir(tmp_path):
    """Working directory with squared-number samples 1..3."""
    work = tmp_path / "work"
    work.mkdir()
    for number, value in ((1, 3), (2, 5), (3, 7)):
        (work / f"{number}.in").write_text(f"{value}\n")
        (work / f"{number}.out").write_text(f"{value * value}\n")
    (work / "main.cpp").write_text("int main() {}\n")
    return work
