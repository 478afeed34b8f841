"""Writing downloaded samples to disk."""

from pathlib import Path
from typing import Optional

from .client.models import Problem
from .errors import DirectoryExistsError, FileAccessError


def create_io_files(problem: Problem, base_dir: Optional[Path] = None) -> Path:
    """
    Write problem samples as <n>.in / <n>.out under a directory named
    after the problem number. Contents are written verbatim.
    Returns the created directory.
    """
    if base_dir is None:
        base_dir = Path.cwd()

    problem_dir = Path(base_dir) / problem.number
    try:
        problem_dir.mkdir()
    except FileExistsError as e:
        raise DirectoryExistsError(f"Directory {problem_dir} already exists") from e
    except OSError as e:
        raise FileAccessError(f"Failed to create {problem_dir}: {e}") from e

    for idx, sample in enumerate(problem.samples, start=1):
        _write(problem_dir / f"{idx}.in", sample.input)
        _write(problem_dir / f"{idx}.out", sample.output)

    return problem_dir


def _write(path: Path, text: str) -> None:
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
    except OSError as e:
        raise FileAccessError(f"Failed to write {path}: {e}") from e
