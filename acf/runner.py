"""Compile a solution and check it against local sample tests."""

import subprocess
import tempfile
import time
from pathlib import Path
from typing import BinaryIO, Callable, Dict, List, Optional, Tuple

from rich.console import Console
from rich.markup import escape

from .client.models import Verdict
from .config import Config
from .errors import (
    CompileError,
    FileAccessError,
    ParseError,
    SolutionRuntimeError,
)


console = Console(stderr=True)

OUTPUT_BINARY = "a.out"
TRIM_CHARS = " \n\t"


def strings_matching_mask(output: str, answer: str) -> List[bool]:
    """
    Compare two texts line by line.
    Lines past the end of the shorter text are marked as mismatched.
    """
    output_lines = output.split("\n")
    answer_lines = answer.split("\n")
    min_length = min(len(output_lines), len(answer_lines))
    max_length = max(len(output_lines), len(answer_lines))

    mask = [False] * max_length
    for i in range(min_length):
        mask[i] = output_lines[i] == answer_lines[i]
    return mask


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise FileAccessError(f"Failed to read {path}: {e}") from e


class SolutionRunner:
    """Runs a C++ solution against the *.in / *.out pairs of a directory."""

    def __init__(
        self,
        config: Config,
        workdir: Optional[Path] = None,
        timeout: Optional[float] = None,
    ):
        self.config = config
        self.workdir = Path(workdir) if workdir is not None else Path.cwd()
        self.timeout = timeout

    def list_tests(self) -> List[Tuple[int, Path]]:
        """Find test inputs, ordered by test number."""
        tests = []
        for input_file in self.workdir.iterdir():
            if not input_file.is_file() or input_file.suffix != ".in":
                continue
            if not (input_file.stem.isascii() and input_file.stem.isdigit()):
                raise ParseError(f"Test file name is not a number: {input_file.name}")
            tests.append((int(input_file.stem), input_file))

        tests.sort()
        return tests

    def compile(self, source: Path) -> Path:
        """Compile the source file, returning the binary path."""
        binary = self.workdir / OUTPUT_BINARY
        cmd = [
            self.config.compiler,
            f"--std={self.config.standard}",
            str(source),
            "-o",
            str(binary),
        ]
        try:
            proc = subprocess.run(cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE)
        except OSError as e:
            raise CompileError(f"error while compiling: {e}") from e

        if proc.returncode != 0:
            diagnostics = (proc.stderr or b"").decode("utf-8", errors="replace")
            raise CompileError("error while compiling", diagnostics)
        return binary

    def execute(
        self, binary: Path, test_number: int, input_file: Path, output_stream: BinaryIO
    ) -> int:
        """Run the binary on one input, returning the wall time in nanoseconds."""
        cmd = [str(binary.resolve())]
        try:
            with open(input_file, "rb") as input_stream:
                start = time.perf_counter_ns()
                proc = subprocess.run(
                    cmd,
                    stdin=input_stream,
                    stdout=output_stream,
                    stderr=subprocess.DEVNULL,
                    cwd=str(self.workdir),
                    timeout=self.timeout,
                )
                elapsed = time.perf_counter_ns() - start
        except subprocess.TimeoutExpired as e:
            raise SolutionRuntimeError(
                f"Time limit exceeded on test #{test_number} ({self.timeout}s)", test_number
            ) from e
        except OSError as e:
            raise SolutionRuntimeError(
                f"error while running test #{test_number}: {e}", test_number
            ) from e

        if proc.returncode != 0:
            raise SolutionRuntimeError(
                f"error while running test #{test_number} (exit code {proc.returncode})",
                test_number,
            )
        return elapsed

    def run(
        self,
        source: Path,
        bench_count: Optional[int] = None,
        on_progress: Optional[Callable[[], None]] = None,
    ) -> Verdict:
        """
        Compile and check every test.
        Stops on the first wrong answer. With bench_count set, every test
        runs bench_count times and average timings are returned.
        """
        repeats = bench_count if bench_count else 1
        tests = self.list_tests()
        binary = self.compile(source)

        total_time: Dict[int, int] = {number: 0 for number, _ in tests}

        for _ in range(repeats):
            for number, input_file in tests:
                with tempfile.TemporaryFile() as scratch:
                    total_time[number] += self.execute(binary, number, input_file, scratch)
                    scratch.seek(0)
                    user_output = scratch.read().decode("utf-8", errors="replace")

                output = user_output.strip(TRIM_CHARS)
                answer = _read(input_file.with_suffix(".out")).strip(TRIM_CHARS)
                test_input = _read(input_file).strip(TRIM_CHARS)

                if output != answer:
                    return Verdict(
                        ok=False,
                        test_number=number,
                        input=test_input,
                        output=output,
                        answer=answer,
                        lines_mask=strings_matching_mask(output, answer),
                    )

                if on_progress is not None:
                    on_progress()

        try:
            binary.unlink()
        except OSError as e:
            console.print(f"[yellow]{escape(f'error while removing {binary}: {e}')}[/yellow]")

        if bench_count:
            timings = {number: total // repeats for number, total in total_time.items()}
            return Verdict(ok=True, timings=timings)
        return Verdict(ok=True)
