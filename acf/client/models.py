"""Data models for contest samples and local test results."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class Sample:
    """Represents one sample test shown on a problem page."""

    input: str
    output: str


@dataclass
class Problem:
    """Represents a problem in a contest."""

    number: str
    samples: List[Sample] = field(default_factory=list)


@dataclass(frozen=True)
class Verdict:
    """
    Outcome of a local test run.
    On failure carries the trimmed input/output/answer of the failing test.
    In benchmark mode carries average durations (ns) keyed by test number.
    """

    ok: bool
    test_number: int = 0
    input: str = ""
    output: str = ""
    answer: str = ""
    lines_mask: List[bool] = field(default_factory=list)
    timings: Optional[Dict[int, int]] = None
