"""Client module for Codeforces interaction."""

from .client import CodeforcesClient
from .models import Problem, Sample, Verdict

__all__ = ["CodeforcesClient", "Problem", "Sample", "Verdict"]
