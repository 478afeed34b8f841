"""Codeforces HTTP client with scraping capabilities."""

from pathlib import Path
from typing import List, Optional

import requests
from bs4 import BeautifulSoup
from rich.console import Console
from rich.markup import escape

from .models import Problem, Sample
from ..errors import InvalidContestError, NetworkError
from .. import samples


console = Console()

PROBLEM_PREFIX_PATTERN = "/contest/{contest}/problem/"
REQUEST_TIMEOUT = 15


class CodeforcesClient:
    """HTTP client for reading contests and problems from Codeforces."""

    BASE_URL = "https://codeforces.com"

    def __init__(self, session: Optional[requests.Session] = None):
        """Initialize the client."""
        self.session = session or requests.Session()

    def _get(self, path: str, error_message: str) -> str:
        """Make GET request and return the page text."""
        url = f"{self.BASE_URL}{path}"
        try:
            response = self.session.get(url, timeout=REQUEST_TIMEOUT)
        except requests.RequestException as e:
            raise NetworkError(f"Failed to fetch {url}: {e}") from e

        if response.status_code != 200:
            raise InvalidContestError(error_message)
        return response.text

    def get_problem_paths(self, contest_id: str) -> List[str]:
        """Scrape distinct problem links of a contest, in page order."""
        html = self._get(f"/contest/{contest_id}", "invalid contest number")
        soup = BeautifulSoup(html, "html.parser")
        prefix = PROBLEM_PREFIX_PATTERN.format(contest=contest_id)

        paths = []
        seen = set()
        for link in soup.find_all("a", href=True):
            href = link["href"]
            if href.startswith(prefix) and href not in seen:
                seen.add(href)
                paths.append(href)

        return paths

    def get_problem(self, contest_id: str, problem_id: str) -> Problem:
        """Scrape sample tests of a single problem."""
        html = self._get(
            f"/contest/{contest_id}/problem/{problem_id}",
            "invalid contest number or problem number",
        )
        soup = BeautifulSoup(html, "html.parser")

        inputs = [_block_text(block) for block in soup.select(".sample-test .input")]
        outputs = [_block_text(block) for block in soup.select(".sample-test .output")]

        problem_samples = []
        for idx, sample_input in enumerate(inputs):
            sample_output = outputs[idx] if idx < len(outputs) else ""
            problem_samples.append(Sample(input=sample_input, output=sample_output))

        return Problem(number=problem_id, samples=problem_samples)

    def load_contest(self, contest_id: str, base_dir: Optional[Path] = None) -> List[Problem]:
        """Download samples of every contest problem into per-problem directories."""
        prefix = PROBLEM_PREFIX_PATTERN.format(contest=contest_id)
        problems = []

        for path in self.get_problem_paths(contest_id):
            problem_id = path[len(prefix):]
            problem = self.get_problem(contest_id, problem_id)
            samples.create_io_files(problem, base_dir)
            console.print(
                f"[cyan]Problem {escape(problem.number)}: {len(problem.samples)} sample(s)[/cyan]"
            )
            problems.append(problem)

        return problems


def _block_text(block) -> str:
    """Extract the text of a sample input/output block."""
    pre = block.find("pre")
    if pre is None:
        return ""

    # Old statements separate lines with <br>
    for br in pre.find_all("br"):
        br.replace_with("\n")

    # Multi-test samples render every line group as a nested div
    lines = pre.find_all("div")
    if lines:
        return "".join(line.get_text() + "\n" for line in lines)
    return pre.get_text()
