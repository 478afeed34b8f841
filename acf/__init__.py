"""acf - fetch Codeforces samples and test solutions locally."""

__version__ = "1.0.0"
