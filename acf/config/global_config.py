"""Global configuration management (~/acf-config.json)."""

import json
from pathlib import Path
from typing import Optional
from dataclasses import dataclass


CONFIG_NAME = "acf-config.json"

DEFAULT_COMPILER = "g++"
DEFAULT_STANDARD = "c++17"


@dataclass(frozen=True)
class Config:
    """
    Compiler settings used by the test runner.
    Stored at ~/acf-config.json as {"compiler": ..., "standart": ...}.
    """

    compiler: str = DEFAULT_COMPILER
    standard: str = DEFAULT_STANDARD

    @staticmethod
    def default_path() -> Optional[Path]:
        """Return the config location, or None if there is no home directory."""
        try:
            return Path.home() / CONFIG_NAME
        except RuntimeError:
            return None

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Config":
        """
        Load config from file.
        A missing or malformed file silently yields the defaults.
        """
        if path is None:
            path = cls.default_path()

        if path is None or not path.exists():
            return cls()

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError, UnicodeDecodeError):
            return cls()

        if not isinstance(data, dict):
            return cls()

        compiler = data.get("compiler")
        # "standart" is the historical key; "standard" is accepted too
        standard = data.get("standart", data.get("standard"))

        return cls(
            compiler=compiler if isinstance(compiler, str) and compiler else DEFAULT_COMPILER,
            standard=standard if isinstance(standard, str) and standard else DEFAULT_STANDARD,
        )
