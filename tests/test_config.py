"""Tests for loading the user config file."""

import json

import pytest

from acf.config import Config


def test_defaults_without_file(home):
    assert Config.load() == Config(compiler="g++", standard="c++17")


def test_load_from_home(home):
    (home / "acf-config.json").write_text(json.dumps({"compiler": "clang++", "standart": "c++20"}))

    assert Config.load() == Config(compiler="clang++", standard="c++20")


def test_standard_key_alias(tmp_path):
    path = tmp_path / "acf-config.json"
    path.write_text(json.dumps({"standard": "c++14"}))

    assert Config.load(path) == Config(compiler="g++", standard="c++14")


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "[1, 2, 3]",
        json.dumps({"compiler": 42, "standart": None}),
        json.dumps({"compiler": "", "standart": ""}),
    ],
)
def test_malformed_config_falls_back(tmp_path, content):
    path = tmp_path / "acf-config.json"
    path.write_text(content)

    assert Config.load(path) == Config()


def test_config_is_immutable():
    config = Config()

    with pytest.raises(AttributeError):
        config.compiler = "clang++"
