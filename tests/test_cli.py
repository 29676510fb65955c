"""Tests for the click command line."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from lingograde.cli import main


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()
    config = tmp_path / "config.yaml"

    def _run(*args):
        return runner.invoke(main, ["--config", str(config), *args])

    return _run


def test_check_correct(run):
    result = run("check", "cat", "dog/cat/bird", "--tolerance", "strict")
    assert result.exit_code == 0
    assert "correct" in result.output
    assert "answer=cat" in result.output


def test_check_wrong_shows_diff(run):
    result = run("check", "helo", "hello", "--tolerance", "strict")
    assert result.exit_code == 1
    assert "he_lo" in result.output
    assert "Not quite" in result.output


def test_check_rejects_unknown_tolerance(run):
    result = run("check", "cat", "cat", "--tolerance", "sloppy")
    assert result.exit_code == 2


def test_diff(run):
    result = run("diff", "xyz", "abcd")
    assert result.exit_code == 0
    assert result.output.strip() == "xyz_"


def test_mask(run):
    result = run("mask", "Tiba-tiba, lampu padam.", "tiba-tiba")
    assert result.output.strip() == "____, lampu padam."


def test_mask_fallback(run):
    result = run("mask", "Dia membeli rumah baru.", "house", "--fallback", "rumah")
    assert result.output.strip() == "Dia membeli ____ baru."


def test_config_uses_file(config_file):
    result = CliRunner().invoke(main, ["--config", str(config_file), "config"])
    assert result.exit_code == 0
    assert "default_tolerance: lenient" in result.output
    assert "mask: '[...]'" in result.output
