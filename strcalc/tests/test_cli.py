"""Tests for the strcalc CLI and batch report rendering."""

import re

import pytest
from rich.console import Console
from typer.testing import CliRunner

from strcalc.__main__ import app
from strcalc.calculator import evaluate
from strcalc.report import render_results, summarize


@pytest.fixture
def runner():
    return CliRunner()


# --- add ---

def test_add_prints_sum(runner):
    result = runner.invoke(app, ["add", "1,2,3"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "6"


def test_add_translates_newline_escape(runner):
    result = runner.invoke(app, ["add", "//[***]\\n1***2***3"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "6"


def test_add_raw_keeps_backslash(runner):
    result = runner.invoke(app, ["add", "--raw", "1\\n2"])
    assert result.exit_code == 1


def test_add_negative_fails(runner):
    result = runner.invoke(app, ["add", "--", "1,-2,-3"])
    assert result.exit_code == 1
    assert "negatives not allowed: -2, -3" in result.output


def test_add_without_args_shows_help(runner):
    result = runner.invoke(app, [])
    assert "Usage" in result.output


# --- batch ---

def test_batch_all_ok(runner):
    result = runner.invoke(app, ["batch", "1,2", "2,1001"])
    assert result.exit_code == 0
    assert "2 ok, 0 failed" in result.output


def test_batch_with_failure(runner):
    result = runner.invoke(app, ["batch", "--", "1,2", "-1"])
    assert result.exit_code == 1
    assert "1 ok, 1 failed" in result.output


# --- report ---

def test_summarize_counts():
    results = [evaluate("1"), evaluate("-1"), evaluate("1,,2")]
    assert summarize(results) == (1, 2)


def test_render_empty():
    console = Console(record=True, width=120)
    render_results([], console)
    assert "No inputs." in console.export_text()


def test_render_escapes_newlines_and_markup():
    console = Console(record=True, width=120)
    render_results([evaluate("//[[x]]\n1[x]2")], console)
    text = console.export_text()
    assert "//[[x]]\\n1[x]2" in text
    assert re.search(r"//\[\[x\]\]\\n1\[x\]2\s*[│|]\s*3\s*[│|]", text)
