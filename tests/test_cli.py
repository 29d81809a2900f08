# File: tests/test_cli.py
"""Tests for the CLI using click.testing.CliRunner.
They cover `crawl`, `config`, `--version` and error handling.
"""
import json
import logging
import types

import pytest
from click.testing import CliRunner

import adoc.cli as cli_module
from adoc.cli import cli
from adoc.crawler.errors import FetchError
from adoc.crawler.models import DocPage
from adoc.logger import LOGGER_NAME


@pytest.fixture(autouse=True)
def patch_run_crawl(monkeypatch):
    """Replace run_crawl with a stub that records its arguments."""
    calls = []
    pages = [
        DocPage(
            title="Swift",
            content="Swift is a language.",
            url="https://developer.apple.com/documentation/swift",
            related_links=["https://developer.apple.com/documentation/swiftui"],
        )
    ]

    async def fake_crawl(cfg, target, recursive=False):
        calls.append((cfg, target, recursive))
        return pages

    monkeypatch.setattr(cli_module, "run_crawl", fake_crawl)
    return calls


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers bound to the runner streams after each invocation."""
    yield
    lg = logging.getLogger(LOGGER_NAME)
    for handler in list(lg.handlers):
        lg.removeHandler(handler)
    lg.propagate = True


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


def test_version_option():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "adoc" in result.output


def test_show_config(tmp_path):
    cfg_file = tmp_path / "adoc.yaml"
    cfg_file.write_text("concurrency: 7\n", encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(cfg_file), "config"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["concurrency"] == 7
    assert data["domain"] == "developer.apple.com"


def test_bad_config_fails(tmp_path):
    cfg_file = tmp_path / "adoc.yaml"
    cfg_file.write_text("concurrency: 0\n", encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(cfg_file), "config"])
    assert result.exit_code == 1
    assert "Failed to load configuration" in result.output


def test_crawl_summary_stdout(patch_run_crawl):
    runner = CliRunner()
    result = runner.invoke(cli, ["crawl", "https://developer.apple.com/documentation/swift"])
    assert result.exit_code == 0
    assert "Title: Swift" in result.output
    assert "Related links: 1" in result.output
    cfg, target, recursive = patch_run_crawl[0]
    assert target == "https://developer.apple.com/documentation/swift"
    assert recursive is False


def test_crawl_json_stdout_with_overrides(patch_run_crawl):
    runner = CliRunner()
    result = runner.invoke(
        cli,
        ["crawl", "SwiftUI", "-r", "--format", "json", "--concurrency", "3", "--max-retries", "0", "--timeout", "5"],
    )
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data[0]["title"] == "Swift"
    cfg, target, recursive = patch_run_crawl[0]
    assert (target, recursive) == ("SwiftUI", True)
    assert (cfg.concurrency, cfg.max_retries, cfg.timeout) == (3, 0, 5.0)


def test_crawl_output_file(tmp_path):
    out = tmp_path / "docs" / "swift.md"
    runner = CliRunner()
    result = runner.invoke(cli, ["crawl", "Swift", "--output", str(out)])
    assert result.exit_code == 0
    assert out.read_text(encoding="utf-8").startswith("# Documentation")


def test_crawl_output_file_explicit_format(tmp_path):
    out = tmp_path / "swift.md"
    runner = CliRunner()
    result = runner.invoke(cli, ["crawl", "Swift", "-o", str(out), "-f", "pretty-json"])
    assert result.exit_code == 0
    assert json.loads(out.read_text(encoding="utf-8"))[0]["title"] == "Swift"


def test_crawl_seed_failure_exits_1(monkeypatch):
    async def failing(cfg, target, recursive=False):
        raise FetchError(target, 4, ConnectionError("refused"))

    monkeypatch.setattr(cli_module, "run_crawl", failing)
    runner = CliRunner()
    result = runner.invoke(cli, ["crawl", "https://developer.apple.com/x"])
    assert result.exit_code == 1
    assert "Crawl failed" in result.output


def test_invalid_concurrency_rejected():
    runner = CliRunner()
    result = runner.invoke(cli, ["crawl", "Swift", "--concurrency", "0"])
    assert result.exit_code == 2


def test_cli_module_is_patchable():
    assert isinstance(cli_module, types.ModuleType)
    assert cli_module.cli is cli
