"""Shared pytest fixtures for recipectl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from recipectl.domain.parser import InputParser
from recipectl.domain.rules import RuleSet
from recipectl.services.parse import ParseService


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def rules() -> RuleSet:
    return RuleSet.default()


@pytest.fixture
def parser(rules: RuleSet) -> InputParser:
    return InputParser(rules)


@pytest.fixture
def service(parser: InputParser) -> ParseService:
    return ParseService(parser)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory with no config overrides in the environment.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on CLI test
    classes so no stray ``recipectl.toml`` is discovered.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("RECIPECTL_CONFIG", raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() side effects after each test.

    CLI invocations point the root handler at CliRunner's temporary
    stderr, which is closed once the invocation returns.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("recipectl")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)
