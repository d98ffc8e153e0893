# SPDX-License-Identifier: Apache-2.0
"""Tests for the command line interface."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

from translation_cache.cli import build_config, parse_args, print_progress, run


def _args(**overrides: Any) -> argparse.Namespace:
    values: dict[str, Any] = {
        "command": "files",
        "config": None,
        "root": None,
        "api_url": None,
        "api_key": None,
        "timeout": None,
        "verbose": False,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


@pytest.fixture(autouse=True)
def _no_language_env(monkeypatch: pytest.MonkeyPatch):
    """Keep the caller's environment and .env out of CLI tests."""
    for name in (
        "LANGUAGE_CACHE_ROOT",
        "LANGUAGE_CACHE_APPLICATIONS",
        "LANGUAGE_API_URL",
        "LANGUAGE_API_KEY",
        "LANGUAGE_API_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
    with patch("translation_cache.config.load_dotenv"):
        yield


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "system": {
                    "paths": {"root": str(tmp_path)},
                    "translated_applications": {"blog": ["en", "de"]},
                    "api": {"url": "http://localhost/api"},
                }
            }
        ),
        encoding="utf-8",
    )
    return path


class TestParseArgs:
    """Tests for parse_args function."""

    def test_command(self) -> None:
        with patch.object(sys, "argv", ["translation-cache", "files"]):
            args = parse_args()
            assert args.command == "files"
            assert args.config is None
            assert args.verbose is False

    def test_options(self) -> None:
        argv = [
            "translation-cache",
            "all",
            "--config",
            "config.json",
            "--root",
            "/srv/app",
            "--api-url",
            "http://api",
            "--api-key",
            "secret",
            "--timeout",
            "5",
            "-v",
        ]
        with patch.object(sys, "argv", argv):
            args = parse_args()
            assert args.command == "all"
            assert args.config == Path("config.json")
            assert args.root == Path("/srv/app")
            assert args.api_url == "http://api"
            assert args.api_key == "secret"
            assert args.timeout == 5.0
            assert args.verbose is True

    def test_invalid_command(self) -> None:
        with patch.object(sys, "argv", ["translation-cache", "everything"]):
            with pytest.raises(SystemExit):
                parse_args()


class TestBuildConfig:
    """Tests for build_config."""

    def test_cli_overrides_file(self, config_file: Path) -> None:
        config = build_config(_args(config=config_file, root=Path("/other"), api_url="http://cli"))

        assert config.get("system.paths.root") == str(Path("/other"))
        assert config.get("system.api.url") == "http://cli"
        assert config.get("system.translated_applications") == {"blog": ["en", "de"]}

    def test_env_between_file_and_cli(
        self, config_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("LANGUAGE_API_URL", "http://env")
        assert build_config(_args(config=config_file)).get("system.api.url") == "http://env"
        assert (
            build_config(_args(config=config_file, api_url="http://cli")).get("system.api.url")
            == "http://cli"
        )


class TestPrintProgress:
    """Tests for print_progress."""

    def test_language_lines_are_indented(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_progress("application", 1, 1, "[APPLICATION: blog]")
        print_progress("language", 1, 2, "[LANGUAGE: en] OK")
        print_progress("language", 2, 2, "")

        assert capsys.readouterr().out == "[APPLICATION: blog]\n\t[LANGUAGE: en] OK\n"


class TestRun:
    """Tests for the run coroutine."""

    @pytest.mark.asyncio
    async def test_files(self, config_file: Path, make_client, tmp_path: Path, capsys) -> None:
        client = make_client({"getLanguageFile": {"status": "OK", "data": "x"}})
        with patch("translation_cache.cli.create_client", return_value=client):
            exit_code = await run(_args(config=config_file))

        assert exit_code == 0
        assert (tmp_path / "cache" / "blog" / "de.php").exists()
        out = capsys.readouterr().out
        assert "[APPLICATION: blog]" in out
        assert "Complete: 2 file(s) cached" in out

    @pytest.mark.asyncio
    async def test_all(self, config_file: Path, make_client, tmp_path: Path) -> None:
        client = make_client(
            {
                "getLanguageFile": {"status": "OK", "data": "x"},
                "getAppletLanguages": {"status": "OK", "data": ["en"]},
                "getAppletLanguageFile": {"status": "OK", "data": "<xml/>"},
            }
        )
        with patch("translation_cache.cli.create_client", return_value=client):
            exit_code = await run(_args(command="all", config=config_file))

        assert exit_code == 0
        assert (tmp_path / "cache" / "flash" / "lang_en.xml").read_text() == "<xml/>"
        assert client.actions() == [
            "getLanguageFile",
            "getLanguageFile",
            "getAppletLanguages",
            "getAppletLanguageFile",
        ]

    @pytest.mark.asyncio
    async def test_all_stops_after_file_failure(self, config_file: Path, make_client, capsys) -> None:
        """Applets are not processed once the application files failed."""
        client = make_client({"getLanguageFile": {"status": "FAIL", "error_code": "403"}})
        with patch("translation_cache.cli.create_client", return_value=client):
            exit_code = await run(_args(command="all", config=config_file))

        assert exit_code == 1
        assert client.actions() == ["getLanguageFile"]
        assert "Code(403)" in capsys.readouterr().err

    @pytest.mark.asyncio
    async def test_missing_config(self, tmp_path: Path, capsys) -> None:
        exit_code = await run(_args(config=tmp_path / "missing.json"))

        assert exit_code == 1
        assert "Config file not found" in capsys.readouterr().err

    @pytest.mark.asyncio
    async def test_missing_api_url(self, tmp_path: Path, capsys) -> None:
        exit_code = await run(_args(root=tmp_path))

        assert exit_code == 1
        assert "system.api.url" in capsys.readouterr().err
