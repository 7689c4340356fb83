"""
Tests for the server entry point.

Tests cover:
- Command line options
- Listing the named interval catalog without starting a server
"""

from pathlib import Path

import pytest

from chuk_mcp_intervals.catalog import IntervalCatalog
from chuk_mcp_intervals.constants import CATALOG_DIR_ENV
from chuk_mcp_intervals.server import build_parser, list_intervals, main


class TestParser:
    """Tests for command line options."""

    def test_defaults(self) -> None:
        args = build_parser().parse_args([])
        assert args.transport == "stdio"
        assert args.port == 8000
        assert args.catalog_dir is None
        assert not args.list_intervals

    def test_http_with_catalog_dir(self) -> None:
        args = build_parser().parse_args(
            ["--transport", "http", "--port", "9000", "--catalog-dir", "jazz"]
        )
        assert args.transport == "http"
        assert args.port == 9000
        assert args.catalog_dir == Path("jazz")

    def test_unknown_transport(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--transport", "websocket"])


class TestListIntervals:
    """Tests for printing the catalog."""

    def test_lines(self, library_path: Path, temp_dir: Path) -> None:
        (temp_dir / "mine.yaml").write_text(
            "intervals:\n  - name: wolf fifth\n    notation: d6\n    aliases: [wolf]\n"
        )
        catalog = IntervalCatalog(library_path=library_path, project_path=temp_dir)
        lines = list_intervals(catalog)

        assert len(lines) == len(catalog.list_intervals())
        wolf = next(line for line in lines if line.startswith("wolf fifth"))
        assert "d6" in wolf
        assert " 7" in wolf
        assert wolf.endswith("(wolf)")

    def test_main_lists_project_catalog(
        self,
        temp_dir: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.delenv(CATALOG_DIR_ENV, raising=False)
        (temp_dir / "mine.yaml").write_text(
            "intervals:\n  - name: wolf fifth\n    notation: d6\n"
        )

        main(["--list-intervals", "--catalog-dir", str(temp_dir)])

        output = capsys.readouterr().out
        assert "wolf fifth" in output
        assert "tritone" in output
