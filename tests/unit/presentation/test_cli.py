"""Tests for the pagewindow command-line entry point."""

from __future__ import annotations

import json

import pytest

from pagewindow.presentation.cli import build_parser, main


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("PER_PAGE", "RANGE", "RENDERER", "PAGE_PARAM_NAME", "LOG_LEVEL"):
        monkeypatch.delenv(f"PAGINATION_{name}", raising=False)


class TestParser:
    def test_param_pairs(self) -> None:
        args = build_parser().parse_args(["--param", "q=a", "--param", "sort=new"])
        assert args.param == [("q", "a"), ("sort", "new")]

    def test_bad_param_exits(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--param", "novalue"])


class TestMain:
    def test_renders_default_markup(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--page", "2", "--total", "100", "--url", "/x"]) == 0
        out = capsys.readouterr().out
        assert out.startswith('<div class="pagination">')
        assert '<a href="/x?page=1" class="btn-prev">' in out

    def test_renderer_and_params(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["--page", "3", "--total", "90", "--per-page", "10", "--renderer", "bootstrap", "--param", "q=a", "--fragment", "top"])
        assert code == 0
        out = capsys.readouterr().out
        assert '<a class="page-link" href="?q=a&amp;page=9#top">9</a>' in out

    def test_summary(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--page", "2", "--total", "100", "--summary"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["current_page"] == 2
        assert data["total_pages"] == 7
        assert data["to_record"] == 30

    def test_unknown_renderer(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--renderer", "fancy"]) == 2
        assert "Renderer Not Found" in capsys.readouterr().err

    def test_invalid_page(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--page", "0"]) == 2
        assert "Invalid Current Page" in capsys.readouterr().err

    @pytest.mark.parametrize(
        "argv",
        [
            ["--page", "1", "--per-page", "0", "--total", "10"],
            ["--per-page", "-5", "--total", "10"],
            ["--total", "-1"],
            ["--range", "-2"],
            ["--per-page", "ten"],
        ],
    )
    def test_invalid_counters_are_usage_errors(self, argv: list[str], capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(argv)
        assert exc_info.value.code == 2
        assert "error: argument --" in capsys.readouterr().err

    def test_zero_total_and_range_are_accepted(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--total", "0", "--range", "0", "--summary"]) == 0
        assert json.loads(capsys.readouterr().out)["total_pages"] == 0

    def test_debug_log_carries_paginator_context(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--page", "3", "--total", "90", "--per-page", "10", "--log-level", "DEBUG"]) == 0
        lines = [json.loads(line) for line in capsys.readouterr().err.splitlines()]
        rendered = next(line for line in lines if line["event"] == "Rendered pager")
        assert rendered["current_page"] == 3
        assert rendered["total_records"] == 90
        assert rendered["renderer"] == "render"
