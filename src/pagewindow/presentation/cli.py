"""Command-line entry point: render a pager for the given counters.

Example::

    pagewindow --page 7 --total 240 --url /posts --param sort=new --renderer bootstrap
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Optional

from pagewindow.domain.exceptions import PaginationError
from pagewindow.infrastructure.container import PaginatorFactory
from pagewindow.infrastructure.observability.logging_config import (
    bind_paginator_context,
    get_logger,
    setup_logging,
)
from pagewindow.infrastructure.settings import get_settings


def _key_value(raw: str) -> tuple[str, str]:
    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected key=value, got {raw!r}")
    return key, value


def _positive_int(raw: str) -> int:
    value = int(raw)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {raw!r}")
    return value


def _non_negative_int(raw: str) -> int:
    value = int(raw)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {raw!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pagewindow",
        description="Render pagination links for a paged listing.",
    )
    parser.add_argument("--page", type=int, default=1, help="current page (1-based)")
    parser.add_argument("--per-page", type=_positive_int, default=None, help="records per page")
    parser.add_argument("--total", type=_non_negative_int, default=None, help="total record count; omit if unknown")
    parser.add_argument("--range", dest="page_range", type=_non_negative_int, default=None, help="pages shown on each side of the current one")
    parser.add_argument("--url", default=None, help="base URL, may contain {page}")
    parser.add_argument("--renderer", default=None, help="renderer name (render, bootstrap, bootstrap_simple, json)")
    parser.add_argument("--param", action="append", type=_key_value, default=[], metavar="KEY=VALUE", help="extra query parameter (repeatable)")
    parser.add_argument("--fragment", default=None, help="URL fragment appended to every link")
    parser.add_argument("--summary", action="store_true", help="print the JSON summary instead of markup")
    parser.add_argument("--log-level", default=None, help="override PAGINATION_LOG_LEVEL")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(args.log_level or settings.log_level)
    log = get_logger("pagewindow.cli")

    config: dict[str, object] = {"extra_params": dict(args.param), "fragment": args.fragment}
    if args.page_range is not None:
        config["range"] = args.page_range
    if args.url is not None:
        config["url_template"] = args.url
    if args.renderer is not None:
        config["renderer_name"] = args.renderer

    try:
        paginator = PaginatorFactory(settings).create(args.page, args.per_page, args.total, **config)
        bind_paginator_context(paginator)
        output = paginator.to_json({"indent": 2}) if args.summary else paginator.render()
    except PaginationError as exc:
        log.warning("Rendering failed", error=exc.title, detail=exc.detail)
        print(f"pagewindow: {exc.title}: {exc.detail}", file=sys.stderr)
        return 2

    log.debug("Rendered pager")
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
