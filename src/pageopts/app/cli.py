from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from pageopts.app.container import build_container
from pageopts.domain.errors import PageOptsError
from pageopts.domain.schema import LAYER_ORDER
from pageopts.merge import merge_layers
from pageopts.utils.mappings import assign_path, thaw_options
from pageopts.utils.parsing import decode_value


def _parse_option(text: str) -> tuple[tuple[str, ...], Any]:
    """
    KEY=VALUE -> (path, decoded value). Dotted keys nest: viewport.width=300.
    """
    key, sep, value = text.partition("=")
    path = tuple(p for p in key.strip().split(".") if p)
    if not sep or not path:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {text!r}")
    return path, decode_value(value).unwrap()


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="pageopts",
        description="Show the render options resolved for a document (defaults < call-site < meta tags).",
    )
    ap.add_argument("source", help="HTML file, inline HTML, or URL (URLs are not fetched)")
    ap.add_argument("--settings", default=None, help="Settings file (.toml/.yaml); defaults to $PAGEOPTS_SETTINGS")
    ap.add_argument("--prefix", default=None, help="Meta tag name prefix (default: grover-)")
    ap.add_argument(
        "-o", "--option",
        action="append",
        default=[],
        type=_parse_option,
        metavar="KEY=VALUE",
        help="Call-site option; repeatable",
    )
    ap.add_argument("--layers", action="store_true", help="Print each option layer before the result")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap


def _read_source(source: str, text_loader) -> str:
    path = Path(source).expanduser()
    try:
        is_file = path.is_file()
    except OSError:
        # Inline HTML can be too long to be a valid path
        is_file = False
    if not is_file:
        return source

    text = text_loader.load(path)
    if text is None:
        raise PageOptsError(f"Could not read {path}")
    return text


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_argparser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )

    console = Console()
    err_console = Console(stderr=True)

    try:
        c = build_container(args.settings, meta_prefix=args.prefix)
        url_or_html = _read_source(args.source, c.text_loader)
    except (PageOptsError, FileNotFoundError) as e:
        err_console.print(f"[bold red]error:[/] {escape(str(e))}", soft_wrap=True, highlight=False)
        return 2

    call_site: dict[str, Any] = {}
    for path, value in args.option:
        assign_path(call_site, path, value)

    layers = c.builder.layers(url_or_html, call_site)
    if args.layers:
        for name, layer in zip(LAYER_ORDER, layers.as_tuple()):
            console.rule(name)
            console.print_json(json.dumps(thaw_options(layer)))
        console.rule("resolved")

    resolved = merge_layers(*layers.as_tuple())
    console.print_json(json.dumps(resolved))
    return 0


if __name__ == "__main__":
    sys.exit(main())
