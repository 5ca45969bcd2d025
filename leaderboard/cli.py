from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from dotenv import load_dotenv

from .config import config_from_env
from .console import ColorPresenter, ConsoleSession, PlainPresenter, Presenter
from .heap import Orientation, PriorityHeap
from .models import Entry
from .render import render_leaderboard
from .report_pdf import build_pdf
from .seed import load_seed, seed_heap

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Player power leaderboard")
    parser.add_argument(
        "--min", action="store_true", help="Surface the lowest power first instead of the highest"
    )
    parser.add_argument(
        "--seed",
        default=None,
        help="Seed players from a JSON path or http(s) URL ('sample' for the bundled data)",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    parser.add_argument("--list", action="store_true", help="Print the leaderboard and exit")
    parser.add_argument("--export-pdf", default=None, help="Write the leaderboard to a PDF and exit")
    parser.add_argument("--debug", action="store_true", help="Print debug logs")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = _parse_args(argv)
    config = config_from_env()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    orientation = Orientation.MIN if args.min else config.orientation
    heap: PriorityHeap[Entry] = PriorityHeap(orientation)

    seed_source = args.seed or config.seed_source
    if seed_source:
        source = None if seed_source == "sample" else seed_source
        count = seed_heap(heap, load_seed(source, timeout_s=config.http_timeout_s))
        logger.info(f"Seeded {count} players into a {orientation.value}-heap")

    presenter: Presenter
    if args.no_color or not config.color:
        presenter = PlainPresenter()
    else:
        presenter = ColorPresenter()

    if args.export_pdf:
        build_pdf(heap.to_ordered_snapshot(), args.export_pdf, orientation=orientation)
        presenter.success(f"Wrote {args.export_pdf}")
        return 0

    if args.list:
        presenter.leaderboard(render_leaderboard(heap.to_ordered_snapshot()))
        return 0

    return ConsoleSession(heap, presenter, read_line=input).run()


if __name__ == "__main__":
    raise SystemExit(main())
