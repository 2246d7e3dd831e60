"""Console entry point: ``python -m delivery_network`` or ``delivery-network``."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .config import configure_logging, get_config
from .menu import run_menu
from .pipeline import build_service, run_demo


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="delivery-network",
        description="Explore the package delivery network from the console.",
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Print every report once instead of showing the menu",
    )
    args = parser.parse_args(argv)

    config = get_config()
    configure_logging(config.observability)

    if args.demo:
        run_demo(config)
        return 0

    service = build_service(config)
    return run_menu(service, start=config.network.start_node)


if __name__ == "__main__":
    sys.exit(main())
