"""Interactive logistics routing menu.

Reads a numeric choice per line and dispatches to the report service
until the user picks 0 (or input runs out). Input and output are
injected so the loop can be driven from tests.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from .domain.errors import InvalidMenuChoiceError
from .domain.models import MenuChoice, NodeId
from .services import NetworkReportService

logger = logging.getLogger(__name__)

MENU_TEXT = "\n".join(
    [
        "",
        "Logistics Routing Menu:",
        "[1] Display delivery network",
        "[2] Explore delivery coverage (BFS)",
        "[3] Trace delivery route (DFS)",
        "[4] Calculate shortest paths",
        "[5] Find Minimum Spanning Tree",
        "[0] Exit",
    ]
)
PROMPT = "Enter your choice: "
INVALID_CHOICE = "Invalid choice, try again"


def parse_choice(raw: str) -> MenuChoice:
    """Turn one line of user input into a menu command.

    Raises:
        InvalidMenuChoiceError: If the text is not one of the listed numbers.
    """
    text = raw.strip()
    try:
        return MenuChoice(int(text))
    except ValueError:
        raise InvalidMenuChoiceError(INVALID_CHOICE, raw_input=text) from None


def run_menu(
    service: NetworkReportService,
    start: NodeId = 0,
    read: Optional[Callable[[str], str]] = None,
    write: Callable[[str], None] = print,
) -> int:
    """Run the menu loop and return the process exit code."""
    read = read or input
    handlers: Dict[MenuChoice, Callable[[], str]] = {
        MenuChoice.DISPLAY: service.display_network,
        MenuChoice.BFS: lambda: service.explore_coverage(start),
        MenuChoice.DFS: lambda: service.trace_routes(start),
        MenuChoice.SHORTEST_PATHS: lambda: service.fastest_routes(start),
        MenuChoice.SPANNING_TREE: service.spanning_forest,
    }
    announced = {MenuChoice.BFS: "BFS", MenuChoice.DFS: "DFS"}

    while True:
        write(MENU_TEXT)
        try:
            raw = read(PROMPT)
        except EOFError:
            logger.debug("Input closed, leaving menu")
            break

        try:
            choice = parse_choice(raw)
        except InvalidMenuChoiceError as exc:
            logger.warning("Invalid menu choice", extra={"raw_input": exc.raw_input})
            write(exc.message)
            continue

        if choice is MenuChoice.EXIT:
            break

        write("")
        if choice in announced:
            intro = service.renderer.render_traversal_start(announced[choice], start)
            if intro:
                write(intro)
        write(handlers[choice]())

    write("Exiting...")
    return 0
