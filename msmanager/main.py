"""Entry point of the interactive states manager."""

from __future__ import annotations

import argparse
import os

from .data import StateRegistry, default_registry
from .helpers import Console, generate_report
from .ui import (
    Language,
    animate_loading,
    display_all,
    display_menu,
    print_welcome,
    prompt_delete,
    prompt_insert,
    prompt_search,
    prompt_sort,
)


def run(
    console: Console | None = None,
    registry: StateRegistry | None = None,
    report_dir: str | os.PathLike | None = None,
) -> None:
    """Run the menu loop until the user exits or input ends."""
    console = console if console is not None else Console()
    registry = registry if registry is not None else default_registry()
    try:
        animate_loading(console, "Loading data")
        console.write("1. English\n2. Bahasa Melayu\nSelect language: ")
        lang = Language(console.read_int_in_range(1, 2))
        print_welcome(console, lang)

        actions = {
            1: lambda: display_all(console, registry),
            2: lambda: prompt_sort(console, registry, lang),
            3: lambda: prompt_insert(console, registry, lang),
            4: lambda: prompt_delete(console, registry, lang),
            5: lambda: prompt_search(console, registry, lang),
            6: lambda: generate_report(registry, console, report_dir),
        }
        while True:
            display_menu(console, lang)
            choice = console.read_int_in_range(0, 6)
            if choice == 0:
                console.write("Exiting...\n" if lang == Language.ENGLISH else "Keluar...\n")
                return
            actions[choice]()
    except EOFError:
        console.write("\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="msmanager",
        description="Manage Malaysian states and federal territories.",
    )
    parser.parse_args(argv)
    run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())