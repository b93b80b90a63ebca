"""The OBus welcome menu."""

from __future__ import annotations

import argparse

from busbooking.menus import Console

_SECTIONS = {
    1: "\n------ Passenger Menu ------\n",
    2: "\n------ Admin Menu ------\n",
    3: "\n------ Bus Operator Menu ------\n",
}


def _loop(console: Console) -> None:
    while True:
        console.write(
            "\n====== Welcome to OBus! ======\n"
            "1. Passenger\n"
            "2. Admin\n"
            "3. Bus Operator\n"
            "4. Exit\n"
        )
        try:
            choice = console.read_int("Enter your choice: ")
        except ValueError:
            choice = None
        if choice == 4:
            console.write("Thanks for using our system. Goodbye!\n")
            return
        console.write(_SECTIONS.get(choice, "Invalid choice! Please try again.\n"))


def run(console: Console) -> None:
    """Run the welcome menu until the user exits or the input ends."""
    try:
        _loop(console)
    except EOFError:
        console.write("\n")


def main(argv: list[str] | None = None) -> int:
    """Start the OBus welcome menu."""
    parser = argparse.ArgumentParser(prog="obus", description="OBus welcome menu.")
    parser.parse_args(argv)
    run(Console())
    return 0