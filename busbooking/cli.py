"""The bus booking system's main menu: log in or register, then use a role menu."""

from __future__ import annotations

import argparse

from busbooking.menus import Console, admin_menu, operator_menu, passenger_menu
from busbooking.routes import BusRoute, default_routes
from busbooking.users import Admin, BusOperator, CredentialStore, Passenger

_ROLES = {
    1: (Passenger, passenger_menu),
    2: (BusOperator, operator_menu),
    3: (Admin, admin_menu),
}

_LOGIN_PROMPTS = ("Enter username: ", "Enter password: ")


def _read_optional_int(console: Console) -> int | None:
    try:
        return console.read_int("Enter your choice: ")
    except ValueError:
        return None


def _session(console: Console, routes: list[BusRoute], store: CredentialStore) -> None:
    while True:
        console.write(
            "\n=== Bus Booking System ===\n"
            "1. Passenger\n"
            "2. Bus Operator\n"
            "3. Admin\n"
            "4. Exit\n"
        )
        choice = _read_optional_int(console)
        if choice == 4:
            console.write("Thank you for using the Bus Booking System!\n")
            return

        console.write("\n1. Login\n2. Register\n")
        auth_choice = _read_optional_int(console)
        username, password = [console.read_token(prompt) for prompt in _LOGIN_PROMPTS]

        role = _ROLES.get(choice)
        if role is None:
            continue
        user_class, menu = role
        user = user_class(username, password, store)

        if auth_choice == 1:
            if user.login(username, password):
                menu(console, user, routes)
            else:
                console.write("Login failed!\n")
        elif auth_choice == 2:
            try:
                user.register(username, password)
            except ValueError:
                console.write("Registration failed!\n")
            else:
                console.write("Registration successful!\n")


def run(console: Console, routes: list[BusRoute], store: CredentialStore) -> None:
    """Run the main menu until the user exits or the input ends."""
    try:
        _session(console, routes, store)
    except EOFError:
        console.write("\n")


def main(argv: list[str] | None = None) -> int:
    """Start the interactive bus booking system."""
    parser = argparse.ArgumentParser(
        prog="busbooking", description="Interactive bus booking system."
    )
    parser.parse_args(argv)
    run(Console(), default_routes(), CredentialStore())
    return 0