"""Interactive menus for passengers, bus operators and administrators."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import TextIO

from busbooking.routes import (
    BusRoute,
    DuplicateRouteError,
    NoSeatsError,
    RouteNotFoundError,
)
from busbooking.users import Admin, BusOperator, Passenger


class Console:
    """Whitespace-separated token input with prompted output."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._tokens = self._token_stream()

    def _token_stream(self) -> Iterator[str]:
        for line in self._in:
            yield from line.split()

    def write(self, text: str) -> None:
        """Write text to the output as is."""
        self._out.write(text)

    def read_token(self, prompt: str) -> str:
        """Show the prompt and return the next token; raise EOFError when input ends."""
        self.write(prompt)
        self._out.flush()
        try:
            return next(self._tokens)
        except StopIteration:
            raise EOFError("end of input") from None

    def read_int(self, prompt: str) -> int:
        """Read a token as an integer; raise ValueError if it is not one."""
        token = self.read_token(prompt)
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def read_float(self, prompt: str) -> float:
        """Read a token as a number; raise ValueError if it is not one."""
        token = self.read_token(prompt)
        try:
            return float(token)
        except ValueError:
            raise ValueError(f"expected a number, got {token!r}") from None


def _read_choice(console: Console) -> int | None:
    try:
        return console.read_int("Enter your choice: ")
    except ValueError:
        return None


def show_routes(console: Console, routes: list[BusRoute]) -> None:
    """Print every route in the listing format."""
    console.write("\nAvailable Bus Routes:\n")
    for route in routes:
        console.write(route.describe() + "\n")


def _book(console: Console, passenger: Passenger, routes: list[BusRoute]) -> None:
    show_routes(console, routes)
    answer = console.read_token("Do you want to book a bus? (Y/N): ")
    if answer[0].upper() != "Y":
        return
    route_id = console.read_int("Enter Route ID to book: ")
    try:
        passenger.book(routes, route_id)
    except RouteNotFoundError:
        console.write("Invalid Route ID!\n")
    except NoSeatsError:
        console.write("No seats available for this route!\n")
    else:
        console.write("Booking successful!\n")


def passenger_menu(console: Console, passenger: Passenger, routes: list[BusRoute]) -> None:
    """Run the passenger menu until the passenger logs out."""
    while True:
        console.write(
            "\n=== Passenger Menu ===\n"
            "1. View Bus Routes\n"
            "2. Book a Bus\n"
            "3. Logout\n"
        )
        choice = _read_choice(console)
        try:
            if choice == 1:
                show_routes(console, routes)
            elif choice == 2:
                _book(console, passenger, routes)
            elif choice == 3:
                console.write("Logging out...\n")
                return
        except ValueError:
            console.write("Invalid input!\n")


def _update_seats(console: Console, operator: BusOperator, routes: list[BusRoute]) -> None:
    show_routes(console, routes)
    route_id = console.read_int("Enter Route ID to update: ")
    seats = console.read_int("Enter new number of available seats: ")
    try:
        operator.update_seats(routes, route_id, seats)
    except RouteNotFoundError:
        console.write("Invalid Route ID!\n")
    else:
        console.write("Seats updated successfully!\n")


def operator_menu(console: Console, operator: BusOperator, routes: list[BusRoute]) -> None:
    """Run the bus operator menu until the operator logs out."""
    while True:
        console.write(
            "\n=== Bus Operator Menu ===\n"
            "1. View Bus Routes\n"
            "2. Update Seat Availability\n"
            "3. Logout\n"
        )
        choice = _read_choice(console)
        try:
            if choice == 1:
                show_routes(console, routes)
            elif choice == 2:
                _update_seats(console, operator, routes)
            elif choice == 3:
                console.write("Logging out...\n")
                return
        except ValueError:
            console.write("Invalid input!\n")


def _read_route_details(console: Console, route_id: int, prefix: str) -> BusRoute:
    origin = console.read_token(f"Enter {prefix}From location: ")
    destination = console.read_token(f"Enter {prefix}To location: ")
    price = console.read_float(f"Enter {prefix}Price: ")
    time = console.read_token(f"Enter {prefix}Time: ")
    seats = console.read_int(f"Enter {prefix}number of seats: ")
    return BusRoute(route_id, origin, destination, price, time, seats)


def _add_route(console: Console, admin: Admin, routes: list[BusRoute]) -> None:
    route_id = console.read_int("Enter Route ID: ")
    if any(route.route_id == route_id for route in routes):
        console.write("Route ID already exists!\n")
        return
    route = _read_route_details(console, route_id, "")
    try:
        admin.add_route(routes, route)
    except DuplicateRouteError:
        console.write("Route ID already exists!\n")
    else:
        console.write("Bus route added successfully!\n")


def _update_route(console: Console, admin: Admin, routes: list[BusRoute]) -> None:
    route_id = console.read_int("Enter Route ID to update: ")
    if not any(route.route_id == route_id for route in routes):
        console.write("Route ID not found!\n")
        return
    route = _read_route_details(console, route_id, "new ")
    try:
        admin.update_route(routes, route)
    except RouteNotFoundError:
        console.write("Route ID not found!\n")
    else:
        console.write("Bus route updated successfully!\n")


def _remove_route(console: Console, admin: Admin, routes: list[BusRoute]) -> None:
    route_id = console.read_int("Enter Route ID to remove: ")
    try:
        admin.remove_route(routes, route_id)
    except RouteNotFoundError:
        console.write("Route ID not found!\n")
    else:
        console.write("Bus route removed successfully!\n")


def admin_menu(console: Console, admin: Admin, routes: list[BusRoute]) -> None:
    """Run the admin menu until the admin logs out."""
    actions = {2: _add_route, 3: _update_route, 4: _remove_route}
    while True:
        console.write(
            "\n=== Admin Menu ===\n"
            "1. View Bus Routes\n"
            "2. Add Bus Route\n"
            "3. Update Bus Route\n"
            "4. Remove Bus Route\n"
            "5. Logout\n"
        )
        choice = _read_choice(console)
        try:
            if choice == 1:
                show_routes(console, routes)
            elif choice in actions:
                actions[choice](console, admin, routes)
            elif choice == 5:
                console.write("Logging out...\n")
                return
        except ValueError:
            console.write("Invalid input!\n")