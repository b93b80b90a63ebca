"""Bus routes, the errors raised when working with them, and the starting timetable."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

SEPARATOR = "------------------------"


class RouteError(Exception):
    """Base class for problems with bus routes."""


class RouteNotFoundError(RouteError, LookupError):
    """No route carries the requested id."""

    def __init__(self, route_id: int) -> None:
        super().__init__(f"Route ID {route_id} not found")
        self.route_id = route_id


class DuplicateRouteError(RouteError):
    """A route with the same id already exists."""

    def __init__(self, route_id: int) -> None:
        super().__init__(f"Route ID {route_id} already exists")
        self.route_id = route_id


class NoSeatsError(RouteError):
    """The route has no seats left to book."""

    def __init__(self, route_id: int) -> None:
        super().__init__(f"No seats available for route {route_id}")
        self.route_id = route_id


@dataclass
class BusRoute:
    """A scheduled bus journey between two places."""

    route_id: int
    origin: str
    destination: str
    price: float
    time: str
    available_seats: int

    def describe(self) -> str:
        """Return the multi-line listing shown to users for this route."""
        return "\n".join(
            (
                f"Route ID: {self.route_id}",
                f"From: {self.origin} To: {self.destination}",
                f"Price: RM{self.price:.2f}",
                f"Time: {self.time}",
                f"Available Seats: {self.available_seats}",
                SEPARATOR,
            )
        )


def find_route(routes: Iterable[BusRoute], route_id: int) -> BusRoute:
    """Return the first route with ``route_id``, or raise RouteNotFoundError."""
    for route in routes:
        if route.route_id == route_id:
            return route
    raise RouteNotFoundError(route_id)


def default_routes() -> list[BusRoute]:
    """Return the timetable the system starts with."""
    return [
        BusRoute(1, "Klang", "Kuala Lumpur", 15.00, "08:00", 40),
        BusRoute(2, "Kuala Lumpur", "Shah Alam", 12.00, "09:00", 40),
        BusRoute(3, "Shah Alam", "Klang", 10.00, "10:00", 40),
    ]