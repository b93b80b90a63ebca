"""User accounts and the actions each kind of user may take on routes."""

from __future__ import annotations

from dataclasses import dataclass, field

from busbooking.routes import (
    BusRoute,
    DuplicateRouteError,
    NoSeatsError,
    RouteNotFoundError,
    find_route,
)


class CredentialStore:
    """Usernames and their passwords."""

    def __init__(self) -> None:
        self._credentials: dict[str, str] = {}

    def register(self, username: str, password: str) -> None:
        """Add a new account; raise ValueError if the username is taken."""
        if username in self._credentials:
            raise ValueError(f"Username {username!r} already exists")
        self._credentials[username] = password

    def check(self, username: str, password: str) -> bool:
        """Return True if the username exists and the password matches."""
        return self._credentials.get(username) == password

    def __contains__(self, username: object) -> bool:
        return username in self._credentials

    def __len__(self) -> int:
        return len(self._credentials)


_SHARED_STORE = CredentialStore()


def _shared_store() -> CredentialStore:
    return _SHARED_STORE


@dataclass
class User:
    """An account holder; all users share one credential store unless given another."""

    username: str
    password: str
    store: CredentialStore = field(default_factory=_shared_store, repr=False, compare=False)

    def login(self, username: str, password: str) -> bool:
        """Return True if the credentials are registered in the store."""
        return self.store.check(username, password)

    def register(self, username: str, password: str) -> None:
        """Register new credentials; raise ValueError if the username is taken."""
        self.store.register(username, password)


class Passenger(User):
    """A user who books seats."""

    def book(self, routes: list[BusRoute], route_id: int) -> BusRoute:
        """Take one seat on the route and return it."""
        route = find_route(routes, route_id)
        if route.available_seats <= 0:
            raise NoSeatsError(route_id)
        route.available_seats -= 1
        return route


class BusOperator(User):
    """A user who manages seat availability."""

    def update_seats(self, routes: list[BusRoute], route_id: int, seats: int) -> BusRoute:
        """Set the number of available seats on a route and return it."""
        route = find_route(routes, route_id)
        route.available_seats = seats
        return route


class Admin(User):
    """A user who maintains the list of routes."""

    def add_route(self, routes: list[BusRoute], route: BusRoute) -> None:
        """Append a route whose id is not already in use."""
        if any(existing.route_id == route.route_id for existing in routes):
            raise DuplicateRouteError(route.route_id)
        routes.append(route)

    def update_route(self, routes: list[BusRoute], route: BusRoute) -> None:
        """Replace the route that has the same id as ``route``."""
        for position, existing in enumerate(routes):
            if existing.route_id == route.route_id:
                routes[position] = route
                return
        raise RouteNotFoundError(route.route_id)

    def remove_route(self, routes: list[BusRoute], route_id: int) -> BusRoute:
        """Remove and return the first route with ``route_id``."""
        route = find_route(routes, route_id)
        routes.remove(route)
        return route