import pytest

from busbooking.routes import (
    BusRoute,
    DuplicateRouteError,
    NoSeatsError,
    RouteNotFoundError,
    default_routes,
)
from busbooking.users import Admin, BusOperator, CredentialStore, Passenger, User

PASSWORD = "password"


@pytest.fixture
def store():
    return CredentialStore()


def test_store_register_then_check(store):
    store.register("alice", PASSWORD)
    assert store.check("alice", PASSWORD) is True
    assert "alice" in store
    assert len(store) == 1


def test_store_wrong_password_fails(store):
    store.register("alice", PASSWORD)
    assert store.check("alice", "secret") is False


def test_store_unknown_user_fails(store):
    assert store.check("nobody", PASSWORD) is False


def test_store_duplicate_registration_raises(store):
    store.register("alice", PASSWORD)
    with pytest.raises(ValueError):
        store.register("alice", "secret")
    assert store.check("alice", PASSWORD) is True


def test_user_login_after_register(store):
    user = User("bob", PASSWORD, store)
    assert user.login("bob", PASSWORD) is False
    user.register("bob", PASSWORD)
    assert user.login("bob", PASSWORD) is True


def test_accounts_shared_across_user_kinds(store):
    Passenger("carol", PASSWORD, store).register("carol", PASSWORD)
    assert Admin("carol", PASSWORD, store).login("carol", PASSWORD) is True
    with pytest.raises(ValueError):
        BusOperator("carol", PASSWORD, store).register("carol", PASSWORD)


def test_default_store_is_shared():
    Passenger("shared_store_user", PASSWORD).register("shared_store_user", PASSWORD)
    assert Admin("shared_store_user", PASSWORD).login("shared_store_user", PASSWORD) is True


def test_book_takes_one_seat(store):
    routes = default_routes()
    passenger = Passenger("p", PASSWORD, store)
    booked = passenger.book(routes, 1)
    assert booked is routes[0]
    assert routes[0].available_seats == 39
    assert routes[1].available_seats == 40


def test_book_full_route_raises(store):
    routes = [BusRoute(7, "A", "B", 5.0, "07:00", 1)]
    passenger = Passenger("p", PASSWORD, store)
    passenger.book(routes, 7)
    with pytest.raises(NoSeatsError):
        passenger.book(routes, 7)
    assert routes[0].available_seats == 0


def test_book_unknown_route_raises(store):
    with pytest.raises(RouteNotFoundError):
        Passenger("p", PASSWORD, store).book(default_routes(), 42)


def test_operator_updates_seats(store):
    routes = default_routes()
    route = BusOperator("op", PASSWORD, store).update_seats(routes, 3, 12)
    assert route is routes[2]
    assert routes[2].available_seats == 12


def test_operator_unknown_route_raises(store):
    routes = default_routes()
    with pytest.raises(RouteNotFoundError):
        BusOperator("op", PASSWORD, store).update_seats(routes, 8, 5)
    assert [r.available_seats for r in routes] == [40, 40, 40]


def test_admin_adds_route(store):
    routes = default_routes()
    new_route = BusRoute(4, "Klang", "Shah Alam", 9.0, "11:00", 30)
    Admin("admin", PASSWORD, store).add_route(routes, new_route)
    assert routes[-1] is new_route
    assert len(routes) == 4


def test_admin_add_duplicate_raises(store):
    routes = default_routes()
    with pytest.raises(DuplicateRouteError):
        Admin("admin", PASSWORD, store).add_route(routes, BusRoute(2, "X", "Y", 1.0, "00:00", 1))
    assert len(routes) == 3


def test_admin_updates_route_in_place(store):
    routes = default_routes()
    replacement = BusRoute(2, "Shah Alam", "Klang", 11.0, "13:00", 20)
    Admin("admin", PASSWORD, store).update_route(routes, replacement)
    assert routes[1] == replacement
    assert [r.route_id for r in routes] == [1, 2, 3]


def test_admin_update_missing_raises(store):
    with pytest.raises(RouteNotFoundError):
        Admin("admin", PASSWORD, store).update_route(
            default_routes(), BusRoute(10, "X", "Y", 1.0, "00:00", 1)
        )


def test_admin_removes_route(store):
    routes = default_routes()
    removed = Admin("admin", PASSWORD, store).remove_route(routes, 2)
    assert removed.route_id == 2
    assert [r.route_id for r in routes] == [1, 3]


def test_admin_remove_missing_raises(store):
    routes = default_routes()
    with pytest.raises(RouteNotFoundError):
        Admin("admin", PASSWORD, store).remove_route(routes, 5)
    assert len(routes) == 3