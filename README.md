# busbooking

A small interactive bus booking system for the terminal. It has three roles:

- **Passenger**: view routes and book a seat on a route.
- **Bus operator**: view routes and set the number of available seats on a route.
- **Admin**: view, add, update and remove routes.

Three routes are loaded when the system starts (`busbooking.routes.default_routes()`):

| ID | From         | To           | Price    | Time  | Seats |
|----|--------------|--------------|----------|-------|-------|
| 1  | Klang        | Kuala Lumpur | RM15.00  | 08:00 | 40    |
| 2  | Kuala Lumpur | Shah Alam    | RM12.00  | 09:00 | 40    |
| 3  | Shah Alam    | Klang        | RM10.00  | 10:00 | 40    |

## Installation

```
pip install .
```

## Usage

Start the booking system:

```
busbooking
```

Pick a role (`1` Passenger, `2` Bus Operator, `3` Admin), then choose `1` to log in or `2` to register, and enter a username and a password. All roles share one set of accounts. Once you are logged in, the menu for your role opens; choose its logout entry to go back to the main menu. Choose `4` in the main menu, or end the input, to quit.

Input is read as whitespace-separated words, so locations and times cannot contain spaces.

A simpler welcome menu is also installed:

```
obus
```

It shows the Passenger, Admin and Bus Operator entries, prints the heading for the one you pick, and quits when you choose `4`. Any other choice prints "Invalid choice! Please try again."

## Using it from Python

```python
from busbooking.routes import BusRoute, default_routes, find_route
from busbooking.users import Admin, CredentialStore, Passenger

routes = default_routes()
store = CredentialStore()

password = "password"
passenger = Passenger("alice", password, store)
passenger.register("alice", password)
assert passenger.login("alice", password)

passenger.book(routes, 1)
print(find_route(routes, 1).describe())

admin = Admin("root", password, store)
admin.add_route(routes, BusRoute(4, "Klang", "Putrajaya", 20.0, "11:00", 30))
admin.remove_route(routes, 2)
```

`BusOperator.update_seats(routes, route_id, seats)` sets a route's seat count, and `Admin.update_route(routes, route)` replaces the route with the same ID.

Registering a username that is already taken raises `ValueError`. Failed route operations raise an error from `busbooking.routes`:

- `RouteNotFoundError` when a route ID does not exist.
- `DuplicateRouteError` when you add a route whose ID is already taken.
- `NoSeatsError` when you book a route that has no seats left.

All three are subclasses of `RouteError`.

The menus can be driven from any text streams through `busbooking.menus.Console(stdin, stdout)`, for example with `busbooking.cli.run(console, routes, store)`.

## What it does not do

- Nothing is saved: accounts, routes and bookings exist only while the program runs.
- Passwords are kept as plain text in memory.
- Bookings are not recorded per passenger; booking only lowers a route's seat count.
- The `obus` menu only prints a heading for each role; it offers no further actions.

## Running the tests

```
pip install .[test]
pytest
```