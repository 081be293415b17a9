from enum import Enum
from typing import Callable, Dict, List, Optional, Union
from dataclasses import dataclass
import math
import sys


DEFAULT_PASSWORD = "defaultPassword"
MIN_YEAR = 1900
MAX_YEAR = 2100


# ==================== Enums ====================

class VehicleKind(Enum):
    """Variant tag of a vehicle"""
    CAR = "Car"
    BIKE = "Bike"

    @classmethod
    def from_label(cls, label: str) -> Optional["VehicleKind"]:
        """Exact, case-sensitive lookup by label"""
        for kind in cls:
            if kind.value == label:
                return kind
        return None


class UserRole(Enum):
    """Role of a registered user"""
    ADMIN = "admin"
    USER = "user"


class RecordStatus(Enum):
    """Status of a rental record"""
    ACTIVE = "ACTIVE"
    RETURNED = "RETURNED"


class ResultStatus(Enum):
    """Outcome of a rental system operation"""
    SUCCESS = "SUCCESS"
    DUPLICATE_ID = "DUPLICATE_ID"
    DUPLICATE_USER = "DUPLICATE_USER"
    NOT_FOUND = "NOT_FOUND"
    UNAVAILABLE = "UNAVAILABLE"
    NO_RENTAL_RECORD = "NO_RENTAL_RECORD"
    VEHICLE_IN_USE = "VEHICLE_IN_USE"


# ==================== Core Models ====================

class Vehicle:
    """Represents a rentable car or bike"""

    def __init__(self, vehicle_id: str, model: str, price_per_day: float,
                 kind: VehicleKind):
        if not math.isfinite(price_per_day):
            raise ValueError(f"Price per day must be a finite number: {price_per_day!r}")
        if price_per_day < 0:
            raise ValueError("Price per day cannot be negative")
        self._vehicle_id = vehicle_id
        self._model = model
        self._price_per_day = price_per_day
        self._kind = kind
        self._rented = False

    def get_id(self) -> str:
        return self._vehicle_id

    def get_model(self) -> str:
        return self._model

    def get_price_per_day(self) -> float:
        return self._price_per_day

    def get_kind(self) -> VehicleKind:
        return self._kind

    def is_available(self) -> bool:
        return not self._rented

    def rent(self) -> None:
        self._rented = True

    def release(self) -> None:
        self._rented = False

    def describe(self) -> str:
        """Multi-line display text for the console"""
        status = "Available" if self.is_available() else "Rented"
        return (f"{self._kind.value} Information:\n"
                f"Vehicle ID: {self._vehicle_id}\n"
                f"Model: {self._model}\n"
                f"Price per day: ${self._price_per_day:.2f}\n"
                f"Status: {status}")

    def __repr__(self) -> str:
        return f"{self._kind.value}({self._vehicle_id}, {self._model})"


@dataclass(frozen=True)
class User:
    """Represents a registered user"""
    name: str
    license_id: str
    password: str
    role: UserRole = UserRole.USER

    def authenticate(self, password: str) -> bool:
        return self.password == password

    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def __repr__(self) -> str:
        return f"User({self.license_id}, {self.name}, {self.role.value})"


class RentalRecord:
    """Log entry for one rental.

    The record keeps the vehicle id together with the model and daily price
    seen at rental time, so history stays readable after the vehicle is
    removed from the catalog.
    """

    def __init__(self, user: User, vehicle: Vehicle, rental_date: str,
                 rental_days: int):
        self._user = user
        self._vehicle_id = vehicle.get_id()
        self._vehicle_model = vehicle.get_model()
        self._price_at_rental = vehicle.get_price_per_day()
        self._rental_date = rental_date
        self._rental_days = rental_days
        self._status = RecordStatus.ACTIVE
        self._actual_days: Optional[int] = None
        self._charged_cost: Optional[float] = None

    def get_user(self) -> User:
        return self._user

    def get_vehicle_id(self) -> str:
        return self._vehicle_id

    def get_vehicle_model(self) -> str:
        return self._vehicle_model

    def get_price_at_rental(self) -> float:
        return self._price_at_rental

    def get_rental_date(self) -> str:
        return self._rental_date

    def get_rental_days(self) -> int:
        return self._rental_days

    def get_status(self) -> RecordStatus:
        return self._status

    def is_active(self) -> bool:
        return self._status == RecordStatus.ACTIVE

    def get_actual_days(self) -> Optional[int]:
        return self._actual_days

    def get_charged_cost(self) -> Optional[float]:
        return self._charged_cost

    def get_original_cost(self) -> float:
        """Cost of the days requested at rental time"""
        return self._rental_days * self._price_at_rental

    def close(self, actual_days: int, cost: float) -> None:
        """Mark the rental as returned"""
        self._status = RecordStatus.RETURNED
        self._actual_days = actual_days
        self._charged_cost = cost

    def describe(self) -> str:
        lines = [
            "--- Rental Record ---",
            f"User: {self._user.name} (License ID: {self._user.license_id})",
            f"Vehicle ID: {self._vehicle_id} (Model: {self._vehicle_model})",
            f"Rental Date: {self._rental_date}",
            f"Duration: {self._rental_days} days",
            f"Total Cost: ${self.get_original_cost():.2f}",
        ]
        if not self.is_active():
            lines.append(f"Returned after {self._actual_days} days, "
                         f"charged ${self._charged_cost:.2f}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (f"RentalRecord({self._vehicle_id}, {self._user.license_id}, "
                f"{self._rental_date}, {self._status.value})")


@dataclass
class OperationResult:
    """Outcome of a mutating operation"""
    status: ResultStatus
    message: str
    cost: Optional[float] = None

    @property
    def success(self) -> bool:
        return self.status == ResultStatus.SUCCESS

    def __bool__(self) -> bool:
        return self.success


# ==================== Factory Pattern: Vehicles ====================

class VehicleFactory:
    """Creates vehicles from a type label"""

    @staticmethod
    def create_vehicle(kind_label: str, vehicle_id: str, model: str,
                       price_per_day: float) -> Optional[Vehicle]:
        """Return a vehicle, or None when the label is not Car or Bike"""
        kind = VehicleKind.from_label(kind_label)
        if kind is None:
            return None
        return Vehicle(vehicle_id, model, price_per_day, kind)


# ==================== Validation Helpers ====================

def parse_date_parts(date: str) -> tuple:
    """Split a YYYY-MM-DD string into integers.

    Raises ValueError when the layout is wrong or a part is not numeric.
    """
    if len(date) != 10 or date[4] != "-" or date[7] != "-":
        raise ValueError(f"Date must be in YYYY-MM-DD format: {date!r}")

    parts = (date[0:4], date[5:7], date[8:10])
    for part in parts:
        if not (part.isascii() and part.isdigit()):
            raise ValueError(f"Non-numeric date component: {part!r}")

    return tuple(int(part) for part in parts)


def is_valid_date(date: str) -> bool:
    """Structural YYYY-MM-DD check; no month length or leap year rules"""
    try:
        year, month, day = parse_date_parts(date)
    except ValueError:
        return False

    if year < MIN_YEAR or year > MAX_YEAR:
        return False
    if month < 1 or month > 12:
        return False
    if day < 1 or day > 31:
        return False
    return True


def validate_days(days: int) -> int:
    if isinstance(days, bool) or not isinstance(days, int) or days <= 0:
        raise ValueError("Rental days must be a positive integer.")
    return days


# ==================== Rental System ====================

class RentalSystem:
    """Owns the catalog, the user roster and the rental records"""

    def __init__(self, default_password: str = DEFAULT_PASSWORD):
        self._vehicles: List[Vehicle] = []
        self._vehicle_index: Dict[str, Vehicle] = {}
        self._users: Dict[str, User] = {}  # license_id -> User
        self._records: List[RentalRecord] = []
        self._default_password = default_password

    # ---------- Users ----------

    def add_user(self, user: User) -> OperationResult:
        """Register a user, keyed by license ID"""
        if user.license_id in self._users:
            message = f"User with license ID {user.license_id} already exists."
            print(f"[System] {message}")
            return OperationResult(ResultStatus.DUPLICATE_USER, message)

        self._users[user.license_id] = user
        print(f"[System] Registered user: {user}")
        return OperationResult(ResultStatus.SUCCESS,
                               f"User {user.license_id} registered.")

    def get_user(self, license_id: str) -> Optional[User]:
        return self._users.get(license_id)

    def authenticate_user(self, license_id: str, password: str) -> Optional[User]:
        """Return the matching user, or None on unknown ID or wrong password"""
        user = self._users.get(license_id)
        if user is None or not user.authenticate(password):
            return None
        return user

    def view_all_users(self) -> List[User]:
        return list(self._users.values())

    # ---------- Catalog ----------

    def add_vehicle(self, vehicle: Vehicle) -> OperationResult:
        """Add a vehicle unless its ID is already in the catalog"""
        vehicle_id = vehicle.get_id()
        if vehicle_id in self._vehicle_index:
            message = f"Vehicle ID {vehicle_id} already exists. Vehicle not added."
            print(f"[System] {message}")
            return OperationResult(ResultStatus.DUPLICATE_ID, message)

        self._vehicles.append(vehicle)
        self._vehicle_index[vehicle_id] = vehicle
        message = f"Vehicle {vehicle_id} added successfully."
        print(f"[System] {message}")
        return OperationResult(ResultStatus.SUCCESS, message)

    def remove_vehicle(self, vehicle_id: str) -> OperationResult:
        """Permanently delete a vehicle that is not currently rented"""
        vehicle = self._vehicle_index.get(vehicle_id)
        if vehicle is None:
            print("[System] Vehicle ID not found.")
            return OperationResult(ResultStatus.NOT_FOUND, "Vehicle ID not found.")

        if self._find_active_record(vehicle_id) is not None:
            message = f"Vehicle {vehicle_id} is currently rented and cannot be removed."
            print(f"[System] {message}")
            return OperationResult(ResultStatus.VEHICLE_IN_USE, message)

        self._vehicles.remove(vehicle)
        del self._vehicle_index[vehicle_id]
        message = f"Vehicle {vehicle_id} removed successfully."
        print(f"[System] {message}")
        return OperationResult(ResultStatus.SUCCESS, message)

    def get_vehicle(self, vehicle_id: str) -> Optional[Vehicle]:
        return self._vehicle_index.get(vehicle_id)

    def is_available(self, vehicle_id: str) -> bool:
        vehicle = self._vehicle_index.get(vehicle_id)
        return vehicle is not None and vehicle.is_available()

    @staticmethod
    def is_valid_date(date: str) -> bool:
        return is_valid_date(date)

    # ---------- Rentals ----------

    def rent_vehicle(self, name: str, license_id: str, vehicle_id: str,
                     rental_date: str, days: int) -> OperationResult:
        """Rent the first available vehicle with the given ID"""
        validate_days(days)

        user = self._users.get(license_id)
        if user is None:
            user = User(name, license_id, self._default_password, UserRole.USER)
            self.add_user(user)

        for vehicle in self._vehicles:
            if vehicle.get_id() == vehicle_id and vehicle.is_available():
                vehicle.rent()
                self._records.append(RentalRecord(user, vehicle, rental_date, days))
                message = f"Vehicle {vehicle_id} rented successfully!"
                print(f"[System] {message}")
                return OperationResult(ResultStatus.SUCCESS, message)

        message = "Vehicle not available or does not exist."
        print(f"[System] {message}")
        return OperationResult(ResultStatus.UNAVAILABLE, message)

    def return_vehicle(self, vehicle_id: str, actual_days: int) -> OperationResult:
        """Close the active rental of a vehicle and report the cost"""
        validate_days(actual_days)

        record = self._find_active_record(vehicle_id)
        if record is None:
            message = "No rental record found for this vehicle."
            print(f"[System] {message}")
            return OperationResult(ResultStatus.NO_RENTAL_RECORD, message)

        # Vehicles with an active record cannot be removed
        vehicle = self._vehicle_index[vehicle_id]
        total_cost = actual_days * vehicle.get_price_per_day()
        vehicle.release()
        record.close(actual_days, total_cost)

        print("[System] Vehicle returned successfully!")
        print(f"[System] Total cost: ${total_cost:.2f}")
        return OperationResult(ResultStatus.SUCCESS,
                               "Vehicle returned successfully!", total_cost)

    def _find_active_record(self, vehicle_id: str) -> Optional[RentalRecord]:
        for record in self._records:
            if record.get_vehicle_id() == vehicle_id and record.is_active():
                return record
        return None

    # ---------- Queries ----------

    def view_available(self) -> List[Vehicle]:
        return [v for v in self._vehicles if v.is_available()]

    def view_history(self) -> List[RentalRecord]:
        return list(self._records)

    def view_all_vehicles(self) -> List[Vehicle]:
        return list(self._vehicles)

    def filter_vehicles(self, min_price: float, max_price: float,
                        kind: Union[VehicleKind, str]) -> List[Vehicle]:
        """Vehicles priced within [min_price, max_price] of exactly this kind"""
        if not isinstance(kind, VehicleKind):
            kind = VehicleKind.from_label(kind)
            if kind is None:
                return []

        return [
            v for v in self._vehicles
            if min_price <= v.get_price_per_day() <= max_price
            and v.get_kind() == kind
        ]


# ==================== Factory Pattern: Systems ====================

class RentalSystemFactory:
    """Factory for creating rental system configurations"""

    @staticmethod
    def create_empty_system() -> RentalSystem:
        return RentalSystem()

    @staticmethod
    def create_demo_system() -> RentalSystem:
        """System seeded with two users and three vehicles"""
        system = RentalSystem()

        system.add_user(User("Admin", "A123", "admin123", UserRole.ADMIN))
        system.add_user(User("John Doe", "L8901", "password123", UserRole.USER))

        seed = [
            ("Car", "C100", "Toyota Camry", 50.0),
            ("Bike", "B200", "Yamaha YZF", 30.0),
            ("Car", "C300", "Honda Accord", 60.0),
        ]
        for kind_label, vehicle_id, model, price in seed:
            system.add_vehicle(
                VehicleFactory.create_vehicle(kind_label, vehicle_id, model, price)
            )

        return system


# ==================== Console Service ====================

class MenuExit(Exception):
    """Raised when input runs out or the user interrupts a prompt"""


class RentalService:
    """Interactive console front end over a RentalSystem"""

    MAIN_MENU = [
        "View Available Vehicles",
        "Rent a Vehicle",
        "Return a Vehicle",
        "View Rental History",
        "Filter Vehicles",
        "Admin Login",
        "Exit",
    ]

    ADMIN_MENU = [
        "Add Vehicle",
        "Remove Vehicle",
        "View All Users",
        "Logout",
    ]

    def __init__(self, system: Optional[RentalSystem] = None,
                 input_func: Optional[Callable[[str], str]] = None):
        if system is None:
            system = RentalSystemFactory.create_demo_system()
        self._system = system
        self._input = input_func if input_func is not None else input

    def get_system(self) -> RentalSystem:
        return self._system

    # ---------- Prompt helpers ----------

    def _prompt(self, message: str) -> str:
        try:
            return self._input(message).strip()
        except (EOFError, KeyboardInterrupt):
            raise MenuExit()

    def _prompt_positive_days(self, message: str) -> int:
        raw = self._prompt(message)
        try:
            days = int(raw)
        except ValueError:
            raise ValueError("Rental days must be a positive integer.")
        return validate_days(days)

    def _prompt_price(self, message: str) -> float:
        raw = self._prompt(message)
        try:
            price = float(raw)
        except ValueError:
            raise ValueError(f"Invalid price: {raw!r}")
        if not math.isfinite(price):
            raise ValueError(f"Invalid price: {raw!r}")
        return price

    def _prompt_required(self, message: str, field: str) -> str:
        value = self._prompt(message)
        if not value:
            raise ValueError(f"{field} cannot be empty.")
        return value

    @staticmethod
    def _print_menu(title: str, options: List[str]) -> None:
        print(f"\n--- {title} ---")
        for number, option in enumerate(options, start=1):
            print(f"{number}. {option}")

    @staticmethod
    def _run_action(action: Callable[[], None]) -> None:
        """Run one menu action; errors are reported, never fatal"""
        try:
            action()
        except MenuExit:
            raise
        except ValueError as e:
            print(f"Error: {e}")
        except Exception as e:
            print(f"An unexpected error occurred: {e}")

    # ---------- Main menu ----------

    def show_menu(self) -> int:
        """Drive the main menu until Exit or end of input"""
        actions = {
            "1": self.view_available_vehicles,
            "2": self.rent_vehicle,
            "3": self.return_vehicle,
            "4": self.view_rental_history,
            "5": self.filter_vehicles,
            "6": self.admin_login,
        }

        try:
            while True:
                self._print_menu("Car Rental System", self.MAIN_MENU)
                choice = self._prompt("Select an option: ")

                if choice == "7":
                    print("Exiting the system. Goodbye!")
                    return 0

                action = actions.get(choice)
                if action is None:
                    print("Invalid option. Please try again.")
                    continue
                self._run_action(action)
        except MenuExit:
            print("\nInput closed. Exiting the system.")
            return 0

    def view_available_vehicles(self) -> None:
        print("\n--- Available Vehicles ---")
        vehicles = self._system.view_available()
        if not vehicles:
            print("No vehicles available.")
        for vehicle in vehicles:
            print(f"\n{vehicle.describe()}")

    def rent_vehicle(self) -> None:
        name = self._prompt("Enter your name: ")
        license_id = self._prompt_required("Enter your license ID: ", "License ID")
        vehicle_id = self._prompt_required("Enter vehicle ID to rent: ", "Vehicle ID")

        rental_date = self._prompt("Enter rental date (YYYY-MM-DD): ")
        while not self._system.is_valid_date(rental_date):
            rental_date = self._prompt(
                "Invalid date format. Please enter in YYYY-MM-DD format: ")

        days = self._prompt_positive_days("Enter number of rental days: ")
        self._system.rent_vehicle(name, license_id, vehicle_id, rental_date, days)

    def return_vehicle(self) -> None:
        vehicle_id = self._prompt_required("Enter vehicle ID to return: ", "Vehicle ID")
        days = self._prompt_positive_days("Enter actual number of rental days: ")
        self._system.return_vehicle(vehicle_id, days)

    def view_rental_history(self) -> None:
        print("\n--- Rental History ---")
        records = self._system.view_history()
        if not records:
            print("No rentals yet.")
        for record in records:
            print(f"\n{record.describe()}")

    def filter_vehicles(self) -> None:
        min_price = self._prompt_price("Enter minimum price: ")
        max_price = self._prompt_price("Enter maximum price: ")
        raw_type = self._prompt("Enter vehicle type (Car/Bike): ")

        # Core matching is exact; normalise "car", "CAR" etc. here
        kind = VehicleKind.from_label(raw_type.lower().capitalize())
        if kind is None:
            print("Invalid vehicle type entered.")
            return

        print("\n--- Filtered Vehicles ---")
        for vehicle in self._system.filter_vehicles(min_price, max_price, kind):
            print(f"\n{vehicle.describe()}")

    def admin_login(self) -> None:
        license_id = self._prompt("Enter Admin License ID: ")
        password = self._prompt("Enter Admin Password: ")

        user = self._system.authenticate_user(license_id, password)
        if user is None or not user.is_admin():
            print("Error: Invalid credentials. Admin login failed.")
            return

        print("Admin login successful!")
        self.admin_menu(user)

    # ---------- Admin menu ----------

    def admin_menu(self, admin: User) -> None:
        actions = {
            "1": self.add_vehicle,
            "2": self.remove_vehicle,
            "3": self.view_all_users,
        }

        while True:
            self._print_menu("Admin Menu", self.ADMIN_MENU)
            choice = self._prompt("Select an option: ")

            if choice == "4":
                print(f"[Admin] {admin.name} logging out...")
                return

            action = actions.get(choice)
            if action is None:
                print("Invalid option. Please try again.")
                continue
            self._run_action(action)

    def add_vehicle(self) -> None:
        vehicle_id = self._prompt_required("Enter vehicle ID: ", "Vehicle ID")
        model = self._prompt_required("Enter vehicle model: ", "Vehicle model")
        kind_label = self._prompt("Enter vehicle type (Car/Bike): ")
        price = self._prompt_price("Enter rental price per day: ")

        vehicle = VehicleFactory.create_vehicle(kind_label, vehicle_id, model, price)
        if vehicle is None:
            print("Invalid vehicle type. Vehicle not added.")
            return

        self._system.add_vehicle(vehicle)

    def remove_vehicle(self) -> None:
        vehicle_id = self._prompt_required("Enter vehicle ID to remove: ", "Vehicle ID")
        self._system.remove_vehicle(vehicle_id)

    def view_all_users(self) -> None:
        print("\n--- All Registered Users ---")
        for user in self._system.view_all_users():
            print(f"Name: {user.name}, License ID: {user.license_id}, "
                  f"Role: {user.role.value}")


# ==================== Main Entry Point ====================

def main() -> int:
    service = RentalService()
    return service.show_menu()


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\n⚠️  Interrupted by user")


# Key Design Decisions
#
# Single Vehicle type with a VehicleKind tag; Car and Bike differ only in
# their display label.
#
# Factory Pattern:
# VehicleFactory builds vehicles from the "Car"/"Bike" label typed at the
# console. RentalSystemFactory builds empty or demo-seeded systems.
#
# Rental records:
# Keep the vehicle id plus a model/price snapshot, so removing a vehicle
# never breaks history. A vehicle with an active rental cannot be removed.
# Returning closes the record; a second return finds no active rental.
#
# Results:
# Domain failures come back as OperationResult values with a ResultStatus.
# Bad arguments (non-positive day counts, negative prices) raise ValueError,
# which the console reports and moves on.
