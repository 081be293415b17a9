"""
Console session tests: RentalService is driven through a scripted input
function and its stdout is checked with capsys.
"""

import pytest

from vehicle_rental import RentalService, RentalSystemFactory, main


def scripted(*answers):
    """Input function that replays answers, then behaves like a closed stdin.

    The prompt is echoed to stdout the way the builtin input() does.
    """
    remaining = list(answers)

    def _input(prompt):
        print(prompt, end="")
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return _input


@pytest.fixture
def system():
    return RentalSystemFactory.create_demo_system()


def run_session(system, *answers):
    service = RentalService(system, input_func=scripted(*answers))
    return service.show_menu()


def test_exit_option(system, capsys):
    assert run_session(system, "7") == 0
    assert "Goodbye" in capsys.readouterr().out


def test_end_of_input_exits_cleanly(system, capsys):
    assert run_session(system) == 0
    assert "Input closed" in capsys.readouterr().out


def test_invalid_option(system, capsys):
    run_session(system, "42", "7")
    assert "Invalid option. Please try again." in capsys.readouterr().out


def test_view_available(system, capsys):
    run_session(system, "1", "7")

    out = capsys.readouterr().out
    assert "Car Information:" in out
    assert "Bike Information:" in out
    assert "Toyota Camry" in out


def test_rent_reprompts_bad_date(system, capsys):
    run_session(system,
                "2", "Jane Roe", "L999", "C100", "2024/05/01", "2024-05-01", "3",
                "7")

    out = capsys.readouterr().out
    assert "Invalid date format" in out
    assert "Vehicle C100 rented successfully!" in out
    assert not system.is_available("C100")


@pytest.mark.parametrize("days", ["0", "-1", "three"])
def test_rent_with_bad_days_is_aborted(system, capsys, days):
    run_session(system, "2", "Jane", "L999", "C100", "2024-05-01", days, "7")

    out = capsys.readouterr().out
    assert "Error: Rental days must be a positive integer." in out
    assert system.is_available("C100")
    assert system.view_history() == []


def test_return_reports_cost(system, capsys):
    run_session(system,
                "2", "Jane", "L999", "C100", "2024-05-01", "3",
                "3", "C100", "5",
                "4",
                "7")

    out = capsys.readouterr().out
    assert "Total cost: $250.00" in out
    assert "Total Cost: $150.00" in out
    assert system.is_available("C100")


def test_return_unknown_vehicle(system, capsys):
    run_session(system, "3", "C300", "2", "7")
    assert "No rental record found for this vehicle." in capsys.readouterr().out


def test_filter_normalises_type_case(system, capsys):
    run_session(system, "5", "40", "70", "cAR", "7")

    out = capsys.readouterr().out
    assert "Toyota Camry" in out
    assert "Honda Accord" in out
    assert "Yamaha YZF" not in out


def test_filter_rejects_unknown_type(system, capsys):
    run_session(system, "5", "0", "100", "truck", "7")
    assert "Invalid vehicle type entered." in capsys.readouterr().out


def test_filter_with_bad_price(system, capsys):
    run_session(system, "5", "cheap", "7")
    assert "Error: Invalid price" in capsys.readouterr().out


def test_admin_login_failure(system, capsys):
    run_session(system, "6", "A123", "wrong", "7")
    assert "Admin login failed" in capsys.readouterr().out


def test_regular_user_cannot_open_admin_menu(system, capsys):
    run_session(system, "6", "L8901", "password123", "7")

    out = capsys.readouterr().out
    assert "Admin login failed" in out
    assert "Admin Menu" not in out


def test_admin_adds_and_removes_vehicles(system, capsys):
    run_session(system,
                "6", "A123", "admin123",
                "1", "B400", "Honda CBR", "Bike", "35",
                "1", "C100", "Duplicate", "Car", "10",
                "1", "T1", "Big Truck", "Truck", "90",
                "2", "C300",
                "3",
                "4",
                "7")

    out = capsys.readouterr().out
    assert "Admin login successful!" in out
    assert "Vehicle B400 added successfully." in out
    assert "Vehicle ID C100 already exists. Vehicle not added." in out
    assert "Invalid vehicle type. Vehicle not added." in out
    assert "Vehicle C300 removed successfully." in out
    assert "Name: John Doe, License ID: L8901, Role: user" in out
    assert "logging out" in out

    assert [v.get_id() for v in system.view_all_vehicles()] == ["C100", "B200", "B400"]
    assert system.get_vehicle("T1") is None


def test_blank_license_id_is_rejected(system, capsys):
    run_session(system, "2", "", "", "7")

    assert "Error: License ID cannot be empty." in capsys.readouterr().out
    assert len(system.view_all_users()) == 2
    assert system.view_history() == []


def test_blank_vehicle_id_on_rent_is_rejected(system, capsys):
    run_session(system, "2", "Jane", "L999", "   ", "7")

    assert "Error: Vehicle ID cannot be empty." in capsys.readouterr().out
    assert system.get_user("L999") is None


@pytest.mark.parametrize("answers, error", [
    (("", "Ghost", "Car", "10"), "Vehicle ID cannot be empty."),
    (("G1", "", "Car", "10"), "Vehicle model cannot be empty."),
    (("N1", "Ghost", "Car", "nan"), "Invalid price"),
    (("I1", "Ghost", "Car", "inf"), "Invalid price"),
])
def test_admin_add_rejects_bad_input(system, capsys, answers, error):
    run_session(system, "6", "A123", "admin123", "1", *answers, "4", "7")

    assert f"Error: {error}" in capsys.readouterr().out
    assert [v.get_id() for v in system.view_all_vehicles()] == ["C100", "B200", "C300"]


def test_filter_rejects_non_finite_price(system, capsys):
    run_session(system, "5", "0", "inf", "7")
    assert "Error: Invalid price" in capsys.readouterr().out


def test_unexpected_error_keeps_loop_running(system, capsys, monkeypatch):
    def boom():
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(system, "view_history", boom)
    run_session(system, "4", "7")

    out = capsys.readouterr().out
    assert "An unexpected error occurred: disk on fire" in out
    assert "Goodbye" in out


def test_main_runs_demo_system(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", scripted("1", "7"))

    assert main() == 0
    assert "Honda Accord" in capsys.readouterr().out
