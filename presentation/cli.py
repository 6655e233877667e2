# Command-line interface

from logic.finance import FinanceApp
from logic.grading import run_grading
from logic.healthcare import HealthcareApp
from logic.inventory_records import run_inventory_records
from logic.warehouse import WarehouseManager
from utils.config import GRADING_INPUT_FILE, GRADING_REPORT_FILE, INVENTORY_DATA_FILE

COMMANDS = ["finance", "healthcare", "inventory", "grading", "warehouse"]


def run_finance():
    print("Welcome to the Finance Management System!")
    FinanceApp().run()


def run_healthcare(patient_id=None):
    """
    Lists the patients, then the prescriptions of ``patient_id``. When no id is
    given the user is asked for one.
    """
    print("Welcome to the Healthcare System!")
    app = HealthcareApp()
    app.seed_data()
    app.build_prescription_map()
    app.print_all_patients()

    if patient_id is None:
        try:
            patient_id = input("Enter Patient ID to view prescriptions: ")
        except EOFError:
            # no console to read from
            patient_id = ""
    try:
        patient_id = int(str(patient_id).strip())
    except ValueError:
        print("Invalid Patient ID.")
        return
    app.print_prescriptions_for_patient(patient_id)


def run_inventory(file_path=INVENTORY_DATA_FILE):
    print("Welcome to the Inventory Records System!")
    run_inventory_records(file_path)


def run_school_grading(input_path=GRADING_INPUT_FILE, output_path=GRADING_REPORT_FILE):
    print("Welcome to the School Grading System!")
    return run_grading(input_path, output_path)


def run_warehouse():
    print("Welcome to the Warehouse Inventory Management System!")
    WarehouseManager().run()


def run_all(patient_id=None):
    for number, command in enumerate(COMMANDS, start=1):
        print(f"Question {number}")
        if command == "healthcare":
            run_healthcare(patient_id)
        else:
            handle_command(command)


def handle_command(command):
    """
    Handles user commands.
    """
    parts = command.split()
    if not parts:
        print("Unknown command.")
        return
    action = parts[0]

    if action == "finance":
        run_finance()
    elif action == "healthcare":
        run_healthcare(parts[1] if len(parts) > 1 else None)
    elif action == "inventory":
        run_inventory(*parts[1:2])
    elif action == "grading":
        if len(parts) > 3:
            print("Usage: grading [input_file] [output_file]")
        else:
            run_school_grading(*parts[1:3])
    elif action == "warehouse":
        run_warehouse()
    elif action == "all":
        run_all(parts[1] if len(parts) > 1 else None)
    else:
        print("Unknown command.")


if __name__ == "__main__":
    # Example usage
    while True:
        try:
            user_input = input(f"Enter command ({', '.join(COMMANDS)}, 'all', 'exit'): ")
        except EOFError:
            break
        if user_input.lower() == "exit":
            break
        handle_command(user_input)
