# Password Strength Checker
# Purpose: Try passwords against the strength rules used by the password input
# and see the same feedback the input shows (required, too short, easy/medium/strong).

from core import configure_logging, read_events, count_events_by_status
from core.field import PasswordField
from cli import test_password_flow


# print how often each strength label was recorded in the event log
def show_event_summary(limit=100):
    events = read_events(limit=limit)
    if not events:
        print("No strength events recorded. Set LOG_EVENTS=true to record them.")
        return {}

    counts = count_events_by_status(events)
    print(f"\n=== Last {len(events)} Strength Events ===")
    for status, count in sorted(counts.items()):
        print(f"{status}: {count}")
    return counts


# main app menu and selection options
def main_menu(field=None):
    field = field or PasswordField()
    while True:
        state = "visible" if field.show_password else "hidden"
        print("\n=== Password Strength Menu ===")
        print("1. Test a password")
        print(f"2. Toggle password visibility (currently {state})")
        print("3. Show strength event summary")
        print("4. Exit")

        choice = input("Choose an option (1-4): ").strip()
        if choice == '1':
            test_password_flow(field)  # type passwords and see feedback
        elif choice == '2':
            field.toggle_visibility()
            print("Password will be shown." if field.show_password else "Password will be hidden.")
        elif choice == '3':
            show_event_summary()
        elif choice == '4':
            print("Exiting the program. Goodbye.")
            break
        else:
            print("Invalid choice. Please enter a number from 1 to 4.")


if __name__ == "__main__":
    configure_logging()
    main_menu()
