"""Password testing CLI flows.

Lets users type a password and see the feedback the input would show.
"""

from typing import Optional

from core.field import PasswordField

from cli.prompts import prompt_for_password, confirm_action


def render_feedback(field: PasswordField) -> list[str]:
    """Build the lines describing a field's current state.

    Args:
        field: Field to describe

    Returns:
        Lines to print, the headline message first
    """
    lines = [f"Password: {field.display_value}"]

    message = field.message
    if message:
        lines.append(message)
    else:
        lines.append("No strength rating (whitespace is not allowed in any character class).")

    if not field.valid:
        lines.append("Status: INVALID")

    return lines


def test_password_flow(field: Optional[PasswordField] = None) -> PasswordField:
    """Prompt for passwords and print feedback until the user stops.

    Args:
        field: Field to reuse, keeping its visibility setting

    Returns:
        The field holding the last entered password
    """
    field = field or PasswordField()
    print("\n--- Test a Password ---")

    while True:
        field.set_value(prompt_for_password(field.show_password))
        for line in render_feedback(field):
            print(line)

        if not confirm_action("\nTest another password?"):
            return field
