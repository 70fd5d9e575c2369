"""Shared CLI prompt utilities.

Common input prompts used across CLI flows.
"""

import getpass


def prompt_for_password(show_password: bool = False, prompt: str = "Enter the password you want to test: ") -> str:
    """Read a password, echoing it only when visibility is on.

    Args:
        show_password: If True, read with input() so the text is visible
        prompt: Prompt text

    Returns:
        The entered password, surrounding newline removed
    """
    if show_password:
        return input(prompt)
    return getpass.getpass(prompt)


def confirm_action(prompt: str) -> bool:
    """Ask a yes/no question.

    Returns:
        True if the user answered 'y'
    """
    response = input(f"{prompt} (y/n): ").strip().lower()
    return response == 'y'
