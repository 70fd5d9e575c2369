"""CLI package for the password strength checker.

Provides interactive terminal flows around the password field.
"""

from cli.tester import render_feedback, test_password_flow
from cli.prompts import prompt_for_password, confirm_action

__all__ = [
    "render_feedback",
    "test_password_flow",
    "prompt_for_password",
    "confirm_action",
]
