"""
Screen components for the sign-up widget.

Available Screens:
    SignUpScreen: Account-creation form driven by SubmissionController.
"""

from signup_widget.screens.sign_up import SignUpScreen

__all__ = [
    "SignUpScreen",
]
