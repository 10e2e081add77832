"""
Client-side validation for the sign-up form.

Every function here is pure: it inspects a ``FormFields`` snapshot and
returns a result without side effects or I/O. The same checks gate
submission in the controller and drive live feedback in the screen
(e.g. the red border on the repeat-password input).

Validation Order:
    1. Required fields, in form order
    2. E-mail syntax (only when an e-mail was entered)
    3. Password confirmation
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from signup_widget.form import FormFields

FIELD_LABELS: dict[str, str] = {
    "first_name": "First name",
    "last_name": "Last name",
    "email": "E-mail",
    "password": "Password",
    "repeat_password": "Repeat password",
}

PASSWORD_MISMATCH_MESSAGE = "Passwords do not match."
INVALID_EMAIL_MESSAGE = "E-mail is not a valid address."

# One "@", no whitespace, and a dot somewhere in the domain part.
EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")


@dataclass(frozen=True)
class ValidationIssue:
    """A single reason the form cannot be submitted yet."""

    field: str
    message: str


def missing_fields(form: FormFields) -> list[str]:
    """Names of empty fields, in declaration order."""
    return [name for name, value in form.as_dict().items() if value == ""]


def passwords_match(form: FormFields) -> bool:
    """
    Check the confirmation field against the password.

    Two empty fields count as matching. As soon as either field holds text
    the values are compared exactly, so typing only a password already
    flags the confirmation field.
    """
    return form.password == form.repeat_password


def email_is_valid(address: str) -> bool:
    """Loose ``local@domain.tld`` syntax check; deliverability is the backend's job."""
    return EMAIL_PATTERN.fullmatch(address) is not None


def validate(form: FormFields) -> list[ValidationIssue]:
    """
    Collect every issue blocking submission.

    Returns:
        Issues ordered as described in the module docstring. An empty list
        means the form is submittable.

    Examples:
        >>> validate(FormFields())[0]
        ValidationIssue(field='first_name', message='First name is required.')
    """
    missing = missing_fields(form)
    issues = [
        ValidationIssue(field=name, message=f"{FIELD_LABELS[name]} is required.")
        for name in missing
    ]
    if "email" not in missing and not email_is_valid(form.email):
        issues.append(ValidationIssue(field="email", message=INVALID_EMAIL_MESSAGE))
    if not passwords_match(form):
        issues.append(ValidationIssue(field="repeat_password", message=PASSWORD_MISMATCH_MESSAGE))
    return issues


def is_submittable(form: FormFields) -> bool:
    """True iff every field is filled in, the e-mail is well formed and the passwords match."""
    return not validate(form)
