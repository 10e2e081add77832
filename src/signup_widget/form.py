"""
Field state for the sign-up form.

The store holds the current value of every form field plus the per-field
password visibility flags. It never validates or rejects input; that is the
job of :mod:`signup_widget.validation`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace

# Names of the password fields that can be unmasked.
MASKABLE_FIELDS: tuple[str, ...] = ("password", "repeat_password")


@dataclass(frozen=True)
class FormFields:
    """
    Snapshot of the values typed into the form.

    Values are never None; untouched fields hold an empty string. Field
    order follows the declaration order below.
    """

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    password: str = ""
    repeat_password: str = ""

    @classmethod
    def names(cls) -> tuple[str, ...]:
        """Field names in declaration order."""
        return tuple(item.name for item in fields(cls))

    def as_dict(self) -> dict[str, str]:
        return {name: getattr(self, name) for name in self.names()}


@dataclass(frozen=True)
class VisibilityFlags:
    """Whether each password field is currently shown in clear text."""

    password: bool = False
    repeat_password: bool = False


@dataclass
class FieldStore:
    """
    Mutable holder for the form state owned by a single widget instance.

    Every mutation swaps in a new frozen snapshot, so a ``FormFields``
    handed out earlier (e.g. to an in-flight submission) is never aliased.

    Example:
        store = FieldStore()
        store.set_field("email", "ada@example.com")
        store.toggle_visibility("password")
        store.fields.email        # "ada@example.com"
        store.visibility.password # True
    """

    fields: FormFields = field(default_factory=FormFields)
    visibility: VisibilityFlags = field(default_factory=VisibilityFlags)

    def set_field(self, name: str, value: str) -> None:
        """
        Overwrite exactly one field.

        Raises:
            KeyError: If ``name`` is not a form field.
        """
        if name not in FormFields.names():
            raise KeyError(name)
        self.fields = replace(self.fields, **{name: value})

    def toggle_visibility(self, name: str) -> bool:
        """
        Flip the visibility flag of one password field.

        Returns:
            The new visibility of that field.

        Raises:
            KeyError: If ``name`` is not a maskable field.
        """
        if name not in MASKABLE_FIELDS:
            raise KeyError(name)
        shown = not getattr(self.visibility, name)
        self.visibility = replace(self.visibility, **{name: shown})
        return shown

    def reset(self) -> None:
        """Restore empty values and masked passwords."""
        self.fields = FormFields()
        self.visibility = VisibilityFlags()
