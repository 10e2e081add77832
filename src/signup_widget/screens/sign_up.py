"""
Sign-up screen for the account-creation widget.

This screen is the presentation adapter for :class:`SubmissionController`.
It renders one input per form field, two independent show/hide toggles for
the password fields, a submit button and a single error slot. User events
are routed into the controller; the controller reports back through its
``on_change`` hook and the screen re-renders from the controller's state.

Submission runs in a Textual worker so the screen keeps processing events
while the request is in flight; the controller itself ignores extra submit
intents until the first one resolves.
"""

from __future__ import annotations

from collections.abc import Callable

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Center, Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Button, Input, Label, Static

from signup_widget.api.types import SignUpAPI
from signup_widget.config import DEFAULT_SUBMIT_TIMEOUT
from signup_widget.controller import SubmissionController
from signup_widget.form import MASKABLE_FIELDS
from signup_widget.theme import Theme
from signup_widget.validation import passwords_match

# (field name, label, placeholder) in form order.
FIELD_SPECS: tuple[tuple[str, str, str], ...] = (
    ("first_name", "First name", "Type your First Name"),
    ("last_name", "Last name", "Type your Last name"),
    ("email", "E-mail", "Type your email here"),
    ("password", "Password", "Type your new password here"),
    ("repeat_password", "Repeat New password", "Type your new password here"),
)

SHOW_LABEL = "Show"
HIDE_LABEL = "Hide"


class SignUpScreen(Screen):
    """
    Account-creation form.

    Args:
        api: Anything implementing ``SignUpAPI``.
        on_success: Called once, with no arguments, after the account is created.
        theme: Color tokens applied to the form.
        submit_timeout: Seconds before an unanswered submission is reported as failed.

    CSS Classes:
        .form-box: The container for the form.
        .form-title: The heading.
        .form-label: Labels above each input.
        .password-row: Input plus its visibility toggle.
        .visibility-toggle: Show/hide buttons.
        .mismatch: Added to the repeat-password input while passwords differ.
    """

    BINDINGS = [
        Binding("ctrl+s", "submit", "Create Account", priority=True),
    ]

    CSS = """
    SignUpScreen {
        align: center middle;
    }

    .form-box {
        width: 70;
        height: auto;
        padding: 1 2;
    }

    .form-title {
        text-align: center;
        text-style: bold;
        padding-bottom: 1;
    }

    .form-label {
        padding-top: 1;
        padding-left: 1;
    }

    .password-row {
        height: auto;
    }

    .password-row Input {
        width: 1fr;
    }

    .visibility-toggle {
        min-width: 8;
        margin-left: 1;
    }

    #error {
        margin-top: 1;
        padding: 0 1;
        text-align: center;
        width: 100%;
    }

    #btn-submit {
        width: 100%;
        margin-top: 1;
    }
    """

    def __init__(
        self,
        api: SignUpAPI,
        on_success: Callable[[], None],
        theme: Theme | None = None,
        submit_timeout: float = DEFAULT_SUBMIT_TIMEOUT,
    ) -> None:
        super().__init__()
        self.form_theme = theme or Theme()
        self.controller = SubmissionController(
            api,
            on_success=on_success,
            submit_timeout=submit_timeout,
            on_change=self._render_state,
        )

    def compose(self) -> ComposeResult:
        with Center():
            with Vertical(classes="form-box"):
                yield Static("Create new account", classes="form-title")

                for name, label, placeholder in FIELD_SPECS:
                    yield Label(label, classes="form-label")
                    if name in MASKABLE_FIELDS:
                        with Horizontal(classes="password-row"):
                            yield Input(placeholder=placeholder, password=True, id=name)
                            yield Button(
                                SHOW_LABEL,
                                id=f"toggle-{name}",
                                classes="visibility-toggle",
                            )
                    else:
                        yield Input(
                            placeholder=placeholder,
                            type="text",
                            id=name,
                        )

                yield Static("", id="error")
                yield Button("Create Account", variant="primary", id="btn-submit")

    def on_mount(self) -> None:
        self._apply_theme()
        self._render_state(self.controller)
        self.query_one("#first_name", Input).focus()

    def on_unmount(self) -> None:
        # Late responses must not touch a screen that no longer exists.
        self.controller.detach()

    # -------------------------------------------------------------------------
    # Event routing
    # -------------------------------------------------------------------------

    @on(Input.Changed)
    def handle_input_changed(self, event: Input.Changed) -> None:
        if event.input.id is None:
            return
        self.controller.store.set_field(event.input.id, event.value)
        self.controller.revalidate()
        self._render_mismatch()

    @on(Input.Submitted)
    def handle_input_submitted(self) -> None:
        self.action_submit()

    @on(Button.Pressed, ".visibility-toggle")
    def handle_toggle(self, event: Button.Pressed) -> None:
        field_name = (event.button.id or "").removeprefix("toggle-")
        shown = self.controller.store.toggle_visibility(field_name)
        self.query_one(f"#{field_name}", Input).password = not shown
        event.button.label = HIDE_LABEL if shown else SHOW_LABEL

    @on(Button.Pressed, "#btn-submit")
    def handle_submit(self) -> None:
        self.action_submit()

    def action_submit(self) -> None:
        """Dispatch a submit intent without blocking the event loop."""
        self.run_worker(self.controller.submit(), group="submit")

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def _render_state(self, controller: SubmissionController) -> None:
        error = self.query_one("#error", Static)
        message = controller.issues[0].message if controller.issues else controller.error_message
        if message:
            error.update(message)
            error.display = True
        else:
            error.update("")
            error.display = False

        self.query_one("#btn-submit", Button).disabled = controller.is_submitting
        self._render_mismatch()

    def _render_mismatch(self) -> None:
        repeat = self.query_one("#repeat_password", Input)
        match = passwords_match(self.controller.store.fields)
        repeat.set_class(not match, "mismatch")
        repeat.styles.border = ("tall", self.form_theme.repeat_password_border(match))

    def _apply_theme(self) -> None:
        theme = self.form_theme
        self.query_one(".form-title", Static).styles.color = theme.text_color
        for label in self.query(".form-label"):
            label.styles.color = theme.input_label_color
        for field_input in self.query(Input):
            field_input.styles.color = theme.input_text_color
            field_input.styles.background = theme.input_background
            field_input.styles.border = ("tall", theme.input_border_color)
        for toggle in self.query(".visibility-toggle"):
            toggle.styles.color = theme.input_text_color

        submit = self.query_one("#btn-submit", Button)
        submit.styles.color = theme.button_text_color
        submit.styles.background = theme.button_background

        error = self.query_one("#error", Static)
        error.styles.color = theme.error_color
        error.styles.background = theme.error_background
        error.styles.border = ("round", theme.error_color)
