"""
Submission controller for the sign-up form.

The controller owns the form state of one widget instance and drives a
single sign-up attempt at a time through a small state machine:

    IDLE ──submit──▶ SUBMITTING ──Ok──▶ SUCCEEDED (terminal)
                        │   ▲
                      Err   │ submit
                        ▼   │
                       FAILED

Guards on ``submit``:
    - Ignored while SUBMITTING (at most one outstanding call)
    - Ignored once SUCCEEDED or after ``detach()``
    - Blocked without a network call when validation fails

It is independent of Textual so it can be unit tested without a rendering
environment; the sign-up screen subscribes through ``on_change``.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from enum import Enum

from signup_widget.api.client import TransportError
from signup_widget.api.types import Err, SignUpAPI
from signup_widget.config import DEFAULT_SUBMIT_TIMEOUT
from signup_widget.form import FieldStore
from signup_widget.validation import ValidationIssue, validate

logger = logging.getLogger(__name__)

TRANSPORT_ERROR_MESSAGE = "Unable to reach the server. Please try again."
TIMEOUT_ERROR_MESSAGE = "The server took too long to respond. Please try again."


class SubmissionState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class SubmissionController:
    """
    State machine for submitting the sign-up form.

    Attributes:
        store: Field values and visibility flags edited by the user.
        state: Current ``SubmissionState``.
        error_message: Message from the last failed attempt, if any.
        issues: Validation issues from the last blocked submit intent.

    Example:
        controller = SubmissionController(api, on_success=lambda: print("done"))
        controller.store.set_field("first_name", "Ada")
        ...
        await controller.submit()
    """

    def __init__(
        self,
        api: SignUpAPI,
        on_success: Callable[[], None],
        submit_timeout: float = DEFAULT_SUBMIT_TIMEOUT,
        on_change: Callable[[SubmissionController], None] | None = None,
    ) -> None:
        self.api = api
        self.store = FieldStore()
        self.state = SubmissionState.IDLE
        self.error_message: str | None = None
        self.issues: list[ValidationIssue] = []
        self._on_success = on_success
        self._on_change = on_change
        self._submit_timeout = submit_timeout
        self._detached = False

    @property
    def is_submitting(self) -> bool:
        return self.state is SubmissionState.SUBMITTING

    @property
    def detached(self) -> bool:
        return self._detached

    def detach(self) -> None:
        """
        Disconnect from the widget that owns this controller.

        Any response still in flight is discarded when it arrives; no state
        changes and no callbacks happen after this call.
        """
        self._detached = True
        self._on_change = None

    def revalidate(self) -> None:
        """
        Refresh issues reported by an earlier blocked submit intent.

        Only issues already on display are recomputed, so editing the form
        before the first submit never surfaces validation messages.
        """
        if not self.issues or self._detached:
            return
        self.issues = validate(self.store.fields)
        self._notify()

    async def submit(self) -> SubmissionState:
        """
        Handle one submit intent.

        Returns:
            The state after the intent has been handled. Intents that are
            ignored or blocked return the unchanged state.
        """
        if self._detached or self.state in (SubmissionState.SUBMITTING, SubmissionState.SUCCEEDED):
            logger.debug("Ignoring submit intent in state %s", self.state.value)
            return self.state

        form = self.store.fields
        self.issues = validate(form)
        if self.issues:
            self._notify()
            return self.state

        self._transition(SubmissionState.SUBMITTING)

        try:
            result = await asyncio.wait_for(
                self.api.sign_up(form.first_name, form.last_name, form.email, form.password),
                timeout=self._submit_timeout,
            )
        except asyncio.TimeoutError:
            logger.error("Sign-up timed out after %.1fs", self._submit_timeout)
            return self._fail(TIMEOUT_ERROR_MESSAGE)
        except TransportError:
            logger.exception("Sign-up request failed")
            return self._fail(TRANSPORT_ERROR_MESSAGE)
        except Exception:
            logger.exception("Unexpected error during sign-up")
            return self._fail(TRANSPORT_ERROR_MESSAGE)

        if self._detached:
            logger.debug("Discarding sign-up result for detached widget")
            return self.state

        if isinstance(result, Err):
            logger.error("Sign-up rejected: status=%s payload=%s", result.status, result.error)
            return self._fail(result.error.message)

        self.error_message = None
        self.store.reset()
        self._transition(SubmissionState.SUCCEEDED)
        self._on_success()
        return self.state

    def _fail(self, message: str) -> SubmissionState:
        if self._detached:
            return self.state
        self.error_message = message
        self._transition(SubmissionState.FAILED)
        return self.state

    def _transition(self, state: SubmissionState) -> None:
        logger.debug("Sign-up state %s -> %s", self.state.value, state.value)
        self.state = state
        self._notify()

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self)
