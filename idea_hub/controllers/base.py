"""Submit protocol shared by every form controller.

A submission moves through ``SubmitState``:

    IDLE -> VALIDATING -> INVALID
                       -> SUBMITTING -> SUCCEEDED | SERVER_REJECTED | NETWORK_FAILED

``validate`` is a pure function of the raw posted values, so every rule set
can be tested without Flask or a backend.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Mapping, Optional

from ..http_client import ApiRejected, ApiResult, ApiSuccess, ApiTransportError
from ..members import MemberRow
from ..presentation import (
    FieldRegistry,
    FormView,
    ValidationError,
    clear_form_errors,
    ensure_error_box,
    render_errors,
    render_success,
)

logger = logging.getLogger(__name__)


class SubmitState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    INVALID = "invalid"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    SERVER_REJECTED = "server_rejected"
    NETWORK_FAILED = "network_failed"


@dataclass
class ValidationResult:
    errors: List[ValidationError] = field(default_factory=list)
    payload: Dict[str, str] = field(default_factory=dict)

    def add(self, message: str, field: Optional[str] = None, hint: Optional[str] = None) -> None:
        self.errors.append(ValidationError(message=message, field=field, hint=hint))

    @property
    def messages(self) -> List[str]:
        return [error.message for error in self.errors]

    def __bool__(self) -> bool:
        return not self.errors


@dataclass
class SubmitOutcome:
    state: SubmitState
    view: FormView
    values: Dict[str, str] = field(default_factory=dict)
    alert: str = ""
    members: List[MemberRow] = field(default_factory=list)


def clean(values: Mapping[str, str], name: str) -> str:
    return (values.get(name) or "").strip()


class FormController:
    form_id = ""
    box_id = ""
    error_heading = ""
    success_message = ""
    reset_on_success = True

    def __init__(self, client=None):
        self.client = client

    def build_registry(self, values: Mapping[str, str]) -> FieldRegistry:
        raise NotImplementedError

    def validate(self, values: Mapping[str, str]) -> ValidationResult:
        raise NotImplementedError

    def send(self, payload: Dict[str, str]) -> ApiResult:
        return ApiSuccess()

    def member_rows(self, values: Mapping[str, str]) -> List[MemberRow]:
        return []

    def success_text(self, result: ApiSuccess, payload: Dict[str, str]) -> str:
        return result.payload.get("msg") or self.success_message

    def on_rejected(self, outcome: SubmitOutcome, result: ApiRejected) -> None:
        raise NotImplementedError

    def on_transport_error(self, outcome: SubmitOutcome, result: ApiTransportError) -> None:
        raise NotImplementedError

    def new_view(self, values: Optional[Mapping[str, str]] = None) -> FormView:
        view = FormView(form_id=self.form_id, registry=self.build_registry(values or {}))
        ensure_error_box(view, self.box_id)
        return view

    def idle(self, values: Optional[Mapping[str, str]] = None) -> SubmitOutcome:
        values = dict(values or {})
        return SubmitOutcome(
            state=SubmitState.IDLE,
            view=self.new_view(values),
            values=values,
            members=self.member_rows(values),
        )

    def submit(self, values: Mapping[str, str]) -> SubmitOutcome:
        outcome = self.idle(values)
        view = outcome.view
        clear_form_errors(view, view.banner)

        outcome.state = SubmitState.VALIDATING
        result = self.validate(outcome.values)
        if not result:
            outcome.state = SubmitState.INVALID
            render_errors(view, result.errors, self.error_heading)
            logger.info("%s: %d validation error(s)", self.form_id, len(result.errors))
            return outcome

        outcome.state = SubmitState.SUBMITTING
        api_result = self.send(result.payload)

        if isinstance(api_result, ApiTransportError):
            outcome.state = SubmitState.NETWORK_FAILED
            logger.error("error submitting %s", self.form_id, exc_info=api_result.error)
            self.on_transport_error(outcome, api_result)
        elif isinstance(api_result, ApiRejected):
            outcome.state = SubmitState.SERVER_REJECTED
            logger.info("%s rejected by backend", self.form_id)
            self.on_rejected(outcome, api_result)
        else:
            outcome.state = SubmitState.SUCCEEDED
            render_success(view, self.success_text(api_result, result.payload))
            if self.reset_on_success:
                outcome.values = {}
                outcome.members = []
            logger.info("%s submitted", self.form_id)
        return outcome
