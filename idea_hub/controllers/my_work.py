from typing import Mapping

from ..presentation import FieldLayout, FieldRegistry
from ..validators import is_digits
from .base import FormController, ValidationResult, clean

STUDENT_ID_LENGTH = 7


class MyWorkController(FormController):
    """Student id lookup demo. Validates locally and never calls the backend."""

    form_id = "myWorkForm"
    box_id = "myWorkErrors"
    reset_on_success = False

    def build_registry(self, values: Mapping[str, str]) -> FieldRegistry:
        return FieldRegistry({"sid": FieldLayout(row="row-sid")})

    def validate(self, values: Mapping[str, str]) -> ValidationResult:
        result = ValidationResult()
        sid = clean(values, "sid")

        if not sid:
            result.add("student id is required.", "sid", "please enter your student id.")
        elif not is_digits(sid):
            result.add("student id must contain digits only (0–9).", "sid", "use numbers only (0–9).")
        elif len(sid) != STUDENT_ID_LENGTH:
            result.add("student id must be exactly 7 digits.", "sid", "enter exactly 7 digits.")

        result.payload = {"sid": sid}
        return result

    def success_text(self, result, payload) -> str:
        return f"tasks loaded successfully for id: {payload['sid']}."
