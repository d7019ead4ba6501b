from datetime import date
from typing import Mapping, Optional

from ..http_client import ApiRejected, ApiTransportError
from ..presentation import FieldLayout, FieldRegistry
from ..validators import (
    is_valid_email,
    is_valid_mobile,
    is_valid_name,
    parse_date_ymd,
)
from .base import FormController, SubmitOutcome, ValidationResult, clean

FALLBACK_DOB_MAX = "2025-11-03"

CONTACT_FIELDS = ("firstName", "lastName", "gender", "mobile", "dob", "email", "language", "message")


class ContactController(FormController):
    form_id = "contactForm"
    box_id = "contactErrors"
    error_heading = "there are some problems with your form:"
    success_message = "your form has been submitted successfully."

    def __init__(self, client=None, dob_max: Optional[str] = None, today: Optional[date] = None):
        super().__init__(client)
        self.dob_max = dob_max or FALLBACK_DOB_MAX
        self._dob_max_date = parse_date_ymd(self.dob_max)
        if self._dob_max_date is None:
            raise ValueError(f"Invalid maximum date of birth: {self.dob_max!r}")
        self._today = today

    def dob_limit(self) -> date:
        today = self._today or date.today()
        return min(today, self._dob_max_date)

    def build_registry(self, values: Mapping[str, str]) -> FieldRegistry:
        layouts = {name: FieldLayout(row=f"row-{name}") for name in CONTACT_FIELDS}
        # radio group reports into its fieldset
        layouts["gender"] = FieldLayout(field="genderFieldset")
        return FieldRegistry(layouts)

    def validate(self, values: Mapping[str, str]) -> ValidationResult:
        result = ValidationResult()

        first_name = clean(values, "firstName")
        if not is_valid_name(first_name):
            result.add("first name must be 2–30 letters (a–z) only.", "firstName",
                       "use letters only, 2–30 characters.")

        last_name = clean(values, "lastName")
        if not is_valid_name(last_name):
            result.add("last name must be 2–30 letters (a–z) only.", "lastName",
                       "use letters only, 2–30 characters.")

        gender = clean(values, "gender")
        if not gender:
            result.add("please select a gender option.", "gender", "please choose one option.")

        mobile = clean(values, "mobile")
        if not is_valid_mobile(mobile):
            result.add("mobile must be a valid saudi number (+9665xxxxxxxx or 05xxxxxxxx).", "mobile",
                       "use +9665xxxxxxxx or 05xxxxxxxx.")

        dob = clean(values, "dob")
        if not dob:
            result.add("date of birth is required.", "dob", "please enter your date of birth.")
        else:
            born = parse_date_ymd(dob)
            if born is None:
                result.add("date of birth must be a valid date in yyyy-mm-dd format.", "dob",
                           "use yyyy-mm-dd, e.g., 2003-05-17.")
            else:
                limit = self.dob_limit()
                if born > limit:
                    result.add("date of birth cannot be in the future.", "dob",
                               f"date cannot be after {limit.isoformat()}.")

        email = clean(values, "email")
        if not email:
            result.add("email is required.", "email", "please enter your email address.")
        elif not is_valid_email(email):
            result.add("email must be in a valid format (name@example.com).", "email",
                       "use a valid email like name@example.com.")

        language = clean(values, "language")
        if not language:
            result.add("please choose a preferred language.", "language", "please select a language.")

        message = clean(values, "message")
        if len(message) < 10 or len(message) > 1000:
            result.add("message must be between 10 and 1000 characters.", "message",
                       "write at least 10 characters.")

        result.payload = {
            "firstName": first_name,
            "lastName": last_name,
            "gender": gender,
            "mobile": mobile,
            "dob": dob,
            "email": email,
            "language": language,
            "message": message,
        }
        return result

    def send(self, payload):
        return self.client.post_contact(payload)

    def on_rejected(self, outcome: SubmitOutcome, result: ApiRejected) -> None:
        lines = "\n".join(f"- {msg}" for msg in result.errors)
        outcome.alert = "please fix the following errors:\n" + lines

    def on_transport_error(self, outcome: SubmitOutcome, result: ApiTransportError) -> None:
        outcome.alert = "there was a problem sending your message."
