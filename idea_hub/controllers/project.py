from typing import List, Mapping

from ..http_client import ApiRejected, ApiTransportError
from ..members import (
    MAX_TEAM_SIZE,
    MIN_TEAM_SIZE,
    MemberRow,
    build_member_rows,
    collect_member_rows,
    rows_from_values,
    serialize_members,
)
from ..presentation import FieldLayout, FieldRegistry, render_failure
from ..validators import is_valid_course_code, is_valid_email, is_valid_student_id, parse_int
from .base import FormController, SubmitOutcome, SubmitState, ValidationResult, clean

PROJECT_FIELDS = (
    "teamName",
    "teamSize",
    "repName",
    "repId",
    "repEmail",
    "courseCode",
    "category",
    "projectType",
    "projectName",
    "projectDesc",
    "tools",
)


class ProjectController(FormController):
    form_id = "projectForm"
    box_id = "projectErrors"
    error_heading = "please review the highlighted fields:"
    success_message = "team project idea has been saved successfully."

    def build_registry(self, values: Mapping[str, str]) -> FieldRegistry:
        registry = FieldRegistry({name: FieldLayout(row=f"row-{name}") for name in PROJECT_FIELDS})
        for row in rows_from_values(values):
            registry.register(row.name_field, row=row.container)
            registry.register(row.id_field, row=row.container)
        return registry

    def member_rows(self, values: Mapping[str, str]) -> List[MemberRow]:
        return rows_from_values(values)

    def regenerate(self, values: Mapping[str, str]) -> SubmitOutcome:
        """Replace the member rows to match the current team size, without validating."""
        values = {k: v for k, v in values.items() if not k.startswith(("memberName", "memberId"))}
        rows = build_member_rows(values.get("teamSize"))
        if not rows:
            values["otherMembers"] = ""
        view = self.new_view(values)
        for row in rows:
            view.registry.register(row.name_field, row=row.container)
            view.registry.register(row.id_field, row=row.container)
        return SubmitOutcome(state=SubmitState.IDLE, view=view, values=values, members=rows)

    def validate(self, values: Mapping[str, str]) -> ValidationResult:
        result = ValidationResult()

        team_name = clean(values, "teamName")
        if len(team_name) < 3:
            result.add("team name must be at least 3 characters.", "teamName", "enter a valid team name.")

        team_size = parse_int(values.get("teamSize"))
        if team_size is None or team_size < MIN_TEAM_SIZE or team_size > MAX_TEAM_SIZE:
            result.add("team size must be between 1 and 5.", "teamSize",
                       "choose a team size between 1 and 5 members.")

        other_members = ""
        if team_size is not None and team_size > 1:
            submitted = collect_member_rows(values)
            expected = team_size - 1
            if len(submitted.names) != expected or len(submitted.ids) != expected:
                result.add("please reselect the team size so member fields are generated correctly.")
            else:
                rows = []
                for position, ((name_field, name), (id_field, student_id)) in enumerate(
                        zip(submitted.names, submitted.ids), start=1):
                    name, student_id = name.strip(), student_id.strip()
                    if not name:
                        result.add(f"member {position} name is required.", name_field,
                                   "please enter this member name.")
                    if not student_id:
                        result.add(f"member {position} id is required.", id_field,
                                   "please enter this member id.")
                    rows.append(MemberRow(index=position, name=name, student_id=student_id))
                other_members = serialize_members(rows)

        rep_name = clean(values, "repName")
        if len(rep_name) < 3:
            result.add("representative name must be at least 3 characters.", "repName", "enter a valid name.")

        rep_id = clean(values, "repId")
        if not is_valid_student_id(rep_id):
            result.add("representative id must be exactly 7 digits.", "repId", "use exactly 7 digits.")

        rep_email = clean(values, "repEmail")
        if not is_valid_email(rep_email):
            result.add("representative email must be valid.", "repEmail", "use a valid email like name@uj.edu.sa.")

        course_code = clean(values, "courseCode")
        if not is_valid_course_code(course_code):
            result.add("course code must follow a pattern like ccsw321.", "courseCode",
                       "example: ccsw321 (letters + digits).")

        project_name = clean(values, "projectName")
        if len(project_name) < 3:
            result.add("project title must be at least 3 characters.", "projectName", "enter a longer title.")

        category = clean(values, "category")
        if not category:
            result.add("please select a major / track.", "category", "select a major.")

        project_type = clean(values, "projectType")
        if not project_type:
            result.add("please select a project type.", "projectType", "select group or solo.")

        project_desc = clean(values, "projectDesc")
        if len(project_desc) < 10:
            result.add("project description must be at least 10 characters.", "projectDesc",
                       "write a longer description.")

        result.payload = {
            "teamName": team_name,
            "teamSize": clean(values, "teamSize"),
            "repName": rep_name,
            "repId": rep_id,
            "repEmail": rep_email,
            "otherMembers": other_members,
            "courseCode": course_code,
            "category": category,
            "projectType": project_type,
            "projectName": project_name,
            "projectDesc": project_desc,
            "tools": clean(values, "tools"),
        }
        return result

    def send(self, payload):
        return self.client.post_project(payload)

    def on_rejected(self, outcome: SubmitOutcome, result: ApiRejected) -> None:
        render_failure(outcome.view, result.message or "there was a problem saving your project.")

    def on_transport_error(self, outcome: SubmitOutcome, result: ApiTransportError) -> None:
        render_failure(outcome.view, "server error while saving your project.")
