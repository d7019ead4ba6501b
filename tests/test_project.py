import pytest

from idea_hub.controllers import ProjectController, SubmitState
from idea_hub.http_client import ApiRejected, ApiSuccess, ApiTransportError


@pytest.fixture
def controller(backend):
    return ProjectController(backend)


def test_valid_project_serializes_members(controller, project_values):
    result = controller.validate(project_values)
    assert result
    assert result.payload["otherMembers"] == "member 1: Sara — 2310123\nmember 2: Omar — 2310456"
    assert result.payload["teamSize"] == "3"
    assert result.payload["tools"] == "flask"


def test_partially_filled_members(controller, project_values):
    project_values.update({
        "teamSize": "4",
        "memberName1": "Sara", "memberId1": "2310123",
        "memberName2": "", "memberId2": "2310456",
        "memberName3": "Omar", "memberId3": "",
    })
    result = controller.validate(project_values)

    assert result.messages == ["member 2 name is required.", "member 3 id is required."]
    assert [e.field for e in result.errors] == ["memberName2", "memberId3"]
    assert result.payload["otherMembers"] == "member 1: Sara — 2310123"


def test_member_count_mismatch_is_one_error(controller, project_values):
    project_values["teamSize"] = "4"
    result = controller.validate(project_values)
    assert result.messages == ["please reselect the team size so member fields are generated correctly."]
    assert result.errors[0].field is None
    assert result.payload["otherMembers"] == ""


def test_solo_team_ignores_member_fields(controller, project_values):
    project_values["teamSize"] = "1"
    result = controller.validate(project_values)
    assert result
    assert result.payload["otherMembers"] == ""


@pytest.mark.parametrize("team_size", ["0", "6", "", "abc"])
def test_team_size_range(controller, project_values, team_size):
    project_values["teamSize"] = team_size
    assert "team size must be between 1 and 5." in controller.validate(project_values).messages


def test_empty_form_reports_every_rule(controller):
    result = controller.validate({})
    assert result.messages == [
        "team name must be at least 3 characters.",
        "team size must be between 1 and 5.",
        "representative name must be at least 3 characters.",
        "representative id must be exactly 7 digits.",
        "representative email must be valid.",
        "course code must follow a pattern like ccsw321.",
        "project title must be at least 3 characters.",
        "please select a major / track.",
        "please select a project type.",
        "project description must be at least 10 characters.",
    ]


def test_invalid_submit_marks_member_rows(controller, backend, project_values):
    project_values["memberName2"] = "  "
    outcome = controller.submit(project_values)

    assert outcome.state is SubmitState.INVALID
    assert backend.calls == []
    assert outcome.view.banner.heading == "please review the highlighted fields:"
    assert outcome.view.message_for("memberRow2") == "please enter this member name."
    assert [row.index for row in outcome.members] == [1, 2]


def test_success_clears_fields_and_member_rows(controller, backend, project_values):
    outcome = controller.submit(project_values)

    assert outcome.state is SubmitState.SUCCEEDED
    assert backend.calls[0][0] == "project"
    assert backend.calls[0][1]["otherMembers"].count("\n") == 1
    assert outcome.values == {}
    assert outcome.members == []
    assert outcome.view.banner.text == "team project idea has been saved successfully."


def test_server_message_shown_on_success(controller, backend, project_values):
    backend.project_result = ApiSuccess({"status": "ok", "msg": "saved as #12"})
    assert controller.submit(project_values).view.banner.text == "saved as #12"


def test_rejection_writes_banner_and_keeps_values(controller, backend, project_values):
    backend.project_result = ApiRejected(payload={"status": "error"}, message="team name taken")
    outcome = controller.submit(project_values)

    assert outcome.state is SubmitState.SERVER_REJECTED
    assert outcome.view.banner.kind == "error-box"
    assert outcome.view.banner.text == "team name taken"
    assert outcome.values == project_values
    assert len(outcome.members) == 2


def test_rejection_without_message(controller, backend, project_values):
    backend.project_result = ApiRejected(payload={"status": "error"})
    outcome = controller.submit(project_values)
    assert outcome.view.banner.text == "there was a problem saving your project."


def test_transport_failure_keeps_values(controller, backend, project_values):
    backend.project_result = ApiTransportError(TimeoutError("slow"))
    outcome = controller.submit(project_values)

    assert outcome.state is SubmitState.NETWORK_FAILED
    assert outcome.view.banner.text == "server error while saving your project."
    assert outcome.values == project_values


def test_regenerate_from_four_to_one_clears_rows(controller, project_values):
    project_values.update({"teamSize": "4", "memberName3": "Ali", "memberId3": "2310999",
                           "otherMembers": "member 1: Sara — 2310123"})
    grown = controller.regenerate(project_values)
    assert [row.index for row in grown.members] == [1, 2, 3]
    assert all(row.name == "" for row in grown.members)
    assert "memberName1" not in grown.values

    project_values["teamSize"] = "1"
    shrunk = controller.regenerate(project_values)
    assert shrunk.members == []
    assert shrunk.values["otherMembers"] == ""
    assert shrunk.state is SubmitState.IDLE
