import pytest

from idea_hub import create_app
from idea_hub.config import TestConfig
from idea_hub.http_client import ApiSuccess


class FakeBackend:
    """Stands in for BackendClient; records payloads and returns canned results."""

    def __init__(self):
        self.calls = []
        self.contact_result = ApiSuccess({"status": "ok"})
        self.project_result = ApiSuccess({"status": "ok"})
        self.projects_result = ApiSuccess({"status": "ok", "data": []})

    def post_contact(self, payload):
        self.calls.append(("contact", payload))
        return self.contact_result

    def post_project(self, payload):
        self.calls.append(("project", payload))
        return self.project_result

    def get_projects(self):
        self.calls.append(("projects", None))
        return self.projects_result

    def close(self):
        pass


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def app(backend):
    app = create_app(TestConfig)
    app.extensions["backend_client"] = backend
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def contact_values():
    return {
        "firstName": "Sara",
        "lastName": "Alharbi",
        "gender": "female",
        "mobile": "0512345678",
        "dob": "2003-05-17",
        "email": "sara@example.com",
        "language": "en",
        "message": "I would like to know more about the hub.",
    }


@pytest.fixture
def project_values():
    return {
        "teamName": "cm3",
        "teamSize": "3",
        "memberName1": "Sara",
        "memberId1": "2310123",
        "memberName2": "Omar",
        "memberId2": "2310456",
        "repName": "Lina",
        "repId": "2310789",
        "repEmail": "lina@uj.edu.sa",
        "courseCode": "ccsw321",
        "category": "ai",
        "projectType": "group",
        "projectName": "study buddy",
        "projectDesc": "pairs classmates who study the same courses",
        "tools": "flask",
    }
