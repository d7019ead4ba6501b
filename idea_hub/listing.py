"""Project list page: load records from the backend and shape them for the table."""
import logging
import re
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

from markupsafe import Markup

from .http_client import ApiRejected, ApiTransportError

logger = logging.getLogger(__name__)

LOADING_STATUS = "loading projects…"
NO_MEMBERS = "-"

CATEGORY_LABELS = {
    "cybersecurity": "cybersecurity",
    "cs": "computer science",
    "se": "software engineering",
    "is": "information systems",
    "ai": "artificial intelligence",
    "data": "data science",
}

_MEMBER_LABEL_RE = re.compile(r"^member\s*\d+:\s*", re.IGNORECASE)


def format_members(other: Optional[str]) -> Markup:
    """Turn the stored member log into one badge per member.

    "member 1: sara — 2310123" becomes a badge reading "sara — 2310123".
    """
    if not other:
        return Markup(NO_MEMBERS)
    if not isinstance(other, str):
        other = str(other)

    lines = [line for line in other.split("\n") if line]
    if not lines:
        return Markup(NO_MEMBERS)

    badges = [
        Markup('<span class="member-badge">{}</span>').format(_MEMBER_LABEL_RE.sub("", line, count=1))
        for line in lines
    ]
    return Markup(" ").join(badges)


def format_major(code: Optional[str]) -> str:
    if not code:
        return ""
    if not isinstance(code, str):
        return str(code)
    return CATEGORY_LABELS.get(code, code)


def _text(record: Mapping[str, Any], key: str) -> str:
    value = record.get(key)
    return "" if value is None else str(value)


@dataclass
class ProjectRow:
    id: str
    team_name: str
    rep_name: str
    members: Markup
    course_code: str
    major: str
    project_type: str
    project_name: str
    description: str

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "ProjectRow":
        return cls(
            id=_text(record, "id"),
            team_name=_text(record, "team_name"),
            rep_name=_text(record, "rep_name"),
            members=format_members(record.get("other_members")),
            course_code=_text(record, "course_code"),
            major=format_major(record.get("category")),
            project_type=_text(record, "project_type"),
            project_name=_text(record, "project_name"),
            description=_text(record, "description"),
        )


@dataclass
class ProjectsView:
    status: str = LOADING_STATUS
    rows: Optional[List[ProjectRow]] = None
    count: int = 0
    ok: bool = False


def load_projects(client) -> ProjectsView:
    """Fetch the collection and build the table rows.

    ``rows`` stays ``None`` whenever the table body must be left untouched
    (transport failure, backend error, empty collection).
    """
    view = ProjectsView()
    result = client.get_projects()

    if isinstance(result, ApiTransportError):
        logger.error("error loading projects", exc_info=result.error)
        view.status = "error loading projects."
        return view

    if isinstance(result, ApiRejected):
        view.status = result.message or "could not load projects."
        return view

    projects = result.payload.get("data")
    if projects is not None and not isinstance(projects, list):
        logger.warning("unexpected project list payload: %s", type(projects).__name__)
        view.status = "could not load projects."
        return view

    records = [record for record in projects or [] if isinstance(record, dict)]
    if not records:
        view.status = "no projects found yet."
        return view

    view.rows = [ProjectRow.from_record(record) for record in records]
    view.count = len(view.rows)
    view.ok = True
    view.status = f"loaded {view.count} project(s)."
    logger.info("loaded %d project(s)", view.count)
    return view
