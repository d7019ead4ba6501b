import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Tuple

from .validators import parse_int

MEMBER_NAME_CLASS = "member-name-input"
MEMBER_ID_CLASS = "member-id-input"

MIN_TEAM_SIZE = 1
MAX_TEAM_SIZE = 5

_MEMBER_FIELD_RE = re.compile(r"member(Name|Id)([0-9]{1,9})")


@dataclass
class MemberRow:
    index: int
    name: str = ""
    student_id: str = ""

    @property
    def name_field(self) -> str:
        return f"memberName{self.index}"

    @property
    def id_field(self) -> str:
        return f"memberId{self.index}"

    @property
    def container(self) -> str:
        return f"memberRow{self.index}"

    @property
    def is_complete(self) -> bool:
        return bool(self.name and self.student_id)

    def log_line(self) -> str:
        return f"member {self.index}: {self.name} — {self.student_id}"


@dataclass
class SubmittedMembers:
    """Member inputs found in a posted form, each as (field name, value)."""

    names: List[Tuple[str, str]] = field(default_factory=list)
    ids: List[Tuple[str, str]] = field(default_factory=list)

    def indexes(self) -> List[int]:
        found = set()
        for name, _ in self.names + self.ids:
            found.add(int(_MEMBER_FIELD_RE.fullmatch(name).group(2)))
        return sorted(found)


def build_member_rows(team_size) -> List[MemberRow]:
    """Rows for every team member besides the representative.

    A team of 4 gets rows 1..3. Anything that is not an integer between 2
    and MAX_TEAM_SIZE gets no rows at all.
    """
    size = parse_int(team_size)
    if size is None or size <= 1 or size > MAX_TEAM_SIZE:
        return []
    return [MemberRow(index=i) for i in range(1, size)]


def members_hint(rows: List[MemberRow]) -> str:
    if not rows:
        return ""
    return f"enter full name + student id for each of the {len(rows)} other member(s)."


def collect_member_rows(values: Mapping[str, str]) -> SubmittedMembers:
    named: Dict[str, List[Tuple[int, str, str]]] = {"Name": [], "Id": []}
    for key, value in values.items():
        m = _MEMBER_FIELD_RE.fullmatch(key)
        if not m:
            continue
        kind, index = m.group(1), int(m.group(2))
        named[kind].append((index, key, value or ""))

    return SubmittedMembers(
        names=[(key, value) for _, key, value in sorted(named["Name"])],
        ids=[(key, value) for _, key, value in sorted(named["Id"])],
    )


def rows_from_values(values: Mapping[str, str]) -> List[MemberRow]:
    """Rebuild the rows a posted form carried, keeping what was typed."""
    submitted = collect_member_rows(values)
    return [
        MemberRow(
            index=i,
            name=values.get(f"memberName{i}", ""),
            student_id=values.get(f"memberId{i}", ""),
        )
        for i in submitted.indexes()
    ]


def serialize_members(rows: Iterable[MemberRow]) -> str:
    return "\n".join(row.log_line() for row in rows if row.is_complete)
