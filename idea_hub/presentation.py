"""Error presentation for the site's forms.

Each form renders from a ``FormView``: one banner (the page-level error or
success box) plus a set of field-error markers keyed by container id. The
container a field reports into is looked up in an explicit ``FieldRegistry``
instead of walking the markup at runtime.
"""
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

FIELD_ERROR_CLASS = "field-error"
ERROR_MESSAGE_CLASS = "error-message"
ERROR_BOX_CLASS = "error-box"
SUCCESS_CLASS = "success-msg"


@dataclass
class ValidationError:
    message: str
    field: Optional[str] = None
    hint: Optional[str] = None


@dataclass(frozen=True)
class FieldLayout:
    """Containers wrapping one input, in lookup priority order."""

    row: Optional[str] = None
    field: Optional[str] = None
    parent: Optional[str] = None

    def container(self) -> Optional[str]:
        for candidate in (self.row, self.field, self.parent):
            if candidate:
                return candidate
        return None


class FieldRegistry:
    def __init__(self, layouts: Optional[Dict[str, FieldLayout]] = None):
        self._layouts: Dict[str, FieldLayout] = dict(layouts or {})

    def register(self, name: str, row: Optional[str] = None, field: Optional[str] = None,
                 parent: Optional[str] = None) -> None:
        self._layouts[name] = FieldLayout(row=row, field=field, parent=parent)

    def resolve(self, name: str) -> Optional[str]:
        layout = self._layouts.get(name)
        if layout is None:
            return None
        return layout.container()

    def __contains__(self, name: str) -> bool:
        return name in self._layouts


@dataclass
class Banner:
    box_id: str
    kind: str = ""
    heading: str = ""
    items: List[str] = field(default_factory=list)
    text: str = ""
    focus: bool = False

    def reset(self) -> None:
        self.kind = ""
        self.heading = ""
        self.items = []
        self.text = ""
        self.focus = False

    @property
    def is_empty(self) -> bool:
        return not (self.items or self.text)


@dataclass
class FormView:
    form_id: str
    registry: FieldRegistry = field(default_factory=FieldRegistry)
    banner: Optional[Banner] = None
    markers: Dict[str, str] = field(default_factory=dict)
    field_errors: Dict[str, str] = field(default_factory=dict)

    def is_marked(self, container: str) -> bool:
        return container in self.markers

    def message_for(self, container: str) -> str:
        return self.markers.get(container, "")

    def css_for(self, container: str, base: str = "form-row") -> str:
        if self.is_marked(container):
            return f"{base} {FIELD_ERROR_CLASS}".strip()
        return base

    def is_invalid(self, name: str) -> bool:
        return name in self.field_errors


def clear_form_errors(view: FormView, banner: Optional[Banner] = None) -> None:
    view.markers.clear()
    view.field_errors.clear()
    if banner is not None:
        banner.reset()


def show_field_error(view: FormView, name: str, message: str) -> None:
    """Mark the container of ``name`` and set its inline message.

    One inline message exists per container; a second error in the same
    container overwrites the first. Fields with no known container are
    ignored.
    """
    container = view.registry.resolve(name)
    if not container:
        return
    view.markers[container] = message
    view.field_errors[name] = message


def ensure_error_box(view: FormView, box_id: str) -> Banner:
    if view.banner is None or view.banner.box_id != box_id:
        view.banner = Banner(box_id=box_id)
    return view.banner


def render_errors(view: FormView, errors: Iterable[ValidationError], heading: str = "") -> Banner:
    errors = list(errors)
    for error in errors:
        if error.field:
            show_field_error(view, error.field, error.hint or error.message)

    banner = view.banner or ensure_error_box(view, f"{view.form_id}Errors")
    banner.kind = ERROR_BOX_CLASS
    banner.heading = heading
    banner.items = [error.message for error in errors]
    banner.text = ""
    banner.focus = True
    return banner


def render_success(view: FormView, message: str) -> Banner:
    banner = view.banner or ensure_error_box(view, f"{view.form_id}Errors")
    banner.reset()
    banner.kind = SUCCESS_CLASS
    banner.text = message
    return banner


def render_failure(view: FormView, message: str) -> Banner:
    banner = view.banner or ensure_error_box(view, f"{view.form_id}Errors")
    banner.reset()
    banner.kind = ERROR_BOX_CLASS
    banner.text = message
    return banner
