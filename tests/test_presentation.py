from idea_hub.presentation import (
    ERROR_BOX_CLASS,
    SUCCESS_CLASS,
    FieldLayout,
    FieldRegistry,
    FormView,
    ValidationError,
    clear_form_errors,
    ensure_error_box,
    render_errors,
    render_failure,
    render_success,
    show_field_error,
)


def _view():
    registry = FieldRegistry({
        "firstName": FieldLayout(row="row-firstName"),
        "gender": FieldLayout(field="genderFieldset"),
        "tools": FieldLayout(parent="toolsParent"),
        "ghost": FieldLayout(),
    })
    return FormView(form_id="contactForm", registry=registry)


def test_layout_priority_row_then_field_then_parent():
    assert FieldLayout(row="r", field="f", parent="p").container() == "r"
    assert FieldLayout(field="f", parent="p").container() == "f"
    assert FieldLayout(parent="p").container() == "p"
    assert FieldLayout().container() is None


def test_show_field_error_marks_container():
    view = _view()
    show_field_error(view, "firstName", "use letters only")
    assert view.is_marked("row-firstName")
    assert view.message_for("row-firstName") == "use letters only"
    assert view.css_for("row-firstName") == "form-row field-error"
    assert view.is_invalid("firstName")


def test_show_field_error_reuses_one_message_per_container():
    view = FormView(form_id="f", registry=FieldRegistry({
        "memberName1": FieldLayout(row="memberRow1"),
        "memberId1": FieldLayout(row="memberRow1"),
    }))
    show_field_error(view, "memberName1", "please enter this member name.")
    show_field_error(view, "memberId1", "please enter this member id.")
    assert view.markers == {"memberRow1": "please enter this member id."}


def test_show_field_error_without_container_is_silent():
    view = _view()
    show_field_error(view, "unknown", "nope")
    show_field_error(view, "ghost", "nope")
    assert view.markers == {}


def test_ensure_error_box_is_idempotent():
    view = _view()
    first = ensure_error_box(view, "contactErrors")
    second = ensure_error_box(view, "contactErrors")
    assert first is second
    assert view.banner.box_id == "contactErrors"


def test_clear_form_errors_resets_everything_and_is_idempotent():
    view = _view()
    banner = ensure_error_box(view, "contactErrors")
    render_errors(view, [ValidationError("bad name", "firstName", "letters only")], "problems:")

    clear_form_errors(view, banner)
    clear_form_errors(view, banner)

    assert view.markers == {}
    assert banner.kind == ""
    assert banner.items == []
    assert banner.text == ""
    assert not banner.focus
    assert banner.is_empty


def test_render_errors_keeps_order_and_focuses_banner():
    view = _view()
    ensure_error_box(view, "contactErrors")
    errors = [
        ValidationError("first name must be 2–30 letters (a–z) only.", "firstName", "letters"),
        ValidationError("please select a gender option.", "gender", "please choose one option."),
        ValidationError("no field for this one"),
    ]

    banner = render_errors(view, errors, "there are some problems with your form:")

    assert banner.kind == ERROR_BOX_CLASS
    assert banner.heading == "there are some problems with your form:"
    assert banner.items == [e.message for e in errors]
    assert banner.focus
    assert view.message_for("genderFieldset") == "please choose one option."


def test_render_success_and_failure_replace_banner_text():
    view = _view()
    ensure_error_box(view, "contactErrors")
    render_errors(view, [ValidationError("x")])

    banner = render_success(view, "saved")
    assert (banner.kind, banner.text, banner.items) == (SUCCESS_CLASS, "saved", [])

    banner = render_failure(view, "server error")
    assert (banner.kind, banner.text) == (ERROR_BOX_CLASS, "server error")
