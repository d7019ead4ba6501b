from flask import Blueprint, current_app, jsonify, render_template, request

from .controllers import ContactController, MyWorkController, ProjectController
from .http_client import get_backend_client
from .listing import CATEGORY_LABELS, load_projects
from .members import MEMBER_ID_CLASS, MEMBER_NAME_CLASS, build_member_rows, members_hint

bp = Blueprint("pages", __name__)


@bp.app_context_processor
def _member_classes():
    return {
        "member_name_class": MEMBER_NAME_CLASS,
        "member_id_class": MEMBER_ID_CLASS,
        "members_hint": members_hint,
    }


@bp.get("/health")
def health():
    return jsonify({"status": "ok"})


@bp.get("/")
def index():
    return render_template("index.html")


@bp.route("/contact", methods=["GET", "POST"])
def contact():
    controller = ContactController(
        get_backend_client(),
        dob_max=current_app.config.get("CONTACT_DOB_MAX") or None,
    )
    if request.method == "POST":
        outcome = controller.submit(request.form.to_dict())
    else:
        outcome = controller.idle()
    return render_template("contact.html", outcome=outcome, view=outcome.view,
                           values=outcome.values, dob_max=controller.dob_max)


@bp.route("/idea", methods=["GET", "POST"])
def idea():
    controller = ProjectController(get_backend_client())
    if request.method == "POST":
        values = request.form.to_dict()
        if values.pop("action", "") == "members":
            outcome = controller.regenerate(values)
        else:
            outcome = controller.submit(values)
    else:
        outcome = controller.idle()
    return render_template("idea.html", outcome=outcome, view=outcome.view, values=outcome.values,
                           members=outcome.members, oob=False,
                           categories=list(CATEGORY_LABELS.items()))


@bp.get("/idea/members")
def idea_members():
    rows = build_member_rows(request.args.get("teamSize"))
    return render_template("_members.html", members=rows, view=None, oob=True)


@bp.route("/my-work", methods=["GET", "POST"])
def my_work():
    controller = MyWorkController()
    if request.method == "POST":
        outcome = controller.submit(request.form.to_dict())
    else:
        outcome = controller.idle()
    return render_template("my_work.html", outcome=outcome, view=outcome.view, values=outcome.values)


@bp.get("/projects")
def projects():
    listing = load_projects(get_backend_client())
    return render_template("projects.html", listing=listing)
