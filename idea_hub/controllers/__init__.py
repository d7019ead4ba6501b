from .base import FormController, SubmitOutcome, SubmitState, ValidationResult
from .contact import ContactController
from .my_work import MyWorkController
from .project import ProjectController

__all__ = [
    "FormController",
    "SubmitOutcome",
    "SubmitState",
    "ValidationResult",
    "ContactController",
    "MyWorkController",
    "ProjectController",
]
