from __future__ import annotations

from core.document import StudioDocument

from .forms import TaskForm, TaskStatusForm
from .records import Task


def add_task(document: StudioDocument, data, *, today=None) -> StudioDocument:
    form = TaskForm(data)
    if not form.is_valid():
        return document
    cleaned = form.cleaned_data
    task_id, document = document.allocate_id()
    task = Task(
        id=task_id,
        title=cleaned["title"],
        description=cleaned["description"],
        client_id=cleaned["client_id"],
        assignee=cleaned["assignee"],
        status=cleaned["status"],
        priority=cleaned["priority"],
        due_date=cleaned["due_date"],
    )
    return document.append("tasks", task)


def update_task_status(document: StudioDocument, data, *, today=None) -> StudioDocument:
    form = TaskStatusForm(data)
    if not form.is_valid():
        return document
    return document.patch("tasks", form.cleaned_data["id"], status=form.cleaned_data["status"])
