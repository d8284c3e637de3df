from datetime import date

from django.test import SimpleTestCase, TestCase

from core.document import StudioDocument

from .records import Task
from .services import add_task, update_task_status


class TaskMutatorTests(SimpleTestCase):
    def test_add_task_with_defaults(self):
        document = add_task(StudioDocument(), {"title": "  Shoot reels ", "assignee": " Priya "})
        task = document.tasks[0]
        self.assertEqual(task.title, "Shoot reels")
        self.assertEqual(task.assignee, "Priya")
        self.assertEqual(task.status, Task.Status.PENDING)
        self.assertEqual(task.priority, Task.Priority.MEDIUM)
        self.assertIsNone(task.client_id)
        self.assertIsNone(task.due_date)

    def test_add_task_keeps_optional_fields(self):
        document = add_task(
            StudioDocument(),
            {
                "title": "Monthly report",
                "client_id": "3",
                "status": "in_progress",
                "priority": "high",
                "due_date": "2026-04-01",
                "description": "Numbers for March",
            },
        )
        task = document.tasks[0]
        self.assertEqual(task.client_id, 3)
        self.assertEqual(task.status, Task.Status.IN_PROGRESS)
        self.assertEqual(task.priority, Task.Priority.HIGH)
        self.assertEqual(task.due_date, date(2026, 4, 1))

    def test_title_is_required(self):
        original = StudioDocument()
        self.assertIs(add_task(original, {"title": "   "}), original)

    def test_update_status(self):
        document = add_task(StudioDocument(), {"title": "Edit video"})
        updated = update_task_status(document, {"id": "1", "status": "completed"})
        self.assertEqual(updated.tasks[0].status, Task.Status.COMPLETED)
        self.assertIs(update_task_status(document, {"id": "1", "status": "blocked"}), document)


class TodoViewsTests(TestCase):
    def test_tasks_are_grouped_in_lanes(self):
        self.client.post("/todo/add", {"title": "Write captions"})
        self.client.post("/todo/add", {"title": "Edit reel", "status": "in_progress"})
        response = self.client.post("/todo/status", {"id": "1", "status": "overdue"})
        self.assertEqual(response.status_code, 302)
        self.assertEqual(response.url, "/todo/")
        payload = self.client.get("/todo/").json()
        self.assertEqual(payload["counts"], {"pending": 0, "in_progress": 1, "completed": 0, "overdue": 1})
        self.assertEqual(payload["lanes"]["overdue"][0]["title"], "Write captions")
