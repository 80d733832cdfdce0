# fakes.py

import itertools

import requests


class FakeTasksClient:
    """
    Stand-in for ``tasks_client`` backed by a plain list.

    - Records every call for assertions
    - ``fail_*`` flags raise the same errors ``requests`` would
    - ``payload`` overrides what ``get_tasks`` returns
    """

    _MISSING = object()

    def __init__(self, tasks=None):
        self.tasks = [dict(t) for t in tasks or []]
        self.payload = self._MISSING
        self.fail_get = False
        self.fail_create = False
        self.fail_update = False
        self.calls = []
        self._ids = itertools.count(len(self.tasks) + 1)

    def get_tasks(self):
        self.calls.append(("get",))
        if self.fail_get:
            raise requests.ConnectionError("store unreachable")
        if self.payload is not self._MISSING:
            return self.payload
        return [dict(t) for t in self.tasks]

    def create_task(self, title, quadrant):
        self.calls.append(("create", title, quadrant))
        if self.fail_create:
            raise requests.HTTPError("500 Server Error")
        self.tasks.append({
            "id": next(self._ids),
            "title": title,
            "quadrant": quadrant,
            "completed": False,
        })

    def update_task(self, task_id, completed):
        self.calls.append(("update", task_id, completed))
        if self.fail_update:
            raise requests.HTTPError("500 Server Error")
        for t in self.tasks:
            if str(t["id"]) == str(task_id):
                t["completed"] = completed

    def count(self, kind):
        return sum(1 for c in self.calls if c[0] == kind)


SAMPLE_TASKS = [
    {"id": 1, "title": "Fix prod bug", "quadrant": "DO", "completed": False},
    {"id": 2, "title": "Plan sprint", "quadrant": "SCHEDULE", "completed": True},
    {"id": 3, "title": "Book travel", "quadrant": "DELEGATE", "completed": False},
    {"id": 4, "title": "Call bank", "quadrant": "DO", "completed": True},
    {"id": 5, "title": "Scroll feeds", "quadrant": "ELIMINATE", "completed": False},
]
