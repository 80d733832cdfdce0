import logging

import requests

import tasks_client

logger = logging.getLogger(f"eisenhower_matrix.{__name__}")


class TaskListView:
    """
    In-memory state behind the Eisenhower page.

    ``tasks`` is always the last successful fetch as returned by the
    remote store, or empty. Writes never touch it directly; they go to
    the store and then re-fetch the whole collection.
    """

    def __init__(self, client=tasks_client):
        self.client = client
        self.tasks = []
        self.loading = True
        self._listeners = []

    def subscribe(self, callback):
        self._listeners.append(callback)

    def _notify(self):
        for callback in self._listeners:
            callback(self)

    def _set_state(self, tasks=None, loading=None):
        if tasks is not None:
            self.tasks = tasks
        if loading is not None:
            self.loading = loading
        self._notify()

    # ----------------------------
    # Remote operations
    # ----------------------------
    def fetch_all(self):
        self._set_state(loading=True)
        try:
            tasks = self.client.get_tasks()
            logger.debug("API response (tasks): %s", tasks)

            if isinstance(tasks, list):
                self._set_state(tasks=tasks)
            else:
                logger.error(
                    "Expected tasks to be a list, but got: %s %r",
                    type(tasks).__name__, tasks,
                )
                self._set_state(tasks=[])
        except (requests.RequestException, ValueError) as e:
            logger.error("Error fetching tasks: %s", e)
            self._set_state(tasks=[])

        self._set_state(loading=False)
        return self.tasks

    def add_task(self, title, quadrant):
        try:
            self.client.create_task(title, quadrant)
        except requests.RequestException as e:
            logger.error("Error adding task: %s", e)
            return False

        logger.info("Task added to %s", quadrant)
        self.fetch_all()
        return True

    def update_task(self, task_id, completed):
        try:
            self.client.update_task(task_id, completed)
        except requests.RequestException as e:
            logger.error("Error updating task %s: %s", task_id, e)
            return False

        logger.info("Task %s completed=%s", task_id, completed)
        self.fetch_all()
        return True

    # ----------------------------
    # Rendering helpers
    # ----------------------------
    def tasks_in(self, quadrant):
        return [
            t for t in self.tasks
            if isinstance(t, dict) and t.get("quadrant") == quadrant
        ]
