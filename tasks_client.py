import requests
from requests.utils import quote

from config import TASKS_API_URL, HEADERS


def _url(path):
    return f"{TASKS_API_URL}/{path.lstrip('/')}"


def get_tasks():
    r = requests.get(_url("tasks"), headers=HEADERS)
    r.raise_for_status()
    return r.json()


def create_task(title, quadrant):
    r = requests.post(
        _url("tasks"),
        headers=HEADERS,
        json={"title": title, "quadrant": quadrant},
    )
    r.raise_for_status()


def update_task(task_id, completed):
    r = requests.put(
        _url(f"tasks/{quote(str(task_id), safe='')}"),
        headers=HEADERS,
        json={"completed": completed},
    )
    r.raise_for_status()
