import pytest
import requests

import tasks_client
from config import TASKS_API_URL


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text="[]"):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


@pytest.fixture()
def recorded(monkeypatch):
    calls = []

    def fake(method, response):
        def _call(url, **kwargs):
            calls.append((method, url, kwargs))
            return response
        return _call

    def install(method, response):
        monkeypatch.setattr(requests, method, fake(method, response))

    install.calls = calls
    return install


def test_get_tasks_hits_collection(recorded):
    recorded("get", FakeResponse(payload=[{"id": 1}]))

    assert tasks_client.get_tasks() == [{"id": 1}]

    method, url, kwargs = recorded.calls[0]
    assert url == f"{TASKS_API_URL}/tasks"
    assert kwargs["headers"]["Content-Type"] == "application/json"


def test_get_tasks_http_error_raises(recorded):
    recorded("get", FakeResponse(status_code=503))

    with pytest.raises(requests.HTTPError):
        tasks_client.get_tasks()


def test_get_tasks_bad_json_raises_value_error(recorded):
    recorded("get", FakeResponse(payload=ValueError("bad json")))

    with pytest.raises(ValueError):
        tasks_client.get_tasks()


def test_create_task_posts_title_and_quadrant(recorded):
    recorded("post", FakeResponse(status_code=201, text=""))

    tasks_client.create_task("Buy milk", "DO")

    method, url, kwargs = recorded.calls[0]
    assert url == f"{TASKS_API_URL}/tasks"
    assert kwargs["json"] == {"title": "Buy milk", "quadrant": "DO"}


def test_update_task_puts_only_completed(recorded):
    recorded("put", FakeResponse(text="not json at all"))

    tasks_client.update_task(7, True)

    method, url, kwargs = recorded.calls[0]
    assert url == f"{TASKS_API_URL}/tasks/7"
    assert kwargs["json"] == {"completed": True}


def test_update_task_http_error_raises(recorded):
    recorded("put", FakeResponse(status_code=404))

    with pytest.raises(requests.HTTPError):
        tasks_client.update_task(7, False)


def test_update_task_encodes_slashes_in_id(recorded):
    recorded("put", FakeResponse(text=""))

    tasks_client.update_task("a/b", True)

    method, url, kwargs = recorded.calls[0]
    assert url == f"{TASKS_API_URL}/tasks/a%2Fb"
