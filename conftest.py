import pytest

from app import app as flask_app
from fakes import FakeTasksClient, SAMPLE_TASKS


@pytest.fixture()
def fake_client():
    return FakeTasksClient(SAMPLE_TASKS)


@pytest.fixture()
def client(fake_client):
    flask_app.config["TESTING"] = True
    original = flask_app.config["TASKS_CLIENT"]
    flask_app.config["TASKS_CLIENT"] = fake_client
    with flask_app.test_client() as test_client:
        yield test_client
    flask_app.config["TASKS_CLIENT"] = original
