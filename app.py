from flask import Flask, request, redirect, url_for, render_template_string

import tasks_client
from config import QUADRANTS, QUADRANT_STYLES, HEADING_STYLES
from logger import setup_logger
from services.analytics_service import load_analytics
from services.task_view import TaskListView
from templates.analytics import ANALYTICS_TEMPLATE
from templates.matrix import MATRIX_TEMPLATE

# ==========================================================
# APP SETUP
# ==========================================================
app = Flask(__name__)
logger = setup_logger()

# Swapped out in tests
app.config["TASKS_CLIENT"] = tasks_client


def _client():
    return app.config["TASKS_CLIENT"]


def _log_state(view):
    logger.debug(
        "View state: loading=%s tasks=%d", view.loading, len(view.tasks)
    )


def mount_view():
    view = TaskListView(_client())
    view.subscribe(_log_state)
    return view


# ==========================================================
# RENDERING
# ==========================================================
def render_analytics_panel():
    return render_template_string(
        ANALYTICS_TEMPLATE,
        summary=load_analytics(_client()),
        quadrants=QUADRANTS,
    )


def render_matrix(view):
    return render_template_string(
        MATRIX_TEMPLATE,
        view=view,
        quadrants=QUADRANTS,
        quadrant_styles=QUADRANT_STYLES,
        heading_styles=HEADING_STYLES,
        analytics_panel=render_analytics_panel(),
    )


def _parse_bool(value):
    return str(value).strip().lower() in ("1", "true", "on", "yes")


# ==========================================================
# ROUTES – EISENHOWER MATRIX
# ==========================================================
@app.route("/", methods=["GET"])
def matrix():
    view = mount_view()
    view.fetch_all()
    return render_matrix(view)


@app.route("/add", methods=["POST"])
def add_task():
    title = request.form.get("title", "")
    quadrant = request.form.get("quadrant", "")
    logger.debug("Add task request: %r -> %s", title, quadrant)

    view = mount_view()
    view.add_task(title, quadrant)
    return redirect(url_for("matrix"))


@app.route("/toggle/<path:task_id>", methods=["POST"])
def toggle_task(task_id):
    completed = _parse_bool(request.form.get("completed", "false"))
    logger.debug("Toggle task request: %s -> %s", task_id, completed)

    view = mount_view()
    view.update_task(task_id, completed)
    return redirect(url_for("matrix"))


# ==========================================================
# ENTRY POINT
# ==========================================================
if __name__ == "__main__":
    logger.info("Starting Eisenhower Matrix")
    app.run(debug=True)
