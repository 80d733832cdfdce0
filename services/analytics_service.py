import logging

import requests

import tasks_client
from config import QUADRANTS

logger = logging.getLogger(f"eisenhower_matrix.{__name__}")


def empty_summary():
    return {
        "total": 0,
        "done": 0,
        "open": 0,
        "percent_done": 0,
        "quadrant_counts": {q: {"done": 0, "total": 0} for q in QUADRANTS},
    }


def compute_summary(tasks):
    summary = empty_summary()

    for t in tasks:
        if not isinstance(t, dict):
            continue

        done = bool(t.get("completed"))
        summary["total"] += 1
        if done:
            summary["done"] += 1

        counts = summary["quadrant_counts"].get(t.get("quadrant"))
        if counts is not None:
            counts["total"] += 1
            if done:
                counts["done"] += 1

    summary["open"] = summary["total"] - summary["done"]
    if summary["total"]:
        summary["percent_done"] = round(summary["done"] * 100 / summary["total"])

    return summary


def load_analytics(client=tasks_client):
    """Fetch the task list on its own and summarise it for the panel."""
    try:
        tasks = client.get_tasks()
    except (requests.RequestException, ValueError) as e:
        logger.error("Error fetching analytics: %s", e)
        return empty_summary()

    if not isinstance(tasks, list):
        logger.error(
            "Expected tasks to be a list, but got: %s", type(tasks).__name__
        )
        return empty_summary()

    summary = compute_summary(tasks)
    logger.debug("Analytics summary: %s", summary)
    return summary
