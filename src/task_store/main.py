"""
Demo entry point: log in with the session stub, create a task, print it.

Usage:
    python -m task_store.main
    task-store-demo
"""
from __future__ import annotations

import logging
import sys

from .auth import login, logout
from .errors import TaskStoreError
from .logging_setup import setup_logging
from .repositories import TaskStore
from .schemas import TaskOut

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
def main() -> int:
    """Run the demo and return a process exit code."""
    setup_logging()
    print("task store example")

    try:
        session = login("alice", "password123")
        print(f"Login result: {session}")

        store = TaskStore()
        task = store.create("Write tests", "Add unit tests for auth module")
        print(f"Created task: {TaskOut.from_task(task).model_dump_json()}")

        logout(session)
    except TaskStoreError as exc:
        logger.error("Demo failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
