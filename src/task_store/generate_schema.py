"""
Utility script to generate and write the JSON schema of the task payloads.

The document holds one JSON schema per payload model (TaskCreate, TaskUpdate,
TaskOut) so that clients and documentation tools can consume a stable
description of the task shape without importing this package.

Usage:
    python -m task_store.generate_schema [OUTPUT_PATH]

Notes:
- Without an explicit path the file goes to SCHEMA_OUTPUT_PATH
  (default ./interfaces/task_schema.json).
"""
from __future__ import annotations

import json
import logging
import os
import sys
from typing import Any, Dict, Optional

from .schemas import TaskCreate, TaskOut, TaskUpdate
from .settings import get_settings

logger = logging.getLogger(__name__)

_MODELS = (TaskCreate, TaskUpdate, TaskOut)


def build_schema() -> Dict[str, Any]:
    """Return the combined schema document keyed by model name."""
    return {
        "title": "Task Store payloads",
        "schemas": {model.__name__: model.model_json_schema() for model in _MODELS},
    }


# PUBLIC_INTERFACE
def generate_schema(out_path: Optional[str] = None) -> str:
    """Write the schema document, creating directories as needed, and return the written path."""
    out_path = out_path or get_settings().schema_output_path
    os.makedirs(os.path.dirname(os.path.abspath(out_path)), exist_ok=True)

    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(build_schema(), f, indent=2, ensure_ascii=False)
    logger.info("Wrote task schema to %s", out_path)
    return out_path


def main() -> None:
    path = generate_schema(sys.argv[1] if len(sys.argv) > 1 else None)
    print(f"Wrote task schema to: {path}")


if __name__ == "__main__":
    main()
