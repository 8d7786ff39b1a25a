import json
import logging
import os
import shutil
import tempfile

logger = logging.getLogger(__name__)


def read_json(file_path, default=None):
    """Read a JSON file; a missing file yields `default` (or []). A corrupt file raises ValueError."""
    if not os.path.exists(file_path):
        return default if default is not None else []
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Failed to read {file_path}: {e}")
        raise ValueError(f"Corrupt JSON file: {file_path}") from e


def write_json(file_path, data):
    """Write through a temp file in the same directory, then move into place."""
    dir_name = os.path.dirname(file_path) or "."
    os.makedirs(dir_name, exist_ok=True)
    with tempfile.NamedTemporaryFile("w", delete=False, dir=dir_name, suffix=".tmp", encoding="utf-8") as tf:
        json.dump(data, tf, indent=4)
        temp_name = tf.name
    shutil.move(temp_name, file_path)
