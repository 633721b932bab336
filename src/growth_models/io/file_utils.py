# growth_models/io/file_utils.py
"""
JSON helpers for configuration files and run summaries.

Reading is strict: a missing or malformed file is logged and ends the
process, since every caller needs the contents to continue.  Writing
creates the parent directory first.

Example:
    >>> from growth_models.io.file_utils import load_json_file, save_json_file
    >>> params = load_json_file("hyperparam/prefixed/ramsey_params.json")
    >>> save_json_file({"k_star": 2.69}, "results/summary.json")
"""

import json
import os
import sys
import logging
from typing import Dict, Any

logger = logging.getLogger(__name__)


def load_json_file(filename: str) -> Dict[str, Any]:
    """
    Read a JSON document.

    Args:
        filename: Path to the JSON file.

    Returns:
        The decoded object.

    Raises:
        SystemExit: If the file is absent, unreadable or not valid JSON.
    """
    try:
        with open(filename, 'r') as f:
            return json.load(f)
    except FileNotFoundError:
        logger.error(f"File '{filename}' not found.")
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {filename}: {e}")
    except OSError as e:
        logger.error(f"Could not read {filename}: {e}")
    sys.exit(1)


def save_json_file(data: Dict[str, Any], filename: str) -> None:
    """
    Write *data* as indented JSON, creating the target directory.

    Raises:
        OSError: If the file cannot be written.
    """
    parent = os.path.dirname(filename)
    if parent:
        os.makedirs(parent, exist_ok=True)
    try:
        with open(filename, 'w') as f:
            json.dump(data, f, indent=4)
    except OSError as e:
        logger.error(f"Failed to write {filename}: {e}")
        raise
    logger.info(f"Saved {len(data)} entries to {filename}")
