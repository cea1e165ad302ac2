"""Named plan documents kept together in a single JSON file."""
import json
import logging
import os
from typing import Any, Dict

from ..data_model import is_finite_number

logger = logging.getLogger(__name__)


def json_safe(value: Any):
    """Replace NaN/inf with None anywhere inside a document."""
    if isinstance(value, float) and not is_finite_number(value):
        return None
    if isinstance(value, dict):
        return {key: json_safe(val) for key, val in value.items()}
    if isinstance(value, list):
        return [json_safe(item) for item in value]
    return value


def load_plans(path: str) -> Dict[str, dict]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw_text = f.read().strip()
    except FileNotFoundError:
        return {}
    except OSError as exc:
        logger.warning("Ignoring unreadable plan store %s: %s", path, exc)
        return {}
    if not raw_text:
        return {}
    try:
        data = json.loads(raw_text)
    except json.JSONDecodeError as exc:
        logger.warning("Ignoring corrupt plan store %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring plan store %s: expected an object", path)
        return {}
    return {str(name): json_safe(doc) for name, doc in data.items() if isinstance(doc, dict)}


def save_plans(path: str, plans: Dict[str, dict]) -> None:
    """Write every document at once; the store is replaced atomically."""
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    tmp_path = f"{path}.tmp"
    with open(tmp_path, "w", encoding="utf-8") as f:
        json.dump(json_safe(plans), f, allow_nan=False)
    os.replace(tmp_path, path)
