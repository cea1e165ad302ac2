"""Runtime settings read from the environment.

Env vars:
  PLANNER_DATA_DIR=user_data          -> directory for stored documents
  PLANNER_PLANS_FILE=<path.json>      -> plan store (default <data dir>/plans.json)
  PLANNER_LOG_LEVEL=INFO              -> log level for the planner logger
  PLANNER_HOST=127.0.0.1              -> API bind host
  PLANNER_PORT=8000                   -> API port
  PLANNER_DEBUG=1                     -> Flask debug mode
"""
from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass

TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class Settings:
    data_dir: str = "user_data"
    plans_file: str = os.path.join("user_data", "plans.json")
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


def load_settings() -> Settings:
    data_dir = os.getenv("PLANNER_DATA_DIR") or "user_data"
    return Settings(
        data_dir=data_dir,
        plans_file=os.getenv("PLANNER_PLANS_FILE") or os.path.join(data_dir, "plans.json"),
        log_level=str(os.getenv("PLANNER_LOG_LEVEL", "INFO")).upper(),
        host=os.getenv("PLANNER_HOST") or "127.0.0.1",
        port=_int_env("PLANNER_PORT", 8000),
        debug=str(os.getenv("PLANNER_DEBUG", "")).lower() in TRUTHY,
    )


def configure_logging(level: str = "INFO") -> logging.Logger:
    logger = logging.getLogger("planner")
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    logger.handlers.clear()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logger.addHandler(handler)
    return logger
