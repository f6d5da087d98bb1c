"""
Demo Configuration - Environment-driven capacities, limits and logging

Supports:
- STACK_CAPACITY / QUEUE_CAPACITY container sizes
- MAX_VALUE_LENGTH input limit
- TOAST_MAX / TOAST_DURATION_MS toast board settings
- ENABLE_FEEDBACK_LOG / FEEDBACK_LOG_DIR JSONL audit trail

Invalid values log a warning and fall back to the default.
"""
import os
import logging
from dataclasses import dataclass

from stackqueue.bounded_queue import DEFAULT_QUEUE_CAPACITY
from stackqueue.bounded_stack import DEFAULT_STACK_CAPACITY
from stackqueue.controller import DEFAULT_MAX_VALUE_LENGTH
from stackqueue.sinks import DEFAULT_MAX_TOASTS, DEFAULT_TOAST_DURATION_MS


logger = logging.getLogger(__name__)

DEFAULT_FEEDBACK_LOG_DIR = "logs"


@dataclass
class DemoConfig:
    """Resolved demo settings."""
    stack_capacity: int = DEFAULT_STACK_CAPACITY
    queue_capacity: int = DEFAULT_QUEUE_CAPACITY
    max_value_length: int = DEFAULT_MAX_VALUE_LENGTH
    toast_max: int = DEFAULT_MAX_TOASTS
    toast_duration_ms: int = DEFAULT_TOAST_DURATION_MS
    feedback_log_enabled: bool = False
    feedback_log_dir: str = DEFAULT_FEEDBACK_LOG_DIR


def _env_int(name: str, default: int, minimum: int) -> int:
    """
    Parse an integer environment variable with a lower bound.

    Returns:
        Parsed value, or default if unset/invalid (invalid values are logged)
    """
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default

    try:
        value = int(raw)
        if value < minimum:
            raise ValueError(f"{name} must be >= {minimum}, got {value}")
    except ValueError as e:
        logger.warning(f"Invalid {name} '{raw}': {e}. Using default {default}")
        return default

    return value


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("true", "1", "yes")


def load_demo_config() -> DemoConfig:
    """
    Load demo configuration from environment.

    Environment variables:
    - STACK_CAPACITY (default: 10, >= 1)
    - QUEUE_CAPACITY (default: 50, >= 1)
    - MAX_VALUE_LENGTH (default: 15, >= 1)
    - TOAST_MAX (default: 5, >= 1)
    - TOAST_DURATION_MS (default: 4000, >= 0)
    - ENABLE_FEEDBACK_LOG (true/1/yes enables, default off)
    - FEEDBACK_LOG_DIR (default: logs)

    Returns:
        DemoConfig with safe defaults
    """
    log_dir = os.environ.get("FEEDBACK_LOG_DIR", "").strip() or DEFAULT_FEEDBACK_LOG_DIR

    return DemoConfig(
        stack_capacity=_env_int("STACK_CAPACITY", DEFAULT_STACK_CAPACITY, 1),
        queue_capacity=_env_int("QUEUE_CAPACITY", DEFAULT_QUEUE_CAPACITY, 1),
        max_value_length=_env_int("MAX_VALUE_LENGTH", DEFAULT_MAX_VALUE_LENGTH, 1),
        toast_max=_env_int("TOAST_MAX", DEFAULT_MAX_TOASTS, 1),
        toast_duration_ms=_env_int("TOAST_DURATION_MS", DEFAULT_TOAST_DURATION_MS, 0),
        feedback_log_enabled=_env_flag("ENABLE_FEEDBACK_LOG"),
        feedback_log_dir=log_dir,
    )


def log_demo_config(config: DemoConfig) -> None:
    """
    Log concise startup diagnostics (single line per component).

    Args:
        config: Resolved configuration
    """
    logger.info(
        f"Containers: stack_capacity={config.stack_capacity} "
        f"queue_capacity={config.queue_capacity} max_value_length={config.max_value_length}"
    )
    logger.info(f"Toasts: max={config.toast_max} duration_ms={config.toast_duration_ms}")

    if config.feedback_log_enabled:
        logger.info(f"Feedback log: enabled dir={config.feedback_log_dir}")
    else:
        logger.info("Feedback log: disabled")
