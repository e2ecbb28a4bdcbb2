# config.py
import json
import logging
import os
from dataclasses import dataclass, fields, replace

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VisualizerConfig:
    """
    Settings for the visualizer UI.

    Attributes:
        default_references (str): Reference string pre-filled in the form
        default_capacity (int): Frame count pre-filled in the form
        step_delay_s (float): Pause between animated steps
        frame_stagger_ms (int): Delay between frames appearing in a column
        totals_tick_s (float): Pause between totals counter increments
        placeholder_columns (int): Empty columns shown before the first run
        event_log_size (int): Number of most recent events listed
        log_level (str): Root logging level name
    """
    default_references: str = "7 0 1 2 0 3 0 4 2 3 0 3 2"
    default_capacity: int = 3
    step_delay_s: float = 1.5
    frame_stagger_ms: int = 80
    totals_tick_s: float = 0.05
    placeholder_columns: int = 15
    event_log_size: int = 20
    log_level: str = "INFO"

    def __post_init__(self):
        _check_type(self, "default_references", str)
        _check_type(self, "log_level", str)
        for name in ("default_capacity", "frame_stagger_ms", "placeholder_columns", "event_log_size"):
            _check_type(self, name, int)
        for name in ("step_delay_s", "totals_tick_s"):
            _check_type(self, name, (int, float))

        if self.default_capacity < 1:
            raise ValueError("default_capacity must be at least 1")
        for name in ("step_delay_s", "frame_stagger_ms", "totals_tick_s"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")
        if self.placeholder_columns < 0 or self.event_log_size < 0:
            raise ValueError("column and log sizes must not be negative")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level}")


def _check_type(config, name, expected):
    value = getattr(config, name)
    # bool is an int subclass but never a valid setting
    if isinstance(value, bool) or not isinstance(value, expected):
        raise ValueError(f"{name} has invalid value {value!r}")


def load_config(path="config.json") -> VisualizerConfig:
    """Defaults overlaid with the known keys of an optional JSON file."""
    config = VisualizerConfig()
    if not os.path.exists(path):
        return config

    with open(path, "r") as f:
        data = json.load(f)

    known = {f.name for f in fields(VisualizerConfig)}
    for key in sorted(set(data) - known):
        logger.warning("Ignoring unknown config key %r in %s", key, path)
    return replace(config, **{k: v for k, v in data.items() if k in known})
