"""
Settings for the Mandelbrot viewer.

Defaults live on the Settings dataclass. A settings.json file next to the
package (or any path given on the command line) may override them, and
command-line flags override both.
"""

import json
import logging
import os
from dataclasses import dataclass, fields, replace

from .viewport import BASE_SPAN, DEFAULT_ITERATIONS, ITERATION_BASE, ITERATION_GAIN

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = os.path.join(os.path.dirname(__file__), 'settings.json')


@dataclass(frozen=True)
class Settings:
    resolution: int = 1024
    initial_span: float = BASE_SPAN
    initial_iterations: int = DEFAULT_ITERATIONS
    iteration_base: int = ITERATION_BASE
    iteration_gain: float = ITERATION_GAIN
    affirmative: str = "y"
    caption: str = "Mandelbrot Set"


def load_settings(path=None):
    """
    Load settings from a JSON file.

    A missing file gives the defaults. A file that cannot be parsed, or
    that is not a JSON object, prints a warning and also gives the
    defaults. Unknown keys are ignored.
    """
    settings_path = path or DEFAULT_SETTINGS_PATH
    try:
        with open(settings_path, 'r') as f:
            data = json.load(f)
    except FileNotFoundError:
        if path is not None:
            print(f"Warning: Could not load {settings_path}: file not found")
        return Settings()
    except json.JSONDecodeError as e:
        print(f"Warning: Could not load {settings_path}: {e}")
        return Settings()

    if not isinstance(data, dict):
        print(f"Warning: Could not load {settings_path}: expected a JSON object")
        return Settings()

    known = {f.name for f in fields(Settings)}
    overrides = {}
    for key, value in data.items():
        if key not in known:
            logger.warning("Ignoring unknown setting %r in %s", key, settings_path)
            continue
        overrides[key] = value
    return apply_overrides(Settings(), **overrides)


def apply_overrides(settings, **overrides):
    """Return a copy of settings with every non-None override applied and coerced."""
    defaults = Settings()
    values = {}
    for key, value in overrides.items():
        if value is None:
            continue
        kind = type(getattr(defaults, key))
        try:
            values[key] = kind(value)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid value for setting {key!r}: {value!r}") from e
    settings = replace(settings, **values)
    validate(settings)
    return settings


def validate(settings):
    """Raise ValueError if any setting is outside its usable range."""
    if settings.resolution < 1:
        raise ValueError(f"resolution must be >= 1, got {settings.resolution}")
    if not settings.initial_span > 0:
        raise ValueError(f"initial_span must be > 0, got {settings.initial_span}")
    if settings.initial_iterations < 1:
        raise ValueError(f"initial_iterations must be >= 1, got {settings.initial_iterations}")
    if settings.iteration_base < 1:
        raise ValueError(f"iteration_base must be >= 1, got {settings.iteration_base}")
    if settings.iteration_gain < 0:
        raise ValueError(f"iteration_gain must be >= 0, got {settings.iteration_gain}")
    if not settings.affirmative.strip():
        raise ValueError("affirmative token must not be empty")
