"""Project configuration for Trug.

Configuration lives in ``trug.yaml`` at the project root. Every key is optional;
missing keys fall back to ``DEFAULT_CONFIG`` and unknown keys are kept in
``ProjectConfig.extra`` so layouts can read them.

Key components:
- ProjectConfig: Immutable configuration handle passed to the layout context.
- load_config: Reads trug.yaml and applies defaults.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

CONFIG_FILENAME = "trug.yaml"

DEFAULT_CONFIG = {
    "title": "",
    "layout": "layout",
    "templates_dir": "templates",
}


class ConfigError(Exception):
    """Error raised when trug.yaml cannot be used.

    Attributes:
        config_path: Path to the offending configuration file.
        message: Human-readable error message.
    """

    def __init__(self, config_path: Path, message: str):
        self.config_path = config_path
        self.message = message
        super().__init__(f"{config_path}: {message}")


@dataclass(frozen=True)
class ProjectConfig:
    """Configuration of a Trug project.

    Attributes:
        root: Base directory of the site project.
        title: Site title exposed to layouts.
        layout: Name of the layout template to render.
        templates_dir: Directory (relative to root) holding layout templates.
        extra: Any other keys found in trug.yaml, read-only.
    """

    root: Path
    title: str = DEFAULT_CONFIG["title"]
    layout: str = DEFAULT_CONFIG["layout"]
    templates_dir: str = DEFAULT_CONFIG["templates_dir"]
    extra: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        # Frozen: assign through object.__setattr__ to normalize the inputs.
        object.__setattr__(self, "root", Path(self.root))
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))

    @property
    def templates_path(self) -> Path:
        """Absolute location of the layout templates."""
        return self.root / self.templates_dir

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a configuration value, including extra keys."""
        if key in DEFAULT_CONFIG:
            return getattr(self, key)
        return self.extra.get(key, default)


def load_config(project_root: Path | str) -> ProjectConfig:
    """Load project configuration from trug.yaml.

    Args:
        project_root: Root directory of the project.

    Returns:
        ProjectConfig with defaults applied for missing keys.

    Raises:
        ConfigError: If trug.yaml cannot be read, is not valid YAML or is not
            a mapping.
    """
    root = Path(project_root)
    config_path = root / CONFIG_FILENAME
    values: dict[str, Any] = DEFAULT_CONFIG.copy()
    extra: dict[str, Any] = {}
    if config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(config_path, f"Invalid YAML: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise ConfigError(config_path, f"Not valid UTF-8: {exc}") from exc
        except OSError as exc:
            raise ConfigError(config_path, f"Cannot read file: {exc}") from exc
        if not isinstance(loaded, dict):
            raise ConfigError(
                config_path,
                f"Expected a mapping at top level, got {type(loaded).__name__}",
            )
        for key, value in loaded.items():
            if key in DEFAULT_CONFIG:
                values[key] = "" if value is None else str(value)
            elif key == "root":
                continue
            else:
                extra[str(key)] = value
    return ProjectConfig(root=root, extra=extra, **values)
