"""YAML-based configuration.

Settings are read from `--config PATH` when given, otherwise from
`.diffwith.yml` at the repository root. A missing file means defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path

import yaml

from diffwith.domain.revision import WORKING_TREE_LABEL
from diffwith.domain.viewer_kind import ViewerKind

CONFIG_FILENAME = ".diffwith.yml"
DEFAULT_DIFF_TOOL = "code --wait --diff $LOCAL $REMOTE"


class ConfigError(Exception):
    """Raised when a settings file exists but cannot be used."""

    pass


@dataclass
class Settings:
    """User settings.

    Attributes:
        diff_tool: Command template for the external diff tool
        viewer: Default viewer kind
        working_tree_label: Label shown for uncommitted changes
        legacy_labels: Keep the historical "deleted in X)" label verbatim
        log_level: Root log level name
    """

    diff_tool: str = DEFAULT_DIFF_TOOL
    viewer: ViewerKind = ViewerKind.TOOL
    working_tree_label: str = WORKING_TREE_LABEL
    legacy_labels: bool = False
    log_level: str = "WARNING"

    # --------------------------------------------------------
    # Factory Methods
    # --------------------------------------------------------

    @classmethod
    def from_dict(cls, data: dict) -> Settings:
        """Build settings from a parsed YAML mapping.

        Unknown keys are ignored.

        Raises:
            ConfigError: If a known key has the wrong type
        """
        settings = cls()
        for f in fields(cls):
            if f.name not in data:
                continue
            value = data[f.name]
            if f.name == "viewer":
                try:
                    value = ViewerKind.from_string(str(value))
                except ValueError as e:
                    raise ConfigError(str(e)) from e
            elif f.name == "legacy_labels":
                if not isinstance(value, bool):
                    raise ConfigError(f"legacy_labels must be true or false, got {value!r}")
            elif not isinstance(value, str):
                raise ConfigError(f"{f.name} must be a string, got {value!r}")
            setattr(settings, f.name, value)
        return settings

    @classmethod
    def load(cls, path: str | Path) -> Settings:
        """Load settings from a YAML file.

        Raises:
            ConfigError: If the file is not valid YAML or not a mapping
        """
        try:
            data = yaml.safe_load(Path(path).read_text())
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(f"{path} must contain a mapping of settings")
        return cls.from_dict(data)


def load_settings(config_path: str | None = None, repo_path: str | None = None) -> Settings:
    """Locate and load settings.

    Args:
        config_path: Explicit settings file; must exist when given
        repo_path: Repository root searched for .diffwith.yml

    Returns:
        Loaded settings, or defaults when no file is found

    Raises:
        ConfigError: If config_path does not exist or a file is invalid
    """
    if config_path is not None:
        if not Path(config_path).is_file():
            raise ConfigError(f"Config file does not exist: {config_path}")
        return Settings.load(config_path)

    if repo_path is not None:
        candidate = Path(repo_path) / CONFIG_FILENAME
        if candidate.is_file():
            return Settings.load(candidate)

    return Settings()
