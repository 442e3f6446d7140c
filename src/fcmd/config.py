"""User configuration for fcmd."""

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Self

from platformdirs import user_config_path

from fcmd.exceptions import ConfigValidationError
from fcmd.exceptions import InvalidModeError

DEFAULT_PERM = 0o750  # u=rwx, g=r-x, o=---
DEFAULT_PERM_ENV = "FCMD_DEFAULT_PERM"


def parse_mode(value: str | int) -> int:
    """Parse a permission mode.

    Args:
        value: Octal string ("750", "0o750") or an int used as-is

    Returns:
        Mode as an int

    Raises:
        InvalidModeError: If value is not octal or is outside 0o0-0o7777
    """
    if isinstance(value, bool):
        raise InvalidModeError(value)

    if isinstance(value, int):
        mode = value
    else:
        try:
            mode = int(value, 8)
        except (TypeError, ValueError) as e:
            raise InvalidModeError(value) from e

    if not 0 <= mode <= 0o7777:
        raise InvalidModeError(value)
    return mode


@dataclass
class Settings:
    """Settings read from the config file and environment."""

    default_perm: int = DEFAULT_PERM  # Mode for created files and directories

    @classmethod
    def default_path(cls) -> Path:
        """Get default config location using platformdirs."""
        return user_config_path("fcmd") / "config.json"

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {"default_perm": f"{self.default_perm:o}"}

    @classmethod
    def from_dict(cls, data: dict) -> Self:
        """Create from dict loaded from JSON. Missing keys keep defaults."""
        if not isinstance(data, dict):
            raise ConfigValidationError("Config must be a JSON object")

        settings = cls()
        if "default_perm" in data:
            try:
                settings.default_perm = parse_mode(data["default_perm"])
            except InvalidModeError as e:
                raise ConfigValidationError(f"Invalid 'default_perm': {e}") from e
        return settings

    @classmethod
    def load(
        cls, path: Path | None = None, environ: Mapping[str, str] | None = None
    ) -> Self:
        """Load settings from JSON file, then apply environment overrides.

        A missing file means defaults.

        Args:
            path: Path to config file. If None, uses default location.
            environ: Environment to read overrides from. If None, uses
                os.environ.

        Raises:
            ConfigValidationError: If the file or an override is invalid
        """
        if path is None:
            path = cls.default_path()
        if environ is None:
            environ = os.environ

        if path.exists():
            try:
                data = json.loads(path.read_text())
            except ValueError as e:
                # JSONDecodeError and UnicodeDecodeError are both ValueErrors
                raise ConfigValidationError(f"Invalid JSON in config: {e}") from e
            settings = cls.from_dict(data)
        else:
            settings = cls()

        override = environ.get(DEFAULT_PERM_ENV)
        if override:
            try:
                settings.default_perm = parse_mode(override)
            except InvalidModeError as e:
                raise ConfigValidationError(f"Invalid {DEFAULT_PERM_ENV}: {e}") from e

        return settings

    def save(self, path: Path | None = None) -> None:
        """Save settings to JSON file atomically.

        Args:
            path: Path to save config. If None, uses default location.
        """
        if path is None:
            path = self.default_path()

        path.parent.mkdir(parents=True, exist_ok=True)

        # Write to temp file, then rename
        temp_path = path.with_suffix(".tmp")
        temp_path.write_text(json.dumps(self.to_dict(), indent=2))
        temp_path.replace(path)
