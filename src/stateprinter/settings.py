"""Registry settings management."""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from stateprinter.base.registry import DEFAULT_INDENT, get_current_culture


@dataclass
class RegistrySettings:
    """Default settings for newly created registries.

    Attributes:
        indent_increment: Indentation added per nesting level (four spaces)
        culture: Locale name used when rendering (default: current locale)
        warn_on_late_add: Log a warning when a value converter is added after
            resolutions have been cached
    """

    indent_increment: str = DEFAULT_INDENT
    culture: str = field(default_factory=get_current_culture)
    warn_on_late_add: bool = True

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "RegistrySettings":
        """Load settings from file.

        Args:
            config_path: Path to settings file. If None, uses default location.

        Returns:
            RegistrySettings instance (defaults if the file does not exist)
        """
        if config_path is None:
            config_path = Path.home() / ".stateprinter" / "settings.json"

        if not config_path.exists():
            return cls()

        with open(config_path, "r") as f:
            data = json.load(f)

        return cls(**data)

    def save(self, config_path: Optional[Path] = None) -> None:
        """Save settings to file.

        Args:
            config_path: Path to settings file. If None, uses default location.
        """
        if config_path is None:
            config_path = Path.home() / ".stateprinter" / "settings.json"

        config_path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "indent_increment": self.indent_increment,
            "culture": self.culture,
            "warn_on_late_add": self.warn_on_late_add,
        }

        with open(config_path, "w") as f:
            json.dump(data, f, indent=2)

    @classmethod
    def from_env(cls) -> "RegistrySettings":
        """Create settings from environment variables.

        Environment variables:
            STATEPRINTER_INDENT: Indentation string, or a number of spaces
            STATEPRINTER_CULTURE: Locale name (e.g., 'da_DK')
            STATEPRINTER_WARN_ON_LATE_ADD: Warn on late converter registration (true/false)

        Returns:
            RegistrySettings instance
        """
        settings = cls()

        indent = os.getenv("STATEPRINTER_INDENT")
        if indent:
            settings.indent_increment = (
                " " * int(indent) if indent.isdigit() else indent
            )

        if os.getenv("STATEPRINTER_CULTURE"):
            settings.culture = os.getenv("STATEPRINTER_CULTURE")

        if os.getenv("STATEPRINTER_WARN_ON_LATE_ADD"):
            settings.warn_on_late_add = (
                os.getenv("STATEPRINTER_WARN_ON_LATE_ADD", "").lower() == "true"
            )

        return settings


# Global settings instance
_global_settings: Optional[RegistrySettings] = None


def get_global_settings() -> RegistrySettings:
    """Get global registry settings.

    Returns:
        Global RegistrySettings instance
    """
    global _global_settings
    if _global_settings is None:
        _global_settings = RegistrySettings.from_env()
    return _global_settings


def set_global_settings(settings: Optional[RegistrySettings]) -> None:
    """Set global registry settings.

    Args:
        settings: RegistrySettings instance to use globally, or None to reset
    """
    global _global_settings
    _global_settings = settings
