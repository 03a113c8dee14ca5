"""Source mode settings for an editor instance."""

from dataclasses import dataclass
import json
import os
from typing import Any

from sourcemode.source_mode_exceptions import SourceModeSettingsError


@dataclass
class SourceModeSettings:
    """
    Settings controlling how source syntax is presented.

    Attributes:
        source_mode: Whether an editor starts in source mode
        fold_heading_prefix: Whether heading prefixes are kept in the heading's
            own text while in source mode, rather than shown as decorations
    """
    source_mode: bool = False
    fold_heading_prefix: bool = True

    @classmethod
    def create_default(cls) -> "SourceModeSettings":
        """Create a new SourceModeSettings object with default values."""
        return cls(source_mode=False, fold_heading_prefix=True)

    @staticmethod
    def _read_bool(data: dict[str, Any], key: str, default: bool) -> bool:
        value = data.get(key, default)
        if not isinstance(value, bool):
            raise SourceModeSettingsError(
                f"Setting '{key}' must be true or false",
                {'key': key, 'value': value}
            )

        return value

    @classmethod
    def from_dict(cls, data: Any) -> "SourceModeSettings":
        """
        Create settings from a dictionary.

        Args:
            data: Dictionary of settings, using the file's key names

        Returns:
            SourceModeSettings object; missing keys keep their defaults

        Raises:
            SourceModeSettingsError: If the data holds invalid values
        """
        if not isinstance(data, dict):
            raise SourceModeSettingsError("Settings must be a JSON object", {'data': data})

        settings = cls.create_default()
        settings.source_mode = cls._read_bool(data, "sourceMode", settings.source_mode)
        settings.fold_heading_prefix = cls._read_bool(data, "foldHeadingPrefix", settings.fold_heading_prefix)
        return settings

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the settings to a dictionary.

        Returns:
            Dictionary using the file's key names
        """
        return {
            "sourceMode": self.source_mode,
            "foldHeadingPrefix": self.fold_heading_prefix,
        }

    @classmethod
    def load(cls, path: str) -> "SourceModeSettings":
        """
        Load settings from file.

        Args:
            path: Path to the settings file

        Returns:
            SourceModeSettings object with loaded values

        Raises:
            json.JSONDecodeError: If file contains invalid JSON
            SourceModeSettingsError: If the file holds invalid values
        """
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        return cls.from_dict(data)

    def save(self, path: str) -> None:
        """
        Save settings to file.

        Args:
            path: Path to save the settings file

        Raises:
            OSError: If there's an issue creating the directory or writing the file
        """
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=4)
