"""Configuration Management Package"""

import json
import os
import sys
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class Config:
    """User configuration with sensible defaults."""
    use_emoji: bool = False
    dry_run: bool = False
    show_help: bool = True
    compact_height: int = 25  # Below this many rows only the active field is drawn

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults silently after warning.
        """
        warnings = []
        defaults = Config()

        for name in ("use_emoji", "dry_run", "show_help"):
            if not isinstance(getattr(self, name), bool):
                warnings.append(f"Invalid {name} '{getattr(self, name)}', using {str(getattr(defaults, name)).lower()}")
                setattr(self, name, getattr(defaults, name))

        if not isinstance(self.compact_height, int) or isinstance(self.compact_height, bool) or self.compact_height < 0:
            warnings.append(f"Invalid compact_height '{self.compact_height}', using {defaults.compact_height}")
            self.compact_height = defaults.compact_height

        return warnings

    def apply_env(self) -> None:
        """Apply CONVINCI_EMOJI / CONVINCI_DRY_RUN environment overrides."""
        emoji = os.environ.get('CONVINCI_EMOJI')
        if emoji is not None:
            self.use_emoji = emoji.strip().lower() in TRUTHY
        dry_run = os.environ.get('CONVINCI_DRY_RUN')
        if dry_run is not None:
            self.dry_run = dry_run.strip().lower() in TRUTHY

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        config = cls(**filtered)
        # Validate and print warnings to stderr
        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return config


class ConfigManager:
    """Finds and reads .convincirc.

    The first file found in ``search_dirs`` (current directory, then home,
    by default) wins. It is read once; callers get their own copy so CLI and
    environment overrides never leak back into the loaded values.
    """

    CONFIG_FILENAME = ".convincirc"

    def __init__(self, search_dirs: Optional[list[Path]] = None):
        self._search_dirs = search_dirs
        self._loaded: Optional[Config] = None
        self._loaded_from: Optional[Path] = None

    def candidates(self) -> list[Path]:
        dirs = self._search_dirs or [Path.cwd(), Path.home()]
        return [Path(d) / self.CONFIG_FILENAME for d in dirs]

    def find(self) -> Optional[Path]:
        return next((path for path in self.candidates() if path.is_file()), None)

    def load(self) -> Config:
        if self._loaded is None:
            self._loaded_from = self.find()
            self._loaded = self._read(self._loaded_from) if self._loaded_from else Config()
        return replace(self._loaded)

    @staticmethod
    def _read(path: Path) -> Config:
        try:
            data = json.loads(path.read_text(encoding='utf-8'))
            if not isinstance(data, dict):
                raise ValueError("expected a JSON object")
            return Config.from_dict(data)
        except (json.JSONDecodeError, ValueError, OSError) as e:
            print(f"Warning: Could not load {path}: {e}", file=sys.stderr)
            return Config()

    def get_config_path(self) -> Optional[Path]:
        """File the config was loaded from, None for defaults or before load()."""
        return self._loaded_from


_manager = ConfigManager()


def load_config() -> Config:
    return _manager.load()


def get_config_path() -> Optional[Path]:
    return _manager.get_config_path()


__all__ = [
    "Config",
    "ConfigManager",
    "load_config",
    "get_config_path",
]
