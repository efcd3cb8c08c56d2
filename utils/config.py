from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union
from utils.logger import LEVELS, Logger
import yaml

# Fixed location beside the program, never the working directory
DEFAULT_CONFIG = Path(__file__).resolve().parent.parent / "config.yaml"

@dataclass(frozen=True)
class AppConfig:
    level: str = "warn"
    to_screen: bool = True
    to_file: bool = False
    log_dir: str = "Logs"

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> AppConfig:
        """Read the logging section of a YAML file, defaults when the file is absent"""
        cfg_path = Path(path) if path is not None else DEFAULT_CONFIG
        if not cfg_path.exists():
            return cls()
        try:
            with cfg_path.open(encoding="utf-8") as f:
                cfg = yaml.safe_load(f) or {}
            if not isinstance(cfg, dict):
                raise ValueError(f"{cfg_path}: top level must be a mapping")
            section = cfg.get("logging") or {}
            if not isinstance(section, dict):
                raise ValueError(f"{cfg_path}: 'logging' must be a mapping")
            return cls.from_dict(section)
        except (OSError, yaml.YAMLError, ValueError) as e:
            Logger().error(f"Configuration error: {e}")
            raise

    @classmethod
    def from_dict(cls, section: Dict[str, Any]) -> AppConfig:
        level = str(section.get("level", cls.level)).lower()
        if level not in LEVELS:
            raise ValueError(f"Unknown log level '{level}'")
        return cls(
            level=level,
            to_screen=_flag(section, "to_screen", cls.to_screen),
            to_file=_flag(section, "to_file", cls.to_file),
            log_dir=str(section.get("log_dir", cls.log_dir)),
        )

    def build_logger(self) -> Logger:
        """Replace the process logger with one built from this config"""
        Logger().close()
        Logger.reset()
        return Logger(level=self.level, to_screen=self.to_screen,
                      to_file=self.to_file, log_dir=self.log_dir)


def _flag(section: Dict[str, Any], key: str, default: bool) -> bool:
    value = section.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"'{key}' must be true or false, got {value!r}")
    return value
