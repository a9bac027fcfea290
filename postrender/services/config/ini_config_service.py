# postrender/services/config/ini_config_service.py
from __future__ import annotations

import configparser
from pathlib import Path
from typing import Optional, List

from platformdirs import user_config_dir

from postrender.domain.interfaces import IConfigService
from postrender.utils.constants import APP_NAME


class IniConfigService(IConfigService):
    r"""
    INI-backed configuration reader.

    Load order (first hit wins):
      1. Explicit path provided at construction
      2. User config dir (e.g., ~/.config/PostRender/config.ini or %APPDATA%\PostRender\config.ini)
      3. Project default at <repo>/config/config.ini  (optional)
    """

    DEFAULT_APP_DIR = APP_NAME
    DEFAULT_FILE = "config.ini"

    def __init__(self, explicit_path: Optional[Path] = None, project_root: Optional[Path] = None):
        self._parser = configparser.ConfigParser(interpolation=None)
        self._loaded_from: Optional[Path] = None

        candidates: list[Path] = []
        if explicit_path:
            candidates.append(explicit_path)

        candidates.append(Path(user_config_dir(self.DEFAULT_APP_DIR)) / self.DEFAULT_FILE)

        if project_root:
            candidates.append(project_root / "config" / self.DEFAULT_FILE)

        for path in candidates:
            if not path.exists():
                continue
            parser = configparser.ConfigParser(interpolation=None)
            try:
                with path.open("r", encoding="utf-8") as fh:
                    parser.read_file(fh)
            except (OSError, UnicodeDecodeError, configparser.Error):
                # A broken file must not stop the post-render step; try the next one.
                continue
            self._parser = parser
            self._loaded_from = path
            break

        if "app" not in self._parser:
            self._parser["app"] = {}
        self._parser["app"].setdefault("version", "0.0.0")

    # ----- IConfigService -----

    def get(self, section: str, key: str, default: Optional[str] = None) -> Optional[str]:
        if section not in self._parser:
            return default
        return self._parser[section].get(key, default)

    def get_list(
        self, section: str, key: str, default: Optional[List[str]] = None
    ) -> Optional[List[str]]:
        """Multi-line value, one item per non-blank line."""
        val = self.get(section, key, None)
        if val is None:
            return default
        return [line.strip() for line in val.splitlines() if line.strip()]

    def app_version(self) -> str:
        return self.get("app", "version", "0.0.0") or "0.0.0"

    # ----- Extras -----

    @property
    def loaded_from(self) -> Optional[Path]:
        """For diagnostics (logged at startup)."""
        return self._loaded_from
