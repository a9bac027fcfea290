from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from postrender.domain.interfaces import IAppConfig
from postrender.services.config.ini_config_service import IniConfigService
from postrender.utils.constants import (
    DEFAULT_EXCLUSIONS,
    DEFAULT_LOG_LEVEL,
    DEFAULT_ROOT_FILE,
)

_VERSION_RE = re.compile(r"^v?(\d+\.\d+\.\d+)(?:[-+].*)?$", re.IGNORECASE)

SECTION = "post_render"


def _project_root_fallback() -> Path:
    # postrender/services/config/app_config.py -> parents[3] = repository root
    return Path(__file__).resolve().parents[3]


def _read_version_file(version_path: Path) -> str | None:
    try:
        raw = version_path.read_text(encoding="utf-8").strip()
    except OSError:
        return None

    m = _VERSION_RE.match(raw)
    if not m:
        return None

    return m.group(1)


@dataclass(frozen=True)
class AppConfig(IAppConfig):
    """
    Adapter that wraps IniConfigService with the typed settings of a post-render run.

    Precedence for version:
      1) <project_root>/version file (semantic e.g. v1.0.0)
      2) ini_config_service.app_version() (fallback)
      3) "0.0.0"

    root_file / exclusions come from the [post_render] section, falling back to
    the built-in book defaults.
    """

    ini: IniConfigService
    project_root: Path

    def get_version(self) -> str:
        v = _read_version_file(self.project_root / "version")
        if v:
            return v

        v2 = (self.ini.app_version() or "").strip()
        if v2:
            m = _VERSION_RE.match(v2)
            return m.group(1) if m else v2

        return "0.0.0"

    def root_file(self) -> Path:
        raw = (self.ini.get(SECTION, "root_file", None) or "").strip()
        return Path(raw or DEFAULT_ROOT_FILE)

    def exclusions(self) -> list[str]:
        configured = self.ini.get_list(SECTION, "exclusions", None)
        if configured is None:
            return list(DEFAULT_EXCLUSIONS)
        return configured

    def log_level(self) -> str:
        return (self.ini.get("logging", "level", None) or DEFAULT_LOG_LEVEL).strip()

    # ---- delegate IniConfigService methods ----

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        return self.ini.get(section, key, default)

    def get_list(
        self, section: str, key: str, default: list[str] | None = None
    ) -> list[str] | None:
        return self.ini.get_list(section, key, default)

    def app_version(self) -> str:
        return self.ini.app_version()

    @property
    def loaded_from(self) -> Path | None:
        return self.ini.loaded_from


def build_app_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> AppConfig:
    root = project_root or _project_root_fallback()
    ini = IniConfigService(explicit_path=explicit_ini, project_root=root)
    return AppConfig(ini=ini, project_root=root)
