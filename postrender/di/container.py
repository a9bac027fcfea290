from __future__ import annotations

from pathlib import Path

from postrender.domain.interfaces import IAppConfig, IFileService
from postrender.services.config.app_config import build_app_config
from postrender.services.file_service import FileService
from postrender.services.line_excluder import LineExcluder


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Builds the LineExcluder on top of the file service
    """

    def __init__(
        self,
        config: IAppConfig | None = None,
        files: IFileService | None = None,
    ) -> None:
        self.config: IAppConfig = config or build_app_config()
        self.file_service: IFileService = files or FileService()
        self.line_excluder = LineExcluder(self.file_service)

    @staticmethod
    def default(*, explicit_ini: Path | None = None) -> Container:
        """Build a container backed by the standard config lookup."""
        return Container(config=build_app_config(explicit_ini=explicit_ini))

    def run_post_render(self, root_file: Path | None = None) -> Path:
        """
        Strip the configured exclusions from the root document.

        Returns the path that was rewritten.
        """
        path = root_file or self.config.root_file()
        self.line_excluder.exclude(path, self.config.exclusions())
        return path
