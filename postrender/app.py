from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from PyQt6.QtCore import QCoreApplication

from postrender.di.container import Container
from postrender.utils.constants import APP_NAME, APP_ORG
from postrender.utils.logging_setup import configure_logging

logger = logging.getLogger(__name__)


def run_app(argv: Sequence[str]) -> int:
    """
    Composes the services via the DI container and runs one post-render pass.

    ``argv[1]``, when given, replaces the configured root file. I/O errors are
    logged and re-raised so the process exits with a failure status.
    """
    QCoreApplication.setOrganizationName(APP_ORG)
    QCoreApplication.setApplicationName(APP_NAME)

    container = Container.default()
    configure_logging(container.config.log_level())

    logger.info("%s %s", APP_NAME, container.config.get_version())
    loaded_from = getattr(container.config, "loaded_from", None)
    if loaded_from is not None:
        logger.debug("Config loaded from %s", loaded_from)

    # Optional root file passed as first CLI argument
    root_file = Path(argv[1]) if len(argv) > 1 else None

    try:
        container.run_post_render(root_file)
    except OSError:
        logger.exception("Post-render failed for %s", root_file or container.config.root_file())
        raise

    return 0
