import logging
import os
from typing import List, Mapping, Optional, Tuple

from PyQt5 import QtWidgets

from seabattle.domain.config import DEBUG_ENV_VAR, DEBUG_LOG_PATH

# -----------------------------
# Debug helpers (enable with --debug or env SEABATTLE_DEBUG=1)
# -----------------------------
DEBUG_ENABLED = False

LOG_FORMAT = "[%(asctime)s] %(levelname)s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger("seabattle")

_TRUTHY = {"1", "true", "yes", "on"}


def debug_requested(argv: List[str], environ: Optional[Mapping[str, str]] = None) -> Tuple[bool, List[str]]:
    """Return (enabled, argv without --debug)."""
    if environ is None:
        environ = os.environ
    argv = list(argv)
    enabled = False
    if "--debug" in argv:
        enabled = True
        argv.remove("--debug")
    if environ.get(DEBUG_ENV_VAR, "").strip().lower() in _TRUTHY:
        enabled = True
    return enabled, argv


def enable_debug_log(path: Optional[str] = None) -> logging.Handler:
    """Route every ``seabattle.*`` logger at DEBUG and above into ``path``."""
    global DEBUG_ENABLED
    DEBUG_ENABLED = True
    handler = logging.FileHandler(path or DEBUG_LOG_PATH, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATEFMT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return handler


def debug_event(
    parent,
    title: str,
    message: str,
    details: str = "",
    *,
    force_popup: bool = False,
    level: str = "info",
) -> None:
    """Log a debug event and optionally show a popup."""
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO
    logger.log(log_level, "%s | %s", title, message)
    for ln in details.splitlines():
        logger.log(log_level, "    %s", ln)

    if not (DEBUG_ENABLED or force_popup):
        return

    box = QtWidgets.QMessageBox(parent)
    box.setWindowTitle(title)
    box.setText(message)
    if details:
        box.setDetailedText(details)
    if level == "error":
        box.setIcon(QtWidgets.QMessageBox.Critical)
    elif level == "warning":
        box.setIcon(QtWidgets.QMessageBox.Warning)
    else:
        box.setIcon(QtWidgets.QMessageBox.Information)
    box.exec_()
