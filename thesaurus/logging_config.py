"""
Centralized logging configuration for the thesaurus.

Separates logs into files by component:

    logs/
    ├── registry.log        # Synonym registry (merges, rejected input, unknown words)
    ├── cli.log             # Console session (start, menu actions, exit)
    ├── config.log          # Settings and seed file loading
    └── errors.log          # ALL errors from ALL components (ERROR+)

Usage:
    from thesaurus.logging_config import setup_logging
    setup_logging("cli")    # activates: cli, registry, config
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import structlog

# Relative to the working directory the process was started from
LOGS_DIR = Path("logs")

# ---------------------------------------------------------------------------
# Category → file mapping
# ---------------------------------------------------------------------------

LOG_CATEGORIES = {
    "registry": "registry.log",
    "cli": "cli.log",
    "config": "config.log",
}

# Which categories each process activates
PROCESS_CATEGORIES = {
    "cli": ["cli", "registry", "config"],
}

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

_initialized = False


def setup_logging(
    component: str = "cli",
    level: str = "DEBUG",
    logs_dir: Optional[Path] = None,
    console_level: str = "WARNING",
) -> None:
    """Configure logging with per-category file handlers.

    Args:
        component: Process name. Determines which log files are created.
        level: Minimum log level for files (DEBUG, INFO, WARNING, ERROR).
        logs_dir: Where log files go. Defaults to ./logs.
        console_level: Minimum level echoed to stderr. Kept high so the
                       interactive menu is not interleaved with log lines.
    """
    global _initialized
    if _initialized:
        return
    _initialized = True

    logs_dir = Path(logs_dir) if logs_dir is not None else LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)

    log_level = getattr(logging, level.upper(), logging.DEBUG)
    console_log_level = getattr(logging, console_level.upper(), logging.WARNING)

    # -----------------------------------------------------------------------
    # Root logger: console + errors.log
    # -----------------------------------------------------------------------
    root = logging.getLogger()
    root.setLevel(min(log_level, console_log_level))
    root.handlers.clear()

    fmt = logging.Formatter(
        "%(asctime)s [%(levelname)s] [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_h = logging.StreamHandler(sys.stderr)
    console_h.setLevel(console_log_level)
    console_h.setFormatter(fmt)
    root.addHandler(console_h)

    # errors.log — catches ERROR+ from every logger via propagation
    errors_h = logging.FileHandler(str(logs_dir / "errors.log"), encoding="utf-8")
    errors_h.setLevel(logging.ERROR)
    errors_h.setFormatter(fmt)
    root.addHandler(errors_h)

    # -----------------------------------------------------------------------
    # Per-category loggers with dedicated file handlers
    # -----------------------------------------------------------------------
    categories = PROCESS_CATEGORIES.get(component, list(LOG_CATEGORIES.keys()))

    for category in categories:
        log_file = LOG_CATEGORIES.get(category)
        if not log_file:
            continue

        cat_logger = logging.getLogger(category)
        cat_logger.setLevel(log_level)
        if not cat_logger.handlers:
            file_h = logging.FileHandler(
                str(logs_dir / log_file), encoding="utf-8",
            )
            file_h.setLevel(log_level)
            file_h.setFormatter(fmt)
            cat_logger.addHandler(file_h)
        # Propagate to root so console + errors.log still work
        cat_logger.propagate = True

    # -----------------------------------------------------------------------
    # structlog → stdlib bridge
    # -----------------------------------------------------------------------
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    init_logger = structlog.get_logger(component)
    init_logger.info(
        "logging_initialized",
        component=component,
        categories=categories,
        level=level,
        logs_dir=str(logs_dir),
    )
