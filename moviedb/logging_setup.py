"""Logging setup helpers for applications embedding the client."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure base logging and quiet the HTTP libraries."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def configure_debug_logging(modules_spec: str | None) -> None:
    """Enable DEBUG logs for moviedb modules, e.g. "client,infrastructure.cache"."""
    modules = _parse_csv(modules_spec)
    for module_name in modules:
        logging.getLogger(f"moviedb.{module_name}").setLevel(logging.DEBUG)
    if modules:
        logger.info("Enabling DEBUG logging for modules: %s", modules)


def _parse_csv(value: str | None) -> list[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]
