"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[template]"


# Wrapper functions with automatic [template] prefix


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [template] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [template] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level templating-specific logging helpers


def log_terms_loaded(locale: str, path: Path) -> None:
    _log_debug(f"Loaded terms for {locale} from {path.name}")


def log_locale_fallback(requested: str, fallback: str) -> None:
    _log_debug(f"No terms for locale '{requested}', falling back to '{fallback}'")


def log_view_computed(engine: str, locale: str, sections: int) -> None:
    """Log a computed view summary."""
    _log_debug(f"Computed {engine} view ({locale}), {sections} sections in order")


def log_template_error(template_name: str, error: Exception) -> None:
    _log_error(f"Template {template_name} failed: {error}")
