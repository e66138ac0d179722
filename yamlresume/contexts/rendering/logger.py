"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

from yamlresume.utils.logger import setup_logger as _setup_logger

load_dotenv()

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, source: Path = None) -> Path:
    """
    Setup logger for rendering context.

    Configures loguru with provenance tracking and rendering-specific context.

    Args:
        log_dir: Directory for this rendering session
        source: Resume file being built

    Returns:
        Path to log file

    Example:
        from yamlresume.contexts.rendering.logger import setup_rendering_logger

        log_file = setup_rendering_logger(log_dir, source=Path("resume.yml"))
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={
            "Source": source,
            "LaTeX compiler": os.getenv("LATEX_COMPILER", "auto"),
        },
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_render_start(engine: str, template: str, layout_index: int) -> None:
    _log_debug(f"Rendering layout {layout_index}: {engine} ({template or 'default'})")


def log_render_result(engine: str, length: int) -> None:
    _log_debug(f"Rendered {engine}: {length} characters")


def log_compiler_check(result) -> None:
    """
    Log the outcome of a LaTeX compiler capability check.

    Args:
        result: CompilerCheckResult from check_latex_compiler()
    """
    if result.available:
        _log_info(f"LaTeX compiler available: {result.compiler} ({result.path})")
    else:
        _log_warning(result.error)


def log_build_result(source_name: str, result, elapsed_time: float) -> None:
    """
    Log build result with the files written.

    Args:
        source_name: Resume identifier
        result: BuildResult from build_resume()
        elapsed_time: Time taken to build
    """
    if result.success:
        _log_success(f"{source_name}: {len(result.outputs)} files written ({elapsed_time:.2f}s)")
        for output in result.outputs:
            _log_info(f"  {output}")
    else:
        _log_error(f"{source_name}: build failed ({elapsed_time:.2f}s)")
        for error in result.errors[:10]:
            _log_error(f"  {error}")
        if len(result.errors) > 10:
            _log_error(f"  ... and {len(result.errors) - 10} more errors")
