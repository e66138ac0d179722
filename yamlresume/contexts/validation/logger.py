"""
Validation context logger.

Provides logging interface for validation context with automatic [validate] prefix.
All validation modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from yamlresume.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[validate]"


def setup_validation_logger(log_dir: Path, source: Path = None) -> Path:
    """
    Setup logger for validation context.

    Args:
        log_dir: Directory for this validation session
        source: Resume file being validated

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="validate",
        log_dir=log_dir,
        extra_provenance={"Source": source},
    )


# Wrapper functions with automatic [validate] prefix


def _log_info(message: str) -> None:
    """Log info message with [validate] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [validate] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [validate] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [validate] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level validation-specific logging helpers


def log_validation_start(source_name: str, source_format: str) -> None:
    _log_debug(f"Validating {source_name} ({source_format})")


def log_validation_result(source_name: str, report) -> None:
    """
    Log a validation outcome.

    Args:
        source_name: Resume identifier or path
        report: ValidationReport from validate_source()
    """
    if report.parse_error is not None:
        _log_debug(f"{source_name}: parse failure: {report.parse_error.message}")
    elif report.errors:
        _log_debug(f"{source_name}: {len(report.errors)} violations")
        for error in report.errors:
            _log_debug(f"  {error.line}:{error.column} {error.dotted_path}: {error.message}")
    else:
        _log_debug(f"{source_name}: valid")


def log_report_summary(source_name: str, report) -> None:
    """Log a one-line summary at INFO level (used by the command line)."""
    if report.parse_error is not None:
        _log_warning(f"{source_name}: {report.parse_error.message}")
    elif report.errors:
        _log_warning(f"{source_name}: {len(report.errors)} schema violations")
    else:
        _log_success(f"{source_name}: resume is valid")
