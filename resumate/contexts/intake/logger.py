"""
Intake context logger.

Provides logging interface for intake context with automatic [intake] prefix.
All intake modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from resumate.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[intake]"


def setup_intake_logger(log_dir: Path, source: str = "text") -> Path:
    """
    Setup logger for intake context.

    Args:
        log_dir: Directory for this parsing session
        source: Description of the input for provenance (file name or "stdin")

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="intake",
        log_dir=log_dir,
        extra_provenance={"Source": source},
    )


# Wrapper functions with automatic [intake] prefix


def _log_info(message: str) -> None:
    """Log info message with [intake] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [intake] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [intake] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [intake] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level intake-specific logging helpers


def log_parse_start(source: str, char_count: int) -> None:
    """Log start of a parse with input size."""
    _log_info(f"Parsing {source} ({char_count} characters)")


def log_parse_result(source: str, record, elapsed_time: float) -> None:
    """
    Log a summary of the parsed record.

    Args:
        source: Input description
        record: ResumeRecord returned by parse_resume_text()
        elapsed_time: Time taken
    """
    _log_success(f"{source}: parse finished ({elapsed_time:.3f}s)")
    _log_info(f"  Name: {record.personal_info.full_name}")
    _log_info(
        f"  Experience: {len(record.experience)} | Education: {len(record.education)} | "
        f"Skill groups: {len(record.skills)} | Projects: {len(record.projects or [])}"
    )
