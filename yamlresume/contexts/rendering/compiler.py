"""
LaTeX Compiler Capability Check

Reports whether a supported LaTeX compiler (xelatex or tectonic) is on the
PATH. Running the compiler stays with the caller.
"""

import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv

from yamlresume.contexts.rendering.logger import log_compiler_check
from yamlresume.utils.errors import YAMLResumeError

load_dotenv()

# Checked in this order unless LATEX_COMPILER names one of them
SUPPORTED_COMPILERS: Tuple[str, ...] = ("xelatex", "tectonic")


@dataclass
class CompilerCheckResult:
    """
    Result of a LaTeX compiler lookup.

    Attributes:
        available: Whether a supported compiler was found
        compiler: Name of the compiler found (None if not available)
        path: Path to its executable (None if not available)
        error: Message of the LATEX_NOT_FOUND error when nothing was found
    """

    available: bool
    compiler: Optional[str] = None
    path: Optional[Path] = None
    error: Optional[str] = None


def _candidates(preferred: Optional[str]) -> Tuple[str, ...]:
    if preferred in SUPPORTED_COMPILERS:
        return (preferred,) + tuple(name for name in SUPPORTED_COMPILERS if name != preferred)
    return SUPPORTED_COMPILERS


def check_latex_compiler(preferred: Optional[str] = None) -> CompilerCheckResult:
    """
    Look for a supported LaTeX compiler.

    Args:
        preferred: Compiler to try first (default: LATEX_COMPILER from environment)

    Returns:
        CompilerCheckResult describing the first compiler found
    """
    if preferred is None:
        preferred = os.getenv("LATEX_COMPILER")

    for name in _candidates(preferred):
        executable = shutil.which(name)
        if executable:
            result = CompilerCheckResult(available=True, compiler=name, path=Path(executable))
            log_compiler_check(result)
            return result

    result = CompilerCheckResult(available=False, error=YAMLResumeError("LATEX_NOT_FOUND").message)
    log_compiler_check(result)
    return result


def require_latex_compiler(preferred: Optional[str] = None) -> CompilerCheckResult:
    """
    Like check_latex_compiler, but fail when no compiler is available.

    Raises:
        YAMLResumeError: LATEX_NOT_FOUND
    """
    result = check_latex_compiler(preferred)
    if not result.available:
        raise YAMLResumeError("LATEX_NOT_FOUND")
    return result
