"""
Build orchestration.

Turns one resume file into output files: read, validate, render every
layout, write. This module and the command line scripts are the only places
that touch the file system.
"""

import os
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

from dotenv import load_dotenv

from yamlresume.contexts.rendering.compiler import CompilerCheckResult, check_latex_compiler
from yamlresume.contexts.rendering.logger import _log_debug, _log_info, log_build_result
from yamlresume.contexts.rendering.selection import get_resume_renderer
from yamlresume.contexts.templating.preprocess import resolve_layouts, resume_to_dict
from yamlresume.contexts.templating.registries import TemplateRegistry
from yamlresume.contexts.validation import format_report, read_source, validate_source
from yamlresume.utils.errors import YAMLResumeError

load_dotenv()

# File extension written for each engine
OUTPUT_EXTENSIONS: Dict[str, str] = {
    "latex": ".tex",
    "html": ".html",
    "markdown": ".md",
}


@dataclass
class BuildResult:
    """
    Result of building one resume file.

    Attributes:
        success: Whether every layout was rendered and written
        outputs: Files written, in layout order
        errors: Formatted validation errors (empty on success)
        compiler: LaTeX compiler check, set when a .tex file was written
    """

    success: bool
    outputs: List[Path] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    compiler: Optional[CompilerCheckResult] = None


def default_output_dir(source_path: Path) -> Path:
    """YAMLRESUME_OUTPUT_DIR when set, else the source file's directory."""
    configured = os.getenv("YAMLRESUME_OUTPUT_DIR")
    return Path(configured) if configured else source_path.parent


def output_path(output_dir: Path, stem: str, engine: str, seen: Dict[str, int], index: int) -> Path:
    """
    <stem>.<ext> for the first layout of an engine, <stem>-<index>.<ext> after.

    Args:
        seen: Engines already written, updated in place
    """
    extension = OUTPUT_EXTENSIONS[engine]
    if engine in seen:
        return output_dir / f"{stem}-{index}{extension}"
    seen[engine] = index
    return output_dir / f"{stem}{extension}"


def write_output(path: Path, text: str) -> None:
    """
    Write one rendered file.

    Raises:
        YAMLResumeError: FILE_WRITE_ERROR
    """
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise YAMLResumeError("FILE_WRITE_ERROR", path=path) from e


def build_resume(
    source_path: Union[str, Path],
    output_dir: Optional[Union[str, Path]] = None,
    check_compiler: bool = True,
) -> BuildResult:
    """
    Validate a resume file and write one output per layout.

    Validation failures do not raise; they come back as formatted errors in
    an unsuccessful BuildResult. Configuration problems (missing file,
    unsupported extension, unknown engine or template) raise.

    Args:
        source_path: Resume file (.yaml, .yml or .json)
        output_dir: Directory for output files (default: YAMLRESUME_OUTPUT_DIR,
                    else beside the source)
        check_compiler: Look for a LaTeX compiler when a .tex file is written

    Returns:
        BuildResult with the written files

    Raises:
        YAMLResumeError: FILE_NOT_FOUND, FILE_READ_ERROR, INVALID_EXTNAME,
            INVALID_ENGINE, INVALID_TEMPLATE or FILE_WRITE_ERROR
    """
    source_path = Path(source_path)
    start_time = time.time()

    text, source_format = read_source(source_path)
    _log_info(f"Building {source_path.name} ({source_format})")

    report = validate_source(text, source_format=source_format, source_name=source_path.name)
    if not report.ok:
        result = BuildResult(success=False, errors=format_report(str(source_path), text, report))
        log_build_result(source_path.name, result, time.time() - start_time)
        return result

    output_dir = Path(output_dir) if output_dir is not None else default_output_dir(source_path)
    output_dir.mkdir(parents=True, exist_ok=True)

    document = resume_to_dict(report.resume)
    registry = TemplateRegistry()
    result = BuildResult(success=True)
    seen: Dict[str, int] = {}

    for index in range(len(resolve_layouts(document))):
        renderer = get_resume_renderer(document, layout_index=index, registry=registry)
        engine = renderer.view.engine

        path = output_path(output_dir, source_path.stem, engine, seen, index)
        write_output(path, renderer.render())
        result.outputs.append(path)
        _log_debug(f"Layout {index} ({engine}) written to {path}")

    if check_compiler and any(path.suffix == ".tex" for path in result.outputs):
        result.compiler = check_latex_compiler()

    log_build_result(source_path.name, result, time.time() - start_time)
    return result
