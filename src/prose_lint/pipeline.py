"""Discover, read and lint files concurrently, streaming results per file."""

import asyncio
import glob
from collections.abc import Callable
from pathlib import Path

from common.logger import get_logger

from .linter import ProseLinter
from .locator import locate_suggestions
from .models import FileReport, LocatedSuggestion, RunSummary

logger = get_logger(__name__)


class FileProcessingError(Exception):
    """A file could not be read, decoded or linted."""

    def __init__(self, path: Path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"{path}: {cause}")


def _expand(patterns: list[str], base_dir: Path) -> list[Path]:
    paths: dict[Path, None] = {}
    for pattern in patterns:
        matches = glob.glob(pattern, root_dir=base_dir, recursive=True)
        files = [(base_dir / m).resolve() for m in sorted(matches)]
        files = [f for f in files if f.is_file()]
        if not files:
            logger.warning(f"No files match '{pattern}'")
        for f in files:
            paths.setdefault(f)
    return list(paths)


async def discover(patterns: list[str], base_dir: Path) -> list[Path]:
    """Expand glob patterns into absolute file paths.

    Args:
        patterns: Glob patterns, relative to base_dir or absolute; ``**``
            matches any number of directories
        base_dir: Directory relative patterns are resolved against

    Returns:
        Absolute paths of matching files, without duplicates, in the order
        they were first matched
    """
    return await asyncio.to_thread(_expand, patterns, Path(base_dir))


async def process_file(path: Path, linter: ProseLinter) -> FileReport:
    """Read, lint and locate the suggestions of one file.

    Reading happens off the event loop; linting and locating run to
    completion once the text is available.

    Args:
        path: File to lint
        linter: Linter to run over the file's text

    Returns:
        FileReport with suggestions in linter order

    Raises:
        FileProcessingError: If the file cannot be read, decoded or linted
    """
    try:
        text = await asyncio.to_thread(path.read_text, encoding="utf-8")
        suggestions = linter.lint(text)
    except Exception as e:
        raise FileProcessingError(path, e) from e

    logger.debug(f"{path}: {len(suggestions)} suggestion(s)")
    return FileReport(file=path, suggestions=locate_suggestions(path, text, suggestions))


async def lint_paths(
    patterns: list[str],
    base_dir: Path,
    linter: ProseLinter,
    emit: Callable[[LocatedSuggestion], None],
    max_concurrency: int = 16,
) -> RunSummary:
    """Lint every file matching the patterns and emit results as files finish.

    Files are processed concurrently, so records for different files arrive
    in completion order; records within a file keep linter order. A failing
    file does not cancel the others: the run emits every file that
    completes, then raises the first failure.

    Args:
        patterns: Glob patterns to expand
        base_dir: Directory relative patterns are resolved against
        linter: Linter to run over each file
        emit: Called once per located suggestion
        max_concurrency: Maximum number of files in flight

    Returns:
        RunSummary with the number of files and suggestions emitted

    Raises:
        FileProcessingError: The first file that failed, after the rest drain
    """
    if max_concurrency < 1:
        raise ValueError("max_concurrency must be at least 1")

    paths = await discover(patterns, base_dir)
    logger.debug(f"Linting {len(paths)} file(s) from {base_dir}")

    semaphore = asyncio.Semaphore(max_concurrency)

    async def bounded(path: Path) -> FileReport:
        async with semaphore:
            return await process_file(path, linter)

    tasks = [asyncio.create_task(bounded(p)) for p in paths]

    summary = RunSummary()
    failure: FileProcessingError | None = None

    for next_report in asyncio.as_completed(tasks):
        try:
            report = await next_report
        except FileProcessingError as e:
            logger.debug(f"Failed: {e}")
            if failure is None:
                failure = e
            continue

        for located in report.suggestions:
            emit(located)
        summary.files += 1
        summary.suggestions += len(report.suggestions)

    if failure is not None:
        raise failure

    return summary
