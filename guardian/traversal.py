"""
File system traversal: walk directories and collect JavaScript/TypeScript files.

Each file found is analyzed on its own; nothing is shared between files.
Dependency, build and VCS directories are skipped by default.

Typical usage:
    from pathlib import Path
    from guardian.traversal import find_source_files

    sources = find_source_files(Path("./web"))

    # Custom ignore set
    sources = find_source_files(Path("./web"), ignore_dirs={"node_modules", "storybook"})
"""

import logging
from pathlib import Path
from typing import Callable, Optional, Set

from guardian.parser import SOURCE_EXTENSIONS

logger = logging.getLogger(__name__)

# Default directories to ignore during traversal
DEFAULT_IGNORE_DIRS: Set[str] = {
    # Dependencies
    "node_modules",
    "bower_components",
    "vendor",

    # Build output
    "build",
    "dist",
    "out",
    "coverage",
    ".next",
    ".nuxt",

    # Version control
    ".git",
    ".svn",
    ".hg",

    # IDE and editor directories
    ".vscode",
    ".idea",

    # Caches
    ".cache",
    ".turbo",
    "__pycache__",
}


def is_source_file(path: Path) -> bool:
    """
    Check if a file has a JavaScript/TypeScript extension (case-insensitive).

    Examples:
        >>> is_source_file(Path("App.tsx"))
        True
        >>> is_source_file(Path("styles.css"))
        False
    """
    return path.suffix.lower() in SOURCE_EXTENSIONS


def should_ignore_directory(dir_path: Path, ignore_dirs: Set[str]) -> bool:
    """Check the directory name (not the full path) against the ignore set."""
    return dir_path.name in ignore_dirs


def find_source_files(
    root: Path,
    ignore_dirs: Optional[Set[str]] = None,
    follow_symlinks: bool = False,
    filter_fn: Optional[Callable[[Path], bool]] = None,
) -> list[Path]:
    """
    Recursively find all JavaScript/TypeScript source files under root.

    Args:
        root: Root directory to start traversal from.
        ignore_dirs: Directory names to skip. If None, uses DEFAULT_IGNORE_DIRS.
        follow_symlinks: If True, follow symbolic links during traversal.
        filter_fn: Optional extra filter; only files for which it returns True
                   are kept.

    Returns:
        Sorted list of matching source files.

    Raises:
        FileNotFoundError: If root does not exist.
        NotADirectoryError: If root is not a directory.

    Notes:
        Permission errors on subdirectories are logged and skipped.
    """
    if ignore_dirs is None:
        ignore_dirs = DEFAULT_IGNORE_DIRS

    root = root.resolve()

    if not root.exists():
        logger.error("Root directory does not exist: %s", root)
        raise FileNotFoundError(f"Root directory does not exist: {root}")

    if not root.is_dir():
        logger.error("Root path is not a directory: %s", root)
        raise NotADirectoryError(f"Root path is not a directory: {root}")

    logger.info("Starting traversal from: %s", root)

    collected_files: list[Path] = []

    def _walk_directory(current_dir: Path) -> None:
        try:
            for entry in current_dir.iterdir():
                if entry.is_symlink() and not follow_symlinks:
                    logger.debug("Skipping symlink: %s", entry)
                    continue

                if entry.is_dir():
                    if should_ignore_directory(entry, ignore_dirs):
                        logger.debug("Ignoring directory: %s", entry)
                        continue
                    _walk_directory(entry)

                elif entry.is_file() and is_source_file(entry):
                    if filter_fn is not None and not filter_fn(entry):
                        logger.debug("Filtered out by custom filter: %s", entry)
                        continue
                    collected_files.append(entry)

        except PermissionError as e:
            logger.warning("Permission denied accessing directory %s: %s", current_dir, e)
        except OSError as e:
            logger.warning("Error accessing directory %s: %s", current_dir, e)

    _walk_directory(root)

    # Sort for deterministic ordering
    collected_files.sort()

    logger.info(
        "Traversal complete: found %d source file(s) in %s",
        len(collected_files),
        root,
    )
    return collected_files
