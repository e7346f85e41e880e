"""
Expansion of dedupe glob patterns into absolute file paths.
"""
import glob
import os

from .errors import DedupeGlobError


def expand_globs(patterns, root=None):
    """
    Expand glob patterns into a sorted list of unique absolute paths.

    Relative patterns are matched against ``root`` (the current directory by
    default). ``**`` matches across directories.

    Raises:
        DedupeGlobError: If a pattern is not a string or cannot be expanded
    """
    if not patterns:
        return []

    root = os.path.abspath(root or os.getcwd())
    files = set()
    for pattern in patterns:
        if not isinstance(pattern, str) or not pattern:
            raise DedupeGlobError(
                f"Invalid dedupe glob: {pattern!r}",
                suggestion="Dedupe globs must be non-empty strings, e.g. 'styles/**/*.scss'"
            )
        full_pattern = pattern if os.path.isabs(pattern) else os.path.join(root, pattern)
        try:
            matches = glob.glob(full_pattern, recursive=True)
        except (OSError, ValueError) as e:
            raise DedupeGlobError(f"Failed to expand dedupe glob '{pattern}': {e}") from e
        files.update(os.path.abspath(match) for match in matches if os.path.isfile(match))

    return sorted(files)
