"""
Resolution of @import paths to files on disk.

An import 'foo/bar' written in /styles/main.scss is looked up as
/styles/foo/bar.scss first and then as the partial /styles/foo/_bar.scss.
"""
import os

from .console import debug_log
from .models import ImportData

FILE_EXTENSION = ".scss"


def with_extension(import_path, extension=FILE_EXTENSION):
    """Append the default extension if it's absent."""
    if import_path.endswith(extension):
        return import_path
    return import_path + extension


def partial_path(full_path):
    """Return the underscored partial variant of a path: dir/name.scss -> dir/_name.scss."""
    dirname, basename = os.path.split(full_path)
    return os.path.join(dirname, f"_{basename}")


def file_exists(path):
    """Check for a regular file; any OS error counts as missing."""
    try:
        return os.path.isfile(path)
    except (OSError, ValueError):
        return False


def _find_in(directory, import_path):
    candidate = os.path.abspath(os.path.join(directory, import_path))
    if file_exists(candidate):
        return candidate
    partial = partial_path(candidate)
    if file_exists(partial):
        return partial
    return None


def resolve_import(import_string, raw_path, importing_dir, include_paths=()):
    """
    Resolve a directive's referenced path relative to the importing file.

    Args:
        import_string: The exact directive text that referenced the file
        raw_path: The path as written inside the directive
        importing_dir: Directory of the file containing the directive
        include_paths: Extra directories searched after importing_dir

    Returns:
        ImportData; when nothing matches, full_path is the plain
        (non-underscored) candidate next to the importing file.
    """
    import_path = with_extension(raw_path)
    import_data = ImportData(
        import_string=import_string,
        path=import_path,
        full_path=os.path.abspath(os.path.join(importing_dir, import_path)),
    )

    for directory in (importing_dir, *include_paths):
        found_path = _find_in(directory, import_path)
        if found_path is not None:
            import_data.full_path = found_path
            import_data.found = True
            break
    else:
        # Neither file, nor partial was found
        debug_log(f"Import not found: {import_string} (looked for {import_data.full_path})")

    return import_data
