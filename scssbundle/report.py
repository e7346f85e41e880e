"""
Human readable reports of bundle results.
"""
import os

_UNITS = ["B", "kB", "MB", "GB", "TB"]


def format_bytes(size):
    """Format a byte count with decimal units, e.g. 1536 -> '1.54 kB'."""
    value = float(size)
    for unit in _UNITS:
        if abs(value) < 1000 or unit == _UNITS[-1]:
            break
        value /= 1000
    if unit == "B":
        return f"{int(value)} B"
    return f"{value:.3g} {unit}"


def _label(result, base_dir):
    path = result.file_path
    if base_dir:
        try:
            path = os.path.relpath(path, base_dir)
        except ValueError:
            # Different drive on Windows
            pass
    if result.cyclic:
        return f"{path} [CYCLE]"
    if not result.found:
        return f"{path} [NOT FOUND]"
    if result.deduped:
        return f"{path} [DEDUPED]"
    return path


def render_tree(result, base_dir=None):
    """
    Render an import tree:

        main.scss
        ├── _variables.scss
        └── missing.scss [NOT FOUND]
    """
    lines = [_label(result, base_dir)]

    def render_children(node, prefix):
        children = node.imports or []
        for i, child in enumerate(children):
            last = i == len(children) - 1
            lines.append(prefix + ("└── " if last else "├── ") + _label(child, base_dir))
            render_children(child, prefix + ("    " if last else "│   "))

    render_children(result, "")
    return "\n".join(lines)


def summarize(result):
    """Count the found, missing, deduped and cyclic imports below a result."""
    counts = {"found": 0, "not_found": 0, "deduped": 0, "cyclic": 0}
    for node in result.walk():
        if node is result:
            continue
        if node.cyclic:
            counts["cyclic"] += 1
        elif not node.found:
            counts["not_found"] += 1
        elif node.deduped:
            counts["deduped"] += 1
        else:
            counts["found"] += 1
    return counts
