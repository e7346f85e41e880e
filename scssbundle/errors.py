"""
Error types for scss-bundle.
"""


class ScssBundleError(Exception):
    """Base exception with a human readable message and an optional hint."""
    title = "Bundle Error"

    def __init__(self, message, path=None, suggestion=None):
        self.message = message
        self.path = path
        self.suggestion = suggestion  # How to fix it
        super().__init__(self._format_error())

    def _format_error(self):
        """Format the error message with the offending path and suggestion."""
        lines = [f"\n❌ {self.title}"]
        if self.path:
            lines.append(f" in {self.path}")
        lines.append(":\n")

        lines.append(f"   {self.message}\n")

        if self.suggestion:
            lines.append(f"   💡 {self.suggestion}\n")

        return "".join(lines)


class BundleError(ScssBundleError):
    """Raised by the launcher when an entry file cannot be bundled."""
    title = "Bundle Error"


class DedupeGlobError(ScssBundleError):
    """Raised when dedupe glob patterns cannot be expanded."""
    title = "Dedupe Glob Error"


class ConfigError(ScssBundleError):
    """Raised for unreadable or invalid configuration."""
    title = "Configuration Error"


class FileReadError(BundleError):
    """Raised when an existing file cannot be read or decoded."""
    title = "File Read Error"
