"""
Shared state for one bundling run.

The registry memoizes bundled file contents, counts how often every file is
imported and remembers the child imports of each bundled file. One registry is
shared by all entries of a run; callers hold ``lock`` around any sequence of
reads and writes that must be consistent.
"""
import threading


class BundleRegistry:
    """File content cache, usage counter and child-import cache."""

    def __init__(self, file_registry=None):
        self.lock = threading.RLock()
        # Full path -> bundled content (raw content while the file is in progress)
        self._contents = dict(file_registry or {})
        # Paths whose final content has been written
        self._final = set(self._contents)
        # Full paths of used imports and their count
        self._usage = {}
        # Imports list by file
        self._imports_by_file = {}
        # Paths currently being bundled
        self._in_progress = set()

    # --- File content cache ---

    def has_content(self, path):
        with self.lock:
            return path in self._contents

    def get_content(self, path):
        with self.lock:
            return self._contents.get(path)

    def seed(self, path, raw_content):
        """Store raw content for a path that has no entry yet."""
        with self.lock:
            if path not in self._contents:
                self._contents[path] = raw_content

    def store(self, path, bundled_content):
        """
        Store the final bundled content of a path.

        The first final write wins; later writes for the same path are ignored.
        Returns True if the content was stored.
        """
        with self.lock:
            if path in self._final:
                return False
            self._contents[path] = bundled_content
            self._final.add(path)
            return True

    def is_final(self, path):
        with self.lock:
            return path in self._final

    # --- Usage counter ---

    def mark_first_use(self, path):
        """Count the first import of a path, unless it was counted already."""
        with self.lock:
            return self._usage.setdefault(path, 1)

    def increment_usage(self, path):
        with self.lock:
            self._usage[path] = self._usage.get(path, 0) + 1
            return self._usage[path]

    def usage(self, path):
        with self.lock:
            return self._usage.get(path, 0)

    # --- Child-import cache ---

    def set_imports(self, path, imports):
        with self.lock:
            self._imports_by_file[path] = imports

    def get_imports(self, path):
        with self.lock:
            return self._imports_by_file.get(path, [])

    # --- Cycle tracking ---

    def begin(self, path):
        with self.lock:
            self._in_progress.add(path)

    def end(self, path):
        with self.lock:
            self._in_progress.discard(path)

    def in_progress(self, path):
        with self.lock:
            return path in self._in_progress

    def clear(self):
        """Drop all state so the registry can serve an independent run."""
        with self.lock:
            self._contents.clear()
            self._final.clear()
            self._usage.clear()
            self._imports_by_file.clear()
            self._in_progress.clear()
