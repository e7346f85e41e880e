import os
import time

from scssbundle.bundler import Bundler
from scssbundle.console import Verbosity, get_verbosity, log, debug_log
from scssbundle.errors import BundleError
from scssbundle.report import format_bytes, render_tree, summarize


class Launcher:
    """Bundles the configured entry file and writes it to its destination."""

    def __init__(self, config):
        self.config = config

    def create_bundler(self):
        # A fresh bundler per run keeps caches from leaking between runs
        return Bundler(
            project_directory=self.config.project_directory,
            include_paths=self.config.include_paths,
            ignored_imports=self.config.ignored_imports,
        )

    def bundle(self):
        """
        Bundle the entry file and write the result to the destination.

        Returns:
            The BundleResult of the entry

        Raises:
            BundleError: If entry/dest are missing or the entry is not found
            DedupeGlobError: If the dedupe globs cannot be expanded
        """
        config = self.config
        if not config.entry or not config.dest:
            raise BundleError("'entry' and 'dest' are required.",
                              suggestion="Pass --entry and --dest or set them in the config file")

        entry = config.resolve(config.entry)
        dest = config.resolve(config.dest)

        start = time.perf_counter()
        result = self.create_bundler().bundle(entry, config.dedupe_globs)
        if not result.found:
            if not os.path.isfile(entry):
                raise BundleError("Entry file not found", path=entry)
            raise BundleError(f"Entry file could not be bundled: {result.error}", path=entry)

        self.write(dest, result.bundled_content)
        elapsed = time.perf_counter() - start
        debug_log(f"Bundled {entry} in {elapsed * 1000:.0f} ms")

        if get_verbosity() >= Verbosity.VERBOSE:
            log("Imports tree:\n" + render_tree(result, config.project_directory))
            counts = summarize(result)
            if counts["not_found"]:
                log(f"⚠️  {counts['not_found']} import(s) not found")
            if counts["cyclic"]:
                log(f"⚠️  {counts['cyclic']} circular import(s) skipped")
            if counts["deduped"]:
                log(f"{counts['deduped']} duplicate import(s) removed")
            size = len(result.bundled_content.encode("utf-8"))
            log(f"Bundle size: {format_bytes(size)}")
            log(f"Bundled successfully in: {os.path.relpath(dest, config.project_directory)}")

        return result

    def write(self, dest, content):
        dest_dir = os.path.dirname(dest)
        if dest_dir:
            os.makedirs(dest_dir, exist_ok=True)
        with open(dest, "w", encoding="utf-8", newline="") as f:
            f.write(content)
