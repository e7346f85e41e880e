"""
Bundler for SCSS imports.

Recursively resolves "@import 'partial';" directives by inlining the bundled
content of the referenced files. Every file is read and bundled at most once
per run; files matched by the dedupe globs are inlined only at their first
import site.
"""
import os
import re
from concurrent.futures import ThreadPoolExecutor

from .console import debug_log
from .errors import DedupeGlobError, FileReadError
from .globs import expand_globs
from .models import BundleResult
from .registry import BundleRegistry
from .resolver import resolve_import

IMPORT_PATTERN = re.compile(r"""@import ['"](.+)['"];""")
COMMENTED_IMPORT_PATTERN = re.compile(r"//@import '(.+)';")

NOT_FOUND_MARKER = "/*** IMPORTED FILE NOT FOUND ***/"
CYCLE_MARKER = "/*** CIRCULAR IMPORT ***/"
END_MARKER = "/*** --- ***/"


def strip_commented_imports(content):
    """
    Remove commented-out "//@import '...';" directives.

    This is a textual match, not a comment parser: the same shape inside a
    string or a block comment is removed as well.
    """
    return COMMENTED_IMPORT_PATTERN.sub("", content)


def _marker(title, import_string):
    # Keep the directive visible in the output for easier debugging
    return f"{title}{os.linesep}{import_string}{END_MARKER}"


class Bundler:
    """
    Bundles SCSS entry files.

    A Bundler owns one BundleRegistry; everything bundled through the same
    instance shares its caches. Use a new instance (or reset()) for an
    independent run, and after a run that was abandoned half way.
    """

    def __init__(self, file_registry=None, project_directory=None, include_paths=None,
                 ignored_imports=None, glob_expander=expand_globs, max_workers=None):
        self.project_directory = os.path.abspath(project_directory or os.getcwd())
        self.include_paths = [
            os.path.join(self.project_directory, p) for p in (include_paths or [])
        ]
        self.ignored_imports = [re.compile(p) for p in (ignored_imports or [])]
        self.glob_expander = glob_expander
        self.max_workers = max_workers
        self.registry = BundleRegistry(file_registry)

    def reset(self):
        self.registry.clear()

    def bundle_all(self, files, dedupe_globs=None):
        """
        Bundle several entry files concurrently over the shared registry.

        Dedupe globs are expanded once for the whole batch. Results keep the
        order of ``files``.

        Raises:
            DedupeGlobError: If the dedupe globs cannot be expanded
        """
        dedupe_files = self._expand_dedupe_globs(dedupe_globs)
        if not files:
            return []

        with ThreadPoolExecutor(max_workers=self.max_workers,
                                thread_name_prefix="BundleWorker") as executor:
            futures = [executor.submit(self._bundle_entry, file, dedupe_files) for file in files]
            return [future.result() for future in futures]

    def bundle(self, file, dedupe_globs=None):
        """
        Bundle a single entry file.

        An entry that cannot be read yields BundleResult(found=False).

        Raises:
            DedupeGlobError: If the dedupe globs cannot be expanded
        """
        dedupe_files = self._expand_dedupe_globs(dedupe_globs)
        return self._bundle_entry(file, dedupe_files)

    def _expand_dedupe_globs(self, dedupe_globs):
        if not dedupe_globs:
            return frozenset()
        try:
            return frozenset(self.glob_expander(dedupe_globs, self.project_directory))
        except DedupeGlobError:
            raise
        except (OSError, ValueError) as e:
            # Never fall back to a partial dedupe set
            raise DedupeGlobError(f"Failed to expand dedupe globs {list(dedupe_globs)}: {e}") from e

    def _read_file(self, path):
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()

    def _bundle_entry(self, file, dedupe_files):
        file = os.fspath(file)
        # Resolve path to work only with full paths
        file_path = os.path.abspath(file)
        try:
            content = self._read_file(file_path)
            # Bundling mutates the shared registry; one entry at a time
            with self.registry.lock:
                return self._bundle_file(file_path, content, dedupe_files)
        except FileReadError as e:
            debug_log(f"Entry {file} could not be bundled: {e.message}")
            return BundleResult(file_path=file, found=False, error=f"{e.path}: {e.message}")
        except (OSError, UnicodeDecodeError, ValueError) as e:
            debug_log(f"Entry {file} could not be bundled: {e}")
            return BundleResult(file_path=file, found=False, error=f"{file}: {e}")

    def _is_ignored(self, raw_path):
        return any(pattern.search(raw_path) for pattern in self.ignored_imports)

    def _bundle_file(self, file_path, content, dedupe_files):
        registry = self.registry
        content = strip_commented_imports(content)
        dirname = os.path.dirname(file_path)

        registry.seed(file_path, content)
        registry.begin(file_path)
        debug_log(f"Bundling {file_path}")

        current_imports = []
        # Directives are substituted at their own position, so inlined text
        # that happens to contain the same directive is never rewritten again
        parts = []
        last = 0
        try:
            for match in IMPORT_PATTERN.finditer(content):
                import_string, raw_path = match.group(0), match.group(1)
                parts.append(content[last:match.start()])
                last = match.end()

                if self._is_ignored(raw_path):
                    debug_log(f"Ignoring {import_string} in {file_path}")
                    parts.append(import_string)
                    continue

                imp = resolve_import(import_string, raw_path, dirname, self.include_paths)
                current_import, content_to_replace = self._bundle_import(imp, dedupe_files)

                # Elide repeated inclusions of dedupe files
                if (current_import.found and imp.full_path in dedupe_files
                        and registry.usage(imp.full_path) > 1):
                    content_to_replace = ""
                    current_import.deduped = True
                    debug_log(f"Deduped {imp.full_path} in {file_path}")

                parts.append(content_to_replace)
                current_imports.append(current_import)
        finally:
            registry.end(file_path)

        parts.append(content[last:])
        content = "".join(parts)

        registry.store(file_path, content)
        registry.set_imports(file_path, current_imports)

        return BundleResult(
            file_path=file_path,
            found=True,
            bundled_content=content,
            imports=current_imports,
        )

    def _bundle_import(self, imp, dedupe_files):
        """Bundle or look up one resolved import. Returns (node, substitution text)."""
        registry = self.registry

        if not imp.found:
            result = BundleResult(file_path=imp.full_path, found=False)
            return result, _marker(NOT_FOUND_MARKER, imp.import_string)

        if registry.in_progress(imp.full_path):
            debug_log(f"Cycle detected: {imp.full_path} skipped")
            result = BundleResult(file_path=imp.full_path, found=False, cyclic=True)
            return result, _marker(CYCLE_MARKER, imp.import_string)

        if not registry.is_final(imp.full_path):
            try:
                imp_content = self._read_file(imp.full_path)
            except (OSError, UnicodeDecodeError, ValueError) as e:
                raise FileReadError(str(e), path=imp.full_path) from e
            result = self._bundle_file(imp.full_path, imp_content, dedupe_files)
            registry.store(imp.full_path, result.bundled_content)
            registry.mark_first_use(imp.full_path)
        else:
            registry.increment_usage(imp.full_path)
            result = BundleResult(
                file_path=imp.full_path,
                found=True,
                imports=registry.get_imports(imp.full_path),
            )

        if not registry.has_content(imp.full_path):
            return result, _marker(NOT_FOUND_MARKER, imp.import_string)
        return result, registry.get_content(imp.full_path)
