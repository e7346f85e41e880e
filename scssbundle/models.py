"""
Result models produced by the bundler.
"""
from typing import List, Optional

from pydantic import BaseModel


class ImportData(BaseModel):
    """Resolution outcome for a single @import directive."""
    import_string: str  # Exact directive text, e.g. @import 'vars';
    path: str           # Referenced path with the default suffix applied
    full_path: str
    found: bool = False


class BundleResult(BaseModel):
    """One node of the bundled import tree."""
    file_path: str
    found: bool
    bundled_content: Optional[str] = None
    deduped: bool = False
    # Why an entry could not be bundled
    error: Optional[str] = None
    cyclic: bool = False
    # Child imports in source order
    imports: Optional[List["BundleResult"]] = None

    def walk(self):
        """Yield this node and every descendant, depth-first."""
        yield self
        for child in self.imports or []:
            yield from child.walk()
