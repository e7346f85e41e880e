import os
import sys
import tempfile

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from scssbundle.console import Verbosity, set_debug, set_verbosity


@pytest.fixture(autouse=True)
def reset_console():
    """Console settings are global; restore them after every test."""
    yield
    set_verbosity(Verbosity.VERBOSE)
    set_debug(False)


@pytest.fixture
def project():
    """A temporary project directory with a helper to write files into it."""
    with tempfile.TemporaryDirectory() as tmpdir:
        def write(relative_path, content=""):
            path = os.path.join(tmpdir, relative_path)
            os.makedirs(os.path.dirname(path), exist_ok=True)
            with open(path, 'w', encoding='utf-8', newline='') as f:
                f.write(content)
            return path

        write.root = tmpdir
        yield write
