# scss-bundle - Core Bundling Components
"""
Core modules for scss-bundle:
- bundler: Recursive @import resolution and substitution
- resolver: Import path resolution (including _partial files)
- registry: Shared content cache, usage counter and child-import cache
- globs: Dedupe glob expansion
- config: Configuration file and command-line settings
- report: Import tree and size reporting
"""

from .errors import ScssBundleError, BundleError, ConfigError, DedupeGlobError
from .models import BundleResult, ImportData
from .bundler import Bundler
from .config import BundlerConfig, load_config

__all__ = [
    'ScssBundleError',
    'BundleError',
    'ConfigError',
    'DedupeGlobError',
    'BundleResult',
    'ImportData',
    'Bundler',
    'BundlerConfig',
    'load_config',
]
