"""
Configuration loading.

Settings come from an optional JSON file (scss-bundle.config.json in the
project directory) and are overridden by command-line values.
"""
import json
import os
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from .console import Verbosity, parse_verbosity
from .errors import ConfigError

CONFIG_FILE = "scss-bundle.config.json"


class BundlerConfig(BaseModel):
    """Validated settings for one scss-bundle run."""
    entry: Optional[str] = None
    dest: Optional[str] = None
    dedupe_globs: List[str] = Field(default_factory=list, alias="dedupeGlobs")
    include_paths: List[str] = Field(default_factory=list, alias="includePaths")
    ignored_imports: List[str] = Field(default_factory=list, alias="ignoredImports")
    verbosity: Verbosity = Verbosity.VERBOSE
    project_directory: str = Field(default_factory=os.getcwd, alias="projectDirectory")

    model_config = {"populate_by_name": True, "extra": "forbid"}

    @field_validator("verbosity", mode="before")
    @classmethod
    def _parse_verbosity(cls, value):
        return parse_verbosity(value)

    @field_validator("project_directory")
    @classmethod
    def _absolute_project(cls, value):
        return os.path.abspath(value)

    def resolve(self, path):
        """Resolve a path relative to the project directory."""
        if path is None:
            return None
        return os.path.abspath(os.path.join(self.project_directory, path))


def read_config_file(path):
    """Read a JSON config file into a dict. A missing file yields {}."""
    if not os.path.exists(path):
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not read config file: {e}", path=path)
    if not isinstance(data, dict):
        raise ConfigError("Config file must contain a JSON object", path=path)
    return data


def load_config(project_directory=None, config_file=None, overrides=None):
    """
    Build a BundlerConfig from the config file plus overrides.

    Args:
        project_directory: Base directory for relative paths (default: cwd)
        config_file: Explicit config path; relative to project_directory
        overrides: Values (field names or JSON keys) taking precedence over
            the file; None values are ignored

    Raises:
        ConfigError: If the file is unreadable or the values are invalid
    """
    project_directory = os.path.abspath(project_directory or os.getcwd())
    config_path = os.path.join(project_directory, config_file or CONFIG_FILE)
    if config_file and not os.path.exists(config_path):
        raise ConfigError("Config file not found", path=config_path)

    values = read_config_file(config_path)
    values.pop("projectDirectory", None)
    values.pop("project_directory", None)
    for key, value in (overrides or {}).items():
        if value is None:
            continue
        # Drop the file's spelling of the same setting before overriding
        field = BundlerConfig.model_fields.get(key)
        if field is not None and field.alias:
            values.pop(field.alias, None)
        values[key] = value
    values["project_directory"] = project_directory

    try:
        return BundlerConfig(**values)
    except (ValidationError, ValueError) as e:
        raise ConfigError(str(e), path=config_path,
                          suggestion="Check key names and value types in the config file")
