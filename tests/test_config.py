"""
Unit tests for configuration loading.
"""
import json
import os

import pytest

from scssbundle.config import BundlerConfig, load_config
from scssbundle.console import Verbosity
from scssbundle.errors import ConfigError


def write_config(project, data, name='scss-bundle.config.json'):
    return project(name, json.dumps(data))


class TestLoadConfig:

    def test_defaults_without_config_file(self, project):
        config = load_config(project.root)

        assert config.entry is None
        assert config.dest is None
        assert config.dedupe_globs == []
        assert config.verbosity == Verbosity.VERBOSE
        assert config.project_directory == os.path.abspath(project.root)

    def test_reads_camel_case_keys(self, project):
        write_config(project, {
            "entry": "src/main.scss",
            "dest": "dist/bundle.scss",
            "dedupeGlobs": ["src/_vars.scss"],
            "includePaths": ["vendor"],
            "ignoredImports": ["^~"],
            "verbosity": "Errors",
        })

        config = load_config(project.root)

        assert config.entry == "src/main.scss"
        assert config.dedupe_globs == ["src/_vars.scss"]
        assert config.include_paths == ["vendor"]
        assert config.ignored_imports == ["^~"]
        assert config.verbosity == Verbosity.ERRORS

    def test_overrides_win_over_file(self, project):
        write_config(project, {"entry": "a.scss", "dest": "out.scss", "dedupeGlobs": ["x"]})

        config = load_config(project.root, overrides={
            "entry": "b.scss",
            "dest": None,
            "dedupe_globs": ["y"],
        })

        assert config.entry == "b.scss"
        assert config.dest == "out.scss"
        assert config.dedupe_globs == ["y"]

    def test_explicit_config_file(self, project):
        write_config(project, {"entry": "custom.scss"}, name='configs/custom.json')

        config = load_config(project.root, config_file='configs/custom.json')

        assert config.entry == "custom.scss"

    def test_missing_explicit_config_file(self, project):
        with pytest.raises(ConfigError):
            load_config(project.root, config_file='nope.json')

    def test_malformed_json(self, project):
        project('scss-bundle.config.json', '{not json')

        with pytest.raises(ConfigError):
            load_config(project.root)

    def test_non_object_json(self, project):
        write_config(project, ["entry"])

        with pytest.raises(ConfigError):
            load_config(project.root)

    def test_unknown_key(self, project):
        write_config(project, {"entyr": "main.scss"})

        with pytest.raises(ConfigError):
            load_config(project.root)

    def test_invalid_verbosity(self, project):
        with pytest.raises(ConfigError):
            load_config(project.root, overrides={"verbosity": "Loud"})


class TestBundlerConfig:

    def test_resolve_relative_to_project(self, project):
        config = BundlerConfig(project_directory=project.root)

        assert config.resolve('src/main.scss') == os.path.join(os.path.abspath(project.root), 'src', 'main.scss')
        assert config.resolve(None) is None

    def test_numeric_verbosity(self):
        assert BundlerConfig(verbosity=0).verbosity == Verbosity.NONE
