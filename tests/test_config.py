"""Tests for configuration loading."""

from pathlib import Path

import pytest

from scaffolding.config import Config, load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("GOSTRAP_TEMPLATES_DIR", "GOSTRAP_REPO_URL", "GOSTRAP_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


class TestLoadConfig:
    """load_config."""

    def test_defaults(self, tmp_path: Path):
        config = load_config(tmp_path / "missing.toml")

        assert config.templates.marker_file == "go.mod"
        assert config.templates.metadata_file == "gostrap.json"
        assert config.templates.excluded_dirs == [".git", ".github"]
        assert config.project.post_create_commands == [["go", "get"], ["go", "mod", "tidy"]]
        assert config.templates.store_path.name == "templates"

    def test_file_values(self, tmp_path: Path):
        path = tmp_path / "gostrap.toml"
        path.write_text(
            '[templates]\n'
            f'templates_dir = "{(tmp_path / "store").as_posix()}"\n'
            'name_separator = "_"\n'
            '[project]\n'
            'init_git = false\n'
            '[logging]\n'
            'level = "DEBUG"\n'
        )

        config = load_config(path)

        assert config.templates.store_path == tmp_path / "store"
        assert config.templates.name_separator == "_"
        assert config.project.init_git is False
        assert config.logging.level == "DEBUG"

    def test_env_overrides_file(self, tmp_path: Path, monkeypatch):
        path = tmp_path / "gostrap.toml"
        path.write_text('[templates]\ndefault_repo_url = "https://example.com/a/b"\n')
        monkeypatch.setenv("GOSTRAP_REPO_URL", "https://example.com/c/d")
        monkeypatch.setenv("GOSTRAP_TEMPLATES_DIR", str(tmp_path / "env-store"))

        config = load_config(path)

        assert config.templates.default_repo_url == "https://example.com/c/d"
        assert config.templates.store_path == tmp_path / "env-store"

    def test_from_dict_empty(self):
        assert Config.from_dict({}) == Config()
