"""
Test MuncherConfig defaults and YAML loading.
"""

import tempfile
from pathlib import Path

import pytest

from muncher.config import MuncherConfig, load_config


def test_defaults():
    config = MuncherConfig()
    assert config.distance == "damerau_levenshtein"
    assert config.search_radius == 2
    assert config.merge_threshold == 2
    assert config.cluster_threshold == 2
    assert config.log_dir is None
    config.validate()


def test_from_dict_ignores_unknown_keys():
    config = MuncherConfig.from_dict({"merge_threshold": 1, "hooks": ["x"]})
    assert config.merge_threshold == 1
    assert config.to_dict()["merge_threshold"] == 1
    assert "hooks" not in config.to_dict()


def test_load_config_yaml():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "muncher.yaml"
        path.write_text(
            "distance: levenshtein\n"
            "cluster_threshold: 1\n"
            "verbose: false\n",
            encoding="utf-8",
        )

        config = load_config(path)
        assert config.distance == "levenshtein"
        assert config.cluster_threshold == 1
        assert config.search_radius == 2
        assert config.verbose is False


def test_load_config_empty_file_uses_defaults():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == MuncherConfig()


def test_load_config_errors():
    with tempfile.TemporaryDirectory() as tmpdir:
        with pytest.raises(FileNotFoundError):
            load_config(Path(tmpdir) / "missing.yaml")

        path = Path(tmpdir) / "bad.yaml"

        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ValueError, match="mapping"):
            load_config(path)

        path.write_text("merge_threshold: -1\n", encoding="utf-8")
        with pytest.raises(ValueError, match="merge_threshold"):
            load_config(path)

        path.write_text("distance: soundex\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Unknown distance"):
            load_config(path)
