from pathlib import Path

import pytest

from versioncheck.config import DIST_FILES, CheckConfig, default_config


def test_default_layout():
    config = default_config(root="/srv/react-umd")
    assert config.root == Path("/srv/react-umd")
    assert config.manifest_path == Path("/srv/react-umd/package.json")
    assert config.installed_descriptor_path == Path("/srv/react-umd/node_modules/react/package.json")
    assert config.dist_files == DIST_FILES
    assert config.dist_path(DIST_FILES[0]) == Path("/srv/react-umd/dist/react.production.min.js")


def test_installed_package_must_be_tracked():
    with pytest.raises(ValueError, match="'vue'"):
        CheckConfig(root="/srv/react-umd", installed_package="vue")


def test_installed_package_can_be_any_tracked_package():
    config = CheckConfig(root="/srv/react-umd", installed_package="react-dom")
    assert config.installed_descriptor_path.parent.name == "react-dom"
