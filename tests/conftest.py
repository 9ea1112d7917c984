import pytest

from versioncheck.config import CheckConfig

from helpers import write_manifest


@pytest.fixture
def project(tmp_path):
    """Project root with a consistent 19.2.0 manifest and nothing else."""
    write_manifest(tmp_path)
    return tmp_path


@pytest.fixture
def config(project) -> CheckConfig:
    return CheckConfig(root=project)
