"""
Pytest configuration file.
"""
import pytest

from termunify.config import config as termunify_config


def pytest_addoption(parser):
    parser.addoption(
        "--runslow", action="store_true", default=False, help="run slow tests"
    )


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--runslow"):
        # --runslow given in cli: do not skip slow tests
        return
    skip_slow = pytest.mark.skip(reason="need --runslow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture
def clean_config_fixture():
    """
    Restore the unification limits after tests that change them.
    """
    unification = dict(termunify_config["UNIFICATION"])
    benchmark = dict(termunify_config["BENCHMARK"])
    try:
        yield termunify_config
    finally:
        termunify_config.read_dict(
            {"UNIFICATION": unification, "BENCHMARK": benchmark}
        )
