import pytest

from .. import config


def test_config_unification_limits(clean_config_fixture):
    assert config.get_max_substitution_size() == 10000000
    assert config.get_max_pending_pairs() == 1000000

    config.set_max_substitution_size(1000)
    assert config.get_max_substitution_size() == 1000
    assert config["UNIFICATION"]["max_substitution_size"] == "1000"

    config.set_max_pending_pairs(20)
    assert config.get_max_pending_pairs() == 20

    with pytest.raises(ValueError):
        config.set_max_substitution_size(0)

    with pytest.raises(ValueError):
        config.set_max_pending_pairs(-3)


def test_config_benchmark_sizes(clean_config_fixture):
    assert config.get_benchmark_sizes() == [1, 2, 4, 8, 12, 16]

    config.set_benchmark_sizes([3, 5])
    assert config.get_benchmark_sizes() == [3, 5]

    with pytest.raises(ValueError):
        config.set_benchmark_sizes([3, 0])


def test_config_fallbacks():
    empty_config = type(config)()
    assert empty_config.get_max_substitution_size() == 10000000
    assert empty_config.get_max_pending_pairs() == 1000000
    assert empty_config.get_benchmark_sizes() == [1, 2, 4, 8]

    empty_config.set_max_pending_pairs(5)
    assert empty_config.get_max_pending_pairs() == 5
