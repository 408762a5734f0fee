import re
import pytest

from pytest_displayfuzz.domains.fuzzing.errors import FuzzerConfigurationError
from pytest_displayfuzz.domains.fuzzing.identifiers import (
    ConfigModeInfoIdFuzzer,
    GsmIdFuzzer,
    MonitorNameFuzzer,
    draw_distinct,
)


@pytest.mark.parametrize("seed", range(10))
def test_monitor_names_are_distinct_and_never_empty(seed):
    names = MonitorNameFuzzer(seed).generate_several(162)

    assert len(names) == 162
    assert len(set(names)) == 162
    assert all(names)


def test_monitor_names_avoid_forbidden_names():
    """Verify that the names drawn first by a seed are skipped once forbidden."""
    forbidden = set(MonitorNameFuzzer(3).generate_several(5))

    names = MonitorNameFuzzer(3).generate_several(20, forbidden)

    assert len(names) == 20
    assert forbidden.isdisjoint(names)


def test_same_seed_same_names():
    assert MonitorNameFuzzer(11).generate_several(30) == MonitorNameFuzzer(11).generate_several(30)


def test_zero_values():
    assert MonitorNameFuzzer(0).generate_several(0) == []


@pytest.mark.parametrize("seed", range(5))
def test_gsm_parts(seed):
    gsm_parts = GsmIdFuzzer(seed).generate_several(162)

    assert len(set(gsm_parts)) == 162
    assert all(re.fullmatch(r"GSM[0-9A-F]{4}", gsm_part) for gsm_part in gsm_parts)


@pytest.mark.parametrize("seed", range(5))
def test_config_mode_info_ids(seed):
    ids = ConfigModeInfoIdFuzzer(seed).generate_several(162)

    assert len(set(ids)) == 162
    assert all(0 <= config_mode_info_id < 2 ** 32 for config_mode_info_id in ids)


def test_config_mode_info_ids_avoid_forbidden_ids():
    forbidden = set(ConfigModeInfoIdFuzzer(8).generate_several(3))

    ids = ConfigModeInfoIdFuzzer(8).generate_several(3, forbidden)

    assert forbidden.isdisjoint(ids)


class TestDrawDistinct:
    """Configuration errors instead of endless rejection sampling."""

    def test_domain_too_small(self):
        with pytest.raises(FuzzerConfigurationError, match="only 3 possible values"):
            draw_distinct(lambda: 1, 2, {5, 6}, 3, "thing")

    def test_draws_exhausted(self):
        with pytest.raises(FuzzerConfigurationError, match="Could not draw 2 distinct things"):
            draw_distinct(lambda: 1, 2, (), 10, "thing")

    def test_negative_count(self):
        with pytest.raises(FuzzerConfigurationError):
            draw_distinct(lambda: 1, -1, (), 10, "thing")

    def test_draws_in_order(self):
        values = iter([1, 1, 2, 4, 3])

        assert draw_distinct(lambda: next(values), 3, {4}, 10, "thing") == [1, 2, 3]
