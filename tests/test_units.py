import math

import pytest

from nettop.units import NO_TRAFFIC, humanize


@pytest.mark.parametrize("bps", [0, 0.5, 0.999, -3.0, math.nan])
def test_below_one_byte_is_placeholder(bps):
    assert humanize(bps) == NO_TRAFFIC == "--"


def test_bytes_have_no_decimals():
    assert humanize(1.0) == "1 B/s"
    assert humanize(500) == "500 B/s"
    assert humanize(1023.0) == "1023 B/s"


def test_kilobytes():
    assert humanize(1024) == "1.0 KB/s"
    assert humanize(2048) == "2.0 KB/s"
    assert humanize(1536) == "1.5 KB/s"


def test_scaled_value_above_hundred_drops_decimals():
    assert humanize(150 * 1024 * 1024) == "150 MB/s"
    assert humanize(99.5 * 1024) == "99.5 KB/s"
    assert humanize(512 * 1024) == "512 KB/s"


def test_gigabytes():
    assert humanize(3 * 1024**3) == "3.0 GB/s"


def test_ladder_saturates_at_gigabytes():
    assert humanize(1024**4) == "1024 GB/s"
    assert humanize(5 * 1024**5).endswith(" GB/s")


def test_is_pure():
    assert humanize(123456.0) == humanize(123456.0)
