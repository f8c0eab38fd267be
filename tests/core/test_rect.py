import pytest

from dwell.types import Rect


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Rect(0, 0, -1, 4)


def test_edges_and_unpacking():
    r = Rect(10, 20, 30, 40)

    assert r.right == 40
    assert r.bottom == 60
    assert tuple(r) == (10, 20, 30, 40)


def test_scaled_around_truncates_toward_zero():
    # Blue witch idle placement on a 1920x1080 screen
    r = Rect.scaled_around(1920 // 15, 1080 / 1.5, 32, 48, 10.5)

    assert r == Rect(-40, 468, 336, 504)


def test_scaled_around_negative_fraction():
    r = Rect.scaled_around(0.0, 0.0, 3, 3, 1.0)

    assert (r.x, r.y) == (-1, -1)
