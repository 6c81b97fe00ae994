import dataclasses

import pytest

from agptools.color import Color


def test_default_alpha_is_opaque():
    assert Color(10, 20, 30).a == 255


def test_str_format():
    assert str(Color(1, 2, 3)) == "(1, 2, 3, 255)"
    assert str(Color(1, 2, 3, 4)) == "(1, 2, 3, 4)"


def test_equality_and_hash():
    assert Color(1, 2, 3) == Color(1, 2, 3, 255)
    assert len({Color(1, 2, 3), Color(1, 2, 3, 255)}) == 1


def test_iteration():
    assert tuple(Color(5, 6, 7, 8)) == (5, 6, 7, 8)


@pytest.mark.parametrize("bad", [-1, 256])
def test_out_of_range_rejected(bad):
    with pytest.raises(ValueError):
        Color(bad, 0, 0)
    with pytest.raises(ValueError):
        Color(0, 0, 0, bad)


def test_non_int_rejected():
    with pytest.raises(TypeError):
        Color(1.5, 0, 0)


def test_frozen():
    c = Color(1, 2, 3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        c.r = 9
    assert c.r == 1
    assert tuple(c) == (1, 2, 3, 255)