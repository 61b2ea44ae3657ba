import pytest

from whistbook.services.whist import Points


def test_zeros():
    assert Points.zeros(5) == [0, 0, 0, 0, 0]
    assert Points.zeros(5).total == 0


def test_add_and_sub():
    a = Points([12, -4, -4, -4])
    b = Points([-11, 11, 11, -11])
    assert a + b == Points([1, 7, 7, -15])
    assert (a + b) - a == b
    assert -b == [11, -11, -11, 11]


def test_arity_must_match():
    with pytest.raises(ValueError):
        Points([1, 2, 3, 4]) + Points([1, 2, 3, 4, 5])
    with pytest.raises(ValueError):
        Points([1, 2, 3, 4]) - Points([1, 2, 3])


def test_is_immutable_value():
    a = Points([1, -1, 0, 0])
    with pytest.raises(TypeError):
        a[0] = 5
    assert hash(a) == hash(Points((1, -1, 0, 0)))
    assert a.to_list() == [1, -1, 0, 0]
    assert a.is_positive(0)
    assert not a.is_positive(2)


@pytest.mark.parametrize('value', [1.5, '1', True, None])
def test_only_integers(value):
    with pytest.raises(TypeError):
        Points([0, value, 0, 0])
