import math

import pytest

from fundalgo.vector import Vector, main


def test_constructor_fills_default_and_doubles_capacity():
    vec = Vector(3, 1.5)
    assert list(vec) == [1.5, 1.5, 1.5]
    assert vec.capacity() == 6


def test_from_iterable_copies_values():
    vec = Vector.from_iterable([1, 2, 3])
    assert list(vec) == [1.0, 2.0, 3.0]
    assert vec.capacity() == 2 * len(vec)


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        Vector(-1)


def test_at_out_of_range_raises():
    vec = Vector.from_iterable([1, 2])
    with pytest.raises(IndexError):
        vec.at(2)
    with pytest.raises(IndexError):
        vec.at(-1)


def test_front_back_and_getitem():
    vec = Vector.from_iterable([4, 5, 6])
    assert vec.front() == 4
    assert vec.back() == 6
    assert vec[-1] == 6
    assert vec[0:2] == [4.0, 5.0]


def test_setitem_changes_element():
    vec = Vector.from_iterable([1, 2, 3])
    vec[1] = 9
    assert list(vec) == [1.0, 9.0, 3.0]
    with pytest.raises(IndexError):
        vec[3] = 1


def test_insert_in_middle_shifts():
    vec = Vector.from_iterable([1, 2, 3])
    vec.insert(1, 9)
    assert list(vec) == [1.0, 9.0, 2.0, 3.0]


def test_insert_past_end_extends_size():
    vec = Vector(2, 1)
    vec.insert(4, 7)
    assert len(vec) == 5
    assert vec[4] == 7
    assert vec[:2] == [1.0, 1.0]
    assert vec[2] == vec[3] == 0.0


def test_insert_past_capacity_reserves_index_plus_five():
    vec = Vector(2, 1)
    vec.insert(10, 5)
    assert vec.capacity() == 15
    assert len(vec) == 11
    assert vec.back() == 5


def test_insert_negative_index_raises():
    with pytest.raises(IndexError):
        Vector(2).insert(-1, 3)


def test_push_back_keeps_capacity_above_size():
    vec = Vector()
    expected = []
    for n in range(40):
        vec.push_back(n)
        expected.append(float(n))
        assert vec.capacity() > len(vec)
    assert list(vec) == expected


def test_erase_removes_element():
    vec = Vector.from_iterable([1, 2, 3])
    vec.erase(0)
    assert list(vec) == [2.0, 3.0]


def test_erase_at_size_drops_last():
    vec = Vector.from_iterable([1, 2, 3])
    vec.erase(3)
    assert list(vec) == [1.0, 2.0]


def test_erase_past_size_is_ignored():
    vec = Vector.from_iterable([1, 2, 3])
    vec.erase(7)
    assert list(vec) == [1.0, 2.0, 3.0]


def test_erase_after_shrink_to_fit():
    vec = Vector.from_iterable([1, 2, 3])
    vec.shrink_to_fit()
    vec.erase(1)
    assert list(vec) == [1.0, 3.0]


def test_pop_back_returns_last():
    vec = Vector.from_iterable([1, 2])
    assert vec.pop_back() == 2
    assert vec.pop_back() == 1
    assert len(vec) == 0
    with pytest.raises(IndexError):
        vec.pop_back()


def test_clear_keeps_capacity():
    vec = Vector(4, 2)
    cap = vec.capacity()
    vec.clear()
    assert len(vec) == 0
    assert vec.capacity() == cap


def test_resize_grow_and_shrink():
    vec = Vector.from_iterable([1, 2])
    vec.resize(5, 4)
    assert list(vec) == [1.0, 2.0, 4.0, 4.0, 4.0]
    vec.resize(1, 9)
    assert list(vec) == [1.0]


def test_reserve_and_shrink_to_fit():
    vec = Vector(2)
    vec.reserve(1)
    assert vec.capacity() == 4
    vec.reserve(10)
    assert vec.capacity() == 10
    vec.shrink_to_fit()
    assert vec.capacity() == len(vec)


def test_ordering_is_lexicographic_then_by_size():
    a = Vector.from_iterable([1, 2])
    assert a < Vector.from_iterable([1, 3])
    assert a < Vector.from_iterable([1, 2, 0])
    assert Vector.from_iterable([2]) > a
    assert a == Vector.from_iterable([1, 2])
    assert a <= Vector.from_iterable([1, 2])


def test_nan_is_unordered():
    a = Vector.from_iterable([math.nan])
    b = Vector.from_iterable([math.nan])
    assert not a == b
    assert not a < b
    assert not a > b


def test_str_lists_values():
    assert str(Vector.from_iterable([1, 2.5])) == "1 2.5 "


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines[0].split()) == int(lines[1])
    assert lines[1:] == ["54", "110", "899"]