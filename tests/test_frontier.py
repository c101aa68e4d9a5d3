import pytest

from gridpath.core.frontier import Frontier


def test_pops_lowest_priority_first():
    fr = Frontier()
    fr.push((0, 0), (3,))
    fr.push((0, 1), (1,))
    fr.push((0, 2), (2,))
    assert [fr.pop()[1] for _ in range(3)] == [(0, 1), (0, 2), (0, 0)]


def test_equal_priorities_pop_in_insertion_order():
    fr = Frontier()
    for c in [(2, 2), (0, 0), (1, 1)]:
        fr.push(c, (5, True))
    assert [fr.pop()[1] for _ in range(3)] == [(2, 2), (0, 0), (1, 1)]


def test_push_keeps_duplicates():
    fr = Frontier()
    fr.push((1, 1), (4,))
    fr.push((1, 1), (2,))
    assert len(fr) == 2
    assert fr.pop() == ((2,), (1, 1))
    assert fr.pop() == ((4,), (1, 1))
    assert not fr


def test_update_rekeys_single_entry():
    fr = Frontier()
    assert fr.update((1, 1), (4, 2)) is True
    assert fr.update((2, 2), (3, 1)) is True
    assert fr.update((1, 1), (2, 0)) is False
    assert len(fr) == 2
    assert (1, 1) in fr
    assert fr.pop() == ((2, 0), (1, 1))
    assert (1, 1) not in fr
    assert fr.pop() == ((3, 1), (2, 2))
    assert not fr


def test_pop_empty_raises():
    fr = Frontier()
    with pytest.raises(KeyError):
        fr.pop()
    fr.update((0, 0), (1,))
    fr.update((0, 0), (0,))
    fr.pop()
    with pytest.raises(KeyError):
        fr.pop()


def test_clear():
    fr = Frontier()
    fr.push((0, 0), (1,))
    fr.update((0, 1), (1,))
    fr.clear()
    assert len(fr) == 0
    assert (0, 1) not in fr
