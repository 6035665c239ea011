"""
Tests for GridStore and grid validation.
"""

import numpy as np
import pytest

from arc_editor.core.types import G, validate_grid, validate_color, to_list
from arc_editor.core.grid_store import GridStore, equals, is_all_zero
from arc_editor.core.errors import InvalidGrid, InvalidColor


def test_get_returns_read_only_view():
    store = GridStore([[1, 2], [3, 4]])
    g = store.get()
    assert g.shape == (2, 2)
    with pytest.raises(ValueError):
        g[0, 0] = 9
    assert store.cell(0, 0) == 1, "store must be unchanged after a rejected write"


def test_store_copies_input():
    src = G([[1, 0], [0, 1]])
    store = GridStore(src)
    src[0, 0] = 5
    assert store.cell(0, 0) == 1, "mutating the caller's array must not leak into the store"


def test_replace_wholesale():
    store = GridStore([[0]])
    store.replace([[1, 2, 3], [4, 5, 6]])
    assert store.shape == (2, 3)
    assert to_list(store.get()) == [[1, 2, 3], [4, 5, 6]]


@pytest.mark.parametrize("bad", [
    [],
    [[]],
    [[1, 2], [3]],
    [[0, 10]],
    [[-1]],
    [[1.5, 2]],
    [["a"]],
    [[[1]]],
    [[0] * 31],
    [[0]] * 31,
])
def test_replace_rejects_invalid(bad):
    store = GridStore([[7]])
    with pytest.raises(InvalidGrid):
        store.replace(bad)
    assert to_list(store.get()) == [[7]], "rejected replace must not mutate"


def test_bounds_accepted():
    assert validate_grid([[0] * 30] * 30).shape == (30, 30)
    assert validate_grid([[9]]).shape == (1, 1)


def test_equals():
    assert equals(G([[1, 2]]), [[1, 2]])
    assert not equals(G([[1, 2]]), G([[1], [2]])), "different shapes are never equal"
    assert not equals(G([[1, 2]]), G([[1, 3]]))
    assert GridStore.equals(G([[0]]), G([[0]]))


def test_is_all_zero():
    assert is_all_zero(G([[0, 0], [0, 0]]))
    assert not is_all_zero(G([[0, 0], [0, 3]]))
    assert GridStore.is_all_zero(np.zeros((3, 4), dtype=int))


def test_validate_color():
    assert validate_color(0) == 0
    assert validate_color(np.int64(9)) == 9
    for bad in (-1, 10, 1.0, "1", True, None):
        with pytest.raises(InvalidColor):
            validate_color(bad)
