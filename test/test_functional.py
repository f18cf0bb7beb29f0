#!/usr/bin/env python3
"""Test module-level constructors and numpy interop"""

import numpy as np
import pytest

import dmx


def test_zeros_and_ones():
    z = dmx.zeros(2, 3)
    assert z.shape == (2, 3)
    assert z.dtype is float
    assert z.get_state() == ((0.0, 0.0, 0.0), (0.0, 0.0, 0.0))

    o = dmx.ones(3, 1, dtype=int)
    assert o.get_state() == ((1,), (1,), (1,))


def test_full():
    m = dmx.full(2, 2, 7)
    assert m == dmx.Matrix(2, 2, 7)


def test_eye_is_matmul_identity():
    a = dmx.from_list([[1.0, 2.0], [3.0, 4.0]])
    i = dmx.eye(2)
    assert i.get_state() == ((1.0, 0.0), (0.0, 1.0))
    assert a @ i == a
    assert i @ a == a


@pytest.mark.parametrize("n", [-2, 2.5, "3"])
def test_eye_rejects_invalid_size(n):
    with pytest.raises(dmx.ValidationError):
        dmx.eye(n)


def test_eye_empty():
    assert dmx.eye(0).shape == (0, 0)


def test_from_list():
    m = dmx.from_list([[1, 2, 3], [4, 5, 6]])
    assert m.shape == (2, 3)
    assert m.dtype is int
    assert m[1, 2] == 6


def test_from_list_empty():
    m = dmx.from_list([])
    assert m.shape == (0, 0)
    assert dmx.from_list([[], []]).shape == (2, 0)


def test_from_list_ragged():
    with pytest.raises(dmx.DimensionError):
        dmx.from_list([[1, 2], [3]])


def test_from_numpy():
    a = np.array([[1.0, 2.0], [3.0, 4.0]])
    m = dmx.from_numpy(a)
    assert m.shape == (2, 2)
    assert m.dtype is float
    assert m.tolist() == a.tolist()


def test_from_numpy_complex():
    a = np.array([[1 + 1j, 2], [3, 4 - 1j]])
    m = dmx.from_numpy(a)
    assert m.dtype is complex
    assert m[0, 0] == 1 + 1j


def test_from_numpy_rejects_wrong_ndim():
    with pytest.raises(dmx.DimensionError):
        dmx.from_numpy(np.zeros(3))
    with pytest.raises(dmx.DimensionError):
        dmx.from_numpy(np.zeros((2, 2, 2)))


def test_from_numpy_rejects_non_array():
    with pytest.raises(dmx.ValidationError):
        dmx.from_numpy([[1, 2]])


def test_array_accepts_list_and_numpy():
    data = [[1.0, 2.0], [3.0, 4.0]]
    assert dmx.array(data) == dmx.array(np.array(data))


def test_to_numpy_round_trip(rng):
    a = rng.standard_normal((3, 4))
    out = dmx.from_numpy(a).to_numpy()
    assert out.shape == (3, 4)
    np.testing.assert_array_equal(out, a)


def test_to_numpy_keeps_shape_of_empty_matrix():
    assert dmx.Matrix(0, 3, 1.0).to_numpy().shape == (0, 3)


def test_functional_aliases():
    a = dmx.from_list([[1, 2], [3, 4]])
    b = dmx.from_list([[0, 1], [1, 0]])
    assert dmx.transpose(a) == a.transpose()
    assert dmx.matmul(a, b) == a @ b
    assert dmx.tensor(a, b) == a.tensor(b)
    assert dmx.kron(a, b) == a.tensor(b)
    assert dmx.kron(a, b).tolist() == np.kron(a.to_numpy(), b.to_numpy()).tolist()
