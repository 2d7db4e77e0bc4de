import pytest

from justjp2.batch import (
    dwt53_predict_batch,
    dwt53_update_batch,
    rct_forward_batch,
    rct_inverse_batch,
)


def test_rct_forward_batch_small():
    y, cb, cr = rct_forward_batch([100], [150], [200])
    assert y == [150]
    assert cb == [50]
    assert cr == [-50]


def test_rct_forward_white():
    assert rct_forward_batch([255], [255], [255]) == ([255], [0], [0])


@pytest.mark.parametrize("n", [0, 1, 3, 4, 5, 7, 8, 13])
def test_rct_roundtrip_lengths(n):
    r = [(i * 37 + 5) % 256 for i in range(n)]
    g = [(i * 91 + 17) % 256 for i in range(n)]
    b = [(i * 53 + 200) % 256 for i in range(n)]
    fwd = rct_forward_batch(r, g, b)
    assert rct_inverse_batch(*fwd) == (r, g, b)


def test_rct_roundtrip_negative_values():
    r = [-100, 5, -3, 77, -1]
    g = [20, -40, 0, -77, 1]
    b = [-5, -5, 9, 3, -128]
    assert rct_inverse_batch(*rct_forward_batch(r, g, b)) == (r, g, b)


def test_rct_forward_leaves_tail_unchanged():
    y, cb, cr = rct_forward_batch([4, 4, 4, 9, 9], [4, 4, 4], [4, 4, 4, 8])
    assert y == [4, 4, 4, 9, 9]
    assert cb == [0, 0, 0]
    assert cr == [0, 0, 0, 8]


def test_rct_inverse_does_not_mutate_inputs():
    c0, c1, c2 = [10, 20], [1, 2], [3, 4]
    rct_inverse_batch(c0, c1, c2)
    assert (c0, c1, c2) == ([10, 20], [1, 2], [3, 4])


def test_predict_values():
    even = [1, 3, 5, 7, 9, 11]
    high = [10, 10, 10, 10, 10]
    assert dwt53_predict_batch(even, high) == [8, 6, 4, 2, 0]


def test_predict_floors_negative():
    assert dwt53_predict_batch([-3, 0], [0]) == [2]


def test_predict_empty_high():
    assert dwt53_predict_batch([], []) == []


def test_predict_requires_extended_even():
    with pytest.raises(ValueError):
        dwt53_predict_batch([1, 2, 3], [1, 2, 3])


def test_update_values():
    assert dwt53_update_batch([0, 4, 8], [1, 1]) == [2, 4]


def test_update_empty_low():
    assert dwt53_update_batch([5], []) == []


def test_update_requires_extended_high():
    with pytest.raises(ValueError):
        dwt53_update_batch([1, 2], [1, 2])


def test_predict_chunk_and_tail_consistent():
    even = list(range(0, 20, 2))
    high = [100] * 9
    out = dwt53_predict_batch(even, high)
    assert out == [100 - ((even[i] + even[i + 1]) >> 1) for i in range(9)]