"""Whole-sequence colour and 5/3 lifting steps for the reversible path."""

from __future__ import annotations

from typing import Sequence


def rct_forward_batch(
    c0: Sequence[int], c1: Sequence[int], c2: Sequence[int]
) -> tuple[list[int], list[int], list[int]]:
    """Forward reversible colour transform over R, G, B sequences.

    Y = floor((R + 2G + B) / 4), Cb = B - G, Cr = R - G.  Only the common
    length is transformed; samples past it are returned unchanged.
    """
    n = min(len(c0), len(c1), len(c2))
    y, cb, cr = [], [], []
    for r, g, b in zip(c0[:n], c1[:n], c2[:n]):
        y.append((r + 2 * g + b) >> 2)
        cb.append(b - g)
        cr.append(r - g)
    return y + list(c0[n:]), cb + list(c1[n:]), cr + list(c2[n:])


def rct_inverse_batch(
    c0: Sequence[int], c1: Sequence[int], c2: Sequence[int]
) -> tuple[list[int], list[int], list[int]]:
    """Inverse reversible colour transform over Y, Cb, Cr sequences.

    G = Y - floor((Cb + Cr) / 4), R = Cr + G, B = Cb + G.  Only the common
    length is transformed; samples past it are returned unchanged.
    """
    n = min(len(c0), len(c1), len(c2))
    red, green, blue = [], [], []
    for y, cb, cr in zip(c0[:n], c1[:n], c2[:n]):
        g = y - ((cb + cr) >> 2)
        red.append(cr + g)
        green.append(g)
        blue.append(cb + g)
    return red + list(c0[n:]), green + list(c1[n:]), blue + list(c2[n:])


def dwt53_predict_batch(even: Sequence[int], high: Sequence[int]) -> list[int]:
    """5/3 predict step: high[i] - ((even[i] + even[i+1]) >> 1).

    ``even`` must already carry the extended boundary sample, so it needs at
    least ``len(high) + 1`` elements.
    """
    if not high:
        return []
    if len(even) <= len(high):
        raise ValueError(
            f"even must have at least len(high)+1 elements "
            f"(got len(even)={len(even)}, len(high)={len(high)})"
        )
    return [h - ((a + b) >> 1) for h, a, b in zip(high, even, even[1:])]


def dwt53_update_batch(high_ext: Sequence[int], low: Sequence[int]) -> list[int]:
    """5/3 update step: low[i] + ((high[i-1] + high[i] + 2) >> 2).

    ``high_ext[0]`` is the mirrored high[-1] and ``high_ext[i+1]`` is high[i],
    so it needs at least ``len(low) + 1`` elements.
    """
    if not low:
        return []
    if len(high_ext) <= len(low):
        raise ValueError(
            f"high_ext must have at least len(low)+1 elements "
            f"(got len(high_ext)={len(high_ext)}, len(low)={len(low)})"
        )
    return [v + ((a + b + 2) >> 2) for v, a, b in zip(low, high_ext, high_ext[1:])]