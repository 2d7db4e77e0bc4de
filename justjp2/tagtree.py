"""Tag trees for code-block inclusion and zero-bitplane information."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass
class TagTreeNode:
    """One node: its value, the lower bound known so far, and whether it is known."""

    value: int = 0
    low: int = 0
    known: bool = False


class TagTree:
    """A quad tree whose parents hold the minimum of their children.

    Level 0 holds the leaves; each higher level halves (rounding up) the
    width and height until a single root remains.  Nodes are stored level
    by level, row-major within a level.
    """

    def __init__(self, num_leafs_h: int, num_leafs_v: int) -> None:
        if num_leafs_h < 1 or num_leafs_v < 1:
            raise ValueError("a tag tree needs at least one leaf in each direction")
        self.num_leafs_h = num_leafs_h
        self.num_leafs_v = num_leafs_v
        self._levels: list[tuple[int, int, int]] = []
        total = 0
        w, h = num_leafs_h, num_leafs_v
        while True:
            self._levels.append((total, w, h))
            total += w * h
            if w == 1 and h == 1:
                break
            w = (w + 1) // 2
            h = (h + 1) // 2
        self.nodes = [TagTreeNode() for _ in range(total)]

    def num_nodes(self) -> int:
        """Total number of nodes over all levels."""
        return len(self.nodes)

    def num_levels(self) -> int:
        """Number of levels, leaves included."""
        return len(self._levels)

    def reset(self) -> None:
        """Forget coding state while keeping the values."""
        for node in self.nodes:
            node.low = 0
            node.known = False

    def _index(self, level: int, h: int, v: int) -> int:
        start, w, _ = self._levels[level]
        return start + v * w + h

    def _path(self, leaf_h: int, leaf_v: int) -> list[int]:
        if not (0 <= leaf_h < self.num_leafs_h and 0 <= leaf_v < self.num_leafs_v):
            raise IndexError(f"leaf ({leaf_h}, {leaf_v}) outside the tree")
        path = []
        h, v = leaf_h, leaf_v
        for level in range(len(self._levels)):
            path.append(self._index(level, h, v))
            h //= 2
            v //= 2
        path.reverse()
        return path

    def set_value(self, leaf_h: int, leaf_v: int, value: int) -> None:
        """Set a leaf value and recompute the minimum in every ancestor."""
        self.nodes[self._path(leaf_h, leaf_v)[-1]].value = value
        h, v = leaf_h, leaf_v
        for level in range(1, len(self._levels)):
            ph, pv = h // 2, v // 2
            start, child_w, child_h = self._levels[level - 1]
            self.nodes[self._index(level, ph, pv)].value = min(
                self.nodes[start + cv * child_w + ch].value
                for cv in range(pv * 2, min(pv * 2 + 2, child_h))
                for ch in range(ph * 2, min(ph * 2 + 2, child_w))
            )
            h, v = ph, pv

    def encode(self, leaf_h: int, leaf_v: int, threshold: int) -> list[int]:
        """Code the leaf up to threshold, returning the bits emitted."""
        bits: list[int] = []
        low = 0
        for idx in self._path(leaf_h, leaf_v):
            node = self.nodes[idx]
            if node.known:
                low = node.value
                continue
            current = max(low, node.low)
            while current < threshold:
                if current >= node.value:
                    bits.append(1)
                    node.known = True
                    node.low = node.value
                    low = node.value
                    break
                bits.append(0)
                current += 1
            if not node.known:
                node.low = current
                low = current
        return bits

    def decode(
        self,
        bits: Iterable[int] | Iterator[int],
        leaf_h: int,
        leaf_v: int,
        threshold: int,
    ) -> int:
        """Read bits for the leaf up to threshold and return its value.

        Pass the same iterator to successive calls so that each call resumes
        where the previous one stopped.  Raises EOFError if bits run out.
        """
        source = iter(bits)
        low = 0
        path = self._path(leaf_h, leaf_v)
        for idx in path:
            node = self.nodes[idx]
            if node.known:
                low = node.value
                continue
            current = max(low, node.low)
            while current < threshold:
                try:
                    bit = next(source)
                except StopIteration:
                    raise EOFError("tag tree bit stream exhausted") from None
                if bit == 1:
                    node.value = current
                    node.known = True
                    node.low = current
                    low = current
                    break
                current += 1
            if not node.known:
                node.low = current
                low = current
        return self.nodes[path[-1]].value