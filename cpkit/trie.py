"""Tries over lowercase words (with Aho-Corasick links) and over binary integers."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

ALPHABET = 26


@dataclass
class _TrieNode:
    count: int = 0
    fail: int = 0
    children: list[int] = field(default_factory=lambda: [0] * ALPHABET)

    def __getitem__(self, index: int) -> int:
        return self.children[index]


def _letter(c: str) -> int:
    x = ord(c) - ord("a")
    if not 0 <= x < ALPHABET:
        raise ValueError(f"only lowercase letters a-z are allowed, got {c!r}")
    return x


class Trie:
    """Trie of lowercase words; node 0 is the root and 0 also means "no child"."""

    def __init__(self) -> None:
        self._nodes = [_TrieNode()]

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, index: int) -> _TrieNode:
        return self._nodes[index]

    def insert(self, word: str) -> int:
        """Add ``word`` and return the index of its final node."""
        nodes = self._nodes
        u = 0
        for c in word:
            x = _letter(c)
            if not nodes[u].children[x]:
                nodes[u].children[x] = len(nodes)
                nodes.append(_TrieNode())
            u = nodes[u].children[x]
        nodes[u].count += 1
        return u

    def build_aho_corasick(self) -> None:
        """Set failure links and fill missing transitions into a full automaton."""
        nodes = self._nodes
        queue = deque(c for c in nodes[0].children if c)
        while queue:
            u = queue.popleft()
            node = nodes[u]
            fallback = nodes[node.fail].children
            for j, child in enumerate(node.children):
                if child:
                    nodes[child].fail = fallback[j]
                    queue.append(child)
                else:
                    node.children[j] = fallback[j]


class Trie01:
    """Binary trie of 31-bit non-negative integers for maximum XOR queries."""

    MAXBITS = 30

    def __init__(self) -> None:
        self._nodes: list[list[int]] = [[0, 0]]

    def _check(self, x: int) -> None:
        if not 0 <= x < 1 << (self.MAXBITS + 1):
            raise ValueError(f"value must lie in 0..{(1 << (self.MAXBITS + 1)) - 1}")

    def insert(self, x: int) -> None:
        self._check(x)
        nodes = self._nodes
        u = 0
        for i in range(self.MAXBITS, -1, -1):
            bit = x >> i & 1
            if not nodes[u][bit]:
                nodes[u][bit] = len(nodes)
                nodes.append([0, 0])
            u = nodes[u][bit]

    def xor_max(self, x: int) -> int:
        """Largest ``x ^ y`` over all inserted ``y``."""
        self._check(x)
        nodes = self._nodes
        if nodes[0] == [0, 0]:
            raise ValueError("the trie is empty")
        u = 0
        result = 0
        for i in range(self.MAXBITS, -1, -1):
            bit = x >> i & 1
            if nodes[u][bit ^ 1]:
                result = result * 2 + 1
                u = nodes[u][bit ^ 1]
            else:
                result *= 2
                u = nodes[u][bit]
        return result