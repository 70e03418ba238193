"""Editable text held as a doubly linked list of byte pieces."""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from typing import Iterator, Optional, Union

_WORD_BYTES = frozenset((string.ascii_letters + string.digits + "_").encode("ascii"))

BytesLike = Union[bytes, bytearray, memoryview]


class PieceBuffer:
    """Growing byte store that inserted text is written to.

    ``pos`` is the write position; bytes past it are free to be overwritten.
    """

    def __init__(self) -> None:
        self.data = bytearray()
        self.pos = 0

    def append(self, data: BytesLike) -> int:
        """Write ``data`` at the write position and return where it starts."""
        start = self.pos
        end = start + len(data)
        self.data[start:end] = data
        self.pos = end
        return start


@dataclass(eq=False)
class StringNode:
    """One piece: ``length`` bytes of ``source`` from ``start``."""

    source: Union[bytes, bytearray]
    start: int
    length: int
    prev: Optional[StringNode] = field(default=None, repr=False)
    next: Optional[StringNode] = field(default=None, repr=False)

    @property
    def data(self) -> bytes:
        return bytes(self.source[self.start:self.start + self.length])

    def _piece(self, begin: int, end: int) -> bytes:
        return bytes(self.source[self.start + begin:self.start + end])


@dataclass(frozen=True)
class StringListPos:
    """A position: a piece and a byte index within it."""

    node: Optional[StringNode]
    index: int


def is_start(pos: StringListPos) -> bool:
    return pos.node is None or (pos.node.prev is None and pos.index == 0)


def is_end(pos: StringListPos) -> bool:
    return pos.node is None or (pos.node.next is None and pos.index == pos.node.length)


def pos_inc(pos: StringListPos) -> StringListPos:
    """The position one byte further on."""
    node, index = pos.node, pos.index
    if node is None:
        return StringListPos(None, index + 1)
    if index == node.length and node.next is not None:
        node, index = node.next, 0
    if index < node.length - 1 or (index == node.length - 1 and node.next is None):
        return StringListPos(node, index + 1)
    return StringListPos(node.next, 0)


def pos_dec(pos: StringListPos) -> StringListPos:
    """The position one byte back; before the very start the index goes to -1."""
    node, index = pos.node, pos.index
    if node is None or index > 0 or (index == 0 and node.prev is None):
        return StringListPos(node, index - 1)
    prev = node.prev
    return StringListPos(prev, prev.length - 1)


def pos_less(a: StringListPos, b: StringListPos) -> bool:
    """Whether ``a`` comes strictly before ``b``."""
    if a.node is b.node:
        return a.index < b.index
    node = a.node
    while node is not None:
        if node is b.node:
            return True
        node = node.next
    return False


class StringList:
    """Text as a chain of pieces; edits write new bytes into a shared buffer."""

    def __init__(self, data: BytesLike = b"", buffer: Optional[PieceBuffer] = None) -> None:
        self.buffer = buffer if buffer is not None else PieceBuffer()
        self.first: Optional[StringNode] = None
        self.last: Optional[StringNode] = None
        self.length = 0
        self.replace(data)

    # -- linking ---------------------------------------------------------

    def _nodes(self) -> Iterator[StringNode]:
        node = self.first
        while node is not None:
            yield node
            node = node.next

    def _link_last(self, node: StringNode) -> None:
        node.prev, node.next = self.last, None
        if self.last is None:
            self.first = node
        else:
            self.last.next = node
        self.last = node

    def _link_first(self, node: StringNode) -> None:
        node.prev, node.next = None, self.first
        if self.first is None:
            self.last = node
        else:
            self.first.prev = node
        self.first = node

    def _link_after(self, anchor: StringNode, node: StringNode) -> None:
        node.prev, node.next = anchor, anchor.next
        if anchor.next is None:
            self.last = node
        else:
            anchor.next.prev = node
        anchor.next = node

    def _unlink(self, node: StringNode) -> None:
        if node.prev is None:
            self.first = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self.last = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None

    def _ends_at_buffer(self, node: StringNode) -> bool:
        return node.source is self.buffer.data and node.start + node.length == self.buffer.pos

    def _buffer_node(self, length: int) -> StringNode:
        return StringNode(self.buffer.data, self.buffer.pos, length)

    # -- whole-list operations ------------------------------------------

    def replace(self, data: BytesLike) -> None:
        """Make the list hold exactly ``data``."""
        self.first = self.last = None
        self.length = 0
        self.append(data)

    def append(self, data: BytesLike) -> None:
        """Add ``data`` as a new piece at the end; empty data is ignored."""
        if not data:
            return
        self._link_last(StringNode(bytes(data), 0, len(data)))
        self.length += len(data)

    def __len__(self) -> int:
        return self.length

    def __bytes__(self) -> bytes:
        return b"".join(node.data for node in self._nodes())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StringList):
            return self.length == other.length and bytes(self) == bytes(other)
        if isinstance(other, (bytes, bytearray, memoryview)):
            return bytes(self) == bytes(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"StringList({bytes(self)!r})"

    def startswith(self, prefix: Union[StringList, BytesLike]) -> bool:
        return bytes(self).startswith(bytes(prefix))

    def start(self) -> StringListPos:
        return StringListPos(self.first, 0)

    def end(self) -> StringListPos:
        return StringListPos(self.last, self.last.length if self.last else 0)

    # -- ranges ----------------------------------------------------------

    def _spans(self, start: StringListPos, end: StringListPos) -> Iterator[tuple[StringNode, int, int]]:
        node = start.node
        while node is not None:
            nxt = node.next
            begin = start.index if node is start.node else 0
            stop = end.index if node is end.node else node.length
            yield node, begin, stop
            if node is end.node:
                break
            node = nxt

    def slice(self, start: StringListPos, end: StringListPos) -> bytes:
        """The bytes between two positions."""
        return b"".join(node._piece(b, e) for node, b, e in self._spans(start, end))

    def find_first(self, start: StringListPos, end: StringListPos, byte: int) -> StringListPos:
        """First position of ``byte`` in the range, or ``end`` if absent."""
        for node, b, e in self._spans(start, end):
            found = node.source.find(byte, node.start + b, node.start + e)
            if found != -1:
                return StringListPos(node, found - node.start)
        return end

    def find_last(self, start: StringListPos, end: StringListPos, byte: int) -> StringListPos:
        """Last position of ``byte`` in the range, or the one before ``start``."""
        result: Optional[StringListPos] = None
        for node, b, e in self._spans(start, end):
            found = node.source.rfind(byte, node.start + b, node.start + e)
            if found != -1:
                result = StringListPos(node, found - node.start)
        return result if result is not None else pos_dec(start)

    def find_word(self, pos: StringListPos) -> tuple[StringListPos, StringListPos]:
        """Bounds of the word under ``pos``, or of the single separator there."""
        start = self.start()
        after = False
        for node in self._nodes():
            for i, b in enumerate(node.data):
                word = b in _WORD_BYTES
                if pos.node is node and pos.index == i:
                    if not word:
                        return StringListPos(node, i), StringListPos(node, i + 1)
                    after = True
                    continue
                if not word:
                    if after:
                        return start, StringListPos(node, i)
                    start = StringListPos(node, i + 1)
        return start, self.end()

    # -- editing ---------------------------------------------------------

    def delete(self, tail: StringListPos, head: StringListPos) -> StringListPos:
        """Remove the selection, or the byte before ``head`` if it is empty.

        Returns the caret position after the edit.
        """
        if tail == head:
            return self._delete_back(head)

        start, end = (tail, head) if pos_less(tail, head) else (head, tail)
        before = start.node.prev if start.node is not None else None
        start_removed = False
        for node, b, e in list(self._spans(start, end)):
            original = node.length
            if e == original and self._ends_at_buffer(node):
                self.buffer.pos -= e - b
            if b == 0 and e == original:
                if node is start.node:
                    start_removed = True
                self._unlink(node)
            elif b == 0:
                node.start += e
                node.length -= e
            elif e == original:
                node.length = b
            else:
                node.length = b
                self._link_after(node, StringNode(node.source, node.start + e, original - e))
            self.length -= e - b

        if not start_removed:
            return start
        if before is not None:
            return StringListPos(before, before.length)
        return StringListPos(self.first, 0)

    def _delete_back(self, head: StringListPos) -> StringListPos:
        if is_start(head):
            return head
        node = head.node
        if head.index == node.length:
            if self._ends_at_buffer(node):
                self.buffer.pos -= 1
            if node.length == 1:
                nxt, prev = node.next, node.prev
                self._unlink(node)
                if nxt is not None or prev is None:
                    head = StringListPos(nxt, 1)
                else:
                    head = StringListPos(prev, prev.length + 1)
            else:
                node.length -= 1
        elif head.index == 0:
            node = node.prev
            head = StringListPos(node, node.length)
            if self._ends_at_buffer(node):
                self.buffer.pos -= 1
            if node.length == 1:
                nxt = node.next
                self._unlink(node)
                head = StringListPos(nxt, 1)
            else:
                node.length -= 1
        else:
            before = head.index - 1
            after = node.length - before - 1
            if before == 0:
                node.start += 1
                node.length -= 1
            else:
                node.length = before
                self._link_after(node, StringNode(node.source, node.start + head.index, after))
        self.length -= 1
        return pos_dec(head)

    def insert(self, data: BytesLike, tail: StringListPos, head: StringListPos) -> StringListPos:
        """Replace the selection with ``data``; returns the caret after it."""
        if not data:
            return head
        if tail != head:
            head = self.delete(tail, head)

        size = len(data)
        node = head.node
        if node is None:
            new = self._buffer_node(size)
            self._link_last(new)
            head = StringListPos(new, 0)
        elif head.index == node.length:
            if self._ends_at_buffer(node):
                node.length += size
            else:
                new = self._buffer_node(size)
                self._link_after(node, new)
                head = StringListPos(new, 0)
        elif is_start(head):
            new = self._buffer_node(size)
            self._link_first(new)
            head = StringListPos(new, 0)
        elif head.index == 0:
            prev = node.prev
            head = StringListPos(prev, prev.length)
            if self._ends_at_buffer(prev):
                prev.length += size
            else:
                new = self._buffer_node(size)
                self._link_after(prev, new)
                head = StringListPos(new, 0)
        else:
            rest = node.length - head.index
            node.length = head.index
            self._link_after(node, StringNode(node.source, node.start + node.length, rest))
            new = self._buffer_node(size)
            self._link_after(node, new)
            head = StringListPos(new, 0)

        self.buffer.append(data)
        self.length += size
        return StringListPos(head.node, head.index + size)