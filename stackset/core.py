#!/usr/bin/env python3
"""
A stack with expected amortized O(1) membership tests.

The interface is that of a stack, with an added `contains` method for
lookups.  Both live in one open addressing hash table: each occupied slot
holds a key and the index of the slot holding the key below it in the stack,
and the container remembers which slot holds the top.

Probing is quadratic, the running index advancing by 1, 3, 5, ... modulo the
table size.  With a prime table size the first (capacity + 1) / 2 probes are
distinct, so keeping the table less than half full guarantees that both
insertion and lookup find an empty slot.

Slots are only ever cleared by `pop`.  A key whose probe sequence passed over
an occupied slot was pushed while that slot's key was on the stack, so it is
higher on the stack and is popped first.  Clearing the top therefore never
opens a gap inside a live key's probe chain, and no tombstones are needed.

Growing the table rehashes every key, re-inserting from the bottom of the
stack to the top so that the same ordering argument holds in the new table
and the predecessor links point at the new slot indices.
"""
__all__ = [
    'StackSet', 'INITIAL_CAPACITY',
    'StackSetError', 'EmptyStackSetError', 'DuplicateKeyError',
]

import logging
from typing import Generic, TypeVar, Optional, List, Iterator, Tuple, Hashable, cast

from .util import Context, prime_at_least, next_prime

log = logging.getLogger('stackset.core')

# the smallest usable table size, all table sizes are prime
INITIAL_CAPACITY = 11

T = TypeVar('T', bound=Hashable)

# an occupied slot: the key and the slot index of the key below it
Slot = Optional[Tuple[T, Optional[int]]]


class StackSetError(Exception):
    pass


class EmptyStackSetError(StackSetError, IndexError):
    pass


class DuplicateKeyError(StackSetError, ValueError):
    pass


class StackSet(Generic[T]):
    """
        A stack that also answers "is this key anywhere on the stack?"

        Keys must be hashable and are compared with ==.  A key may be on the
        stack at most once, pushing a key that is already present raises
        DuplicateKeyError.  top() returns None on an empty stack, so None is
        best avoided as a key.

        Not thread safe, callers sharing one across threads must lock around
        every call.
    """
    __slots__ = 'table', 'top_index', 'count'

    table: List[Slot]
    top_index: Optional[int]
    count: int

    def __init__(self, capacity: int = INITIAL_CAPACITY):
        self.table = [None] * prime_at_least(max(capacity, INITIAL_CAPACITY))
        self.top_index = None
        self.count = 0

    @property
    def capacity(self) -> int:
        return len(self.table)

    def is_empty(self) -> bool:
        return self.top_index is None

    def top(self) -> Optional[T]:
        if self.top_index is None:
            return None
        return cast(Tuple[T, Optional[int]], self.table[self.top_index])[0]

    def push(self, key: T) -> None:
        self._push_at(self._probe(key), key)
        if self.count >= self.capacity // 2:
            self._resize()

    def pop(self) -> T:
        if self.top_index is None:
            raise EmptyStackSetError('pop from empty StackSet')
        key, below = cast(Tuple[T, Optional[int]], self.table[self.top_index])
        self.table[self.top_index] = None
        self.top_index = below
        self.count -= 1
        return key

    def contains(self, key: T) -> bool:
        for i in self._probe_sequence(key):
            slot = self.table[i]
            if slot is None:
                return False
            if slot[0] == key:
                return True
        return False  # pragma: no cover

    def context(self, key: T) -> Context['StackSet[T]', T]:
        """
            with path.context(node):
                ...  # node is on the stack, and is popped again on exit
        """
        return Context(self, key)

    __contains__ = contains

    def __len__(self) -> int:
        return self.count

    def __bool__(self) -> bool:
        return self.top_index is not None

    def __repr__(self):
        return f'StackSet(count={self.count}, capacity={self.capacity}, top={self.top()!r})'

    def _probe_sequence(self, key: T) -> Iterator[int]:
        capacity = len(self.table)
        i = hash(key) % capacity
        offset = 1
        # h, h+1, h+1+3, ... wrapped; the first (capacity + 1) // 2 are distinct
        for _ in range(capacity):
            yield i
            i = (i + offset) % capacity
            offset += 2

    def _probe(self, key: T) -> int:
        """the first empty slot in key's probe sequence"""
        for i in self._probe_sequence(key):
            slot = self.table[i]
            if slot is None:
                return i
            if slot[0] == key:
                raise DuplicateKeyError(f'{key!r} is already on the stack')
        raise StackSetError('probe sequence exhausted')  # pragma: no cover

    def _push_at(self, i: int, key: T) -> None:
        self.table[i] = (key, self.top_index)
        self.top_index = i
        self.count += 1

    def _keys_bottom_up(self) -> List[T]:
        keys = []
        i = self.top_index
        while i is not None:
            key, i = cast(Tuple[T, Optional[int]], self.table[i])
            keys.append(key)
        keys.reverse()
        return keys

    def _resize(self) -> None:
        keys = self._keys_bottom_up()
        old_capacity = self.capacity
        self.table = [None] * next_prime(2 * old_capacity)
        self.top_index = None
        self.count = 0
        for key in keys:
            self._push_at(self._probe(key), key)
        log.debug('resized from %d to %d slots holding %d keys', old_capacity, self.capacity, self.count)
