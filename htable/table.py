from dataclasses import dataclass
from fractions import Fraction
import math
import random
from typing import Any, Iterator

from .debug import trace_resize
from .hashing import DOUBLE_HASH_K
from .primes import next_prime
from .probe import ProbeType, probe_sequence


TABLE_MAX_LOAD = Fraction(3, 5)

# Every double-hash step in [1, K] must be coprime with the table size.
DOUBLE_HASH_MIN_SIZE = 11


_debug_trace_resize = False


def set_debug_trace_resize(b: bool):
    global _debug_trace_resize
    _debug_trace_resize = b


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass
class Entry:
    key: str | None
    value: Any

    @classmethod
    def empty(cls):
        return Entry(None, None)


class ProbeExhaustedError(RuntimeError):
    def __init__(self, key: str, size: int, probe_type: ProbeType) -> None:
        super().__init__(
            f"no free slot for {key!r} reachable by {probe_type.name} probing in {size} slots"
        )
        self.key = key
        self.size = size
        self.probe_type = probe_type


@dataclass
class Table:
    count: int
    entries: tuple[Entry, ...]
    probe_type: ProbeType
    rng: random.Random | None

    def __init__(
        self,
        initial_capacity: int,
        probe_type: ProbeType = ProbeType.LINEAR,
        rng: random.Random | None = None,
    ) -> None:
        if not isinstance(initial_capacity, int) or initial_capacity < 1:
            raise ValueError(
                f"initial capacity should be a positive int, got {initial_capacity!r}"
            )

        self.probe_type = probe_type
        self.rng = rng

        size = math.ceil(initial_capacity / TABLE_MAX_LOAD)
        if probe_type == ProbeType.DOUBLE_HASH:
            size = max(size, DOUBLE_HASH_MIN_SIZE)

        self.count = 0
        self.entries = _new_entries(next_prime(size, rng=rng))

    @property
    def size(self) -> int:
        return len(self.entries)

    def __len__(self) -> int:
        return self.count

    def __contains__(self, key: str) -> bool:
        return self.has_key(key)

    def put(self, key: str, value: Any) -> bool:
        entry = self.find_entry(self.entries, key)
        if entry is None:
            raise ProbeExhaustedError(key, self.size, self.probe_type)

        is_new_key = entry.key is None
        entry.key = key
        entry.value = value

        if is_new_key:
            self.count += 1
            if self.count >= self.capacity():
                self.resize()
        return is_new_key

    def add_all(self, from_t: "Table"):
        for entry in from_t.entries:
            if entry.key is None:
                continue
            self.put(entry.key, entry.value)

    def get(self, key: str) -> Any | NotFound:
        entry = self.find_entry(self.entries, key)
        if entry is None or entry.key is None:
            return NotFound()
        return entry.value

    def has_key(self, key: str) -> bool:
        return not isinstance(self.get(key), NotFound)

    def keys(self) -> set[str]:
        return {entry.key for entry in self.entries if entry.key is not None}

    def load_factor(self) -> float:
        return round(self.count / self.size, 2)

    def capacity(self) -> int:
        """Number of live keys at which the table grows."""
        return math.ceil(self.size * TABLE_MAX_LOAD)

    def resize(self):
        new_entries = _new_entries(next_prime(2 * self.size + 1, rng=self.rng))

        count = 0
        for entry in self.entries:
            if entry.key is None:
                continue

            dest = self.find_entry(new_entries, entry.key)
            if dest is None:
                raise ProbeExhaustedError(entry.key, len(new_entries), self.probe_type)
            dest.key = entry.key
            dest.value = entry.value
            count += 1

        if _debug_trace_resize:
            trace_resize(self.size, len(new_entries), count)

        self.entries = new_entries
        self.count = count

    def find_entry(self, entries: tuple[Entry, ...], key: str) -> Entry | None:
        # No deletions, so the first empty slot ends the search.
        for index in probe_sequence(self.probe_type, key, len(entries)):
            entry = entries[index]
            if entry.key is None or entry.key == key:
                return entry
        return None

    def probe_indices(self, key: str) -> Iterator[int]:
        """Indices visited when looking up `key`, ending at its slot or the first empty one."""
        for index in probe_sequence(self.probe_type, key, self.size):
            yield index
            entry = self.entries[index]
            if entry.key is None or entry.key == key:
                return


def _new_entries(size: int) -> tuple[Entry, ...]:
    return tuple(Entry.empty() for _ in range(size))
