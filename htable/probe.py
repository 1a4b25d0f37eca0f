import enum
from typing import Iterator

from .hashing import double_hash, hash_string


class ProbeType(enum.Enum):
    LINEAR = enum.auto()
    QUADRATIC = enum.auto()
    DOUBLE_HASH = enum.auto()


def next_location(probe_type: ProbeType, index: int, step: int, size: int, stride: int = 1) -> int:
    """Return the slot to try after `index` on collision number `step`.

    `stride` is the key's double-hash step and is only read by DOUBLE_HASH.

    QUADRATIC adds step**2 to the current index, so from the home slot the
    offsets are 1, 5, 14, 30, ... This walk does not reach every slot of a
    prime-sized table; the load ceiling keeps enough slots free that it
    normally lands on one, but it is not guaranteed to.
    """
    match probe_type:
        case ProbeType.LINEAR:
            index += 1
        case ProbeType.QUADRATIC:
            index += step * step
        case ProbeType.DOUBLE_HASH:
            index += stride
        case _:
            raise Exception("Unknown probe type", probe_type)
    return index % size


def probe_sequence(probe_type: ProbeType, key: str, size: int) -> Iterator[int]:
    index = hash_string(key, size)
    stride = double_hash(key) if probe_type == ProbeType.DOUBLE_HASH else 1
    for step in range(1, size + 1):
        yield index
        index = next_location(probe_type, index, step, size, stride)
