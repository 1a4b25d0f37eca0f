import string


# Keys are case-sensitive and drawn from the printable ASCII set minus whitespace.
ALPHABET = string.ascii_letters + string.digits + string.punctuation
# code(c) runs 1..94; keys are read as base-95 numerals.
RADIX = len(ALPHABET) + 1

DOUBLE_HASH_K = 8

_CODES = {c: i + 1 for i, c in enumerate(ALPHABET)}


class InvalidKeyError(ValueError):
    def __init__(self, key: str, position: int) -> None:
        super().__init__(
            f"invalid character {key[position]!r} at position {position} in key {key!r}"
        )
        self.key = key
        self.position = position


def validate_key(key: str):
    if not isinstance(key, str):
        raise TypeError(f"key should be str, not {type(key).__name__}")
    for i in range(len(key)):
        if key[i] not in _CODES:
            raise InvalidKeyError(key, i)


def _polynomial(key: str, modulus: int) -> int:
    # sum of code(c) * RADIX^position_from_right, reduced as it accumulates
    acc = 0
    for c in key:
        acc = (acc * RADIX + _CODES[c]) % modulus
    return acc


def hash_string(key: str, size: int) -> int:
    validate_key(key)
    return _polynomial(key, size)


def double_hash(key: str) -> int:
    """Probe step for double hashing, always in [1, DOUBLE_HASH_K]."""
    validate_key(key)
    return DOUBLE_HASH_K - _polynomial(key, DOUBLE_HASH_K)
