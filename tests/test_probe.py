from htable.hashing import double_hash
from htable.probe import ProbeType, next_location, probe_sequence


def test_linear():
    assert next_location(ProbeType.LINEAR, 2, 1, 5) == 3
    assert next_location(ProbeType.LINEAR, 4, 3, 5) == 0
    # stride only matters for double hashing
    assert next_location(ProbeType.LINEAR, 4, 3, 5, 7) == 0

    # should visit every slot once, 'b' = 2
    assert list(probe_sequence(ProbeType.LINEAR, "b", 5)) == [2, 3, 4, 0, 1]


def test_quadratic():
    assert next_location(ProbeType.QUADRATIC, 3, 1, 7) == 4
    assert next_location(ProbeType.QUADRATIC, 3, 2, 7) == 0

    # 'g' = 7 starts at 0; offsets accumulate: 0, 1, 5, 14, 30, 55, 91 (mod 7)
    seq = list(probe_sequence(ProbeType.QUADRATIC, "g", 7))
    assert seq == [0, 1, 5, 0, 2, 6, 0]
    # should not reach every slot
    assert set(seq) != set(range(7))


def test_double_hash():
    key = "bananas"
    step = double_hash(key)
    assert next_location(ProbeType.DOUBLE_HASH, 0, 1, 11, step) == step % 11
    assert next_location(ProbeType.DOUBLE_HASH, 10, 5, 11, step) == (10 + step) % 11

    # step is fixed for a key, and covers a prime table larger than the step
    seq = list(probe_sequence(ProbeType.DOUBLE_HASH, key, 11))
    assert len(seq) == 11
    assert set(seq) == set(range(11))
    for a, b in zip(seq, seq[1:]):
        assert (b - a) % 11 == step


def test_double_hash_sequences_differ():
    size = 11
    assert double_hash("b") != double_hash("ab")
    b = list(probe_sequence(ProbeType.DOUBLE_HASH, "b", size))
    ab = list(probe_sequence(ProbeType.DOUBLE_HASH, "ab", size))
    assert b != ab


def test_sequence_is_pure():
    for probe_type in ProbeType:
        for key in ["a", "pyjamas", "0:17"]:
            assert list(probe_sequence(probe_type, key, 13)) == list(
                probe_sequence(probe_type, key, 13)
            )
            assert all(0 <= i < 13 for i in probe_sequence(probe_type, key, 13))
