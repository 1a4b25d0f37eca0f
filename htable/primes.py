import random


# Witness rounds per candidate. More rounds lower the chance of accepting a
# composite but never to zero: Carmichael numbers pass every coprime witness.
FERMAT_ROUNDS = 20


class PrimeSearchError(RuntimeError):
    pass


def is_prime(n: int, rounds: int = FERMAT_ROUNDS, rng: random.Random | None = None) -> bool:
    """Fermat test. False means composite, True means probably prime."""
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False

    randint = rng.randint if rng is not None else random.randint
    for _ in range(rounds):
        a = randint(1, n - 1)
        if pow(a, n - 1, n) != 1:
            return False
    return True


def next_prime(n: int, rng: random.Random | None = None) -> int:
    """Smallest value >= n accepted by is_prime."""
    if n <= 2:
        return 2

    # Bertrand's postulate: a prime lies in [n, 2n), and the Fermat test
    # never rejects a true prime.
    start = n if n % 2 == 1 else n + 1
    for candidate in range(start, 2 * n, 2):
        if is_prime(candidate, rng=rng):
            return candidate

    raise PrimeSearchError(f"no prime found in [{n}, {2 * n})")
