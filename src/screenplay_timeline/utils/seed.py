import hashlib
import random
from typing import Optional, Sequence

MOD = 2 ** 32


def make_seed(*parts: str, mod: int = MOD) -> int:
    h = hashlib.sha256("||".join(map(str, parts)).encode()).hexdigest()
    return int(h[:8], 16) % mod


def seed_for_screenplay(full_text: str, namespace: str = "screenplay_timeline") -> int:
    return make_seed(namespace, full_text)


class Picker:
    """Seedable "pick one of a fixed pool" source.

    Every default that the analysis chooses at random (shot types, music)
    goes through one instance, so a fixed seed replays the same choices.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def pick(self, pool: Sequence[str]) -> str:
        if not pool:
            return ""
        return pool[self._rng.randrange(len(pool))]
