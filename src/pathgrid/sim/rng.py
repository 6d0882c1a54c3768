# sim/rng.py
from zlib import crc32

import numpy as np


def _name_tag(s: str) -> int:
    return crc32(s.encode("utf-8")) & 0xFFFFFFFF


class RNGRegistry:
    """
    One numpy Generator per stream name, all derived from a master seed.
    Creation order does not matter: a stream is seeded from
    [seed, crc32(scenario), crc32(name)] only.
    """

    def __init__(self, master_seed: int, *, scenario: str | int = 0):
        self.master_seed = master_seed & 0xFFFFFFFF
        self.scenario_tag = _name_tag(str(scenario))
        self._streams: dict[str, np.random.Generator] = {}

    def stream(self, name: str) -> np.random.Generator:
        gen = self._streams.get(name)
        if gen is None:
            ss = np.random.SeedSequence([self.master_seed, self.scenario_tag, _name_tag(name)])
            gen = self._streams[name] = np.random.default_rng(ss)
        return gen
