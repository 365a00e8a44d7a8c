# ==============================================================================
# file: tests/helpers.py
# Shared fixtures for the test suite.
# ==============================================================================
import math


class ScriptedRNG:
    """RandomSource that replays fixed draws and fails loudly when it runs dry."""

    def __init__(self, floats=(), ints=()):
        self.floats = list(floats)
        self.ints = list(ints)
        self.int_calls = []

    def uniform(self) -> float:
        if not self.floats:
            raise AssertionError("ScriptedRNG: no float draws left")
        return self.floats.pop(0)

    def randint(self, a: int, b: int) -> int:
        self.int_calls.append((a, b))
        if not self.ints:
            raise AssertionError("ScriptedRNG: no int draws left")
        v = self.ints.pop(0)
        assert a <= v <= b, f"scripted int {v} outside [{a}, {b}]"
        return v


def assert_min_separation(test, points, eps=1e-9):
    for i in range(len(points)):
        p = points[i]
        for j in range(i + 1, len(points)):
            q = points[j]
            d = math.hypot(p.x - q.x, p.y - q.y)
            test.assertGreaterEqual(
                d, p.radius + q.radius - eps, f"points {i} and {j} overlap: {d}"
            )
