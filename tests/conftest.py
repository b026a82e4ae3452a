from eel.game import SimulationState
from eel.spawn import Food


class ScriptedRng:
    """Replays fixed values for randrange(); choice() takes the first option."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def randrange(self, n):
        self.calls += 1
        return self.values.pop(0) % n

    def choice(self, seq):
        return seq[0]


def make_state(width, height, body, heading, food, **kw):
    return SimulationState(
        width=width,
        height=height,
        body=list(body),
        heading=heading,
        food=Food(food) if isinstance(food, tuple) else food,
        **kw,
    )
