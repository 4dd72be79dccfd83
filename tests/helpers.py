"""Shared test helpers for Tea Timer."""

from teatimer.messages import KeyPress, Tick
from teatimer.model import AppModel
from teatimer.timer.engine import TimerEngine, TimerState


class CommandCollector:
    """Dispatch events into a model and keep every returned command."""

    def __init__(self, model: AppModel):
        self.model = model
        self.items: list = []

    def __call__(self, event):
        commands = self.model.dispatch(event)
        self.items.extend(commands)
        return commands

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


def press(model: AppModel, *keys: str) -> list:
    """Dispatch one KeyPress per key; return all commands produced."""
    commands = []
    for key in keys:
        commands.extend(model.dispatch(KeyPress(key)))
    return commands


def tick_model(model: AppModel, count: int) -> None:
    """Deliver *count* ticks for the model's current timer."""
    generation = model.timer.generation
    for _ in range(count):
        model.dispatch(Tick(generation))


def run_ticks(engine: TimerEngine, state: TimerState, count: int) -> list[TimerState]:
    """Apply *count* matching ticks; return every intermediate state."""
    states = []
    for _ in range(count):
        state = engine.on_tick(state, Tick(state.generation))
        states.append(state)
    return states
