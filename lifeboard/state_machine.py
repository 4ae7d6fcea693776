"""Screen states and the stack machine that switches between them."""

from __future__ import annotations

from abc import ABC, abstractmethod


class State(ABC):
    """One screen of the game."""

    @abstractmethod
    def init(self) -> None:
        """Prepare the state when it becomes active."""

    @abstractmethod
    def handle_input(self) -> None:
        """Process pending input events."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the state by a fixed time step."""

    @abstractmethod
    def draw(self, dt: float) -> None:
        """Render the state."""


class StateMachine:
    """A stack of states whose changes take effect on process_state_changes."""

    def __init__(self) -> None:
        self._states: list[State] = []
        self._pending: State | None = None
        self._is_adding = False
        self._is_removing = False
        self._is_replacing = False

    def add_state(self, state: State, is_replacing: bool = True) -> None:
        """Queue a state to be pushed, replacing the top one by default."""
        self._pending = state
        self._is_adding = True
        self._is_replacing = is_replacing

    def remove_state(self) -> None:
        """Queue removal of the top state."""
        self._is_removing = True

    def process_state_changes(self) -> None:
        """Apply queued removals and additions; a new state is initialised."""
        if self._is_removing and self._states:
            self._states.pop()
            self._is_removing = False

        if self._is_adding and self._pending is not None:
            if self._states and self._is_replacing:
                self._states.pop()
            self._states.append(self._pending)
            self._pending = None
            self._is_adding = False
            self._states[-1].init()

    def active_state(self) -> State:
        """The state on top of the stack."""
        if not self._states:
            raise IndexError("no active state")
        return self._states[-1]