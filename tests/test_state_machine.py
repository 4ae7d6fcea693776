import pytest

from lifeboard.state_machine import State, StateMachine


class Recorder(State):
    def __init__(self, name):
        self.name = name
        self.inits = 0

    def init(self):
        self.inits += 1

    def handle_input(self):
        pass

    def update(self, dt):
        pass

    def draw(self, dt):
        pass


def test_state_is_abstract():
    with pytest.raises(TypeError):
        State()


def test_empty_machine_has_no_active_state():
    with pytest.raises(IndexError):
        StateMachine().active_state()


def test_added_state_waits_for_processing():
    machine = StateMachine()
    first = Recorder("first")
    machine.add_state(first)
    assert first.inits == 0
    with pytest.raises(IndexError):
        machine.active_state()
    machine.process_state_changes()
    assert machine.active_state() is first
    assert first.inits == 1


def test_processing_twice_does_not_reinit():
    machine = StateMachine()
    first = Recorder("first")
    machine.add_state(first)
    machine.process_state_changes()
    machine.process_state_changes()
    assert first.inits == 1


def test_replacing_state_drops_previous():
    machine = StateMachine()
    first, second = Recorder("first"), Recorder("second")
    machine.add_state(first)
    machine.process_state_changes()
    machine.add_state(second)
    machine.process_state_changes()
    assert machine.active_state() is second
    machine.remove_state()
    machine.process_state_changes()
    with pytest.raises(IndexError):
        machine.active_state()


def test_non_replacing_state_stacks_on_top():
    machine = StateMachine()
    first, second = Recorder("first"), Recorder("second")
    machine.add_state(first)
    machine.process_state_changes()
    machine.add_state(second, is_replacing=False)
    machine.process_state_changes()
    assert machine.active_state() is second
    machine.remove_state()
    machine.process_state_changes()
    assert machine.active_state() is first
    assert first.inits == 1


def test_last_added_state_wins_before_processing():
    machine = StateMachine()
    first, second = Recorder("first"), Recorder("second")
    machine.add_state(first)
    machine.add_state(second)
    machine.process_state_changes()
    assert machine.active_state() is second
    assert first.inits == 0


def test_removal_on_empty_stack_stays_pending():
    machine = StateMachine()
    first = Recorder("first")
    machine.remove_state()
    machine.process_state_changes()
    machine.add_state(first)
    machine.process_state_changes()
    assert machine.active_state() is first
    machine.process_state_changes()
    with pytest.raises(IndexError):
        machine.active_state()