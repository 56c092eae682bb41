import pytest

from graph import NodeStatus
from engine import Stepper, StepperState, RunError, Store, initial_state
from engine.actions import AddNode, SetAlgorithm, SetStartNode


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def stepper(diamond_store, clock):
    return Stepper(diamond_store, clock=clock)


def test_requires_algorithm(stepper):
    with pytest.raises(RunError, match="select an algorithm"):
        stepper.start()


def test_requires_start_node_for_prim():
    store = Store(initial_state(speed=500, history_limit=10))
    store.dispatch(AddNode(0, 0, node_id="n1"))
    with pytest.raises(RunError, match="start node"):
        Stepper(store).start("prim")


def test_kruskal_needs_no_start(diamond_store):
    diamond_store.dispatch(SetStartNode(None))
    stepper = Stepper(diamond_store)
    stepper.start("kruskal", autoplay=False)
    stepper.jump_to_end()
    assert diamond_store.state.total_cost == 7


def test_prim_to_the_end(stepper, diamond_store):
    stepper.start("prim", autoplay=False)
    assert stepper.state is StepperState.PAUSED
    stepper.jump_to_end()

    state = diamond_store.state
    assert stepper.is_finished
    assert state.total_cost == 7
    assert not state.is_running
    assert state.algorithm == "prim"
    assert state.path[0] == "Start at node A"
    assert state.path[-1] == "MST: A–C (w=1), A–B (w=2), C–D (w=4); total cost 7"
    assert state.graph.nodes["a1"].status is NodeStatus.START
    assert stepper.next_step() is None


def test_editing_during_run_does_not_touch_producer(stepper, diamond_store):
    stepper.start("prim", autoplay=False)
    stepper.next_step()
    diamond_store.dispatch(AddNode(500, 500, node_id="late"))
    stepper.jump_to_end()
    assert stepper.last_step.total_cost == 7
    assert not stepper.last_step.incomplete


def test_pause_keeps_progress(stepper, diamond_store):
    stepper.start("bfs")
    assert diamond_store.state.is_running
    for _ in range(3):
        stepper.next_step()
    stepper.pause()
    assert not diamond_store.state.is_running
    assert stepper.state is StepperState.PAUSED
    stepper.toggle_play()
    assert stepper.is_playing
    stepper.next_step()
    assert stepper.steps_taken == 4


def test_tick_waits_for_speed(stepper, clock):
    stepper.start("dfs")
    clock.now = 0.2
    assert stepper.tick() is False
    clock.now = 0.5
    assert stepper.tick() is True
    clock.now = 0.6
    assert stepper.tick() is False
    assert stepper.steps_taken == 1


def test_tick_does_nothing_when_paused(stepper, clock):
    stepper.start("dfs", autoplay=False)
    clock.now = 10
    assert stepper.tick() is False
    assert stepper.steps_taken == 0


def test_reset_restores_start_colour(stepper, diamond_store):
    stepper.start("bfs", autoplay=False)
    for _ in range(5):
        stepper.next_step()
    stepper.reset()
    state = diamond_store.state
    assert stepper.state is StepperState.IDLE
    assert state.path == () and state.current_step is None
    assert state.graph.nodes["a1"].status is NodeStatus.START
    assert all(state.graph.nodes[n].status is NodeStatus.DEFAULT for n in ("a2", "a3", "a4"))
    assert stepper.next_step() is None


def test_switching_algorithm_drops_run(stepper, diamond_store):
    stepper.start("prim", autoplay=False)
    stepper.next_step()
    stepper.select_algorithm("dfs")
    assert diamond_store.state.algorithm == "dfs"
    assert stepper.state is StepperState.IDLE
    assert stepper.next_step() is None


def test_uses_selected_algorithm(stepper, diamond_store):
    diamond_store.dispatch(SetAlgorithm("bfs"))
    stepper.start(autoplay=False)
    assert stepper.next_step().message == "Starting BFS from node A"


@pytest.mark.parametrize("value,expected", [("slow", 1000), ("turbo", 50), (250, 250), ("300", 300), (1, 20)])
def test_set_speed(stepper, diamond_store, value, expected):
    assert stepper.set_speed(value) == expected
    assert diamond_store.state.speed == expected


def test_set_speed_rejects_unknown_preset(stepper):
    with pytest.raises(ValueError):
        stepper.set_speed("warp")
