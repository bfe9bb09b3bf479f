import itertools

from rtop.memory import HISTORY_SIZE, MemoryState


def test_initial_read_without_history():
    state = MemoryState(sampler=lambda: (1000, 250, 400, 100))
    assert state.total_memory == 1000
    assert state.used_memory == 250
    assert state.total_swap == 400
    assert state.used_swap == 100
    assert state.memory_history == ()
    assert state.swap_history == ()


def test_percentages():
    state = MemoryState(sampler=lambda: (1000, 250, 400, 100))
    assert state.memory_usage_percent == 25.0
    assert state.swap_usage_percent == 25.0


def test_zero_totals_give_zero_percent():
    state = MemoryState(sampler=lambda: (0, 0, 0, 0))
    assert state.memory_usage_percent == 0.0
    assert state.swap_usage_percent == 0.0


def test_update_records_history():
    state = MemoryState(sampler=lambda: (200, 200, 0, 0))
    state.update()
    assert state.memory_history == (100.0,)
    assert state.swap_history == (0.0,)


def test_history_is_bounded():
    counter = itertools.count()
    state = MemoryState(sampler=lambda: (100, next(counter) % 100, 100, 0))
    for _ in range(HISTORY_SIZE + 10):
        state.update()
    assert len(state.memory_history) == HISTORY_SIZE
    assert len(state.swap_history) == HISTORY_SIZE
    assert state.memory_history[-1] == state.memory_usage_percent


def test_real_sampler():
    state = MemoryState()
    state.update()
    assert state.total_memory > 0
    assert 0.0 <= state.memory_usage_percent <= 100.0
    assert len(state.memory_history) == 1