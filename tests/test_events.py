import pytest

from fractol.mlx.events import (
    MAX_EVENT,
    Event,
    EventMask,
    EventType,
    Hook,
    HookTable,
)


def _recorder(calls, result="done"):
    def handler(*args):
        calls.append(args)
        return result

    return handler


def test_destroy_event_and_mask_match_the_close_hook():
    assert EventType(17) is EventType.DESTROY_NOTIFY
    assert EventMask.STRUCTURE_NOTIFY == 1 << 17


def test_key_dispatch_passes_keysym_and_param():
    calls = []
    table = HookTable()
    table.set(EventType.KEY_RELEASE, EventMask.KEY_RELEASE, _recorder(calls), "p")
    result = table.dispatch(Event(EventType.KEY_RELEASE, keysym=0xFF1B))
    assert result == "done"
    assert calls == [(0xFF1B, "p")]


def test_button_dispatch_passes_button_position_and_param():
    calls = []
    table = HookTable()
    table.set(EventType.BUTTON_PRESS, EventMask.BUTTON_PRESS, _recorder(calls), None)
    table.dispatch(Event(EventType.BUTTON_PRESS, button=4, x=10, y=20))
    assert calls == [(4, 10, 20, None)]


def test_motion_dispatch_passes_position_and_param():
    calls = []
    table = HookTable()
    table.set(EventType.MOTION_NOTIFY, EventMask.POINTER_MOTION, _recorder(calls), 7)
    table.dispatch(Event(EventType.MOTION_NOTIFY, x=3, y=5))
    assert calls == [(3, 5, 7)]


def test_expose_is_delivered_only_when_count_is_zero():
    calls = []
    table = HookTable()
    table.set(EventType.EXPOSE, EventMask.EXPOSURE, _recorder(calls), "w")
    assert table.dispatch(Event(EventType.EXPOSE, count=2)) is None
    assert calls == []
    assert table.dispatch(Event(EventType.EXPOSE, count=0)) == "done"
    assert calls == [("w",)]


def test_generic_event_passes_only_param():
    calls = []
    table = HookTable()
    table.set(17, 1 << 17, _recorder(calls), "graph")
    table.dispatch(Event(EventType.DESTROY_NOTIFY))
    assert calls == [("graph",)]


def test_dispatch_without_hook_returns_none():
    table = HookTable()
    assert table.dispatch(Event(EventType.KEY_PRESS, keysym=1)) is None


def test_low_event_numbers_are_never_dispatched():
    calls = []
    table = HookTable()
    table.set(0, 0, _recorder(calls))
    table.set(1, 0, _recorder(calls))
    assert table.dispatch(Event(0)) is None
    assert table.dispatch(Event(1)) is None
    assert calls == []


def test_event_mask_is_union_of_hook_masks():
    table = HookTable()
    assert table.event_mask() == EventMask.NO_EVENT
    table.set(EventType.KEY_RELEASE, EventMask.KEY_RELEASE, print)
    table.set(EventType.BUTTON_PRESS, EventMask.BUTTON_PRESS, print)
    table.set(EventType.DESTROY_NOTIFY, EventMask.STRUCTURE_NOTIFY, print)
    assert table.event_mask() == (
        EventMask.KEY_RELEASE | EventMask.BUTTON_PRESS | EventMask.STRUCTURE_NOTIFY
    )


def test_hook_without_function_still_selects_mask():
    table = HookTable()
    table.set(EventType.EXPOSE, EventMask.EXPOSURE, None)
    assert table.event_mask() == EventMask.EXPOSURE
    assert table.dispatch(Event(EventType.EXPOSE)) is None


def test_set_replaces_previous_hook():
    table = HookTable()
    table.set(EventType.KEY_RELEASE, EventMask.KEY_RELEASE, print, "a")
    table.set(EventType.KEY_RELEASE, EventMask.KEY_PRESS, len, "b")
    assert table.get(EventType.KEY_RELEASE) == Hook(EventMask.KEY_PRESS, len, "b")
    assert table.get(EventType.EXPOSE) is None


@pytest.mark.parametrize("kind", [-1, MAX_EVENT, MAX_EVENT + 5])
def test_out_of_range_event_type_is_rejected(kind):
    table = HookTable()
    with pytest.raises(ValueError):
        table.set(kind, 0, print)
    with pytest.raises(ValueError):
        table.get(kind)