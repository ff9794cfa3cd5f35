import pytest

from junglecore.delegates import (
    Delegate,
    DelegateHandle,
    MulticastDelegate,
    UnboundDelegateError,
)


def test_created_handles_are_valid_and_distinct():
    first = DelegateHandle.create()
    second = DelegateHandle.create()
    assert first.is_valid()
    assert second.is_valid()
    assert first != second


def test_default_handle_is_invalid():
    assert not DelegateHandle().is_valid()


def test_invalidate():
    handle = DelegateHandle.create()
    handle.invalidate()
    assert not handle.is_valid()
    assert handle == DelegateHandle()


def test_handle_equality_and_hash():
    handle = DelegateHandle.create()
    same = DelegateHandle(handle.handle_id)
    assert handle == same
    assert hash(handle) == hash(same)


def test_delegate_execute_returns_result():
    delegate = Delegate()
    delegate.bind(lambda a, b: a + b)
    assert delegate.is_bound()
    assert delegate.execute(2, 3) == 5


def test_delegate_bind_replaces():
    delegate = Delegate(lambda: "old")
    delegate.bind(lambda: "new")
    assert delegate.execute() == "new"


def test_unbound_execute_raises():
    delegate = Delegate()
    with pytest.raises(UnboundDelegateError):
        delegate.execute()


def test_unbind():
    delegate = Delegate(lambda: 1)
    delegate.unbind()
    assert not delegate.is_bound()
    with pytest.raises(UnboundDelegateError):
        delegate.execute()


def test_execute_if_bound():
    calls = []
    delegate = Delegate()
    assert delegate.execute_if_bound("x") is False
    delegate.bind(calls.append)
    assert delegate.execute_if_bound("x") is True
    assert calls == ["x"]


def test_broadcast_calls_every_handler():
    seen = []
    multicast = MulticastDelegate()
    multicast.add(lambda value: seen.append(("a", value)))
    multicast.add(lambda value: seen.append(("b", value)))
    multicast.broadcast(7)
    assert sorted(seen) == [("a", 7), ("b", 7)]


def test_add_binds_leading_arguments():
    seen = []
    multicast = MulticastDelegate()
    multicast.add(lambda tag, value: seen.append((tag, value)), "tag")
    multicast.broadcast(1)
    assert seen == [("tag", 1)]


def test_remove_stops_calls():
    seen = []
    multicast = MulticastDelegate()
    handle = multicast.add(seen.append)
    assert multicast.remove(handle) is True
    multicast.broadcast("x")
    assert seen == []
    assert len(multicast) == 0


def test_remove_invalid_handle_returns_false():
    multicast = MulticastDelegate()
    multicast.add(lambda: None)
    assert multicast.remove(DelegateHandle()) is False
    assert len(multicast) == 1


def test_remove_unknown_valid_handle_returns_true():
    multicast = MulticastDelegate()
    assert multicast.remove(DelegateHandle.create()) is True


def test_handler_added_during_broadcast_waits_for_next():
    seen = []
    multicast = MulticastDelegate()

    def adder():
        seen.append("adder")
        multicast.add(lambda: seen.append("late"))

    multicast.add(adder)
    multicast.broadcast()
    assert seen == ["adder"]
    assert len(multicast) == 2