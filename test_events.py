import pytest

from events import (
    Event,
    EventPriority,
    HandlerList,
    PlayerCommandPreprocessEvent,
    WarpCreateEvent,
    WarpDeleteEvent,
    WarpEvent,
    event_handler,
    register_events,
    unregister_events,
)


def test_warp_event_delegates_cancellation(player):
    command_event = PlayerCommandPreprocessEvent(player, "/setwarp home")
    warp_event = WarpCreateEvent(command_event, "home")

    warp_event.set_cancelled(True)
    assert command_event.is_cancelled()

    command_event.set_cancelled(False)
    assert not warp_event.is_cancelled()

    command_event.cancelled = True
    assert warp_event.cancelled


def test_warp_event_fields(player):
    warp_event = WarpDeleteEvent(PlayerCommandPreprocessEvent(player, "/delwarp a b c"), "b")

    assert warp_event.player is player
    assert warp_event.warp_name == "b"
    assert warp_event.get_warp_name() == "b"
    assert warp_event.event_name == "WarpDeleteEvent"
    with pytest.raises(AttributeError):
        warp_event.warp_name = "other"


def test_variants_have_separate_handler_lists():
    assert WarpCreateEvent.get_handler_list() is not WarpDeleteEvent.get_handler_list()
    assert isinstance(PlayerCommandPreprocessEvent.get_handler_list(), HandlerList)


def test_abstract_event_has_no_handler_list():
    with pytest.raises(TypeError):
        WarpEvent.get_handler_list()
    with pytest.raises(TypeError):
        Event.get_handler_list()


def test_call_event_returns_outcome(player):
    event = WarpCreateEvent(PlayerCommandPreprocessEvent(player, "/setwarp home"), "home")
    assert event.call_event() is True

    WarpCreateEvent.get_handler_list().register(lambda e: e.set_cancelled(True))
    assert event.call_event() is False


def test_dispatch_order(player):
    calls = []
    handlers = WarpCreateEvent.get_handler_list()
    handlers.register(lambda e: calls.append("monitor"), priority=EventPriority.MONITOR)
    handlers.register(lambda e: calls.append("normal-1"))
    handlers.register(lambda e: calls.append("lowest"), priority=EventPriority.LOWEST)
    handlers.register(lambda e: calls.append("normal-2"))

    WarpCreateEvent(PlayerCommandPreprocessEvent(player, "/setwarp home"), "home").call_event()

    assert calls == ["lowest", "normal-1", "normal-2", "monitor"]


def test_ignore_cancelled_handlers_skipped(player):
    calls = []
    handlers = WarpDeleteEvent.get_handler_list()
    handlers.register(lambda e: e.set_cancelled(True), priority=EventPriority.LOW)
    handlers.register(lambda e: calls.append("skipped"), ignore_cancelled=True)
    handlers.register(lambda e: calls.append("monitor"), priority=EventPriority.MONITOR)

    WarpDeleteEvent(PlayerCommandPreprocessEvent(player, "/delwarp home"), "home").call_event()

    assert calls == ["monitor"]


def test_handler_exceptions_propagate(player):
    def boom(event):
        raise ValueError("boom")

    WarpCreateEvent.get_handler_list().register(boom)

    with pytest.raises(ValueError):
        WarpCreateEvent(PlayerCommandPreprocessEvent(player, "/setwarp x"), "x").call_event()


def test_register_rejects_non_callable():
    with pytest.raises(TypeError):
        WarpCreateEvent.get_handler_list().register("not a function")


def test_unregister_by_callback():
    handlers = WarpCreateEvent.get_handler_list()

    def callback(event):
        pass

    handlers.register(callback)
    handlers.register(callback, priority=EventPriority.HIGH)

    assert handlers.unregister(callback) == 2
    assert len(handlers) == 0


def test_register_events_uses_annotations(player):
    class WarpAuditor:
        def __init__(self):
            self.log = []

        @event_handler(priority=EventPriority.MONITOR)
        def on_create(self, event: WarpCreateEvent) -> None:
            self.log.append(("create", event.warp_name))

        @event_handler()
        def on_delete(self, event: WarpDeleteEvent) -> None:
            self.log.append(("delete", event.warp_name))

        def helper(self, event: WarpCreateEvent) -> None:
            self.log.append("not a handler")

    auditor = WarpAuditor()
    assert register_events(auditor) == 2

    command_event = PlayerCommandPreprocessEvent(player, "/setwarp home")
    WarpCreateEvent(command_event, "home").call_event()
    WarpDeleteEvent(command_event, "home").call_event()
    assert auditor.log == [("create", "home"), ("delete", "home")]

    assert unregister_events(auditor) == 2
    WarpCreateEvent(command_event, "home").call_event()
    assert len(auditor.log) == 2


def test_register_events_requires_event_annotation():
    class Broken:
        @event_handler()
        def on_something(self, event) -> None:
            pass

    with pytest.raises(TypeError):
        register_events(Broken())


def test_unregister_none_keeps_anonymous_handlers():
    seen = []
    handlers = WarpCreateEvent.get_handler_list()
    handlers.register(seen.append)

    assert unregister_events(None) == 0
    assert handlers.unregister(None) == 0
    assert len(handlers) == 1
