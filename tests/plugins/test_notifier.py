"""Tests for PluginNotifier and the built-in LogEventsPlugin."""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from libstock.plugins.builtins.log_events import LogEventsPlugin
from libstock.plugins.hookspecs import hookimpl
from libstock.plugins.manager import PluginManager
from libstock.plugins.notifier import PluginNotifier


class EventRecorder:
    def __init__(self) -> None:
        self.events: list[tuple[str, int, str]] = []

    @hookimpl
    def post_borrow(self, member_id: int, title: str) -> None:
        self.events.append(("borrow", member_id, title))

    @hookimpl
    def post_return(self, member_id: int, title: str) -> None:
        self.events.append(("return", member_id, title))


class ExplodingPlugin:
    @hookimpl
    def post_return(self, member_id: int, title: str) -> None:
        msg = "Plugin exploded!"
        raise RuntimeError(msg)


@pytest.fixture
def recorder_notifier() -> tuple[PluginNotifier, EventRecorder]:
    pm = PluginManager()
    recorder = EventRecorder()
    pm.register_plugin(recorder, name="recorder")
    return PluginNotifier(pm), recorder


class TestPluginNotifier:
    def test_notify_borrow(self, recorder_notifier) -> None:
        notifier, recorder = recorder_notifier
        notifier.notify_borrow(1, "Metamorphosis")
        assert recorder.events == [("borrow", 1, "Metamorphosis")]

    def test_notify_return(self, recorder_notifier) -> None:
        notifier, recorder = recorder_notifier
        notifier.notify_return(1, "Animal Farm")
        assert recorder.events == [("return", 1, "Animal Farm")]

    def test_no_plugins_is_a_no_op(self) -> None:
        PluginNotifier(PluginManager()).notify_borrow(1, "1984")

    def test_plugin_failure_propagates(self) -> None:
        pm = PluginManager()
        pm.register_plugin(ExplodingPlugin())
        with pytest.raises(RuntimeError, match="Plugin exploded!"):
            PluginNotifier(pm).notify_return(1, "1984")


class TestLogEventsPlugin:
    def test_emits_structured_events(self) -> None:
        pm = PluginManager()
        pm.register_plugin(LogEventsPlugin())
        notifier = PluginNotifier(pm)

        with capture_logs() as logs:
            notifier.notify_borrow(3, "Dune")
            notifier.notify_return(3, "Dune")

        assert [(e["event"], e["member_id"], e["title"]) for e in logs] == [
            ("book.borrowed", 3, "Dune"),
            ("book.returned", 3, "Dune"),
        ]
        assert all(e["log_level"] == "info" for e in logs)
