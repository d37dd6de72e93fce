"""Tests for the State pattern canvas."""

import logging

import pytest
from PySide6.QtCore import Qt

from patternbook.exceptions import NoToolSetError
from patternbook.state.canvas import Canvas
from patternbook.state.tools import EraserTool, SelectionTool


def test_dispatch_without_tool_raises(canvas):
    with pytest.raises(NoToolSetError):
        canvas.on_pointer_down()
    with pytest.raises(NoToolSetError):
        canvas.on_pointer_up()


def test_new_canvas_has_no_tool(canvas):
    assert canvas.active_tool is None
    assert canvas.cursor == Qt.CursorShape.ArrowCursor


def test_constructor_tool_becomes_active():
    tool = EraserTool()
    canvas = Canvas(tool)
    assert canvas.active_tool is tool
    assert canvas.cursor == Qt.CursorShape.CrossCursor


def test_events_route_to_active_tool(canvas, recording_tool_factory):
    tool = recording_tool_factory()
    canvas.set_tool(tool)
    canvas.on_pointer_down()
    canvas.on_pointer_up()
    assert tool.calls == ["down", "up"]


def test_events_route_to_most_recent_tool(canvas, recording_tool_factory):
    first = recording_tool_factory("first")
    second = recording_tool_factory("second")

    canvas.set_tool(first)
    canvas.set_tool(second)
    canvas.on_pointer_down()

    assert second.calls == ["down"]
    assert "down" not in first.calls


def test_set_tool_does_not_call_new_tool(canvas, recording_tool_factory):
    tool = recording_tool_factory()
    canvas.set_tool(tool)
    assert tool.calls == []


def test_set_tool_deactivates_previous_tool(canvas, recording_tool_factory):
    first = recording_tool_factory("first")
    second = recording_tool_factory("second")
    canvas.set_tool(first)
    canvas.set_tool(second)
    assert first.calls == ["deactivate"]
    assert second.calls == []


def test_resetting_same_tool_is_allowed(canvas, recording_tool_factory):
    tool = recording_tool_factory()
    canvas.set_tool(tool)
    canvas.set_tool(tool)
    canvas.on_pointer_up()
    assert canvas.active_tool is tool
    assert tool.calls == ["up"]


def test_set_tool_rejects_non_tool(canvas):
    with pytest.raises(TypeError):
        canvas.set_tool("eraser")


def test_swapping_tools_changes_behavior(canvas, caplog):
    caplog.set_level(logging.INFO, logger="patternbook.state.tools")

    canvas.set_tool(EraserTool())
    canvas.on_pointer_down()
    canvas.set_tool(SelectionTool())
    canvas.on_pointer_down()

    assert caplog.messages == ["eraser tool selected", "selection tool selected"]


def test_cursor_follows_active_tool(canvas):
    canvas.set_tool(EraserTool())
    assert canvas.cursor == Qt.CursorShape.CrossCursor
    canvas.set_tool(SelectionTool())
    assert canvas.cursor == Qt.CursorShape.ArrowCursor


def test_tool_changed_signal(canvas):
    received = []
    canvas.tool_changed.connect(received.append)

    tool = EraserTool()
    canvas.set_tool(tool)

    assert received == [tool]


def test_pointer_dispatched_signal(canvas):
    received = []
    canvas.pointer_dispatched.connect(lambda name, tool: received.append((name, tool)))

    tool = SelectionTool()
    canvas.set_tool(tool)
    canvas.on_pointer_down()
    canvas.on_pointer_up()

    assert received == [("pointer_down", tool), ("pointer_up", tool)]


def test_no_signal_when_dispatch_fails(canvas):
    received = []
    canvas.pointer_dispatched.connect(lambda name, tool: received.append(name))
    with pytest.raises(NoToolSetError):
        canvas.on_pointer_down()
    assert received == []


def test_dispatch_without_tool_logs_rejection(canvas, caplog):
    caplog.set_level(logging.WARNING, logger="patternbook.state.canvas")
    with pytest.raises(NoToolSetError):
        canvas.on_pointer_up()
    assert caplog.messages == ["Rejected pointer_up: no tool set on canvas"]
