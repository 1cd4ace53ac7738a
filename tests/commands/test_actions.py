"""
Tests for CommandAction

Activation must complete before the command is dispatched.
"""
import asyncio
import sys

import pytest

from extcommands.commands.actions import Action, CommandAction, ORDER_LAST
from extcommands.commands.types import Command
from extcommands.errors import ActivationError, DispatchError


class MockActivation:
    """Records activation events; optionally fails."""

    def __init__(self, error: Exception | None = None, calls: list | None = None):
        self.error = error
        self.calls = calls if calls is not None else []

    async def activate_by_event(self, event):
        await asyncio.sleep(0)
        self.calls.append(("activate", event))
        if self.error:
            raise self.error


class MockDispatcher:
    """Records executed commands and returns a canned result."""

    def __init__(self, result=None, error: Exception | None = None, calls: list | None = None):
        self.result = result
        self.error = error
        self.calls = calls if calls is not None else []

    async def execute_command(self, command_id, *args):
        self.calls.append(("execute", command_id, args))
        if self.error:
            raise self.error
        return self.result


@pytest.fixture
def command():
    return Command(command="ext.go", title="Go")


def test_identity_and_order(command):
    action = CommandAction(command, MockActivation(), MockDispatcher())

    assert action.id == "ext.go"
    assert action.label == "Go"
    assert action.order == ORDER_LAST == sys.maxsize
    assert action.enabled is True
    assert action.command is command


@pytest.mark.asyncio
async def test_activates_then_dispatches(command):
    calls = []
    action = CommandAction(command, MockActivation(calls=calls), MockDispatcher(result="done", calls=calls))

    result = await action.run("a", 2)

    assert result == "done"
    assert calls == [("activate", "onCommand:ext.go"), ("execute", "ext.go", ("a", 2))]


@pytest.mark.asyncio
async def test_activation_failure_skips_dispatch(command):
    dispatcher = MockDispatcher()
    action = CommandAction(command, MockActivation(error=RuntimeError("boom")), dispatcher)

    with pytest.raises(ActivationError) as exc_info:
        await action.run()

    assert dispatcher.calls == []
    assert exc_info.value.stage == "activation"
    assert exc_info.value.event == "onCommand:ext.go"
    assert isinstance(exc_info.value.__cause__, RuntimeError)


@pytest.mark.asyncio
async def test_dispatch_failure_is_reported(command):
    action = CommandAction(command, MockActivation(), MockDispatcher(error=ValueError("bad arg")))

    with pytest.raises(DispatchError) as exc_info:
        await action.run()

    assert exc_info.value.stage == "dispatch"
    assert exc_info.value.to_dict()["details"] == {"command": "ext.go", "stage": "dispatch"}


@pytest.mark.asyncio
async def test_run_returns_awaitable_for_concurrent_invocations(command):
    dispatcher = MockDispatcher(result=1)
    action = CommandAction(command, MockActivation(), dispatcher)

    results = await asyncio.gather(action.run(1), action.run(2))

    assert results == [1, 1]
    assert len(dispatcher.calls) == 2


@pytest.mark.asyncio
async def test_plain_action_without_callback():
    assert await Action("noop").run() is None
