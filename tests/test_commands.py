# tests/test_commands.py

from __future__ import annotations

from todo_keeper.cli.commands import CommandRegistry, registry
from todo_keeper.connectors.console_connector import handle_line


def test_command_registry_routes_2_and_3_params(state) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}

    def h2(state, args):
        called["h2"] += 1
        return "h2"

    def h3(state, args, emit):
        called["h3"] += 1
        if emit is not None:
            emit("note")
        return "h3"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b")

    assert reg.handle(state, "/a x") == "h2"
    assert reg.handle(state, "/b y", emit=lambda _: None) == "h3"
    assert called["h2"] == 1
    assert called["h3"] == 1


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_add_list_done_delete_flow(state) -> None:
    emitted: list[str] = []

    reply = registry.handle(state, "/add   Write report  ")
    assert reply == "Added [ ] #1 Write report"
    registry.handle(state, "/add Call mom")

    listing = registry.handle(state, "/list") or ""
    assert listing.index("#2 Call mom") < listing.index("#1 Write report")
    assert "2 Total | 0 Completed | 2 Pending" in listing

    reply = registry.handle(state, "/done #1", emit=emitted.append) or ""
    assert reply.startswith("[x] #1 Write report")
    assert emitted == ["Nice work! #1 is done."]

    reply = registry.handle(state, "/del 2") or ""
    assert reply == "Deleted #2."

    stats = registry.handle(state, "/stats") or ""
    assert "1 of 1 completed" in stats
    assert "100%" in stats
    assert "All tasks completed!" in stats


def test_commands_report_bad_arguments(state) -> None:
    assert (registry.handle(state, "/add    ") or "").startswith("Usage: /add")
    assert registry.handle(state, "/done") == "Usage: /done <id>"
    assert registry.handle(state, "/done abc") == "Usage: /done <id>"
    assert registry.handle(state, "/done 42") == "No task #42."
    assert registry.handle(state, "/del 42") == "No task #42."
    assert len(state.store) == 0


def test_console_line_without_slash_adds_task(state) -> None:
    assert handle_line(state, "   ") is None
    assert handle_line(state, "buy milk") == "Added [ ] #1 buy milk"
    assert [t.text for t in state.store.tasks] == ["buy milk"]
    assert "Available commands" in (handle_line(state, "/help") or "")


def test_empty_list_message(state) -> None:
    listing = registry.handle(state, "/ls") or ""
    assert listing.startswith("No tasks yet.")
    assert "0 Total" in listing


def test_add_keeps_inner_spacing_and_only_trims(state) -> None:
    reply = registry.handle(state, "/add   buy   two   milks  ")

    assert reply == "Added [ ] #1 buy   two   milks"
    assert [t.text for t in state.store.tasks] == ["buy   two   milks"]
    # Same text typed without a slash is stored the same way.
    handle_line(state, "buy   two   milks")
    assert [t.text for t in state.store.tasks] == ["buy   two   milks"] * 2


def test_raw_args_registration_passes_remainder(state) -> None:
    reg = CommandRegistry()
    seen: list[list[str]] = []
    def say(state, args):
        seen.append(args)
        return "ok"

    reg.register("say", say, "say", aliases=["s"], raw_args=True)

    reg.handle(state, "/say  a  b ")
    reg.handle(state, "/S x")
    reg.handle(state, "/say   ")

    assert seen == [["a  b "], ["x"], []]


def test_help_lists_exit(state) -> None:
    help_text = registry.handle(state, "/help") or ""
    assert "/exit - " in help_text
    assert registry.handle(state, "/quit") == "Use /exit at the console prompt to quit."
