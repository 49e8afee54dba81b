import pytest

from untitled_dm.config import CommandConfig
from untitled_dm.exceptions import MalformedArgumentError
from untitled_dm.registry import Command, CommandRegistry, parse_extra_command


def test_parse_extra_command_splits_name_program_and_args():
    name, command = parse_extra_command('Greet=echo "hello world" again')
    assert name == "Greet"
    assert command == Command("echo", ("hello world", "again"))
    assert command.argv == ["echo", "hello world", "again"]


def test_parse_extra_command_splits_on_first_equals_only():
    name, command = parse_extra_command("Env=env FOO=bar")
    assert name == "Env"
    assert command == Command("env", ("FOO=bar",))


def test_parse_extra_command_without_args():
    assert parse_extra_command("Sway=sway") == ("Sway", Command("sway"))


@pytest.mark.parametrize("record", ["Nothing=", "Nothing"])
def test_parse_extra_command_label_only(record):
    name, command = parse_extra_command(record)
    assert name == "Nothing"
    assert not command.runnable


def test_parse_extra_command_rejects_unterminated_quote():
    with pytest.raises(MalformedArgumentError, match="Bad=echo"):
        parse_extra_command('Bad=echo "oops')


def test_build_orders_extra_before_configured():
    extra = ["A=echo a", "B=echo b"]
    configured = [
        CommandConfig(name="C", command="echo", args=["c"]),
        CommandConfig(name="D", command="true"),
        CommandConfig(name="E", command="echo", args=["e"]),
    ]
    registry = CommandRegistry.build(extra, configured)

    assert registry.choices == ["A", "B", "C", "D", "E"]
    assert registry.get(0) == Command("echo", ("a",))
    assert registry.get(1) == Command("echo", ("b",))
    assert registry.get(2) == Command("echo", ("c",))
    assert registry.get(3) == Command("true")
    assert registry.get(4) == Command("echo", ("e",))


def test_build_skips_label_only_entries():
    registry = CommandRegistry.build(
        ["Title="],
        [CommandConfig(name="Section"), CommandConfig(name="Run", command="ls")],
    )

    assert len(registry) == 3
    assert 0 not in registry
    assert 1 not in registry
    assert 2 in registry
    assert registry.get(0) is None
    assert set(registry.commands) <= set(range(len(registry)))


def test_build_aborts_on_malformed_extra():
    with pytest.raises(MalformedArgumentError):
        CommandRegistry.build(['Ok=echo ok', 'Bad=echo "x'], [CommandConfig(name="C")])


def test_build_empty():
    registry = CommandRegistry.build()
    assert registry.choices == []
    assert registry.commands == {}
