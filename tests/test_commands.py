import pytest

from rejson_handler.commands import CommandBuilder
from rejson_handler.errors import CommandArgumentError
from rejson_handler.options import CommandName, DebugSubCommand, GetOption, SetOption


@pytest.fixture
def builder() -> CommandBuilder:
    return CommandBuilder()


def test_set_encodes_document_and_appends_condition(builder: CommandBuilder) -> None:
    assert builder.set("k", ".", {"a": 1}) == ("JSON.SET", "k", ".", '{"a": 1}')
    assert builder.set("k", ".a", 2, SetOption.NX) == ("JSON.SET", "k", ".a", "2", "NX")
    assert builder.set("k", ".a", None, SetOption.XX) == ("JSON.SET", "k", ".a", "null", "XX")


def test_set_rejects_more_than_one_condition(builder: CommandBuilder) -> None:
    with pytest.raises(CommandArgumentError, match="at most one"):
        builder.set("k", ".", 1, SetOption.NX, SetOption.XX)


def test_set_rejects_unknown_condition(builder: CommandBuilder) -> None:
    with pytest.raises(CommandArgumentError, match="unknown JSON.SET option"):
        builder.set("k", ".", 1, "EX")  # type: ignore[arg-type]


def test_get_places_format_flags_before_path(builder: CommandBuilder) -> None:
    assert builder.get("k", ".") == ("JSON.GET", "k", ".")
    assert builder.get("k", ".a", GetOption.INDENT, GetOption.NEWLINE, GetOption.SPACE, GetOption.NOESCAPE) == (
        "JSON.GET",
        "k",
        "INDENT",
        "\t",
        "NEWLINE",
        "\n",
        "SPACE",
        " ",
        "NOESCAPE",
        ".a",
    )


def test_get_accepts_custom_format_flags(builder: CommandBuilder) -> None:
    command = builder.get("k", ".", GetOption.indent("  "), GetOption.space(""))
    assert command == ("JSON.GET", "k", "INDENT", "  ", "SPACE", "", ".")


def test_get_rejects_unknown_format_flag(builder: CommandBuilder) -> None:
    with pytest.raises(CommandArgumentError, match="unknown JSON.GET option"):
        builder.get("k", ".", "NOESCAPE")  # type: ignore[arg-type]


def test_mget_puts_path_last(builder: CommandBuilder) -> None:
    assert builder.mget(".name", "a", "b", "c") == ("JSON.MGET", "a", "b", "c", ".name")


@pytest.mark.parametrize(
    "command",
    [
        CommandName.DEL,
        CommandName.TYPE,
        CommandName.STRLEN,
        CommandName.ARRLEN,
        CommandName.OBJKEYS,
        CommandName.OBJLEN,
        CommandName.FORGET,
        CommandName.RESP,
    ],
)
def test_key_path_commands(builder: CommandBuilder, command: CommandName) -> None:
    assert builder.key_path(command, "k", ".x") == (command.value, "k", ".x")


def test_number_commands_pass_number_through(builder: CommandBuilder) -> None:
    assert builder.number(CommandName.NUMINCRBY, "k", ".n", 3) == ("JSON.NUMINCRBY", "k", ".n", 3)
    assert builder.number(CommandName.NUMMULTBY, "k", ".n", 1.5) == ("JSON.NUMMULTBY", "k", ".n", 1.5)


def test_strappend_encodes_string_as_json(builder: CommandBuilder) -> None:
    assert builder.strappend("k", ".s", "bar") == ("JSON.STRAPPEND", "k", ".s", '"bar"')


def test_array_commands(builder: CommandBuilder) -> None:
    assert builder.arrappend("k", ".arr", 1, "two", {"three": 3}) == (
        "JSON.ARRAPPEND",
        "k",
        ".arr",
        "1",
        '"two"',
        '{"three": 3}',
    )
    assert builder.arrpop("k", ".arr", -1) == ("JSON.ARRPOP", "k", ".arr", -1)
    assert builder.arrtrim("k", ".arr", 0, 4) == ("JSON.ARRTRIM", "k", ".arr", 0, 4)
    assert builder.arrinsert("k", ".arr", 2, "x", "y") == ("JSON.ARRINSERT", "k", ".arr", 2, '"x"', '"y"')


def test_arrindex_optional_range(builder: CommandBuilder) -> None:
    assert builder.arrindex("k", ".arr", 3) == ("JSON.ARRINDEX", "k", ".arr", "3")
    assert builder.arrindex("k", ".arr", 3, 1) == ("JSON.ARRINDEX", "k", ".arr", "3", 1)
    assert builder.arrindex("k", ".arr", 3, 1, 5) == ("JSON.ARRINDEX", "k", ".arr", "3", 1, 5)

    with pytest.raises(CommandArgumentError, match="at most start and stop"):
        builder.arrindex("k", ".arr", 3, 1, 5, 7)


@pytest.mark.parametrize("method", ["arrappend", "arrinsert"])
def test_array_insertion_requires_values(builder: CommandBuilder, method: str) -> None:
    args = ("k", ".arr") if method == "arrappend" else ("k", ".arr", 0)
    with pytest.raises(CommandArgumentError, match="at least one json value"):
        getattr(builder, method)(*args)


def test_debug_memory_and_help(builder: CommandBuilder) -> None:
    assert builder.debug(DebugSubCommand.MEMORY, "k", ".") == ("JSON.DEBUG", "MEMORY", "k", ".")
    assert builder.debug(DebugSubCommand.HELP, "k", ".") == ("JSON.DEBUG", "HELP")
    assert builder.debug("MEMORY", "k", ".a") == ("JSON.DEBUG", "MEMORY", "k", ".a")


def test_debug_rejects_unknown_subcommand(builder: CommandBuilder) -> None:
    with pytest.raises(CommandArgumentError, match="unknown JSON.DEBUG subcommand"):
        builder.debug("STATS", "k", ".")


def test_custom_json_encoder_is_used() -> None:
    builder = CommandBuilder(json_encoder=lambda value: f"<{value}>")
    assert builder.set("k", ".", 1) == ("JSON.SET", "k", ".", "<1>")
    assert builder.arrappend("k", ".", "a") == ("JSON.ARRAPPEND", "k", ".", "<a>")


def test_command_argument_error_is_value_error() -> None:
    assert issubclass(CommandArgumentError, ValueError)
