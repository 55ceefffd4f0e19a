from booba_bot.commands.parser import MAX_COUNT, parse_command, parse_count
from booba_bot.core.models import Command, CommandKind


def test_keywords_map_to_commands():
    assert parse_command("!booba") == Command(kind=CommandKind.INCREMENT)
    assert parse_command("!boobacount").kind is CommandKind.SHOW_COUNT
    assert parse_command("!boobareset").kind is CommandKind.RESET
    assert parse_command("!help").kind is CommandKind.HELP
    assert parse_command("!boobasave 3").kind is CommandKind.SET_TO


def test_empty_messages_are_ignored():
    assert parse_command("") is None
    assert parse_command("   \n\t ") is None


def test_unknown_and_wrong_case_keywords():
    assert parse_command("!unknown").kind is CommandKind.UNRECOGNIZED
    assert parse_command("!BOOBA").kind is CommandKind.UNRECOGNIZED
    assert parse_command("hello !booba").kind is CommandKind.UNRECOGNIZED


def test_boobasave_keeps_only_first_argument():
    cmd = parse_command("  !boobasave    12   34 extra ")
    assert cmd.argument == "12"
    assert parse_command("!boobasave").argument is None
    # other commands ignore their arguments
    assert parse_command("!booba 5").argument is None


def test_parse_count():
    assert parse_count("0") == 0
    assert parse_count("42") == 42
    assert parse_count("007") == 7
    assert parse_count(str(MAX_COUNT)) == MAX_COUNT
    for bad in ["", "abc", "-5", "+5", "1.5", "1e3", "١٢", str(MAX_COUNT + 1)]:
        assert parse_count(bad) is None, bad
