import pytest

from mshell.quoting import (
    QuoteInfo,
    init_space_check,
    is_quote,
    skip_whitespace,
)


def test_new_quote_info_is_outside_quotes():
    info = QuoteInfo()
    assert info.in_quotes is False
    assert info.quote_char == ""
    assert info.start_pos == -1


def test_process_quote_opens_and_records_position():
    info = QuoteInfo()
    info.process_quote('"', 4)
    assert info.in_quotes is True
    assert info.quote_char == '"'
    assert info.start_pos == 4


def test_process_quote_ignores_other_quote_inside():
    info = QuoteInfo()
    info.process_quote('"', 2)
    info.process_quote("'", 5)
    assert info.in_quotes is True
    assert info.quote_char == '"'
    assert info.start_pos == 2


def test_process_quote_closes_matching_quote():
    info = QuoteInfo()
    info.process_quote("'", 1)
    info.process_quote("'", 6)
    assert info.in_quotes is False
    assert info.quote_char == ""
    # start position of the last opened quote is kept
    assert info.start_pos == 1


def test_reset_restores_initial_state():
    info = QuoteInfo()
    info.process_quote("'", 3)
    info.reset()
    assert info == QuoteInfo()


def test_process_space_quote_does_not_touch_start_pos():
    info = QuoteInfo()
    info.process_space_quote('"')
    assert info.in_quotes is True
    assert info.quote_char == '"'
    assert info.start_pos == -1
    info.process_space_quote("'")
    assert info.quote_char == '"'
    info.process_space_quote('"')
    assert info.in_quotes is False
    assert info.quote_char == ""


@pytest.mark.parametrize(
    "line", ['echo "a b"', "echo 'x \"y\" z'", "'a'\"b\"", "\"'\""]
)
def test_balanced_lines_end_outside_quotes(line):
    info = QuoteInfo()
    for pos, char in enumerate(line):
        if is_quote(char):
            info.process_quote(char, pos)
    assert info.in_quotes is False


def test_unbalanced_line_reports_opening_position():
    line = "echo 'abc"
    info = QuoteInfo()
    for pos, char in enumerate(line):
        if is_quote(char):
            info.process_quote(char, pos)
    assert info.in_quotes is True
    assert info.start_pos == line.index("'")


@pytest.mark.parametrize(
    "command", ["   ls", "\t\n ls -l", "ls", "", "  \v\f\r ", " a b "]
)
def test_skip_whitespace_matches_lstrip(command):
    index = skip_whitespace(command)
    assert command[index:] == command.lstrip(" \t\n\v\f\r")


def test_skip_whitespace_on_blank_line_is_length():
    assert skip_whitespace("   ") == len("   ")


@pytest.mark.parametrize("c", ['"', "'"])
def test_quotes_recognised(c):
    assert is_quote(c) is True


@pytest.mark.parametrize("c", ["a", "`", " ", "", "''"])
def test_non_quotes_rejected(c):
    assert is_quote(c) is False


def test_init_space_check():
    assert init_space_check("ls", 0) is True
    assert init_space_check("", 0) is True
    assert init_space_check(None, 0) is False
    assert init_space_check("ls", -1) is False