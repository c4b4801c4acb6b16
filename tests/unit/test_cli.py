"""Tests unitarios del parser y el ejecutor de kvs.cli."""

import pytest

from kvs.cli import Command, CommandError, GetResult, parse_line, parse_script, run_commands
from kvs.store import KvStore


@pytest.mark.unit
class TestParseLine:
    def test_set(self) -> None:
        assert parse_line(1, "set foo bar") == Command(1, "set", ("foo", "bar"))

    def test_quoted_value_with_spaces(self) -> None:
        assert parse_line(2, 'set greeting "hola mundo"').args == ("greeting", "hola mundo")

    def test_empty_value(self) -> None:
        assert parse_line(1, 'set k ""').args == ("k", "")

    def test_blank_and_comment_lines(self) -> None:
        assert parse_line(1, "") is None
        assert parse_line(1, "   ") is None
        assert parse_line(1, "# comentario") is None
        assert parse_line(1, "  # sangrado") is None

    def test_hash_inside_value_is_kept(self) -> None:
        assert parse_line(1, "set k v#1").args == ("k", "v#1")
        assert parse_line(1, "set url http://h/p#frag").args == ("url", "http://h/p#frag")

    def test_hash_inside_key_is_kept(self) -> None:
        assert parse_line(1, "get a#b") == Command(1, "get", ("a#b",))

    def test_unknown_command(self) -> None:
        with pytest.raises(CommandError, match="línea 3: orden desconocida 'put'"):
            parse_line(3, "put a b")

    def test_wrong_arity(self) -> None:
        with pytest.raises(CommandError) as exc_info:
            parse_line(4, "get")
        assert exc_info.value.lineno == 4

    def test_unclosed_quote(self) -> None:
        with pytest.raises(CommandError):
            parse_line(1, 'set k "abc')


@pytest.mark.unit
class TestParseScript:
    def test_skips_blank_lines_and_keeps_line_numbers(self) -> None:
        cmds = parse_script(["set a 1", "", "get a"])
        assert [(c.lineno, c.name) for c in cmds] == [(1, "set"), (3, "get")]

    def test_error_reports_line(self) -> None:
        with pytest.raises(CommandError, match="línea 2"):
            parse_script(["set a 1", "rm"])


@pytest.mark.unit
class TestRunCommands:
    def test_get_results_in_order(self) -> None:
        store = KvStore()
        cmds = parse_script(["get foo", "set foo bar", "get foo", "rm foo", "get foo"])
        results = run_commands(store, cmds)
        assert results == [
            GetResult(1, "foo", None, False),
            GetResult(3, "foo", "bar", True),
            GetResult(5, "foo", None, False),
        ]
        assert len(store) == 0

    def test_rm_missing_is_not_an_error(self) -> None:
        store = KvStore()
        assert run_commands(store, parse_script(["rm missing"])) == []
        assert len(store) == 0
