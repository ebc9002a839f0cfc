"""Tests for the MiniLang recognizer: acceptance, diagnostics, recovery."""

import pytest

from minilang import Recognizer, recognize, tokenize
from minilang.tokens import TokenKind


def _messages(source: str) -> list[str]:
    return [d.message for d in recognize(source)]


class TestAcceptance:
    """Grammatical input produces no diagnostics."""

    @pytest.mark.parametrize(
        "source",
        [
            "x=1;",
            "x = y;",
            "print 1+2;",
            "print (a + b) * c / 2 - 1;",
            "total = ((1));",
            "if (x) { print x; }",
            "if (x - 1) { y = 2; } else { y = 3; }",
            "if (a) { if (b) { print 1; } else { print 2; } }",
            "",
            "   \n\t",
        ],
    )
    def test_valid_programs(self, source: str) -> None:
        assert recognize(source) == ()

    def test_only_first_statement_is_visited(self) -> None:
        recognizer = Recognizer(tokenize("x=1;y=2;"))
        assert recognizer.recognize() == ()
        assert recognizer.position == 4
        assert [t.text for t in recognizer.remaining] == ["y", "=", "2", ";"]

    def test_garbage_after_first_statement_is_ignored(self) -> None:
        assert recognize("print 1; )))") == ()

    def test_block_holds_a_single_statement(self) -> None:
        # The second statement is left for the closing-brace check
        assert _messages("if (x) { a=1; b=2; }") == ["Syntax error: Expected '}', found b"]


class TestAssignment:
    def test_missing_semicolon(self) -> None:
        messages = _messages("x=1")
        assert messages == ["Syntax error: Expected ';', found "]
        assert ";" in messages[0]

    def test_missing_equals(self) -> None:
        assert _messages("x 1;") == ["Syntax error: Expected '=', found 1"]

    def test_keyword_is_not_assignable(self) -> None:
        assert _messages("true = 1;") == ["Syntax error: Unexpected token true"]

    def test_missing_operand(self) -> None:
        assert _messages("x = ;") == [
            "Syntax error: Unexpected token ;",
            "Syntax error: Expected ';', found ",
        ]


class TestPrint:
    def test_missing_semicolon(self) -> None:
        assert _messages("print x") == ["Syntax error: Expected ';', found "]

    def test_dangling_operator(self) -> None:
        assert _messages("print 1 +;") == [
            "Syntax error: Unexpected token ;",
            "Syntax error: Expected ';', found ",
        ]

    def test_unclosed_parenthesis(self) -> None:
        assert _messages("print (1 + 2;") == [
            "Syntax error: Expected ')', found ;",
            "Syntax error: Expected ';', found ",
        ]


class TestConditional:
    def test_missing_open_paren(self) -> None:
        assert _messages("if x) { print 1; }") == [
            "Syntax error: Expected '(' after if, found x"
        ]

    def test_missing_close_paren_cascade(self) -> None:
        recognizer = Recognizer(tokenize("if(x{print 1;}"))
        messages = [d.message for d in recognizer.recognize()]
        # Recovery eats "{" and leaves the conditional; nothing else is visited
        assert messages == ["Syntax error: Expected ')', found {"]
        assert [t.text for t in recognizer.remaining] == ["print", "1", ";", "}"]

    def test_missing_open_brace(self) -> None:
        assert _messages("if (x) print 1;") == [
            "Syntax error: Expected '{' after if condition, found print"
        ]

    def test_missing_close_brace(self) -> None:
        assert _messages("if (x) { print 1;") == ["Syntax error: Expected '}', found "]

    def test_missing_else_brace(self) -> None:
        assert _messages("if (x) { y=1; } else print 1;") == [
            "Syntax error: Expected '{' after else, found print"
        ]

    def test_missing_else_close_brace(self) -> None:
        assert _messages("if (x) { y=1; } else { print 1;") == [
            "Syntax error: Expected '}', found "
        ]

    def test_else_without_if_block_error_is_not_checked(self) -> None:
        # else is only looked for after a good closing brace
        recognizer = Recognizer(tokenize("if (x) { print 1; ) else { }"))
        assert [d.message for d in recognizer.recognize()] == [
            "Syntax error: Expected '}', found )"
        ]
        assert recognizer.remaining[0].text == "else"

    def test_empty_block_is_rejected(self) -> None:
        # A block body is a program, which must start with a statement
        assert _messages("if (x) { }") == [
            "Syntax error: Unexpected token }",
            "Syntax error: Expected '}', found ",
        ]

    def test_error_inside_block_cascades_outward(self) -> None:
        assert _messages("if (x) { y 1; }") == [
            "Syntax error: Expected '=', found 1",
            "Syntax error: Expected '}', found ;",
        ]


class TestStatementDispatch:
    @pytest.mark.parametrize(
        ("source", "found"),
        [
            ("1 = x;", "1"),
            ("else { }", "else"),
            ("; x = 1;", ";"),
            ("{ print 1; }", "{"),
            ("# comment\nx = 1;", "# comment"),
        ],
    )
    def test_unexpected_first_token(self, source: str, found: str) -> None:
        assert _messages(source) == [f"Syntax error: Unexpected token {found}"]

    def test_error_does_not_retry_statement(self) -> None:
        recognizer = Recognizer(tokenize("; x = 1;"))
        recognizer.recognize()
        assert recognizer.position == 1


class TestCursor:
    def test_cursor_never_passes_end(self) -> None:
        tokens = tokenize("print (")
        recognizer = Recognizer(tokens)
        messages = [d.message for d in recognizer.recognize()]
        assert messages == [
            "Syntax error: Unexpected token ",
            "Syntax error: Expected ')', found ",
            "Syntax error: Expected ';', found ",
        ]
        assert recognizer.position == len(tokens)

    def test_diagnostics_at_end_point_past_last_token(self) -> None:
        (diagnostic,) = recognize("x = 1")
        assert diagnostic.found.kind is TokenKind.END_OF_FILE
        assert diagnostic.location.offset == 5
        assert diagnostic.location.col_offset == 6

    def test_trailing_eof_token_is_accepted(self) -> None:
        from minilang.lexer import Scanner

        recognizer = Recognizer(Scanner("x = 1").tokenize())
        assert len(recognizer.tokens) == 3
        assert recognizer.recognize()[0].found.kind is TokenKind.END_OF_FILE

    def test_empty_stream(self) -> None:
        recognizer = Recognizer([])
        assert recognizer.recognize() == ()
        assert recognizer.position == 0


class TestCallbacks:
    def test_on_diagnostic_sees_each_in_order(self) -> None:
        seen = []
        result = recognize("print (1 + 2;", on_diagnostic=seen.append)
        assert tuple(seen) == result
        assert len(seen) == 2

    def test_diagnostics_property_matches_result(self) -> None:
        recognizer = Recognizer(tokenize("x 1;"))
        result = recognizer.recognize()
        assert recognizer.diagnostics == result
