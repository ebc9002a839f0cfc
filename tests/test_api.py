"""Tests for the high-level MiniLang API."""


class TestTokenizeFunction:
    def test_tokenize_excludes_eof(self) -> None:
        from minilang import TokenKind, tokenize

        tokens = tokenize("x = 1;")
        assert [t.kind for t in tokens] == [
            TokenKind.IDENTIFIER,
            TokenKind.OPERATOR,
            TokenKind.INTEGER,
            TokenKind.OPERATOR,
        ]

    def test_tokenize_with_source_file(self) -> None:
        from minilang import tokenize

        (token,) = tokenize("x", source_file="prog.ml")
        assert token.location.source_file == "prog.ml"

    def test_tokens_are_immutable(self) -> None:
        import dataclasses

        import pytest

        from minilang import tokenize

        (token,) = tokenize("x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            token.text = "y"  # type: ignore[misc]


class TestRecognizeFunction:
    def test_clean_input(self) -> None:
        from minilang import recognize

        assert recognize("print 1+2;") == ()

    def test_returns_diagnostics(self) -> None:
        from minilang import Diagnostic, recognize

        (diagnostic,) = recognize("x=1")
        assert isinstance(diagnostic, Diagnostic)
        assert str(diagnostic) == "Syntax error: Expected ';', found "

    def test_matches_scanner_plus_recognizer(self) -> None:
        from minilang import Recognizer, recognize, tokenize

        source = "if (x) { y 1; }"
        assert recognize(source) == Recognizer(tokenize(source)).recognize()


class TestPublicExports:
    def test_all_names_resolve(self) -> None:
        import minilang

        for name in minilang.__all__:
            assert hasattr(minilang, name), name
