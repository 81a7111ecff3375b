# tests/parser_tests/test_token_stream.py
# This file is part of Galileo-Parse - A Dynamic Fault Tree Model Parser
#
# Test suite for the bounded-lookahead token stream

"""Test suite for TokenStream lookahead, consumption and EOF handling."""

import pytest
from galileo.tokens import SourcePosition, Token, TokenKind, TokenStream


class TestTokenStream:
    """Test cases for the token source adapter."""

    def test_peek_does_not_consume(self, tok):
        stream = TokenStream(tok(TokenKind.TOPLEVEL, (TokenKind.NAME, "T"), TokenKind.SEMICOLON))

        assert stream.peek() is TokenKind.TOPLEVEL
        assert stream.peek(1) is TokenKind.NAME
        assert stream.peek(2) is TokenKind.SEMICOLON
        assert stream.peek() is TokenKind.TOPLEVEL

    def test_advance_returns_consumed_token(self, tok):
        stream = TokenStream(tok((TokenKind.NAME, "A"), (TokenKind.NAME, "B")))

        first = stream.advance()
        assert first.kind is TokenKind.NAME
        assert first.value == "A"
        assert stream.current_token().value == "B"
        assert stream.position() == SourcePosition(1, 2, 1)

    @pytest.mark.parametrize("offset", [-1, 3, 10])
    def test_lookahead_is_bounded(self, tok, offset):
        stream = TokenStream(tok(TokenKind.SEMICOLON))

        with pytest.raises(ValueError):
            stream.peek(offset)

    def test_eof_is_synthesized_and_sticky(self, tok):
        stream = TokenStream(tok((TokenKind.NAME, "ABC")))

        assert stream.peek(1) is TokenKind.EOF
        assert stream.peek(2) is TokenKind.EOF

        stream.advance()
        eof = stream.advance()
        assert eof.kind is TokenKind.EOF
        assert stream.advance().kind is TokenKind.EOF
        assert stream.peek() is TokenKind.EOF

    def test_eof_position_follows_last_token(self):
        stream = TokenStream([Token(TokenKind.NAME, "ABC", SourcePosition(2, 5, 14), width=3)])

        stream.advance()
        assert stream.position() == SourcePosition(2, 8, 17)

    def test_empty_source_yields_eof_at_origin(self):
        stream = TokenStream([])

        assert stream.peek() is TokenKind.EOF
        assert stream.position() == SourcePosition(1, 1, 0)

    def test_tokens_are_pulled_lazily(self, tok):
        """Only as many tokens as the lookahead requires are read."""
        pulled = []

        def source():
            for token in tok(TokenKind.TOPLEVEL, (TokenKind.NAME, "T"), TokenKind.SEMICOLON):
                pulled.append(token.kind)
                yield token

        stream = TokenStream(source())
        assert pulled == []

        stream.peek()
        assert pulled == [TokenKind.TOPLEVEL]

        stream.peek(1)
        assert pulled == [TokenKind.TOPLEVEL, TokenKind.NAME]

        stream.advance()
        stream.advance()
        assert len(pulled) == 2
