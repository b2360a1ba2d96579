"""
Scanner for the calcdemo expression language.

Converts an expression string into classified tokens, one at a time.
The parser pulls tokens on demand through Scanner.tokenize(); whitespace
is consumed there and never reaches it.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import StrEnum, auto


class TokenKind(StrEnum):
    """Token types for the expression language."""

    EOF = auto()
    WHITESPACE = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()

    # Literals
    NUMBER = auto()

    # Punctuation
    LPAREN = auto()
    RPAREN = auto()

    # Anything the scanner does not recognise
    ILLEGAL = auto()

    @property
    def display(self) -> str:
        """Form used in diagnostics: the operator itself or a <<NAME>> marker."""
        return _DISPLAY[self]


_DISPLAY: dict[TokenKind, str] = {
    TokenKind.EOF: "<<EOF>>",
    TokenKind.WHITESPACE: "<<Whitespace>>",
    TokenKind.PLUS: "+",
    TokenKind.MINUS: "-",
    TokenKind.STAR: "*",
    TokenKind.SLASH: "/",
    TokenKind.NUMBER: "<<NUMBER>>",
    TokenKind.LPAREN: "(",
    TokenKind.RPAREN: ")",
    TokenKind.ILLEGAL: "<<Illegal>>",
}

_SINGLE_CHAR: dict[str, TokenKind] = {
    " ": TokenKind.WHITESPACE,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}

_DIGITS = frozenset("0123456789")


class Token:
    """A single token, as yielded by iter_tokens()."""

    __slots__ = ("kind", "value", "pos")

    def __init__(self, kind: TokenKind, value: str, pos: int) -> None:
        self.kind = kind
        self.value = value
        self.pos = pos

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.value!r}, pos={self.pos})"


class Scanner:
    """Pull-based scanner with one token of state.

    The constructor scans the first token, so current_token is valid
    before the first call to tokenize().
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._offset = 0
        self._literal = ""
        self._token_start = 0
        self._current = TokenKind.EOF
        self.tokenize()

    @property
    def source(self) -> str:
        return self._source

    @property
    def current_token(self) -> TokenKind:
        """Kind of the most recently produced non-whitespace token."""
        return self._current

    @property
    def literal(self) -> str:
        """Text captured for the current token (digits for NUMBER)."""
        return self._literal

    @property
    def token_start(self) -> int:
        """Offset where the current token begins."""
        return self._token_start

    def _eof(self) -> bool:
        return self._offset >= len(self._source)

    def tokenize_once(self) -> TokenKind:
        """Scan exactly one token, whitespace included.

        Always advances the cursor unless at end of input, so a run of
        unrecognised characters cannot stall the scanner.
        """
        self._literal = ""
        self._token_start = self._offset

        if self._eof():
            return TokenKind.EOF

        c = self._source[self._offset]

        if c in _SINGLE_CHAR:
            self._offset += 1
            return _SINGLE_CHAR[c]

        if c in _DIGITS:
            start = self._offset
            while not self._eof() and self._source[self._offset] in _DIGITS:
                self._offset += 1
            self._literal = self._source[start : self._offset]
            return TokenKind.NUMBER

        self._literal = c
        self._offset += 1
        return TokenKind.ILLEGAL

    def tokenize(self) -> TokenKind:
        """Scan the next non-whitespace token and make it current."""
        kind = self.tokenize_once()
        while kind == TokenKind.WHITESPACE:
            kind = self.tokenize_once()
        self._current = kind
        return kind


def iter_tokens(source: str) -> Iterator[Token]:
    """Lazily yield the token stream of source, ending with EOF."""
    scanner = Scanner(source)
    while True:
        kind = scanner.current_token
        yield Token(kind, scanner.literal, scanner.token_start)
        if kind == TokenKind.EOF:
            return
        scanner.tokenize()
