"""Recursive descent parser: unit tokens -> UnitExpression.

Grammar::

    expression := <empty>
                | term (op term)*
                | term (mulop term)* "/" "(" term (mulop term)* ")"
    term       := SYMBOL [EXPONENT]

Each ``/`` negates the exponent of the term right after it; a parenthesized
group after ``/`` negates every term inside it.
"""

from __future__ import annotations

from dataclasses import dataclass

from unitgraph.core.errors import FormatError
from unitgraph.core.parser.tokenizer import Token, TokenType, tokenize
from unitgraph.core.parser.ast_nodes import TermNode, UnitExpression


@dataclass
class ParseError:
    message: str
    pos: int


@dataclass
class ParseResult:
    ast: UnitExpression | None
    errors: list[ParseError]

    @property
    def ok(self) -> bool:
        return len(self.errors) == 0


class Parser:
    """Parses a token stream into a UnitExpression. Stops at the first error."""

    def __init__(self, tokens: list[Token], source: str = ""):
        self.tokens = tokens
        self.source = source
        self.pos = 0
        self.errors: list[ParseError] = []

    def parse(self) -> ParseResult:
        terms: list[TermNode] = []
        if self._at_end():
            return ParseResult(ast=UnitExpression(terms, self.source), errors=[])

        seen_div = False
        sign = 1
        while True:
            term = self._parse_term(sign)
            if term is None:
                break
            terms.append(term)

            if self._at_end():
                break

            tok = self._advance()
            if tok.type == TokenType.MUL:
                sign = 1
            elif tok.type == TokenType.DIV:
                if self._peek().type == TokenType.LPAREN:
                    if seen_div:
                        self._error("A parenthesized group may only follow the first '/'", self._peek())
                        break
                    self._parse_group(terms)
                    break
                seen_div = True
                sign = -1
            else:
                self._error(f"Expected '*' or '/', got '{tok.value}'", tok)
                break

        if self.errors:
            return ParseResult(ast=None, errors=self.errors)
        return ParseResult(ast=UnitExpression(terms, self.source), errors=[])

    def _parse_group(self, terms: list[TermNode]) -> None:
        self._advance()  # consume (
        while True:
            term = self._parse_term(-1)
            if term is None:
                return
            terms.append(term)

            tok = self._peek()
            if tok.type == TokenType.MUL:
                self._advance()
                continue
            if tok.type == TokenType.RPAREN:
                self._advance()
                break
            if tok.type == TokenType.EOF:
                self._error("Missing closing parenthesis", tok)
            else:
                self._error(f"Only '*' may appear inside parentheses, got '{tok.value}'", tok)
            return

        if not self._at_end():
            self._error(f"Unexpected '{self._peek().value}' after closing parenthesis", self._peek())

    def _parse_term(self, sign: int) -> TermNode | None:
        tok = self._expect(TokenType.SYMBOL, "unit symbol")
        if tok is None:
            return None
        exponent = 1
        if self._peek().type == TokenType.EXPONENT:
            exponent = int(self._advance().value)
        return TermNode(symbol=tok.value, exponent=sign * exponent, pos=tok.pos)

    # ── Helpers ─────────────────────────────────────────────────────────

    def _peek(self) -> Token:
        return self.tokens[self.pos]

    def _advance(self) -> Token:
        tok = self.tokens[self.pos]
        self.pos += 1
        return tok

    def _at_end(self) -> bool:
        return self.pos >= len(self.tokens) or self.tokens[self.pos].type == TokenType.EOF

    def _expect(self, tok_type: TokenType, description: str) -> Token | None:
        if self._at_end():
            self._error(f"Expected {description}, got end of input", self.tokens[-1])
            return None
        tok = self._peek()
        if tok.type != tok_type:
            self._error(f"Expected {description}, got '{tok.value}'", tok)
            return None
        return self._advance()

    def _error(self, message: str, token: Token):
        self.errors.append(ParseError(message=message, pos=token.pos))


def parse(tokens: list[Token], source: str = "") -> ParseResult:
    """Convenience function to parse tokens into a UnitExpression."""
    return Parser(tokens, source).parse()


def parse_expression(source: str) -> UnitExpression:
    """Tokenize and parse ``source``, raising FormatError on the first problem."""
    result = parse(tokenize(source), source)
    if not result.ok:
        first = result.errors[0]
        raise FormatError(first.message, source, first.pos)
    return result.ast
