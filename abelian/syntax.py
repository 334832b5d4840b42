"""
Reading terms and equations.

Grammar (whitespace is ignored):

    equation := term "=" term
    term     := summand { "+" summand | "-" factor }
    summand  := factor | "-" factor
    factor   := primary | NUMBER primary        NUMBER other than "0"
    primary  := IDENT | "0" | "(" term ")"

Identifiers are a letter followed by letters and digits. Identifiers
starting with the gensym prefix "g" are reserved for generated
variables and rejected.

    parse_equation("64x = 41y + a")
    parse_term("2(x - y) + -z")
"""

from string import digits

from .core.term import Term, identity, variable, scale, negate, add
from .core.state import Equation
from .core.unification import is_gensym, GENSYM_PREFIX


class ParseError(ValueError):
    """Malformed term or equation text."""


def tokenize(text: str) -> list:
    """Split text into identifiers, numbers, and single-character symbols."""
    tokens = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch.isspace():
            i += 1
        elif ch.isalpha():
            j = i + 1
            while j < len(text) and text[j].isalnum():
                j += 1
            tokens.append(text[i:j])
            i = j
        elif ch in digits:
            j = i + 1
            while j < len(text) and text[j] in digits:
                j += 1
            tokens.append(text[i:j])
            i = j
        else:
            tokens.append(ch)
            i += 1
    return tokens


class _Parser:
    def __init__(self, text: str):
        self.tokens = tokenize(text)
        self.pos = 0

    def peek(self):
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self):
        tok = self.peek()
        if tok is None:
            raise ParseError("unexpected end of input")
        self.pos += 1
        return tok

    def expect(self, expected: str):
        tok = self.advance()
        if tok != expected:
            raise ParseError(f"expected {expected!r}, found {tok!r}")

    def end(self):
        tok = self.peek()
        if tok is not None:
            raise ParseError(f"unexpected {tok!r}")

    def term(self) -> Term:
        t = self.summand()
        while self.peek() in ("+", "-"):
            if self.advance() == "+":
                t = add(t, self.summand())
            else:
                t = add(t, negate(self.factor()))
        return t

    def summand(self) -> Term:
        if self.peek() == "-":
            self.advance()
            return negate(self.factor())
        return self.factor()

    def factor(self) -> Term:
        tok = self.peek()
        if tok is not None and tok[0] in digits and tok != "0":
            self.advance()
            try:
                k = int(tok)
            except ValueError as e:
                raise ParseError(f"coefficient {tok[:20]}... too long") from e
            return scale(k, self.primary())
        return self.primary()

    def primary(self) -> Term:
        tok = self.advance()
        if tok == "0":
            return identity()
        if tok == "(":
            t = self.term()
            self.expect(")")
            return t
        if tok[0].isalpha():
            if is_gensym(tok):
                raise ParseError(
                    f"identifier {tok!r} starts with reserved "
                    f"prefix {GENSYM_PREFIX!r}"
                )
            return variable(tok)
        raise ParseError(f"unexpected {tok!r}")


def parse_term(text: str) -> Term:
    parser = _Parser(text)
    try:
        t = parser.term()
    except RecursionError as e:
        raise ParseError("term nested too deeply") from e
    parser.end()
    return t


def parse_equation(text: str) -> Equation:
    """Parse "term = term". Raises ParseError on malformed text."""
    parser = _Parser(text)
    try:
        left = parser.term()
        parser.expect("=")
        right = parser.term()
    except RecursionError as e:
        raise ParseError("term nested too deeply") from e
    parser.end()
    return Equation(left, right)
