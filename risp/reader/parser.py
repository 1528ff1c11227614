"""
  Risp Reader, Lexer and Parser

- Streaming, lazy parsing
- Emits AST nodes (risp.types.ast) directly, there is no intermediate list form:

    - 123                          -> Num
    - true / false                 -> Bool
    - name                         -> Ident
    - (+ a b) / (- a b) / (== a b) -> Add / Minus / Equal
    - (If c t e)                   -> If
    - (Define name expr)           -> Define
    - (Func (p1 p2 ...) body)      -> Function
    - (Apply f a1 a2 ...)          -> Apply

Keywords are case-sensitive and cannot be used as identifiers.
"""

from __future__ import annotations

import re
from typing import Callable, Iterator, Optional

from risp.errors import RispSyntaxError
from risp.types.ast import (
    AST,
    Add,
    Apply,
    Bool,
    Define,
    Equal,
    Function,
    Ident,
    If,
    Minus,
    Num,
)


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<symbol>[^\s();]+)"  # numbers, booleans, keywords and identifiers
    r")",
    re.DOTALL,
)

NUMBER_RE = re.compile(r"[0-9]+")
SIGNED_NUMBER_RE = re.compile(r"[+-][0-9]+")
IDENT_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_\-?!*']*")

BOOLEANS: dict[str, bool] = {
    "true": True,
    "false": False,
}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)

    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            # Only trailing whitespace is left
            if source[pos:].isspace():
                break
            raise RispSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        if m.group("comment"):
            continue
        for nm in ("lparen", "rparen", "symbol"):
            if m.group(nm):
                yield nm, m.group(nm)
                break


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    # ------------------------
    # Helpers for syntax forms
    # ------------------------
    def expect_expr(self, form: str) -> AST:
        """Parse one operand of `form`; a missing operand is a syntax error."""
        tok_type, _ = self.peek()
        if tok_type is None:
            raise RispSyntaxError(f"Unexpected EOF while reading {form}")
        if tok_type == "rparen":
            raise RispSyntaxError(f"Too few operands for {form}")
        return self.read_expr()

    def expect_rparen(self, form: str) -> None:
        tok_type, _ = self.advance()
        if tok_type is None:
            raise RispSyntaxError(f"Unmatched '(' in {form}")
        if tok_type != "rparen":
            raise RispSyntaxError(f"Too many operands for {form}")

    def expect_ident(self, form: str) -> str:
        tok_type, tok_val = self.advance()
        if tok_type != "symbol" or not is_identifier(tok_val):
            raise RispSyntaxError(f"{form} expects an identifier, got {tok_val!r}")
        return tok_val

    # ------------------------
    # Expressions
    # ------------------------
    def parse_expr(self) -> AST | None:
        """Read the next expression, or return None at end of input."""
        try:
            return self.read_expr()
        except RecursionError as err:
            raise RispSyntaxError("Expression nested too deeply to read") from err

    def read_expr(self) -> AST | None:
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            self.advance()
            return parse_atom(tok_val)

        if tok_type == "rparen":
            raise RispSyntaxError("Unexpected ')'")

        # Parenthesised syntax form
        self.advance()
        head_type, head_val = self.advance()
        if head_type is None:
            raise RispSyntaxError("Unmatched '('")
        if head_type == "rparen":
            raise RispSyntaxError("Empty form '()'")
        if head_type != "symbol" or head_val not in SYNTAX_FORMS:
            raise RispSyntaxError(f"Unknown form: {head_val!r}")
        return SYNTAX_FORMS[head_val](self)

    def parse_all(self) -> Iterator[AST]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def is_identifier(token: str | None) -> bool:
    return (
        token is not None
        and IDENT_RE.fullmatch(token) is not None
        and token not in SYNTAX_FORMS
        and token not in BOOLEANS
    )


def parse_atom(token: str) -> AST:
    if NUMBER_RE.fullmatch(token):
        return Num(int(token))
    if token in BOOLEANS:
        return Bool(BOOLEANS[token])
    if token in SYNTAX_FORMS:
        raise RispSyntaxError(f"Keyword {token!r} cannot be used as an identifier")
    if SIGNED_NUMBER_RE.fullmatch(token):
        raise RispSyntaxError(f"Only unsigned integer literals are supported, got {token!r}")
    if not IDENT_RE.fullmatch(token):
        raise RispSyntaxError(f"Invalid identifier: {token!r}")
    return Ident(token)


# ------------------------
# Syntax form readers
# ------------------------
def _binary(node_type: Callable[[AST, AST], AST], form: str) -> Callable[[TokenStream], AST]:
    def read(stream: TokenStream) -> AST:
        left = stream.expect_expr(form)
        right = stream.expect_expr(form)
        stream.expect_rparen(form)
        return node_type(left, right)
    return read


def read_if(stream: TokenStream) -> AST:
    cond = stream.expect_expr("If")
    then = stream.expect_expr("If")
    els = stream.expect_expr("If")
    stream.expect_rparen("If")
    return If(cond, then, els)


def read_define(stream: TokenStream) -> AST:
    name = stream.expect_ident("Define")
    value = stream.expect_expr("Define")
    stream.expect_rparen("Define")
    return Define(name, value)


def read_func(stream: TokenStream) -> AST:
    tok_type, _ = stream.advance()
    if tok_type != "lparen":
        raise RispSyntaxError("Func expects a parameter list")
    params: list[str] = []
    while True:
        tok_type, _ = stream.peek()
        if tok_type is None:
            raise RispSyntaxError("Unexpected EOF while reading Func parameters")
        if tok_type == "rparen":
            stream.advance()
            break
        name = stream.expect_ident("Func parameter list")
        if name in params:
            raise RispSyntaxError(f"Duplicate parameter name: {name}")
        params.append(name)
    body = stream.expect_expr("Func")
    stream.expect_rparen("Func")
    return Function(tuple(params), body)


def read_apply(stream: TokenStream) -> AST:
    callee = stream.expect_expr("Apply")
    args: list[AST] = []
    while True:
        tok_type, _ = stream.peek()
        if tok_type is None:
            raise RispSyntaxError("Unexpected EOF while reading Apply")
        if tok_type == "rparen":
            stream.advance()
            break
        args.append(stream.read_expr())
    return Apply(callee, tuple(args))


SYNTAX_FORMS: dict[str, Callable[[TokenStream], AST]] = {
    "+": _binary(Add, "+"),
    "-": _binary(Minus, "-"),
    "==": _binary(Equal, "=="),
    "If": read_if,
    "Define": read_define,
    "Func": read_func,
    "Apply": read_apply,
}


def parse(source: str) -> AST:
    """Read exactly one expression from `source`."""
    stream = TokenStream(lex(source))
    expr = stream.parse_expr()
    if expr is None:
        raise RispSyntaxError("Empty input")
    if stream.peek()[0] is not None:
        raise RispSyntaxError("Unexpected input after expression")
    return expr
