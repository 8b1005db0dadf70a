import enum
from dataclasses import dataclass

from calcengine.tokenizer import Token, TokenType, untokenize
from calcengine.utils import PrintableEnum


@dataclass
class ParserError(Exception):
    errmsg: str
    tokens: list[Token]
    error_token_idx: int

    def __str__(self) -> str:
        parsed = untokenize(self.tokens[: self.error_token_idx])
        filler_whitespace = " " * (len(parsed) + 1) if parsed else ""
        return "\n".join([f"[Parser error] {self.errmsg}", untokenize(self.tokens), filler_whitespace + "^"])


class BinaryOperator(PrintableEnum):
    ADD = enum.auto()
    SUB = enum.auto()
    MUL = enum.auto()
    DIV = enum.auto()


class UnaryOperator(PrintableEnum):
    NEG = enum.auto()


@dataclass(frozen=True)
class Number:
    value: float


@dataclass(frozen=True)
class BinaryOperation:
    operator: BinaryOperator
    left: "Expression"
    right: "Expression"


@dataclass(frozen=True)
class UnaryOperation:
    operator: UnaryOperator
    operand: "Expression"


Expression = Number | UnaryOperation | BinaryOperation

ADDITIVE_OPERATORS = {"+": BinaryOperator.ADD, "-": BinaryOperator.SUB}
MULTIPLICATIVE_OPERATORS = {"*": BinaryOperator.MUL, "/": BinaryOperator.DIV}


def parse(tokens: list[Token]) -> Expression:
    """Builds the expression tree for the whole token list.

    Grammar, lowest precedence first::

        sum     := product (("+" | "-") product)*
        product := primary (("*" | "/") primary)*
        primary := NUMBER | "(" sum ")" | "-" primary | "+" primary

    Tokens left over after a complete ``sum`` are an error.
    """
    expr, i = _consume_sum(tokens, 0)
    if i < len(tokens):
        raise ParserError(f"Unexpected trailing input: {tokens[i].lexeme!r}", tokens=tokens, error_token_idx=i)
    return expr


def _peek_operator(tokens: list[Token], i: int, operators: dict[str, BinaryOperator]) -> BinaryOperator | None:
    if i < len(tokens) and tokens[i].type is TokenType.OPERATOR:
        return operators.get(tokens[i].lexeme)
    return None


def _consume_sum(tokens: list[Token], i: int) -> tuple[Expression, int]:
    result, i = _consume_product(tokens, i)
    while (operator := _peek_operator(tokens, i, ADDITIVE_OPERATORS)) is not None:
        right, i = _consume_product(tokens, i + 1)
        result = BinaryOperation(operator=operator, left=result, right=right)
    return result, i


def _consume_product(tokens: list[Token], i: int) -> tuple[Expression, int]:
    result, i = _consume_primary(tokens, i)
    while (operator := _peek_operator(tokens, i, MULTIPLICATIVE_OPERATORS)) is not None:
        right, i = _consume_primary(tokens, i + 1)
        result = BinaryOperation(operator=operator, left=result, right=right)
    return result, i


def _consume_primary(tokens: list[Token], i: int) -> tuple[Expression, int]:
    if i >= len(tokens):
        raise ParserError("Unexpected end of expression", tokens=tokens, error_token_idx=i)

    first = tokens[i]
    if first.type is TokenType.NUMBER:
        return Number(float(first.value)), i + 1
    elif first.type is TokenType.BRACKET_OPEN:
        expr, i = _consume_sum(tokens, i + 1)
        if i >= len(tokens) or tokens[i].type is not TokenType.BRACKET_CLOSE:
            raise ParserError("Missing closing parenthesis", tokens=tokens, error_token_idx=i)
        return expr, i + 1
    elif first.type is TokenType.OPERATOR and first.lexeme == "-":
        operand, i = _consume_primary(tokens, i + 1)
        return UnaryOperation(operator=UnaryOperator.NEG, operand=operand), i
    elif first.type is TokenType.OPERATOR and first.lexeme == "+":
        # unary plus leaves no trace in the tree
        return _consume_primary(tokens, i + 1)
    else:
        raise ParserError(f"Unexpected token: {first.lexeme!r}", tokens=tokens, error_token_idx=i)
