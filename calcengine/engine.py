"""Entry points used by calculator front ends.

``evaluate`` runs tokenizer, parser and runtime in sequence and reports any
stage failure as a single ``CalculationError``; ``is_valid_expression``
answers whether ``evaluate`` would get past parsing, without evaluating.
"""
import logging
from dataclasses import dataclass

from calcengine.parser import ParserError, parse
from calcengine.runtime import CalcRuntimeError, evaluate_expression
from calcengine.tokenizer import TokenType, TokenizerError, tokenize

logger = logging.getLogger(__name__)


@dataclass
class CalculationError(Exception):
    errmsg: str

    def __str__(self) -> str:
        return f"Calculation error: {self.errmsg}"


def evaluate(expression: str) -> float:
    if not expression or expression.isspace():
        return 0.0

    try:
        return evaluate_expression(parse(tokenize(expression)))
    except (TokenizerError, ParserError, CalcRuntimeError) as e:
        logger.debug(f"Evaluation of {expression!r} failed: {e.errmsg}")
        raise CalculationError(e.errmsg) from e
    except RecursionError as e:
        logger.debug(f"Evaluation of {expression!r} exceeded recursion limit")
        raise CalculationError("Expression is nested too deeply") from e


def is_valid_expression(expression: str) -> bool:
    if not expression or expression.isspace():
        return True

    try:
        tokens = tokenize(expression)
    except TokenizerError as e:
        logger.debug(f"Rejected {expression!r}: {e.errmsg}")
        return False

    depth = 0
    for token in tokens:
        if token.type is TokenType.BRACKET_OPEN:
            depth += 1
        elif token.type is TokenType.BRACKET_CLOSE:
            depth -= 1
            if depth < 0:
                logger.debug(f"Rejected {expression!r}: ')' at {token.position} closes nothing")
                return False
    if depth != 0:
        logger.debug(f"Rejected {expression!r}: {depth} unclosed parenthesis")
        return False

    try:
        parse(tokens)
    except ParserError as e:
        logger.debug(f"Rejected {expression!r}: {e.errmsg}")
        return False
    except RecursionError:
        logger.debug(f"Rejected {expression!r}: nested too deeply")
        return False
    return True
