import operator
from dataclasses import dataclass
from typing import Callable

from calcengine.parser import BinaryOperation, BinaryOperator, Expression, Number, UnaryOperation, UnaryOperator


@dataclass
class CalcRuntimeError(ArithmeticError):
    errmsg: str

    def __str__(self) -> str:
        return self.errmsg


BINARY_OPERATION_IMPLS: dict[BinaryOperator, Callable[[float, float], float]] = {
    BinaryOperator.ADD: operator.add,
    BinaryOperator.SUB: operator.sub,
    BinaryOperator.MUL: operator.mul,
    BinaryOperator.DIV: operator.truediv,
}


def evaluate_expression(expression: Expression) -> float:
    # explicit stack, left-deep trees from long operator chains exceed the recursion limit
    results: list[float] = []
    pending: list[tuple[Expression, bool]] = [(expression, False)]
    while pending:
        expr, operands_ready = pending.pop()
        if isinstance(expr, Number):
            results.append(expr.value)
        elif isinstance(expr, BinaryOperation):
            if not operands_ready:
                pending.extend([(expr, True), (expr.right, False), (expr.left, False)])
                continue
            right_res = results.pop()
            left_res = results.pop()
            if expr.operator is BinaryOperator.DIV and right_res == 0:
                raise CalcRuntimeError("Division by zero")
            results.append(BINARY_OPERATION_IMPLS[expr.operator](left_res, right_res))
        elif isinstance(expr, UnaryOperation):
            if not operands_ready:
                pending.extend([(expr, True), (expr.operand, False)])
                continue
            if expr.operator is UnaryOperator.NEG:
                results.append(-results.pop())
            else:
                raise RuntimeError(f"Unexpected unary operator: {expr.operator}")
        else:
            raise RuntimeError(f"Unexpected expression type: {expr}")
    return results.pop()
