import logging

import pytest

from calcengine.engine import CalculationError, evaluate, is_valid_expression
from calcengine.parser import ParserError
from calcengine.runtime import CalcRuntimeError
from calcengine.tokenizer import TokenizerError


@pytest.mark.parametrize(
    "code, expected",
    [
        pytest.param("2 + 3 * 4", 14.0),
        pytest.param("10 - 2 * 3", 4.0),
        pytest.param("(2 + 3) * 4", 20.0),
        pytest.param("((2 + 3) * 4) / 2", 10.0),
        pytest.param("24 / 2 / 3", 4.0),
        pytest.param("--5", 5.0),
        pytest.param("---5", -5.0),
        pytest.param("  2 + 3  ", 5.0),
        pytest.param("2  +  3", 5.0),
        pytest.param("100 - 100 * 20 / 100", 80.0),
        pytest.param("", 0.0),
        pytest.param("   ", 0.0),
        pytest.param("\t\n", 0.0),
    ],
)
def test_evaluate(code: str, expected: float) -> None:
    assert evaluate(code) == expected


def test_evaluate_decimals() -> None:
    assert evaluate("0.1 + 0.2") == pytest.approx(0.3)
    assert evaluate("1 / 3") == pytest.approx(1 / 3)


@pytest.mark.parametrize(
    "code, errmsg, cause_type",
    [
        pytest.param("5 / 0", "Division by zero", CalcRuntimeError),
        pytest.param("(2 + 3", "Missing closing parenthesis", ParserError),
        pytest.param("2 + 3)", "Unexpected trailing input: ')'", ParserError),
        pytest.param("()", "Unexpected token: ')'", ParserError),
        pytest.param("2 *", "Unexpected end of expression", ParserError),
        pytest.param("2 + # 3", "Invalid character in expression: '#'", TokenizerError),
        pytest.param("1.2.3 + 1", "Malformed number literal: '1.2.3'", TokenizerError),
    ],
)
def test_evaluate_errors(code: str, errmsg: str, cause_type: type) -> None:
    with pytest.raises(CalculationError) as exc_info:
        evaluate(code)
    assert exc_info.value.errmsg == errmsg
    assert str(exc_info.value) == f"Calculation error: {errmsg}"
    assert isinstance(exc_info.value.__cause__, cause_type)


def test_evaluate_failure_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="calcengine.engine"):
        with pytest.raises(CalculationError):
            evaluate("5 / 0")
    assert "Division by zero" in caplog.text


@pytest.mark.parametrize(
    "code, expected",
    [
        pytest.param("", True),
        pytest.param("   ", True),
        pytest.param("5", True),
        pytest.param("2 + 3", True),
        pytest.param("10 * (5 - 3)", True),
        pytest.param("--5", True),
        pytest.param("5 / 0", True),  # valid syntax, fails only when evaluated
        pytest.param("(2 + 3", False),
        pytest.param("2 + 3)", False),
        pytest.param(")(", False),
        pytest.param("()", False),
        pytest.param("2 + # 3", False),
        pytest.param("2 +", False),
        pytest.param("2 3", False),
        pytest.param("1.2.3", False),
    ],
)
def test_is_valid_expression(code: str, expected: bool) -> None:
    assert is_valid_expression(code) is expected


def test_deep_nesting_is_reported_not_raised() -> None:
    code = "(" * 5000 + "1" + ")" * 5000
    assert is_valid_expression(code) is False
    with pytest.raises(CalculationError, match="nested too deeply"):
        evaluate(code)


@pytest.mark.parametrize(
    "code, expected",
    [
        pytest.param("+".join(["1"] * 5000), 5000.0, id="sum"),
        pytest.param("-".join(["1"] * 5001), -4999.0, id="difference"),
        pytest.param("*".join(["1"] * 5000), 1.0, id="product"),
        pytest.param("1" + "/1" * 5000, 1.0, id="quotient"),
        pytest.param(" + ".join(["2 * 3"] * 3000), 18000.0, id="sum-of-products"),
    ],
)
def test_long_operator_chains(code: str, expected: float) -> None:
    assert is_valid_expression(code) is True
    assert evaluate(code) == expected


def test_division_by_zero_at_end_of_long_chain() -> None:
    with pytest.raises(CalculationError, match="Division by zero"):
        evaluate("+".join(["1"] * 5000) + " / 0")
