from repl import respond


def test_respond_with_result() -> None:
    assert respond("2 + 3 * 4") == "14"
    assert respond("0.1 + 0.2") == "0.3"
    assert respond("") == "0"


def test_respond_with_max_decimals() -> None:
    assert respond("2 / 3", max_decimals=2) == "0.67"


def test_respond_with_tokens() -> None:
    assert respond("(1+2)*3", show_tokens=True) == "tokens: (1 + 2) * 3\n9"


def test_respond_with_calculation_error() -> None:
    assert respond("5 / 0") == "Calculation error: Division by zero"


def test_respond_with_invalid_expression() -> None:
    lines = respond("(2 + 3").split("\n")
    assert lines == ["Invalid expression", "[Parser error] Missing closing parenthesis", "(2 + 3", "       ^"]


def test_respond_with_invalid_character() -> None:
    lines = respond("2 + # 3").split("\n")
    assert lines[0] == "Invalid expression"
    assert lines[1] == "[Tokenizer error] Invalid character in expression: '#'"
