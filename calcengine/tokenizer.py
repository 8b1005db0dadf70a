import enum
import re
from dataclasses import dataclass

from calcengine.utils import PrintableEnum, point_at


@dataclass
class TokenizerError(Exception):
    errmsg: str
    code: str
    error_char_idx: int

    def __str__(self) -> str:
        return "\n".join([f"[Tokenizer error] {self.errmsg}", *point_at(self.code, self.error_char_idx)])


class TokenType(PrintableEnum):
    NUMBER = enum.auto()
    OPERATOR = enum.auto()
    BRACKET_OPEN = enum.auto()
    BRACKET_CLOSE = enum.auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str
    value: float | str
    position: int = 0

    def __str__(self) -> str:
        return f"<{self.type}>{self.lexeme}"


def _is_valid_in_number(s: str) -> bool:
    return "0" <= s <= "9" or s == "."


SINGLE_CHAR_TOKENS = {
    "+": TokenType.OPERATOR,
    "-": TokenType.OPERATOR,
    "*": TokenType.OPERATOR,
    "/": TokenType.OPERATOR,
    "(": TokenType.BRACKET_OPEN,
    ")": TokenType.BRACKET_CLOSE,
}


def _number_value(code: str, start: int, end: int) -> float:
    lexeme = code[start:end]
    # at most one decimal point and at least one digit
    if lexeme.count(".") > 1 or lexeme == ".":
        raise TokenizerError(f"Malformed number literal: {lexeme!r}", code=code, error_char_idx=start)
    return float(lexeme)


def tokenize(code: str) -> list[Token]:
    i = 0
    tokens: list[Token] = []
    while i < len(code):
        if _is_valid_in_number(code[i]):
            number_end_idx = i + 1
            while number_end_idx < len(code) and _is_valid_in_number(code[number_end_idx]):
                number_end_idx += 1
            tokens.append(
                Token(
                    type=TokenType.NUMBER,
                    lexeme=code[i:number_end_idx],
                    value=_number_value(code, i, number_end_idx),
                    position=i,
                )
            )
            i = number_end_idx - 1  # to account for += 1 later
        elif code[i] in SINGLE_CHAR_TOKENS:
            tokens.append(Token(type=SINGLE_CHAR_TOKENS[code[i]], lexeme=code[i], value=code[i], position=i))
        elif code[i].isspace():
            pass
        else:
            raise TokenizerError(f"Invalid character in expression: {code[i]!r}", code=code, error_char_idx=i)
        i += 1

    return tokens


def untokenize(tokens: list[Token]) -> str:
    result = " ".join(t.lexeme for t in tokens)

    # ( 1 + 2 ) => (1 + 2)
    result = re.sub(r"\(\s+", "(", result)
    result = re.sub(r"\s+\)", ")", result)
    return result
