import enum
import string
from dataclasses import dataclass
from typing import Callable


@dataclass
class TokenizerError(Exception):
    errmsg: str
    char: str

    def __str__(self) -> str:
        return f"[Tokenizer error] {self.errmsg}"


class TokenType(enum.Enum):
    NUMBER = enum.auto()
    IDENTIFIER = enum.auto()
    LET = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    STAR = enum.auto()
    SLASH = enum.auto()
    BRACKET_OPEN = enum.auto()
    BRACKET_CLOSE = enum.auto()
    EQUAL = enum.auto()
    EXPR_END = enum.auto()
    END = enum.auto()

    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str

    def __str__(self) -> str:
        return f"<{self.type}>{self.lexeme}"


SINGLE_CHAR_TOKENS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "(": TokenType.BRACKET_OPEN,
    ")": TokenType.BRACKET_CLOSE,
    "=": TokenType.EQUAL,
    ";": TokenType.EXPR_END,
}

KEYWORDS = {"let": TokenType.LET}


def _is_valid_in_number(s: str) -> bool:
    return s in string.digits


def _is_valid_in_identifier(s: str) -> bool:
    # digits are not allowed anywhere in identifiers
    return s in string.ascii_letters or s == "_"


class Scanner:
    """Produces tokens from source code one at a time, on request.

    Once the end of the code is reached, every further call to `next_token`
    returns an END token.
    """

    def __init__(self, code: str) -> None:
        self.code = code
        self.pos = 0

    def next_token(self) -> Token:
        self._skip_whitespace()
        if self.pos >= len(self.code):
            return Token(type=TokenType.END, lexeme="")

        char = self.code[self.pos]
        if _is_valid_in_number(char):
            return Token(type=TokenType.NUMBER, lexeme=self._consume_while(_is_valid_in_number))
        elif _is_valid_in_identifier(char):
            word = self._consume_while(_is_valid_in_identifier)
            return Token(type=KEYWORDS.get(word, TokenType.IDENTIFIER), lexeme=word)
        elif char in SINGLE_CHAR_TOKENS:
            self.pos += 1
            return Token(type=SINGLE_CHAR_TOKENS[char], lexeme=char)
        else:
            raise TokenizerError(f"Unexpected character: {char!r}", char=char)

    def _skip_whitespace(self) -> None:
        while self.pos < len(self.code) and self.code[self.pos].isspace():
            self.pos += 1

    def _consume_while(self, predicate: Callable[[str], bool]) -> str:
        start = self.pos
        while self.pos < len(self.code) and predicate(self.code[self.pos]):
            self.pos += 1
        return self.code[start : self.pos]


def tokenize(code: str) -> list[Token]:
    """Drains a scanner over the code, END token included"""
    scanner = Scanner(code)
    tokens = [scanner.next_token()]
    while tokens[-1].type is not TokenType.END:
        tokens.append(scanner.next_token())
    return tokens
