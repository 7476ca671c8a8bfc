from dataclasses import dataclass
from typing import Mapping, Optional

from letcalc.runtime import VariableStore, eval_binary_operation
from letcalc.tokenizer import Scanner, Token, TokenType


@dataclass
class ParserError(Exception):
    errmsg: str
    token: Token

    def __str__(self) -> str:
        return f"[Parser error] {self.errmsg}"


TERM_OPERATORS = (TokenType.STAR, TokenType.SLASH)
EXPR_OPERATORS = (TokenType.PLUS, TokenType.MINUS)


class Evaluator:
    """Recursive descent parser that evaluates statements as it parses them.

    Grammar:
        statement  : LET assignment EXPR_END | expr EXPR_END
        assignment : IDENTIFIER EQUAL expr
        expr       : term ((PLUS | MINUS) term)*
        term       : factor ((STAR | SLASH) factor)*
        factor     : NUMBER | IDENTIFIER | BRACKET_OPEN expr BRACKET_CLOSE

    The evaluator takes the first token from the scanner on construction, so a
    scanner must not be shared between evaluators. Assignments go to the passed
    variable store, or to a fresh one.
    """

    def __init__(self, scanner: Scanner, variables: Optional[VariableStore] = None) -> None:
        self.scanner = scanner
        self.store = variables if variables is not None else VariableStore()
        self.current_token = scanner.next_token()

    @property
    def variables(self) -> Mapping[str, int]:
        return self.store.snapshot()

    def expect(self, token_type: TokenType) -> None:
        if self.current_token.type is not token_type:
            raise ParserError(
                f"Expected {token_type}, found {self.current_token.type}",
                token=self.current_token,
            )
        self.current_token = self.scanner.next_token()

    def factor(self) -> int:
        token = self.current_token
        if token.type is TokenType.NUMBER:
            self.expect(TokenType.NUMBER)
            return int(token.lexeme, 10)
        elif token.type is TokenType.BRACKET_OPEN:
            self.expect(TokenType.BRACKET_OPEN)
            result = self.expr()
            self.expect(TokenType.BRACKET_CLOSE)
            return result
        elif token.type is TokenType.IDENTIFIER:
            self.expect(TokenType.IDENTIFIER)
            return self.store.lookup(token.lexeme)
        else:
            raise ParserError(f"Unexpected token: {token.type}", token=token)

    def term(self) -> int:
        result = self.factor()
        while self.current_token.type in TERM_OPERATORS:
            op = self.current_token.type
            self.expect(op)
            result = eval_binary_operation(op, result, self.factor())
        return result

    def expr(self) -> int:
        result = self.term()
        while self.current_token.type in EXPR_OPERATORS:
            op = self.current_token.type
            self.expect(op)
            result = eval_binary_operation(op, result, self.term())
        return result

    def assignment(self) -> int:
        name = self.current_token.lexeme
        self.expect(TokenType.IDENTIFIER)
        self.expect(TokenType.EQUAL)
        value = self.expr()
        self.store.assign(name, value)
        return value

    def statement(self) -> int:
        """Executes a single statement, returning the assigned or computed value"""
        if self.current_token.type is TokenType.LET:
            self.expect(TokenType.LET)
            result = self.assignment()
        else:
            result = self.expr()
        self.expect(TokenType.EXPR_END)
        return result

    def run(self) -> list[int]:
        results: list[int] = []
        while self.current_token.type is not TokenType.END:
            results.append(self.statement())
        return results
