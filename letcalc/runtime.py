import operator
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping

from letcalc.tokenizer import TokenType


@dataclass
class CalcRuntimeError(Exception):
    errmsg: str

    def __str__(self) -> str:
        return f"[Runtime error] {self.errmsg}"


@dataclass
class UndefinedVariableError(CalcRuntimeError):
    name: str


@dataclass
class DivisionByZeroError(CalcRuntimeError):
    pass


class VariableStore:
    """Values of the variables assigned by `let` statements"""

    def __init__(self) -> None:
        self._values: dict[str, int] = dict()

    def lookup(self, name: str) -> int:
        if name not in self._values:
            raise UndefinedVariableError(f"Reference to undefined variable {name!r}", name=name)
        return self._values[name]

    def assign(self, name: str, value: int) -> None:
        self._values[name] = value

    def snapshot(self) -> Mapping[str, int]:
        return MappingProxyType(dict(self._values))

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)


def truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero, so that 7 / 2 == 3 and -7 / 2 == -3"""
    if b == 0:
        raise DivisionByZeroError(f"Division by zero: {a} / {b}")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


BinaryOperationImpl = Callable[[int, int], int]

BINARY_OPERATIONS: dict[TokenType, BinaryOperationImpl] = {
    TokenType.PLUS: operator.add,
    TokenType.MINUS: operator.sub,
    TokenType.STAR: operator.mul,
    TokenType.SLASH: truncating_div,
}


def eval_binary_operation(op: TokenType, a: int, b: int) -> int:
    impl = BINARY_OPERATIONS.get(op)
    if impl is None:
        raise CalcRuntimeError(f"Unexpected binary operator: {op}")
    return impl(a, b)
