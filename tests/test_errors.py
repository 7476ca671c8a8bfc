import pytest

from letcalc.interpreter import run
from letcalc.parser import Evaluator, ParserError
from letcalc.runtime import CalcRuntimeError, DivisionByZeroError, UndefinedVariableError, VariableStore
from letcalc.tokenizer import Scanner, TokenizerError, TokenType


@pytest.mark.parametrize(
    "code, unexpected_token_type",
    [
        pytest.param("let = 5;", TokenType.EQUAL),
        pytest.param("let x = 5", TokenType.END),
        pytest.param("let x 5;", TokenType.NUMBER),
        pytest.param("let let = 1;", TokenType.LET),
        pytest.param("(1 + 2;", TokenType.EXPR_END),
        pytest.param("1 + 2);", TokenType.BRACKET_CLOSE),
        pytest.param("();", TokenType.BRACKET_CLOSE),
        pytest.param("1 + ;", TokenType.EXPR_END),
        pytest.param("-1;", TokenType.MINUS),
        pytest.param(";", TokenType.EXPR_END),
        pytest.param("1 2;", TokenType.NUMBER),
        pytest.param("let x = 1; x = 2;", TokenType.EQUAL),
    ],
)
def test_syntax_error(code: str, unexpected_token_type: TokenType) -> None:
    with pytest.raises(ParserError) as exc_info:
        run(code, VariableStore())
    assert exc_info.value.token.type is unexpected_token_type
    assert str(unexpected_token_type) in str(exc_info.value)


def test_missing_semicolon_expects_expr_end() -> None:
    with pytest.raises(ParserError) as exc_info:
        run("let x = 5")
    assert str(exc_info.value) == "[Parser error] Expected EXPR_END, found END"


def test_lexical_error_stops_the_run() -> None:
    variables = VariableStore()
    with pytest.raises(TokenizerError) as exc_info:
        run("let x = 1; let y = 2 @ 3; let z = 3;", variables)
    assert exc_info.value.char == "@"
    assert dict(variables.snapshot()) == {"x": 1}


def test_division_by_zero_raises() -> None:
    # unlike floating point division, there is no infinite result
    with pytest.raises(DivisionByZeroError):
        run("let x = 5 / 0;")


def test_division_by_computed_zero_keeps_earlier_assignments() -> None:
    variables = VariableStore()
    with pytest.raises(CalcRuntimeError):
        run("let a = 2; let b = a - 2; let c = a / b;", variables)
    assert dict(variables.snapshot()) == {"a": 2, "b": 0}
    assert "c" not in variables


def test_undefined_variable_raises() -> None:
    with pytest.raises(UndefinedVariableError) as exc_info:
        run("let x = 1; let y = x + z;")
    assert exc_info.value.name == "z"
    assert "'z'" in str(exc_info.value)


def test_undefined_self_reference_raises() -> None:
    with pytest.raises(UndefinedVariableError):
        run("let x = x + 1;")


def test_errors_are_raised_lazily() -> None:
    # the scanner is only asked for tokens as the evaluator needs them
    evaluator = Evaluator(Scanner("let x = 1; 2; $"))
    assert evaluator.statement() == 1
    with pytest.raises(TokenizerError):
        evaluator.statement()
    assert dict(evaluator.variables) == {"x": 1}
