from typing import Mapping, Optional

from letcalc.parser import Evaluator
from letcalc.runtime import VariableStore
from letcalc.tokenizer import Scanner


class Interpreter:
    def __init__(self, evaluator: Evaluator) -> None:
        self.evaluator = evaluator

    def interpret(self) -> list[int]:
        return self.evaluator.run()


def run(code: str, variables: Optional[VariableStore] = None) -> Mapping[str, int]:
    """Runs the whole program and returns the resulting variables.

    Raises TokenizerError, ParserError or CalcRuntimeError on the first error.
    Statements executed before it have already updated `variables`, if passed.
    """
    evaluator = Evaluator(Scanner(code), variables)
    Interpreter(evaluator).interpret()
    return evaluator.variables
