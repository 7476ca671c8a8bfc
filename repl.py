from letcalc.interpreter import run
from letcalc.parser import ParserError
from letcalc.runtime import CalcRuntimeError, VariableStore
from letcalc.tokenizer import TokenizerError


if __name__ == "__main__":
    variables = VariableStore()

    while True:
        code = input("> ")

        try:
            run(code, variables)
        except (TokenizerError, ParserError, CalcRuntimeError) as e:
            # statements before the error have been executed anyway
            print(e)

        print(dict(variables.snapshot()))
