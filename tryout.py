from letcalc.parser import Evaluator, ParserError
from letcalc.runtime import CalcRuntimeError
from letcalc.tokenizer import Scanner, TokenizerError, tokenize

for code in [
    "let x = 3 + 5 * (10 - 4); let y = x + 2;",
    "5;",
    "1 + 1;",
    "4 + 6 * 3;",
    "(4 + 6) * 3;",
    "7 / 2; (0 - 7) / 2;",
    "10 - 4 - 3;",
    "let a = 1; let b = 2; let c = a + b;",
    "let var = (1 + 14 * (54 * 54));",
    "let a = 1; let a = a + 1;",
    "",
    "let x = 5 / 0;",
    "let x = y;",
    "let = 5;",
    "let x = 5",
    "let x = 1; @",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    try:
        tokens = tokenize(code)
    except TokenizerError as e:
        print(e)
        continue

    print(f"tokens: {' '.join(str(t) for t in tokens)}")

    evaluator = Evaluator(Scanner(code))
    try:
        results = evaluator.run()
    except (ParserError, CalcRuntimeError) as e:
        print(e)
        continue
    results_str = "\n".join(f" {i + 1:> 2}: {res}" for i, res in enumerate(results))
    print(f"statement results:\n{results_str}")
    print(f"variables: {dict(evaluator.variables)}")
