import random
import string

from letcalc.interpreter import run


def eval_py(code: str) -> int | str:
    try:
        return eval(code)
    except Exception as e:
        return str(e)


def eval_my(code: str) -> int | str:
    try:
        return run(f"let result = {code};")["result"]
    except Exception as e:
        return str(e)


if __name__ == "__main__":
    # no division: python's / is float division
    alphabet = string.digits + "()+-* "

    def generate(length: int) -> str:
        return "".join(random.choices(alphabet, k=length))

    while True:
        code = generate(10)

        if "**" in code.replace(" ", ""):
            continue  # avoid generating powers (10**4)

        res_py = eval_py(code)
        res_my = eval_my(code)
        if not isinstance(res_py, (int, str)):
            continue  # "()" evaluates to a tuple in python
        if isinstance(res_py, int) and isinstance(res_my, int) and res_py == res_my:
            continue
        if isinstance(res_py, str) and isinstance(res_my, str):
            continue
        if isinstance(res_py, str) and res_py.startswith("leading zeros in decimal integer literals are not permitted"):
            continue
        if isinstance(res_py, int) and isinstance(res_my, str):
            continue  # unary plus and minus are not part of the language
        print(f"{code!r}\npy: {res_py}\nmy: {res_my}\n\n")
