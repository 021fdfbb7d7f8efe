from functools import wraps
import os
import sys

TRACE = os.environ.get('ZCALC_TRACE', '') not in ('', '0')

depth = 0


def trace(f):
    if not TRACE:
        return f

    @wraps(f)
    def wrapper(*args, **kwargs):
        global depth

        print(f"{'  '*depth}{f.__name__} <- {args} {kwargs}", file=sys.stderr)
        depth += 1

        try:
            ret = f(*args, **kwargs)
        finally:
            depth -= 1

        print(f"{'  '*depth}{f.__name__} -> {ret}", file=sys.stderr)

        return ret

    return wrapper


class ExprError(Exception):
    pass


class ParseError(ExprError):
    def __init__(self, position, message):
        super().__init__(f"{message} at position {position}")
        self.position = position
        self.message = message


class TokenError(ParseError):
    pass


class EvalError(ExprError):
    pass
