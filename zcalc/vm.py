from .common import EvalError
from .complex import Complex, NAN
from .opcodes import Op, BINARY_OPS, UNARY_OPS


def new_stack(program):
    return [None] * program.depth


def evaluate(program, x, stack=None):
    if stack is None:
        stack = new_stack(program)
    elif len(stack) < program.depth:
        raise EvalError(f"stack buffer of size {len(stack)} is smaller than {program.depth}")

    constants = program.constants
    sp = 0

    try:
        for op, arg in program.code:
            if op is Op.CONST:
                stack[sp] = constants[arg]
                sp += 1

            elif op is Op.VAR:
                stack[sp] = Complex(x)
                sp += 1

            elif op in UNARY_OPS:
                if sp < 1:
                    raise EvalError(f"stack underflow at {op}")
                stack[sp - 1] = UNARY_OPS[op](stack[sp - 1])

            elif op in BINARY_OPS:
                if sp < 2:
                    raise EvalError(f"stack underflow at {op}")
                sp -= 1
                stack[sp - 1] = BINARY_OPS[op](stack[sp - 1], stack[sp])

            else:
                raise EvalError(f"unknown opcode: {op}")

    except IndexError:
        raise EvalError(f"malformed program {program.text!r}: stack or constant index out of range")

    if sp != 1:
        raise EvalError(f"malformed program: {program.text!r} left {sp} values on the stack")

    result = stack[0]
    if result.is_infinite():
        return NAN

    return result
