from enum import Enum
from types import MappingProxyType
from typing import NamedTuple, Optional

from .common import EvalError
from .complex import Complex, PI, E


class Op(Enum):
    CONST = 'const'
    VAR = 'var'

    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'
    POW = '^'

    NEG = 'neg'
    SIN = 'sin'
    COS = 'cos'
    TAN = 'tan'
    COT = 'cot'
    SEC = 'sec'
    CSC = 'csc'
    ARCSIN = 'arcsin'
    ARCCOS = 'arccos'
    ARCTAN = 'arctan'
    EXP = 'exp'
    LN = 'ln'
    LOG10 = 'log10'
    LOG2 = 'log2'
    ABS = 'abs'
    SQRT = 'sqrt'
    SINH = 'sinh'
    COSH = 'cosh'
    TANH = 'tanh'
    RAD = 'rad'
    DEG = 'deg'

    def __repr__(self):
        return f"Op.{self.name}"


class Instruction(NamedTuple):
    op: Op
    arg: Optional[int] = None

    def __str__(self):
        if self.op is Op.CONST:
            return f"const #{self.arg}"
        return self.op.value


FUNCTION_NAMES = (
    'sin', 'cos', 'tan', 'cot', 'sec', 'csc',
    'arcsin', 'arccos', 'arctan',
    'exp', 'ln', 'log10', 'log2',
    'abs', 'sqrt',
    'sinh', 'cosh', 'tanh',
    'rad', 'deg',
)

FUNCTIONS = MappingProxyType({name: Op(name) for name in FUNCTION_NAMES})

CONSTANTS = MappingProxyType({
    'pi': PI,
    'e': E,
})

VARIABLE = 'x'

BINARY_OPS = MappingProxyType({
    Op.ADD: Complex.add,
    Op.SUB: Complex.subtract,
    Op.MUL: Complex.multiply,
    Op.DIV: Complex.divide,
    Op.POW: Complex.power,
})

UNARY_OPS = MappingProxyType({
    Op.NEG: Complex.negate,
    Op.SIN: Complex.sin,
    Op.COS: Complex.cos,
    Op.TAN: Complex.tan,
    Op.COT: Complex.cot,
    Op.SEC: Complex.sec,
    Op.CSC: Complex.csc,
    Op.ARCSIN: Complex.arcsin,
    Op.ARCCOS: Complex.arccos,
    Op.ARCTAN: Complex.arctan,
    Op.EXP: Complex.exp,
    Op.LN: Complex.ln,
    Op.LOG10: Complex.log10,
    Op.LOG2: Complex.log2,
    Op.ABS: Complex.modulus,
    Op.SQRT: Complex.sqrt,
    Op.SINH: Complex.sinh,
    Op.COSH: Complex.cosh,
    Op.TANH: Complex.tanh,
    Op.RAD: Complex.rad,
    Op.DEG: Complex.deg,
})

BINARY_SYMBOLS = MappingProxyType({op.value: op for op in BINARY_OPS})


def stack_effect(op):
    if op is Op.CONST or op is Op.VAR:
        return 1
    if op in BINARY_OPS:
        return -1
    if op in UNARY_OPS:
        return 0
    raise EvalError(f"unknown opcode: {op}")
