from typing import NamedTuple, Tuple

from .common import ParseError, EvalError, trace
from .complex import Complex
from .lexer import Token, tokenize
from .opcodes import Op, Instruction, BINARY_OPS, BINARY_SYMBOLS, UNARY_OPS, stack_effect


GRAMMAR = """
expression: ('+' | '-')?, term, { '+' | '-', term }
term: factor, { '*' | '/', factor }
factor: primary, { '^', primary }
primary:
  | 'x'
  | 'function', '(', expression, ')'
  | 'constant'
  | 'number'
  | '(', expression, ')'
"""

OPERATORS = {'+', '-', '*', '/', '^'}

MAX_NESTING = 100


class Program(NamedTuple):
    text: str
    code: Tuple[Instruction, ...]
    constants: Tuple[Complex, ...]
    depth: int

    def rpn(self):
        words = []
        for ins in self.code:
            if ins.op is Op.CONST:
                words.append(str(self.constants[ins.arg]))
            elif ins.op is Op.VAR:
                words.append('x')
            else:
                words.append(ins.op.value)
        return ' '.join(words)

    def listing(self):
        lines = []
        for i, ins in enumerate(self.code):
            line = f"{i:4d}  {ins}"
            if ins.op is Op.CONST:
                line += f"  ; {self.constants[ins.arg]}"
            lines.append(line)
        return '\n'.join(lines)


class CodeBuilder:
    def __init__(self, text):
        self.text = text
        self.code = []
        self.constants = []
        self.parens = []

    def emit(self, op, arg=None):
        self.code.append(Instruction(op, arg))

    def emit_const(self, value):
        self.constants.append(value)
        self.emit(Op.CONST, len(self.constants) - 1)

    def __repr__(self):
        return f"CodeBuilder({[str(ins) for ins in self.code]})"

    def build(self):
        code = tuple(self.code)
        return Program(self.text, code, tuple(self.constants), stack_depth(code))


def stack_depth(code):
    depth = 0
    max_depth = 0

    for i, ins in enumerate(code):
        if ins.op in BINARY_OPS:
            needed = 2
        elif ins.op in UNARY_OPS:
            needed = 1
        else:
            needed = 0

        if depth < needed:
            raise EvalError(f"stack underflow at instruction {i} ({ins})")

        depth += stack_effect(ins.op)
        max_depth = max(max_depth, depth)

    if depth != 1:
        raise EvalError(f"program leaves {depth} values on the stack")

    return max_depth


def peek(tokens):
    return tokens[0]


def unexpected(token, out):
    if token.type == 'eof':
        if out.parens:
            return ParseError(token.pos, f"unmatched '(' (opened at position {out.parens[-1]})")
        return ParseError(token.pos, "unexpected end of input")

    if token.type == ')':
        if out.parens:
            return ParseError(token.pos, "expected an operand before ')'")
        return ParseError(token.pos, "unmatched ')'")

    if token.type in OPERATORS:
        return ParseError(token.pos, f"operator '{token.type}' in invalid position")

    return ParseError(token.pos, f"unexpected {token.type}")


@trace
def parse_primary(tokens, out):
    next = peek(tokens)

    if next.type == 'x':
        tokens.pop(0)
        out.emit(Op.VAR)
        return tokens

    if next.type == 'number':
        tokens.pop(0)
        out.emit_const(Complex(next.value))
        return tokens

    if next.type == 'constant':
        tokens.pop(0)
        out.emit_const(next.value)
        return tokens

    if next.type == 'function':
        tokens.pop(0)
        if peek(tokens).type != '(':
            raise ParseError(peek(tokens).pos, f"expected '(' after function '{next.value.value}'")

        tokens = parse_group(tokens, out)
        out.emit(next.value)
        return tokens

    if next.type == '(':
        return parse_group(tokens, out)

    raise unexpected(next, out)


@trace
def parse_group(tokens, out):
    lparen = tokens.pop(0)
    out.parens.append(lparen.pos)

    if len(out.parens) > MAX_NESTING:
        raise ParseError(lparen.pos, f"expression nested too deeply (more than {MAX_NESTING} levels)")

    tokens = parse_expression(tokens, out)

    close = peek(tokens)
    if close.type != ')':
        if close.type == 'eof':
            raise unexpected(close, out)
        raise ParseError(close.pos, f"expected ')' but found {close.type}")

    tokens.pop(0)
    out.parens.pop()

    return tokens


@trace
def parse_factor(tokens, out):
    tokens = parse_primary(tokens, out)

    while peek(tokens).type == '^':
        tokens.pop(0)
        tokens = parse_primary(tokens, out)
        out.emit(Op.POW)

    return tokens


@trace
def parse_term(tokens, out):
    tokens = parse_factor(tokens, out)

    while peek(tokens).type in ['*', '/']:
        op = BINARY_SYMBOLS[tokens.pop(0).type]
        tokens = parse_factor(tokens, out)
        out.emit(op)

    return tokens


@trace
def parse_expression(tokens, out):
    sign = None
    if peek(tokens).type in ['+', '-']:
        sign = tokens.pop(0).type

    tokens = parse_term(tokens, out)

    if sign == '-':
        out.emit(Op.NEG)

    while peek(tokens).type in ['+', '-']:
        op = BINARY_SYMBOLS[tokens.pop(0).type]
        tokens = parse_term(tokens, out)
        out.emit(op)

    return tokens


def parse(tokens, text):
    end = len(text)
    tokens = tokens + [Token('eof', None, end)]

    if peek(tokens).type == 'eof':
        raise ParseError(0, "empty expression")

    out = CodeBuilder(text)
    try:
        tokens = parse_expression(tokens, out)
    except RecursionError:
        # the caller is already deep in its own stack, or tracing doubles the frames
        pos = out.parens[-1] if out.parens else 0
        raise ParseError(pos, "expression nested too deeply") from None

    next = peek(tokens)
    if next.type != 'eof':
        if next.type == ')':
            raise ParseError(next.pos, "unmatched ')'")
        raise ParseError(next.pos, f"unexpected trailing input '{text[next.pos:]}'")

    return out.build()


def compile_expression(text):
    tokens = tokenize(text)
    return parse(tokens, text)
