#!/usr/bin/env python3

import sys
import argparse

from .lexer import tokenize
from .expression import Expression
from .sampling import sample, X_STEP
from .common import TRACE, ExprError


def positive(s):
    value = float(s)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive number, got {s}")
    return value


def fmt(v):
    # print -0.0 as 0.0
    return float(v) + 0.0


def run(text, args):
    if args.tokens:
        print(tokenize(text))

    expr = Expression(text)

    if args.rpn:
        print(expr.program.listing())

    xs = args.x
    if not xs and args.range is None:
        xs = [0.0]

    for x in xs:
        y = expr.evaluate(x)
        print(fmt(x), fmt(y.real), fmt(y.imag))

    if args.range is not None:
        lower, upper = args.range
        samples = sample(expr, lower, upper, args.step)
        for row in zip(samples.x, samples.real, samples.imag):
            print(*(fmt(v) for v in row))


def _main(args):
    if args.input:
        inputs = args.input
    else:
        inputs = (line.strip() for line in sys.stdin)

    for text in inputs:
        if text:
            run(text, args)


def main(argv=None):
    argp = argparse.ArgumentParser(prog='zcalc')
    argp.add_argument('input', nargs='*')
    argp.add_argument('-x', type=float, action='append', default=[])
    argp.add_argument('--range', type=float, nargs=2, metavar=('FROM', 'TO'))
    argp.add_argument('--step', type=positive, default=X_STEP)
    argp.add_argument('--rpn', action='store_true')
    argp.add_argument('--tokens', action='store_true')
    args = argp.parse_args(argv)

    try:
        _main(args)
        return 0
    except ExprError as e:
        if TRACE:
            import traceback

            traceback.print_exception(e)
        else:
            print(f'Error: {e}')
        return 1


if __name__ == "__main__":
    sys.exit(main())
