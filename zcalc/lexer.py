from .common import TokenError, trace
from .opcodes import FUNCTIONS, CONSTANTS, VARIABLE
import re


class Token:
    def __init__(self, type, value, pos):
        self.type = type
        self.value = value
        self.pos = pos

    def __repr__(self):
        return f"Token('{self.type}', {self.value}, {self.pos})"


def tok_number(s, pos):
    start = pos
    digits = 0

    while pos < len(s) and re.match('[0-9]', s[pos]):
        pos += 1
        digits += 1

    if pos < len(s) and s[pos] == '.':
        pos += 1
        while pos < len(s) and re.match('[0-9]', s[pos]):
            pos += 1
            digits += 1

        if pos < len(s) and s[pos] == '.':
            raise TokenError(pos, "malformed number: second decimal point")

    if digits == 0:
        raise TokenError(start, "malformed number: bare decimal point")

    if pos < len(s) and re.match('[eE]', s[pos]):
        exp = pos
        pos += 1
        if pos < len(s) and s[pos] in '+-':
            pos += 1

        if not (pos < len(s) and re.match('[0-9]', s[pos])):
            raise TokenError(exp, "malformed number: exponent has no digits")

        while pos < len(s) and re.match('[0-9]', s[pos]):
            pos += 1

    return Token('number', float(s[start:pos]), start), pos


def tok_ident(s, pos):
    start = pos

    while pos < len(s) and re.match('[_a-zA-Z0-9]', s[pos]):
        pos += 1

    name = s[start:pos].lower()

    if name == VARIABLE:
        return Token('x', None, start), pos

    if name in FUNCTIONS:
        return Token('function', FUNCTIONS[name], start), pos

    if name in CONSTANTS:
        return Token('constant', CONSTANTS[name], start), pos

    raise TokenError(start, f"unknown identifier '{s[start:pos]}'")


@trace
def tokenize(s):
    # 'space': \s -> skip
    # \0: [-+*/^()]
    # 'number':
    #   | [0-9]+(\.[0-9]*)?([eE][-+]?[0-9]+)?
    #   | \.[0-9]+([eE][-+]?[0-9]+)?
    # 'x' | 'function' | 'constant': [_a-zA-Z][_a-zA-Z0-9]*

    tokens = []
    pos = 0

    while pos < len(s):
        if re.match(r'\s', s[pos]):
            pos += 1
            continue

        if re.match(r'[-+*/^()]', s[pos]):
            tokens.append(Token(s[pos], None, pos))
            pos += 1
            continue

        if re.match(r'[0-9.]', s[pos]):
            token, pos = tok_number(s, pos)
            tokens.append(token)
            continue

        if re.match('[_a-zA-Z]', s[pos]):
            token, pos = tok_ident(s, pos)
            tokens.append(token)
            continue

        raise TokenError(pos, f"unexpected character '{s[pos]}'")

    return tokens
