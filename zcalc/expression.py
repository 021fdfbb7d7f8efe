from .compiler import compile_expression
from .vm import evaluate, new_stack


class Expression:
    def __init__(self, text):
        self._text = text
        self._program = compile_expression(text)
        self._stack = new_stack(self._program)

    @property
    def program(self):
        return self._program

    def text(self):
        return self._text

    def evaluate(self, x):
        # shares one stack buffer between calls, not reentrant
        return evaluate(self._program, x, self._stack)

    __call__ = evaluate

    def __str__(self):
        return self._text

    def __repr__(self):
        return f"Expression({self._text!r})"
