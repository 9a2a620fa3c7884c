import logging
from typing import Iterable, Union

from rpncalc.errors import MalformedExpression
from rpncalc.tokens import Token, TokenKind, format_number

log = logging.getLogger('rpncalc.expression')

Value = Union[float, bool]

RENDER_MODES = ('postfix', 'infix')


class Expression:
    """ Expression in postfix order which can be solved or rendered.

    The postfix tokens are usually produced by
    :func:`rpncalc.compiler.compile`. The expression is not verified
    on construction; malformed token sequences fail with
    :exc:`MalformedExpression` when solved or rendered as infix.
    """

    def __init__(self, postfix: Iterable[Token]):
        self.postfix = tuple(postfix)

    def solve(self) -> Value:
        stack = []
        for token in self.postfix:
            if token.kind == TokenKind.NUMERIC_LITERAL:
                stack.append(token.value)
            elif token.kind == TokenKind.OPERATOR:
                operator = token.operator
                if operator.is_unary:
                    operand = _pop(stack)
                    stack.append(operator.compute(operand))
                else:
                    right, left = _pop(stack), _pop(stack)
                    stack.append(operator.compute(left, right))
            else:
                raise MalformedExpression("unexpected token %r" % token.lexeme)
        result = _result(stack)
        log.debug("%s solved to %r", self, result)
        return result

    def render_postfix(self) -> str:
        return ' '.join(token.lexeme for token in self.postfix)

    def render_infix(self) -> str:
        # entries are (text, precedence of the unary operator producing
        # the text or None)
        stack = []
        last = len(self.postfix) - 1
        for index, token in enumerate(self.postfix):
            if token.kind == TokenKind.NUMERIC_LITERAL:
                stack.append((token.lexeme, None))
            elif token.kind == TokenKind.OPERATOR:
                operator = token.operator
                if operator.is_unary:
                    operand, _ = _pop(stack)
                    stack.append((token.lexeme + operand, operator.precedence))
                else:
                    (right, _), (left, unary) = _pop(stack), _pop(stack)
                    if unary is not None and operator.precedence > unary:
                        left = "(%s)" % left
                    text = "%s %s %s" % (left, token.lexeme, right)
                    stack.append((text if index == last else "(%s)" % text, None))
            else:
                raise MalformedExpression("unexpected token %r" % token.lexeme)
        text, _ = _result(stack)
        return text

    def render(self, mode='postfix') -> str:
        if mode == 'postfix':
            return self.render_postfix()
        if mode == 'infix':
            return self.render_infix()
        raise ValueError("invalid render mode %r" % mode)

    def __str__(self):
        return self.render_postfix()

    def __repr__(self):
        return "Expression(%r)" % self.render_postfix()


def _pop(stack):
    try:
        return stack.pop()
    except IndexError:
        raise MalformedExpression("Malformed Expression") from None


def _result(stack):
    if not stack:
        raise MalformedExpression("Malformed Expression")
    if len(stack) != 1:
        raise MalformedExpression("too many values left on the stack")
    return stack[0]


def format_value(value: Value) -> str:
    """ Text shown for a computed value. """
    if isinstance(value, bool):
        return "true" if value else "false"
    return format_number(value)
