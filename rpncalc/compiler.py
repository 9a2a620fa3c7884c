import logging
from typing import Iterable, Optional

from rpncalc.errors import UnmatchedParenthesis, UnsupportedToken
from rpncalc.tokens import Token, TokenKind, TokenQueue

log = logging.getLogger('rpncalc.compiler')


class Compiler:
    """ Converts infix tokens to postfix order (shunting-yard).

    The compiler keeps a stack of pending operators and the previously
    handled token which decides whether ``+`` and ``-`` are unary or
    binary. Both are reset at the start of every :meth:`compile` call
    so an instance can be reused, also after a failed compilation.
    """

    def __init__(self):
        self.operator_stack = []
        self.previous_token: Optional[Token] = None

    def compile(self, tokens: Iterable[Token]) -> TokenQueue:
        self.operator_stack = []
        self.previous_token = None
        rpn = TokenQueue()
        for token in tokens:
            if token.kind == TokenKind.NUMERIC_LITERAL:
                rpn.append(token)
            elif token.kind == TokenKind.OPERATOR:
                operator = token.operator.resolve_arity(self.previous_token)
                if operator != token.operator:
                    token = token.retag(operator)
                # prefix operators have no left operand to complete
                if not operator.is_unary:
                    self._pop_operators(rpn, operator.precedence)
                self.operator_stack.append(token)
            elif token.kind == TokenKind.OPENING_PARENTHESIS:
                self.operator_stack.append(token)
            elif token.kind == TokenKind.CLOSING_PARENTHESIS:
                self._pop_operators(rpn)
                if not self.operator_stack:
                    raise UnmatchedParenthesis("unmatched closing parenthesis")
                self.operator_stack.pop()
            else:
                raise UnsupportedToken(token)
            self.previous_token = token
        while self.operator_stack:
            token = self.operator_stack.pop()
            if token.kind == TokenKind.OPENING_PARENTHESIS:
                raise UnmatchedParenthesis("unclosed opening parenthesis")
            rpn.append(token)
        log.debug("compiled to %s", ' '.join(t.lexeme for t in rpn))
        return rpn

    def _pop_operators(self, rpn, precedence=None):
        """ Move operators from the stack to the output.

        Stops at an opening parenthesis or when the stack is empty.
        If precedence is given, only the operators binding at least
        as tight are moved.
        """
        while self.operator_stack:
            top = self.operator_stack[-1]
            if top.kind != TokenKind.OPERATOR:
                break
            if precedence is not None and top.operator.precedence < precedence:
                break
            rpn.append(self.operator_stack.pop())


def compile(tokens: Iterable[Token]) -> TokenQueue:
    return Compiler().compile(tokens)
