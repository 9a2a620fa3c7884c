from rpncalc.__about__ import *
from rpncalc.compiler import Compiler, compile
from rpncalc.errors import CalculatorError, CompileError, EvalError, LexError
from rpncalc.expression import Expression, format_value
from rpncalc.lexer import Lexer, tokenize
from rpncalc.operators import Operator, OperatorKind
from rpncalc.tokens import Keyword, Token, TokenKind, display_queue


def evaluate(postfix):
    """ Solve the expression given as postfix tokens. """
    return Expression(postfix).solve()


def render(postfix, mode='postfix'):
    """ Render postfix tokens as postfix or infix text. """
    return Expression(postfix).render(mode)


def calculate(text):
    """ Run the whole pipeline on the expression text. """
    return evaluate(compile(tokenize(text)))
