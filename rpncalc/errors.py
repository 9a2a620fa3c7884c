class CalculatorError(Exception):
    """ Base class of the errors raised while processing an expression. """


class LexError(CalculatorError):
    pass


class EmptyInput(LexError):
    pass


class MalformedNumber(LexError):
    pass


class UnterminatedString(LexError):
    pass


class DanglingOperator(LexError):
    pass


class UnknownOperator(LexError):
    pass


class UnbalancedParentheses(LexError):
    pass


class UnbalancedScope(LexError):
    pass


class CompileError(CalculatorError):
    pass


class UnsupportedToken(CompileError):
    def __init__(self, token):
        super().__init__("unsupported token %r" % token.lexeme)
        self.token = token


class UnmatchedParenthesis(CompileError):
    pass


class EvalError(CalculatorError):
    pass


class MalformedExpression(EvalError):
    pass
