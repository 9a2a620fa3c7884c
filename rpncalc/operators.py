import enum
import math
import operator

from attr import attrs, attrib

from rpncalc.errors import UnknownOperator
from rpncalc.tokens import TokenKind


class OperatorKind(enum.Enum):
    SUM = 'sum'
    DIFFERENCE = 'difference'
    PRODUCT = 'product'
    QUOTIENT = 'quotient'
    EXPONENT = 'exponent'
    NEGATE = 'negate'
    POSITIVE = 'positive'
    LOGICAL_AND = 'and'
    LOGICAL_OR = 'or'
    LOGICAL_NOT = 'not'
    EQUALS = 'eq'
    NOT_EQUALS = 'ne'
    GREATER_THAN = 'gt'
    GREATER_OR_EQUAL = 'ge'
    LESS_THAN = 'lt'
    LESS_OR_EQUAL = 'le'


K = OperatorKind

OPERATOR_PRECEDENCE = {
    kind: prec
    for prec, kinds in
    enumerate([[K.EQUALS, K.NOT_EQUALS, K.GREATER_THAN, K.GREATER_OR_EQUAL,
                K.LESS_THAN, K.LESS_OR_EQUAL],
               [K.SUM, K.DIFFERENCE],
               [K.PRODUCT, K.QUOTIENT, K.LOGICAL_AND, K.LOGICAL_OR],
               [K.NEGATE, K.POSITIVE, K.LOGICAL_NOT],
               [K.EXPONENT]], start=1)
    for kind in kinds
}

UNARY_OPERATORS = [K.NEGATE, K.POSITIVE, K.LOGICAL_NOT]

SPELLINGS = {
    '+': K.SUM,
    '-': K.DIFFERENCE,
    '*': K.PRODUCT,
    '/': K.QUOTIENT,
    '^': K.EXPONENT,
    '**': K.EXPONENT,
    '!': K.LOGICAL_NOT,
    '&&': K.LOGICAL_AND,
    '||': K.LOGICAL_OR,
    '==': K.EQUALS,
    '!=': K.NOT_EQUALS,
    '>': K.GREATER_THAN,
    '>=': K.GREATER_OR_EQUAL,
    '<': K.LESS_THAN,
    '<=': K.LESS_OR_EQUAL,
}

# '**' is an alternative spelling of '^'
CANONICAL_SPELLINGS = {
    kind: spelling for spelling, kind in SPELLINGS.items() if spelling != '**'
}
CANONICAL_SPELLINGS[K.NEGATE] = '-'
CANONICAL_SPELLINGS[K.POSITIVE] = '+'

_UNARY_FORMS = {K.SUM: K.POSITIVE, K.DIFFERENCE: K.NEGATE}
_BINARY_FORMS = {K.POSITIVE: K.SUM, K.NEGATE: K.DIFFERENCE}


def _quotient(left, right):
    try:
        return left / right
    except ZeroDivisionError:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)


def _power(left, right):
    try:
        return math.pow(left, right)
    except OverflowError:
        odd_exponent = right.is_integer() and right % 2 == 1
        return -math.inf if left < 0 and odd_exponent else math.inf
    except ValueError:
        # zero raised to a negative power or a root of a negative number
        return math.inf if left == 0 else math.nan


_ARITHMETIC_BINARY = {
    K.EXPONENT: _power,
    K.PRODUCT: operator.mul,
    K.QUOTIENT: _quotient,
    K.DIFFERENCE: operator.sub,
    K.SUM: operator.add,
}

_ARITHMETIC_UNARY = {
    K.NEGATE: operator.neg,
    K.POSITIVE: operator.pos,
}

_LOGICAL_BINARY = {
    K.LOGICAL_AND: lambda a, b: bool(a) and bool(b),
    K.LOGICAL_OR: lambda a, b: bool(a) or bool(b),
    K.EQUALS: operator.eq,
    K.NOT_EQUALS: operator.ne,
    K.GREATER_THAN: operator.gt,
    K.GREATER_OR_EQUAL: operator.ge,
    K.LESS_THAN: operator.lt,
    K.LESS_OR_EQUAL: operator.le,
}

_LOGICAL_UNARY = {
    K.LOGICAL_NOT: lambda a: not bool(a),
}

LOGICAL_OPERATORS = frozenset(_LOGICAL_BINARY) | frozenset(_LOGICAL_UNARY)


@attrs(frozen=True)
class Operator:
    """ Operator details carried by the operator tokens.

    Operators are values; a change of arity produces a new instance
    rather than modifying an existing one.
    """
    kind = attrib(type=OperatorKind)
    precedence = attrib(type=int)
    arity = attrib(type=int)

    @classmethod
    def of(cls, kind: OperatorKind) -> 'Operator':
        arity = 1 if kind in UNARY_OPERATORS else 2
        return cls(kind, OPERATOR_PRECEDENCE[kind], arity)

    @property
    def spelling(self) -> str:
        return CANONICAL_SPELLINGS[self.kind]

    @property
    def is_unary(self) -> bool:
        return self.arity == 1

    @property
    def is_logical(self) -> bool:
        return self.kind in LOGICAL_OPERATORS

    def compute(self, *operands):
        """ Apply the operator to one or two operands.

        Logical and comparison operators produce booleans, arithmetic
        operators produce floats.
        """
        if self.is_logical:
            return self.logical(*operands)
        return self.arithmetic(*operands)

    def arithmetic(self, *operands) -> float:
        table = _ARITHMETIC_BINARY if len(operands) == 2 else _ARITHMETIC_UNARY
        function = table.get(self.kind)
        if function is None:
            return 0.0
        return function(*map(float, operands))

    def logical(self, *operands) -> bool:
        table = _LOGICAL_BINARY if len(operands) == 2 else _LOGICAL_UNARY
        function = table.get(self.kind)
        if function is None:
            return True
        return function(*operands)

    def resolve_arity(self, previous) -> 'Operator':
        """ Choose between the unary and binary form of ``+`` and ``-``.

        The operator is unary unless it follows a numeric literal or
        a closing parenthesis. Other operators are returned as they are.

        :param previous: token preceding the operator or None
        """
        unary = previous is None or previous.kind not in (
            TokenKind.NUMERIC_LITERAL, TokenKind.CLOSING_PARENTHESIS
        )
        if unary and self.kind in _UNARY_FORMS:
            return Operator.of(_UNARY_FORMS[self.kind])
        if not unary and self.kind in _BINARY_FORMS:
            return Operator.of(_BINARY_FORMS[self.kind])
        return self

    def __str__(self):
        return self.spelling


def is_operator(spelling: str) -> bool:
    return spelling in SPELLINGS


def lookup(spelling: str) -> Operator:
    try:
        return Operator.of(SPELLINGS[spelling])
    except KeyError:
        raise UnknownOperator("unrecognized operator %r" % spelling) from None


def resolve_arity(candidate: Operator, previous) -> Operator:
    return candidate.resolve_arity(previous)
