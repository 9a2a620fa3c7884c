import enum
from collections import deque
from typing import Iterable, Optional

from attr import attrs, attrib, evolve


class TokenKind(enum.Enum):
    NUMERIC_LITERAL = "LITERAL, NUMERIC"
    STRING_LITERAL = "LITERAL, STRING"
    SYMBOL = "SYMBOL"
    OPERATOR = "OPERATOR"
    SEPARATOR = "SEPARATOR"
    OPENING_PARENTHESIS = "PARENTHESIS, OPEN"
    CLOSING_PARENTHESIS = "PARENTHESIS, CLOSE"
    OPENING_SCOPE = "SCOPE, OPEN"
    CLOSING_SCOPE = "SCOPE, CLOSE"
    END_OF_STATEMENT = "END OF STATEMENT"
    KEYWORD = "KEYWORD"
    UNKNOWN = "UNKNOWN"

    def __str__(self):
        return "[%-18s]" % self.value


class Keyword(enum.Enum):
    """ Reserved words. They have no meaning in arithmetic expressions yet. """
    TRUE = "true"
    FALSE = "false"
    NULL = "null"
    LET = "let"
    CONST = "const"
    CLASS = "class"
    NEW = "new"
    IMPORT = "import"
    FROM = "from"
    FUNCTION = "fn"
    IF = "if"
    ELSE = "else"
    FOREACH = "foreach"
    WHILE = "while"
    FOR = "for"
    EXPORT = "export"
    TYPEOF = "typeof"
    IN = "in"

    @classmethod
    def find(cls, name: str) -> Optional['Keyword']:
        try:
            return cls(name)
        except ValueError:
            return None


# spelling of the tokens which consist of a single, fixed character
PUNCTUATION = {
    TokenKind.OPENING_PARENTHESIS: '(',
    TokenKind.CLOSING_PARENTHESIS: ')',
    TokenKind.OPENING_SCOPE: '{',
    TokenKind.CLOSING_SCOPE: '}',
    TokenKind.SEPARATOR: ',',
    TokenKind.END_OF_STATEMENT: ';',
}


def _check_value(instance, attribute, value):
    is_number = instance.kind == TokenKind.NUMERIC_LITERAL
    if is_number != (value is not None):
        raise ValueError(
            "numeric value must be present for numeric literals only"
        )


@attrs(frozen=True)
class Token:
    """ A classified piece of the input text.

    ``value`` is set for numeric literals only, ``operator`` and
    ``keyword`` carry the details of operator and keyword tokens.
    ``lexeme`` is the canonical spelling used when the token is
    rendered back to text. ``position`` is the offset in the input
    text and is not compared.
    """
    kind = attrib(type=TokenKind)
    lexeme = attrib(type=str)
    value = attrib(default=None, validator=_check_value)
    operator = attrib(default=None)
    keyword = attrib(default=None)
    position = attrib(default=None, eq=False)

    @classmethod
    def number(cls, text: str, value: float, position=None) -> 'Token':
        return cls(TokenKind.NUMERIC_LITERAL, text, float(value),
                   position=position)

    @classmethod
    def string(cls, text: str, position=None) -> 'Token':
        return cls(TokenKind.STRING_LITERAL, text, position=position)

    @classmethod
    def symbol(cls, name: str, position=None) -> 'Token':
        keyword = Keyword.find(name)
        if keyword is not None:
            return cls(TokenKind.KEYWORD, name, keyword=keyword,
                       position=position)
        return cls(TokenKind.SYMBOL, name, position=position)

    @classmethod
    def from_operator(cls, operator, position=None) -> 'Token':
        return cls(TokenKind.OPERATOR, operator.spelling, operator=operator,
                   position=position)

    @classmethod
    def punctuation(cls, kind: TokenKind, position=None) -> 'Token':
        return cls(kind, PUNCTUATION[kind], position=position)

    def retag(self, operator) -> 'Token':
        """ Return a copy of the operator token carrying other details. """
        if self.kind != TokenKind.OPERATOR:
            raise TypeError("only operator tokens can be re-tagged")
        return evolve(self, operator=operator, lexeme=operator.spelling)

    def __str__(self):
        return "%s : %s (%s)" % (
            self.kind, self.lexeme, format_number(self.value or 0.0)
        )


TokenQueue = deque


def format_number(value: float) -> str:
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def display_queue(queue: Iterable[Token]) -> str:
    """ Tabular representation of the tokens, one token per line. """
    return '\n'.join(map(str, queue))
