"""Lexical analysis of the expression text.

The lexer is a state machine whose states are the members of
:class:`LexState`. Each state has a handler method which inspects at
most one character ahead, updates the scratch data of the token being
built and returns the next state. The machine starts in ``START`` and
runs until it reaches ``END`` which validates the bracket balance.
"""
import enum
import logging
from functools import partial

from rpncalc import charclass
from rpncalc.errors import (
    DanglingOperator,
    EmptyInput,
    MalformedNumber,
    UnbalancedParentheses,
    UnbalancedScope,
    UnknownOperator,
    UnterminatedString,
)
from rpncalc.operators import is_operator, lookup
from rpncalc.tokens import Token, TokenKind, TokenQueue

log = logging.getLogger('rpncalc.lexer')

MAX_UNSIGNED = (1 << 64) - 1


class LexState(enum.Enum):
    START = enum.auto()
    NEW_TOKEN = enum.auto()
    NUMERIC_LITERAL = enum.auto()
    FANCY_NUMERIC_LITERAL = enum.auto()
    HEX_NUMERIC_LITERAL = enum.auto()
    BINARY_NUMERIC_LITERAL = enum.auto()
    STRING_LITERAL = enum.auto()
    SYMBOL_NAME = enum.auto()
    OPERATOR = enum.auto()
    PARENTHESIS_OPEN = enum.auto()
    PARENTHESIS_CLOSE = enum.auto()
    SCOPE_OPEN = enum.auto()
    SCOPE_CLOSE = enum.auto()
    SEPARATOR = enum.auto()
    END_OF_STATEMENT = enum.auto()
    COMPLETE_TOKEN = enum.auto()
    END = enum.auto()


_PUNCTUATION_STATES = {
    '(': LexState.PARENTHESIS_OPEN,
    ')': LexState.PARENTHESIS_CLOSE,
    '{': LexState.SCOPE_OPEN,
    '}': LexState.SCOPE_CLOSE,
    ',': LexState.SEPARATOR,
    ';': LexState.END_OF_STATEMENT,
}


def _parse_unsigned(digits, base):
    """ Parse digits as an unsigned 64-bit integer; zero if impossible. """
    try:
        value = int(digits, base)
    except ValueError:
        return 0
    return value if value <= MAX_UNSIGNED else 0


class Lexer:
    """ Converts expression text into a queue of tokens.

    Example:
        >>> [t.lexeme for t in Lexer('0x1F * (2 - 1)').tokenize()]
        ['0x1F', '*', '(', '2', '-', '1', ')']

    Lexical errors are raised as subclasses of
    :exc:`rpncalc.errors.LexError`.
    """

    def __init__(self, text: str):
        self.text = text
        self._handlers = {
            LexState.START: self._start,
            LexState.NEW_TOKEN: self._new_token,
            LexState.NUMERIC_LITERAL: self._numeric_literal,
            LexState.FANCY_NUMERIC_LITERAL: self._fancy_numeric_literal,
            LexState.HEX_NUMERIC_LITERAL: partial(
                self._prefixed_literal, LexState.HEX_NUMERIC_LITERAL,
                charclass.is_hex_digit, 16, "hexadecimal"),
            LexState.BINARY_NUMERIC_LITERAL: partial(
                self._prefixed_literal, LexState.BINARY_NUMERIC_LITERAL,
                charclass.is_binary_digit, 2, "binary"),
            LexState.STRING_LITERAL: self._string_literal,
            LexState.SYMBOL_NAME: self._symbol_name,
            LexState.OPERATOR: self._operator,
            LexState.PARENTHESIS_OPEN: partial(
                self._single_character, TokenKind.OPENING_PARENTHESIS),
            LexState.PARENTHESIS_CLOSE: partial(
                self._single_character, TokenKind.CLOSING_PARENTHESIS),
            LexState.SCOPE_OPEN: partial(
                self._single_character, TokenKind.OPENING_SCOPE),
            LexState.SCOPE_CLOSE: partial(
                self._single_character, TokenKind.CLOSING_SCOPE),
            LexState.SEPARATOR: partial(
                self._single_character, TokenKind.SEPARATOR),
            LexState.END_OF_STATEMENT: partial(
                self._single_character, TokenKind.END_OF_STATEMENT),
            LexState.COMPLETE_TOKEN: self._complete_token,
        }

    def tokenize(self) -> TokenQueue:
        self._output = TokenQueue()
        self._pos = 0
        self._start_pos = 0
        self._buffer = ''
        self._token = None
        self._decimal_point_found = False
        self._paren_balance = 0
        self._scope_balance = 0

        state = LexState.START
        while state is not LexState.END:
            state = self._handlers[state]()
        self._end()
        log.debug("%d tokens read from %r", len(self._output), self.text)
        return self._output

    def _peek(self):
        """ Previews the next character of input (but does not consume it). """
        if self._pos >= len(self.text):
            return None
        return self.text[self._pos]

    def _advance(self):
        self._pos += 1

    def _take(self, char):
        """ Consumes the character, appending it to the pending token text. """
        self._buffer += char
        self._pos += 1

    def _start(self):
        if not self.text:
            raise EmptyInput("no input provided")
        return LexState.NEW_TOKEN

    def _new_token(self):
        self._buffer = ''
        self._token = None
        self._decimal_point_found = False
        self._start_pos = self._pos

        char = self._peek()
        if char is None:
            return LexState.END
        if charclass.is_whitespace(char):
            self._advance()
            return LexState.NEW_TOKEN
        if charclass.is_digit(char):
            if char == '0':
                self._take(char)
                return LexState.FANCY_NUMERIC_LITERAL
            return LexState.NUMERIC_LITERAL
        if charclass.is_operator_char(char):
            return LexState.OPERATOR
        if char in _PUNCTUATION_STATES:
            return _PUNCTUATION_STATES[char]
        if char == '"':
            self._advance()
            return LexState.STRING_LITERAL
        return LexState.SYMBOL_NAME

    def _complete_token(self):
        self._output.append(self._token)
        if self._peek() is None:
            return LexState.END
        return LexState.NEW_TOKEN

    def _numeric_literal(self):
        char = self._peek()
        if charclass.is_real_digit(char):
            if char == '.':
                if self._decimal_point_found:
                    raise MalformedNumber(
                        "multiple decimal points in %r" % (self._buffer + char)
                    )
                self._decimal_point_found = True
            self._take(char)
            return LexState.NUMERIC_LITERAL
        if charclass.is_symbol_char(char):
            raise MalformedNumber(
                "invalid number or symbol %r" % (self._buffer + char)
            )
        self._token = Token.number(
            self._buffer, float(self._buffer), self._start_pos
        )
        return LexState.COMPLETE_TOKEN

    def _fancy_numeric_literal(self):
        """ Literal starting with zero, possibly a hex or binary prefix. """
        char = self._peek()
        if char == 'x':
            self._take(char)
            return LexState.HEX_NUMERIC_LITERAL
        if char == 'b':
            self._take(char)
            return LexState.BINARY_NUMERIC_LITERAL
        if charclass.is_real_digit(char):
            return LexState.NUMERIC_LITERAL
        if charclass.is_symbol_char(char):
            raise MalformedNumber(
                "bad numeric literal %r" % (self._buffer + char)
            )
        self._token = Token.number(self._buffer, 0.0, self._start_pos)
        return LexState.COMPLETE_TOKEN

    def _prefixed_literal(self, state, is_valid_digit, base, name):
        char = self._peek()
        if is_valid_digit(char):
            self._take(char)
            return state
        if charclass.is_symbol_char(char) or char == '.':
            raise MalformedNumber(
                "invalid %s number %r" % (name, self._buffer + char)
            )
        value = _parse_unsigned(self._buffer[2:], base)
        self._token = Token.number(self._buffer, value, self._start_pos)
        return LexState.COMPLETE_TOKEN

    def _string_literal(self):
        char = self._peek()
        if char is None:
            raise UnterminatedString('missing quotation mark \'"\'')
        if char == '"':
            self._advance()
            self._token = Token.string(self._buffer, self._start_pos)
            return LexState.COMPLETE_TOKEN
        self._take(char)
        return LexState.STRING_LITERAL

    def _symbol_name(self):
        char = self._peek()
        if not self._buffer:
            # a character outside of any class is a symbol on its own
            self._take(char)
            if not charclass.is_symbol_char(char):
                return self._complete_symbol()
            return LexState.SYMBOL_NAME
        if charclass.is_symbol_char(char):
            self._take(char)
            return LexState.SYMBOL_NAME
        return self._complete_symbol()

    def _complete_symbol(self):
        self._token = Token.symbol(self._buffer, self._start_pos)
        return LexState.COMPLETE_TOKEN

    def _operator(self):
        char = self._peek()
        if char is None:
            raise DanglingOperator(
                "operators should always be followed by another token"
            )
        if charclass.is_operator_char(char):
            if is_operator(self._buffer + char):
                self._take(char)
                return LexState.OPERATOR
            if is_operator(self._buffer):
                return self._complete_operator()
            # a longer spelling may still be valid, e.g. '=' then '=='
            self._take(char)
            return LexState.OPERATOR
        if is_operator(self._buffer):
            return self._complete_operator()
        raise UnknownOperator("unrecognized operator %r" % self._buffer)

    def _complete_operator(self):
        self._token = Token.from_operator(
            lookup(self._buffer), self._start_pos
        )
        return LexState.COMPLETE_TOKEN

    def _single_character(self, kind):
        self._advance()
        if kind == TokenKind.OPENING_PARENTHESIS:
            self._paren_balance += 1
        elif kind == TokenKind.CLOSING_PARENTHESIS:
            self._paren_balance -= 1
        elif kind == TokenKind.OPENING_SCOPE:
            self._scope_balance += 1
        elif kind == TokenKind.CLOSING_SCOPE:
            self._scope_balance -= 1
        self._token = Token.punctuation(kind, self._start_pos)
        return LexState.COMPLETE_TOKEN

    def _end(self):
        if self._paren_balance != 0:
            raise UnbalancedParentheses("parentheses are not balanced")
        if self._scope_balance != 0:
            raise UnbalancedScope("scope brackets are not balanced")
        if self._output and self._output[-1].kind == TokenKind.OPERATOR:
            raise DanglingOperator(
                "operators should always be followed by another token"
            )


def tokenize(text: str) -> TokenQueue:
    return Lexer(text).tokenize()
