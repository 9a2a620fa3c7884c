"""Lookup tables classifying single characters.

Every table covers the 256 single-byte character codes; characters beyond
that range, and ``None`` which the lexer uses for the end of input, are not
members of any class.
"""
import string

TABLE_SIZE = 256


def _make_table(chars):
    members = {ord(ch) for ch in chars}
    return tuple(code in members for code in range(TABLE_SIZE))


WHITESPACE = _make_table(" \t\n\r\x0c")
DIGITS = _make_table(string.digits)
REAL_DIGITS = _make_table("." + string.digits)
HEX_DIGITS = _make_table(string.hexdigits)
BINARY_DIGITS = _make_table("01")
OPERATOR_CHARACTERS = _make_table("!$%^&*+-=#@?|`/\\<>~")
SYMBOL_CHARACTERS = _make_table(string.ascii_letters + string.digits + "_")


def _member(table, char):
    if not char:
        return False
    code = ord(char)
    return code < TABLE_SIZE and table[code]


def is_whitespace(char):
    return _member(WHITESPACE, char)


def is_digit(char):
    return _member(DIGITS, char)


def is_real_digit(char):
    """ Decimal digit or decimal point. """
    return _member(REAL_DIGITS, char)


def is_hex_digit(char):
    return _member(HEX_DIGITS, char)


def is_binary_digit(char):
    return _member(BINARY_DIGITS, char)


def is_operator_char(char):
    return _member(OPERATOR_CHARACTERS, char)


def is_symbol_char(char):
    """ Letters, digits and underscore i.e. anything a symbol name is made of. """
    return _member(SYMBOL_CHARACTERS, char)
