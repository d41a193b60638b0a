from enum import Enum
from functools import reduce
import operator

import regex

from .util import CalculatorError


class Category(Enum):
    '''
    What a single key press means to the machine.
    '''
    NUMBER = 'number'
    UNARY = 'unary'
    BINARY = 'binary'
    EQUALS = 'equals'
    CLEAR = 'clear'
    ON_OFF = 'onoff'
    MEMORY = 'memory'


class Classifier:
    '''
    Classifier for keypad symbols.

    Like any keypad, it holds no state; one instance can be shared.
    '''
    # ASCII digits and the decimal separator only; \d matches any script.
    NUMBER = r'[0-9,]'
    # M(inus), S(ine), K(osine), T(angent), Q(uadrat), R(oot), I(nverse)
    UNARY = r'[MSKTQRI]'
    BINARY = r'[-+*/]'
    EQUALS = r'='
    CLEAR = r'C'
    ON_OFF = r'O'
    # P(ut) and G(et)
    MEMORY = r'[PG]'

    # Order of the alternatives is the classification precedence.
    KEY = r'(?<number>' + NUMBER + r')|' \
          r'(?<unary>' + UNARY + r')|' \
          r'(?<binary>' + BINARY + r')|' \
          r'(?<equals>' + EQUALS + r')|' \
          r'(?<clear>' + CLEAR + r')|' \
          r'(?<onoff>' + ON_OFF + r')|' \
          r'(?<memory>' + MEMORY + r')'
    FLAGS = reduce(operator.__or__,
                   {regex.POSIX,
                    regex.VERSION1},
                   0)
    SPACE = r'\s+'

    def classify(self, key):
        '''
        Return the Category of a single key.

        Raises CalculatorError on anything that isn't exactly one known key.
        '''
        if not isinstance(key, str):
            raise CalculatorError('Invalid key {!r}'.format(key))
        match = regex.fullmatch(type(self).KEY, key, flags=type(self).FLAGS)
        if match is None:
            raise CalculatorError('Invalid key {!r}'.format(key))
        return Category(match.lastgroup)

    def isvalid(self, key):
        '''
        Return True if key would classify.
        '''
        try:
            self.classify(key)
        except CalculatorError:
            return False
        return True

    def lex(self, line):
        '''
        Split a line of typed text into keys, skipping whitespace.

        Unknown characters are yielded too; it is the machine's job to
        complain about them.
        '''
        for chunk in regex.split(type(self).SPACE, line):
            yield from chunk
