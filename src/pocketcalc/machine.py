import logging
import math
import operator

from .keys import Category, Classifier
from .numeric import Formatter, Numeral
from .registers import Registers
from .util import CalculatorError, wrap_user_errors


log = logging.getLogger(__name__)


def square(x):
    return x ** 2


def reciprocal(x):
    return 1 / x


class Machine:
    '''
    Calculator engine: a ten digit pocket calculator with memory.

    Takes one key at a time and keeps the display up to date. Nothing it is
    fed ever raises; whatever goes wrong shows up as the error marker on the
    display, and the next key is taken as usual.
    '''

    # Arithmetic on the values of the operand registers.
    BINARY = {
        '+': operator.__add__,
        '-': operator.__sub__,
        '*': operator.__mul__,
        '/': operator.__truediv__,
    }

    # Functions of the current operand. Angles in radians.
    UNARY = {
        'S': math.sin,
        'K': math.cos,
        'T': math.tan,
        'Q': square,
        'R': math.sqrt,
        'I': reciprocal,
    }
    # Unary too, but works on the typed text rather than its value.
    SIGN_CHANGE = 'M'

    STORE = 'P'
    RECALL = 'G'

    CLASSIFIER = Classifier
    FORMATTER = Formatter

    def __init__(self):
        '''
        Create a calculator showing 0, with empty memory.
        '''
        self.registers = Registers()
        self.classifier = type(self).CLASSIFIER()
        self.formatter = type(self).FORMATTER()

    def press(self, key):
        '''
        Feed a single key to the machine.
        '''
        try:
            category = self.classifier.classify(key)
            log.debug('%r: %s', key, category.name.lower())
            type(self).DISPATCH[category](self, key)
        except CalculatorError as e:
            log.debug('%r: %s', key, e.args[0])
            self.registers.display = self.formatter.ERROR

    def read_display(self):
        '''
        Return what the display shows.

        Cleans up the display register in place, so reading twice gives the
        same text.
        '''
        registers = self.registers
        registers.display = self.formatter.normalize(registers.display)
        return registers.display

    @wrap_user_errors('Cannot convert {1}')
    def _value(self, text):
        return float(Numeral.parse(text))

    @wrap_user_errors('Cannot apply {1.__name__}')
    def _apply(self, f, *args):
        return f(*args)

    def number(self, key):
        '''
        Append a digit or separator to the operand being typed.

        Keys that would overflow the display are dropped.
        '''
        registers = self.registers
        name = 'second' if registers.entering_second() else 'first'
        typed = (getattr(registers, name) or '') + key
        if not self.formatter.fits(typed):
            log.debug('Display full, dropping %r', key)
            return
        setattr(registers, name, typed)
        registers.display = typed

    def binary(self, key):
        '''
        Set the pending operation, first running the previous one if both
        of its operands are in.
        '''
        registers = self.registers
        if not registers.first:
            registers.first = self.formatter.ZERO
        if registers.second and registers.operation:
            registers.first = self.execute()
        registers.operation = key

    def execute(self):
        '''
        Run the pending operation and show its result.

        Without a second operand, the first is used twice. Returns the
        rounded result.
        '''
        registers = self.registers
        left = self._value(registers.first or self.formatter.ZERO)
        if registers.second:
            right = self._value(registers.second)
        else:
            right = left
        f = type(self).BINARY[registers.operation]
        result = self.formatter.format_result(self._apply(f, left, right))
        registers.display = result
        registers.operation = None
        registers.second = None
        return result

    def unary(self, key):
        if key == type(self).SIGN_CHANGE:
            return self.change_sign()
        registers = self.registers
        if registers.operation and registers.second:
            operand = registers.second
        else:
            operand = registers.first or self.formatter.ZERO
        f = type(self).UNARY[key]
        result = self.formatter.format_result(self._apply(f,
                                                          self._value(operand)))
        if registers.entering_second():
            registers.second = result
        else:
            registers.first = result
        registers.display = result

    def change_sign(self):
        '''
        Toggle the minus sign of the current operand.

        Toggling an empty second operand leaves a lone minus, so a negative
        second operand can be typed.
        '''
        registers = self.registers
        if registers.operation or registers.second:
            name, text = 'second', registers.second or ''
        else:
            name, text = 'first', registers.first or self.formatter.ZERO
        try:
            result = self.formatter.toggle_sign(text)
        except CalculatorError:
            setattr(registers, name, self.formatter.ERROR)
            raise
        setattr(registers, name, result)
        registers.display = result

    def memory(self, key):
        type(self).MEMORY[key](self)

    def store(self):
        '''
        Put the current operand in memory.
        '''
        registers = self.registers
        registers.memory = (registers.second or
                            registers.first or
                            self.formatter.ZERO)

    def recall(self):
        '''
        Show memory, and make it the current operand.
        '''
        registers = self.registers
        if not registers.memory:
            registers.display = self.formatter.ZERO
            return
        registers.display = registers.memory
        if registers.second:
            registers.second = registers.memory
        else:
            registers.first = registers.memory

    def equals(self, key):
        registers = self.registers
        if not registers.operation:
            first = registers.first or self.formatter.ZERO
            registers.display = self.formatter.strip_zero_fraction(first)
            return
        self.execute()

    def clear(self, key):
        self.registers.clear()

    def on_off(self, key):
        self.registers.reset()

    MEMORY = {
        STORE: store,
        RECALL: recall,
    }

    DISPATCH = {
        Category.NUMBER: number,
        Category.UNARY: unary,
        Category.BINARY: binary,
        Category.EQUALS: equals,
        Category.CLEAR: clear,
        Category.ON_OFF: on_off,
        Category.MEMORY: memory,
    }

    assert DISPATCH.keys() == set(Category)


__all__ = 'Machine',
