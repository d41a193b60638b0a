from collections import namedtuple
from decimal import Decimal, ROUND_HALF_UP
import math

import regex

from .util import CalculatorError, wrap_user_errors


class Numeral(namedtuple('Numeral', 'negative integral separated fractional')):
    '''
    Parsed numeric text, as typed on the keypad or shown on the display.

    Keeps the digits as text, so "007" and "5," survive a round trip; only
    to_decimal() and float() interpret them.
    '''
    __slots__ = ()

    SEPARATOR = ','
    MINUS = '-'
    PATTERN = r'''
               (?<sign>-)?
               (?<integral>[0-9]*)
               (?:
                   (?<separator>,)
                   (?<fractional>[0-9]*)
               )?
               '''
    FLAGS = regex.VERSION1 | regex.VERBOSE

    @classmethod
    def parse(cls, text):
        '''
        Parse numeric text. An empty or sign-only text is a valid zero.

        Raises CalculatorError on anything else, including a second
        separator.
        '''
        match = regex.fullmatch(cls.PATTERN, text, flags=cls.FLAGS)
        if match is None:
            raise CalculatorError('Not a number {!r}'.format(text))
        return cls(negative=match['sign'] is not None,
                   integral=match['integral'],
                   separated=match['separator'] is not None,
                   fractional=match['fractional'] or '')

    @classmethod
    def from_decimal(cls, value):
        # 'f' never switches to exponent notation
        return cls.parse(format(value, 'f').replace('.', cls.SEPARATOR))

    def __str__(self):
        return ''.join([self.MINUS if self.negative else '',
                        self.integral,
                        self.SEPARATOR if self.separated else '',
                        self.fractional])

    def __float__(self):
        return float(self.to_decimal())

    def to_decimal(self):
        return Decimal('{}{}.{}'.format('-' if self.negative else '',
                                        self.integral or '0',
                                        self.fractional or '0'))

    def negated(self):
        return self._replace(negative=not self.negative)

    def trimmed(self):
        '''
        Drop leading zeros of the integral part, keeping one before a
        separator: 007 is 7, 00,5 is 0,5.
        '''
        integral = self.integral.lstrip('0')
        if self.integral and not integral:
            integral = '0'
        return self._replace(integral=integral)

    @property
    def significant(self):
        '''
        Number of integral digits, ignoring leading zeros.
        '''
        return len(self.integral.lstrip('0'))


class Formatter:
    '''
    Display rules of a ten digit calculator.

    Every limit is a class attribute; subclass to build a wider display.
    '''
    ERROR = '-E-'
    ZERO = '0'
    MAX_DIGITS = 10
    # Including the separator, and the minus sign when signed.
    MAX_SIGNED_LENGTH = 12
    MAX_UNSIGNED_LENGTH = 11
    ROUNDING_DIGIT = 5
    # Digits a float holds reliably.
    SIGNIFICANT_DIGITS = 15

    LEADING_ZEROS = r'^(-?)0+(?=[0-9])'
    LEADING_SEPARATOR = r'^(-?),'
    # Also eats junk like ",0,0" left by typing several separators.
    ZERO_FRACTION = r'(?:,0*)*,0+$'
    NEGATIVE_ZERO = r'^-0$'
    DIGIT = r'[0-9]'

    def strip_leading_zeros(self, text):
        '''
        Collapse a leading run of zeros, keeping the one before a separator.
        '''
        text = regex.sub(self.LEADING_ZEROS, r'\1', text)
        return regex.sub(self.LEADING_SEPARATOR, r'\g<1>0,', text)

    def strip_zero_fraction(self, text):
        '''
        Drop an all-zero fractional part: 5,000 becomes 5.
        '''
        return regex.sub(self.ZERO_FRACTION, '', text)

    def normalize(self, display):
        '''
        Clean up display text for reading.

        Idempotent. The error marker is returned as is.
        '''
        if display == self.ERROR:
            return display
        if display in ('', Numeral.MINUS):
            return self.ZERO
        display = self.strip_leading_zeros(display)
        display = self.strip_zero_fraction(display)
        return regex.sub(self.NEGATIVE_ZERO, self.ZERO, display)

    def fits(self, text):
        '''
        Return True if typed text doesn't show more digits than the display
        has.
        '''
        shown = self.strip_leading_zeros(text)
        return len(regex.findall(self.DIGIT, shown)) <= self.MAX_DIGITS

    def overflows(self, numeral):
        return numeral.significant > self.MAX_DIGITS

    @wrap_user_errors('Cannot display {1}')
    def format_result(self, value):
        '''
        Turn a computed float into rounded display text.

        Raises CalculatorError on infinities, NaN and results whose integral
        part won't fit.
        '''
        if not math.isfinite(value):
            raise CalculatorError('Not a finite result {}'.format(value))
        text = '{:.{}g}'.format(value, self.SIGNIFICANT_DIGITS)
        numeral = Numeral.from_decimal(Decimal(text))
        if self.overflows(numeral):
            raise CalculatorError('Overflow {}'.format(numeral))
        return self.round(str(numeral))

    @wrap_user_errors('Cannot round {1}')
    def round(self, text):
        '''
        Fit numeric text into the display.

        Within the limits, text comes back unchanged. Past them, it is cut
        at the first digit that doesn't fit; if that digit is 5 or more, the
        rest is rounded up. Leading zeros are dropped before cutting.
        '''
        numeral = Numeral.parse(text)
        if len(text) > self._limit(numeral):
            numeral = numeral.trimmed()
        if numeral.separated:
            rounded = self._round_fractional(numeral)
        else:
            rounded = self._round_integral(numeral)
        if self.overflows(rounded):
            raise CalculatorError('Overflow {}'.format(rounded))
        return str(rounded)

    def toggle_sign(self, text):
        '''
        Flip the sign of numeric text, then fit it into the display.
        '''
        return self.round(str(Numeral.parse(text).negated()))

    def _allowed(self, numeral):
        if numeral.negative:
            return self.MAX_SIGNED_LENGTH
        return self.MAX_UNSIGNED_LENGTH

    def _limit(self, numeral):
        allowed = self._allowed(numeral)
        return allowed if numeral.separated else allowed - 1

    def _round_fractional(self, numeral):
        allowed = self._allowed(numeral)
        text = str(numeral)
        if len(text) <= allowed:
            return numeral
        separator_at = len(text) - len(numeral.fractional) - 1
        if allowed <= separator_at:
            raise CalculatorError('No room for the separator in {}'.format(text))
        places = allowed - separator_at - 1
        if int(numeral.fractional[places]) < self.ROUNDING_DIGIT:
            rounded = numeral._replace(fractional=numeral.fractional[:places])
        else:
            value = numeral.to_decimal().quantize(Decimal(1).scaleb(-places),
                                                  rounding=ROUND_HALF_UP)
            # A carry can lengthen the integral part; cut again.
            cut = str(Numeral.from_decimal(value))[:allowed]
            rounded = Numeral.parse(cut)
        if not rounded.fractional:
            rounded = rounded._replace(separated=False)
        return rounded

    def _round_integral(self, numeral):
        allowed = self._allowed(numeral) - 1
        text = str(numeral)
        if len(text) <= allowed:
            return numeral
        if numeral.negative:
            allowed -= 1
        kept = numeral.integral[:allowed]
        if int(numeral.integral[allowed]) < self.ROUNDING_DIGIT:
            return numeral._replace(integral=kept)
        return numeral._replace(integral=str(int(kept) + 1))
