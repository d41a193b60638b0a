'''
Numeral and display formatter tests
'''

from decimal import Decimal
import math

from pocketcalc.util import CalculatorError
from pocketcalc.numeric import Formatter, Numeral

from pytest import mark, raises


def test_parse():
    n = Numeral.parse('-012,50')
    assert n == Numeral(negative=True, integral='012', separated=True,
                        fractional='50')
    assert str(n) == '-012,50'
    assert n.to_decimal() == Decimal('-12.5')
    assert n.significant == 2


@mark.parametrize('text, value', [
    ('', 0.0),
    ('-', 0.0),
    (',', 0.0),
    (',5', 0.5),
    ('5,', 5.0),
    ('-3,25', -3.25),
])
def test_partial_entries_are_numbers(text, value):
    assert float(Numeral.parse(text)) == value


@mark.parametrize('text', ['1,2,3', '-E-', '--1', '1-', '1.5', 'abc'])
def test_not_numbers(text):
    with raises(CalculatorError):
        Numeral.parse(text)


def test_negated():
    assert str(Numeral.parse('7,5').negated()) == '-7,5'
    assert str(Numeral.parse('-7,5').negated()) == '7,5'
    assert str(Numeral.parse('').negated()) == '-'


def test_from_decimal_never_uses_exponents():
    assert str(Numeral.from_decimal(Decimal('1E-5'))) == '0,00001'
    assert str(Numeral.from_decimal(Decimal('1.5E+3'))) == '1500'


@mark.parametrize('text', ['5', '-5', '1234567890', '-1234567890',
                           '0,123456789', '-0,123456789', '12,5'])
def test_round_fitting_text_unchanged(text):
    assert Formatter().round(text) == text


@mark.parametrize('text, rounded', [
    # Boundary digit below 5: plain truncation.
    ('0,12345678941', '0,123456789'),
    ('-0,12345678941', '-0,123456789'),
    # Boundary digit 5 or more: round up.
    ('0,12345678951', '0,123456790'),
    ('-0,12345678951', '-0,123456790'),
    ('123456789,95', '123456790,0'),
    # A carry into a new integral digit.
    ('9,9999999995', '10,00000000'),
    ('-9,9999999995', '-10,00000000'),
    # Nothing left after the separator: no dangling separator.
    ('1234567890,3', '1234567890'),
    ('999999999,95', '1000000000'),
])
def test_round_fractional(text, rounded):
    assert Formatter().round(text) == rounded


def test_round_separator_on_boundary():
    with raises(CalculatorError):
        Formatter().round('12345678901,5')
    with raises(CalculatorError):
        Formatter().round('-12345678901,5')


def test_round_carry_overflow():
    with raises(CalculatorError):
        Formatter().round('9999999999,5')


@mark.parametrize('text, rounded', [
    ('12345678901', '1234567890'),
    ('12345678904', '1234567890'),
    ('-123456789014', '-1234567890'),
])
def test_round_integral_truncates(text, rounded):
    assert Formatter().round(text) == rounded


def test_round_integral_rounds_magnitude():
    assert Formatter().round('12345678905') == '1234567891'
    assert Formatter().round('-12345678905') == '-1234567891'


@mark.parametrize('value, text', [
    (8.0, '8'),
    (0.5, '0,5'),
    (-2.25, '-2,25'),
    (0.1 + 0.2, '0,3'),
    (1 / 3, '0,333333333'),
    (2 / 3, '0,666666667'),
    (-2 / 3, '-0,666666667'),
    (1e-20, '0,000000000'),
    (9999999999.0, '9999999999'),
])
def test_format_result(value, text):
    assert Formatter().format_result(value) == text


@mark.parametrize('value', [math.inf, -math.inf, math.nan, 1e10, -1e10,
                            12345678901.5])
def test_format_result_errors(value):
    with raises(CalculatorError):
        Formatter().format_result(value)


def test_toggle_sign_twice():
    f = Formatter()
    for text in ['0', '12,5', '-3', '0,000001', '007', '-00,5']:
        assert f.toggle_sign(f.toggle_sign(text)) == text


@mark.parametrize('display, normalized', [
    ('0', '0'),
    ('', '0'),
    ('007', '7'),
    ('000', '0'),
    ('00,5', '0,5'),
    (',5', '0,5'),
    ('-,5', '-0,5'),
    ('-007', '-7'),
    ('5,000', '5'),
    ('5,', '5,'),
    ('5,050', '5,050'),
    ('-0', '0'),
    ('-0,00', '0'),
    ('1,0,0', '1'),
    ('-', '0'),
    ('-E-', '-E-'),
])
def test_normalize(display, normalized):
    f = Formatter()
    assert f.normalize(display) == normalized
    assert f.normalize(normalized) == normalized


def test_fits():
    f = Formatter()
    assert f.fits('1234567890')
    assert f.fits('-1234,567890')
    assert f.fits('0001234567890')
    assert f.fits('0,123456789')
    assert not f.fits('12345678901')
    assert not f.fits('0,1234567890')


def test_wider_display():
    class Wide(Formatter):
        MAX_DIGITS = 12
        MAX_SIGNED_LENGTH = 14
        MAX_UNSIGNED_LENGTH = 13
    assert Wide().format_result(123456789012.0) == '123456789012'
    with raises(CalculatorError):
        Formatter().format_result(123456789012.0)


@mark.parametrize('text, trimmed', [
    ('007', '7'),
    ('000', '0'),
    ('00,5', '0,5'),
    ('-0012,5', '-12,5'),
    (',5', ',5'),
    ('', ''),
    ('-', '-'),
])
def test_trimmed(text, trimmed):
    assert str(Numeral.parse(text).trimmed()) == trimmed


@mark.parametrize('text, rounded', [
    ('0000000000,5', '0,5'),
    ('-0000000000,5', '-0,5'),
    ('00000000000005', '5'),
    ('-00000000000005', '-5'),
])
def test_round_leading_zeros_take_no_room(text, rounded):
    assert Formatter().round(text) == rounded
