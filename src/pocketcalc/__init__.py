'''
Pocket calculator.

The logic of a plain ten digit calculator: the four functions, a memory,
and a handful of one-key functions (sine, cosine, tangent, square, square
root, reciprocal, sign change). Keys go in one at a time, and what the
display shows comes out.

Keys:

- 0-9 and , (the decimal separator)
- + - * / and =
- M sign change, S sine, K cosine, T tangent, Q square, R square root,
  I reciprocal
- P store to memory, G recall from memory
- C clear the last register, O on/off

Anything that goes wrong shows -E- on the display.
'''

from .cli import CLI
from .keys import Category, Classifier
from .machine import Machine
from .numeric import Formatter, Numeral
from .util import CalculatorError


__all__ = ('Machine', 'Classifier', 'Category', 'Formatter', 'Numeral',
           'CalculatorError', 'CLI')
