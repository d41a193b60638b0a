class Registers:
    '''
    Register bank of one calculator.

    Operands and memory hold numeric text, not numbers, so whatever was
    typed is kept exactly until something computes with it. None means
    unset; so does an empty string.
    '''

    DISPLAY = '0'

    def __init__(self):
        self.memory = None
        self.reset()

    def reset(self):
        '''
        Power cycle. Memory survives.
        '''
        self.first = None
        self.second = None
        self.operation = None
        self.display = type(self).DISPLAY

    def clear(self):
        '''
        Forget the most recently filled register, and blank the display.
        '''
        if self.second:
            self.second = None
        elif self.operation:
            self.operation = None
        else:
            self.first = None
        self.display = type(self).DISPLAY

    def entering_second(self):
        '''
        Return True if typed digits go to the second operand.
        '''
        return bool(self.first and self.operation)

    def __repr__(self):
        return '{}(first={!r}, second={!r}, operation={!r}, memory={!r}, ' \
               'display={!r})'.format(type(self).__name__,
                                      self.first, self.second, self.operation,
                                      self.memory, self.display)
