from functools import wraps
import logging


log = logging.getLogger(__name__)


class CalculatorError(Exception):
    pass


def wrap_user_errors(fmt):
    '''
    Decorator turning the arithmetic and domain errors of a computation
    (division by zero, square root of a negative, unparseable decimals) into
    a CalculatorError.

    fmt is filled in with the call's arguments. The original exception is
    logged and chained as __cause__. CalculatorErrors pass through.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalculatorError:
                raise
            except (ArithmeticError, ValueError) as e:
                message = fmt.format(*args, **kwargs)
                log.debug('%s: %s: %s', message, type(e).__name__, e)
                raise CalculatorError(message) from e
        return wrapper
    return decorator
