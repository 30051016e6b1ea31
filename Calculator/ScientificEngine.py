# ScientificEngine
"""Scientific functions used by the evaluator.

Trigonometric functions always take their argument in degrees.
"""
import math

from . import error as E
from .log import get_logger

logger = get_logger(__name__)


FUNCTIONS = ("sin", "cos", "tan", "sqrt", "log", "ln")


def is_function(name):
    """Return True if name is one of the recognised function names."""
    return name in FUNCTIONS


def isSCT(name, argument):  # Sin / Cos / Tan
    radians = math.radians(argument)
    if name == "sin":
        return math.sin(radians)
    elif name == "cos":
        return math.cos(radians)
    return math.tan(radians)


def isRoot(argument, position=None):
    if argument < 0:
        raise E.DomainError("Cannot take square root of a negative number", position=position)
    return math.sqrt(argument)


def isLog(name, argument, position=None):
    """log is base 10, ln is the natural logarithm. Both need a positive argument."""
    if argument <= 0:
        if name == "ln":
            raise E.DomainError("Natural logarithm of non-positive number", position=position)
        raise E.DomainError("Logarithm of non-positive number", position=position)

    if name == "ln":
        return math.log(argument)
    return math.log10(argument)


def apply_function(name, argument, position=None):
    """Apply the function called name to argument.

    position is where the function name starts; it is attached to any error.
    """
    if name in ("sin", "cos", "tan"):
        return isSCT(name, argument)
    elif name == "sqrt":
        return isRoot(argument, position)
    elif name in ("log", "ln"):
        return isLog(name, argument, position)
    raise E.UnknownFunctionError(name, position)


def power(base, exponent, position=None):
    """base ^ exponent on floats.

    Follows IEEE pow: overflow and 0 to a negative power give a signed inf,
    a negative base with a fractional exponent gives nan.
    """
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if _odd_integer(exponent) and math.copysign(1.0, base) < 0:
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0:
            # -0.0 keeps its sign for odd negative exponents
            if _odd_integer(exponent) and math.copysign(1.0, base) < 0:
                return -math.inf
            return math.inf
        logger.debug("Power %r^%r has no real value (position %s)", base, exponent, position)
        return math.nan


def _odd_integer(value):
    return value == int(value) and int(value) % 2 == 1
