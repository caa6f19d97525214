import logging
import math
from decimal import Decimal
from fractions import Fraction
from numbers import Number

logger = logging.getLogger(__name__)


def _require_number(number) -> Number:
    # bool is an int subclass but it is not accepted as a number here
    if isinstance(number, bool) or not isinstance(number, (int, float, Decimal, Fraction)):
        raise TypeError(f'Unsupported type: {type(number).__name__}')
    return number


def is_non_decimal_number(number, class_based: bool = False) -> bool:
    _require_number(number)
    if isinstance(number, int):
        return True
    if class_based:
        return False
    if isinstance(number, float) and not math.isfinite(number):
        return False
    return number % 1 == 0


def is_decimal_number(number, class_based: bool = False) -> bool:
    _require_number(number)
    if isinstance(number, int):
        return False
    if class_based:
        return True
    if isinstance(number, float) and not math.isfinite(number):
        return False
    return number % 1 != 0


def _require_integral(number) -> int:
    if not is_non_decimal_number(number):
        raise TypeError(f'Unsupported type: {type(number).__name__}')
    return int(number)


def is_even(number) -> bool:
    _require_number(number)
    return math.floor(number) % 2 == 0


def is_odd(number) -> bool:
    return not is_even(number)


def is_prime(number) -> bool:
    value = _require_integral(number)
    if value <= 1:
        return False
    for i in range(2, math.isqrt(value) + 1):
        if value % i == 0:
            return False
    return True


def gcd(a, b) -> int:
    a, b = _require_integral(a), _require_integral(b)
    while b != 0:
        a, b = b, a % b
    return a


def lcm(*numbers) -> int:
    if not numbers:
        raise ValueError('At least 1 number.')
    values = [_require_integral(n) for n in numbers]

    result = 1
    for value in values:
        result = result * value // gcd(result, value)
    return result


def count_digits(number) -> int:
    _require_number(number)
    text = str(number).replace('.', '')
    return len(text) - 1 if text.startswith('-') else len(text)


def is_palindrome(number) -> bool:
    digits = str(abs(_require_integral(number)))
    return digits == digits[::-1]


def sum_of_digits(number) -> int:
    value = abs(_require_integral(number))
    total = 0
    while value != 0:
        total += value % 10
        value //= 10
    return total


def is_perfect_number(number) -> bool:
    value = _require_integral(number)
    if value <= 1:
        return False

    total = 1
    for i in range(2, math.isqrt(value) + 1):
        if value % i == 0:
            pair = value // i
            total += i if i == pair else i + pair
    return total == value


def factorial(number) -> int:
    value = _require_integral(number)
    if value < 0:
        raise ValueError('Number must be non-negative.')
    logger.debug(f'Computing factorial of {value}')
    return math.factorial(value)
