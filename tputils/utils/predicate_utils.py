from typing import Callable, TypeVar

from tputils.utils.boolean_utils import (
    ExceptionFactory,
    choose,
    choose_else_raise,
    choose_get,
)

T = TypeVar('T')
R = TypeVar('R')

Predicate = Callable[[T], bool]


def _test(predicate: Predicate, value) -> bool:
    if predicate is None:
        raise TypeError('predicate cannot be None')
    return bool(predicate(value))


def require_ensured(
    predicate: Predicate,
    value: T,
    message: str | None = None,
    exception_factory: ExceptionFactory | None = None,
) -> T:
    if not _test(predicate, value):
        if exception_factory is not None:
            raise exception_factory()
        raise ValueError(message) if message else ValueError()
    return value


def require_ensured_else(predicate: Predicate, value: T, default: T) -> T:
    return value if _test(predicate, value) else default


def require_non_ensured(
    predicate: Predicate,
    value: T,
    message: str | None = None,
    exception_factory: ExceptionFactory | None = None,
) -> T:
    if _test(predicate, value):
        if exception_factory is not None:
            raise exception_factory()
        raise ValueError(message) if message else ValueError()
    return value


def require_non_ensured_else(predicate: Predicate, value: T, default: T) -> T:
    return default if _test(predicate, value) else value


def if_ensured(predicate: Predicate, value, result: R | None = None, else_result: R | None = None) -> R | None:
    return choose(_test(predicate, value), result, else_result)


def if_ensured_get(predicate: Predicate, value, supplier=None, else_supplier=None):
    return choose_get(_test(predicate, value), supplier, else_supplier)


def if_ensured_else_raise(predicate: Predicate, value, result: R, exception_factory: ExceptionFactory) -> R:
    return choose_else_raise(_test(predicate, value), result, exception_factory)


def if_non_ensured(predicate: Predicate, value, result: R | None = None, else_result: R | None = None) -> R | None:
    return choose(not _test(predicate, value), result, else_result)


def if_non_ensured_get(predicate: Predicate, value, supplier=None, else_supplier=None):
    return choose_get(not _test(predicate, value), supplier, else_supplier)


def if_non_ensured_else_raise(predicate: Predicate, value, result: R, exception_factory: ExceptionFactory) -> R:
    return choose_else_raise(not _test(predicate, value), result, exception_factory)
