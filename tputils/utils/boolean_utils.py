from typing import Callable, TypeVar

T = TypeVar('T')

ExceptionFactory = Callable[[], BaseException]


def is_true(obj: bool | None) -> bool:
    return isinstance(obj, bool) and obj


def is_false(obj: bool | None) -> bool:
    return isinstance(obj, bool) and not obj


def is_none_or_true(obj: bool | None) -> bool:
    return obj is None or is_true(obj)


def is_none_or_false(obj: bool | None) -> bool:
    return obj is None or is_false(obj)


def all_true(*values: bool | None) -> bool:
    return all(is_true(v) for v in values)


def any_true(*values: bool | None) -> bool:
    return any(is_true(v) for v in values)


def all_false(*values: bool | None) -> bool:
    return all(is_false(v) for v in values)


def any_false(*values: bool | None) -> bool:
    # None counts as not true, same as for all_true
    return any(not is_true(v) for v in values)


def _require(
    matched: bool,
    obj,
    message: str | None,
    exception_factory: ExceptionFactory | None,
):
    if matched:
        return obj
    if exception_factory is not None:
        raise exception_factory()
    raise ValueError(message) if message else ValueError()


def require_true(
    obj: bool | None,
    message: str | None = None,
    exception_factory: ExceptionFactory | None = None,
) -> bool:
    return _require(is_true(obj), obj, message, exception_factory)


def require_false(
    obj: bool | None,
    message: str | None = None,
    exception_factory: ExceptionFactory | None = None,
) -> bool:
    return _require(is_false(obj), obj, message, exception_factory)


def require_none_or_true(
    obj: bool | None,
    message: str | None = None,
    exception_factory: ExceptionFactory | None = None,
) -> bool | None:
    return _require(is_none_or_true(obj), obj, message, exception_factory)


def require_none_or_false(
    obj: bool | None,
    message: str | None = None,
    exception_factory: ExceptionFactory | None = None,
) -> bool | None:
    return _require(is_none_or_false(obj), obj, message, exception_factory)


def choose(matched: bool, result: T | None = None, else_result: T | None = None) -> T | None:
    return result if matched else else_result


def choose_get(
    matched: bool,
    supplier: Callable[[], T] | None = None,
    else_supplier: Callable[[], T] | None = None,
) -> T | None:
    """Call ``supplier`` when ``matched`` and ``else_supplier`` otherwise.

    A missing callable for the taken branch yields ``None``, so actions
    without a value work the same as suppliers.
    """
    call = supplier if matched else else_supplier
    if call is None:
        return None
    return call()


def choose_else_raise(matched: bool, result: T, exception_factory: ExceptionFactory) -> T:
    if exception_factory is None:
        raise TypeError('exception_factory cannot be None')
    if not matched:
        raise exception_factory()
    return result


def if_true(condition: bool | None, result: T | None = None, else_result: T | None = None) -> T | None:
    return choose(is_true(condition), result, else_result)


def if_true_get(condition: bool | None, supplier=None, else_supplier=None):
    return choose_get(is_true(condition), supplier, else_supplier)


def if_true_else_raise(condition: bool | None, result: T, exception_factory: ExceptionFactory) -> T:
    return choose_else_raise(is_true(condition), result, exception_factory)


def if_false(condition: bool | None, result: T | None = None, else_result: T | None = None) -> T | None:
    return choose(is_false(condition), result, else_result)


def if_false_get(condition: bool | None, supplier=None, else_supplier=None):
    return choose_get(is_false(condition), supplier, else_supplier)


def if_false_else_raise(condition: bool | None, result: T, exception_factory: ExceptionFactory) -> T:
    return choose_else_raise(is_false(condition), result, exception_factory)


def if_none_or_true(condition: bool | None, result: T | None = None, else_result: T | None = None) -> T | None:
    return choose(is_none_or_true(condition), result, else_result)


def if_none_or_true_get(condition: bool | None, supplier=None, else_supplier=None):
    return choose_get(is_none_or_true(condition), supplier, else_supplier)


def if_none_or_true_else_raise(condition: bool | None, result: T, exception_factory: ExceptionFactory) -> T:
    return choose_else_raise(is_none_or_true(condition), result, exception_factory)


def if_none_or_false(condition: bool | None, result: T | None = None, else_result: T | None = None) -> T | None:
    return choose(is_none_or_false(condition), result, else_result)


def if_none_or_false_get(condition: bool | None, supplier=None, else_supplier=None):
    return choose_get(is_none_or_false(condition), supplier, else_supplier)


def if_none_or_false_else_raise(condition: bool | None, result: T, exception_factory: ExceptionFactory) -> T:
    return choose_else_raise(is_none_or_false(condition), result, exception_factory)
