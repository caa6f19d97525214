from typing import Callable, TypeVar

T = TypeVar('T')
R = TypeVar('R')


def all_none(*objects) -> bool:
    return all(obj is None for obj in objects)


def any_none(*objects) -> bool:
    return any(obj is None for obj in objects)


def all_not_none(*objects) -> bool:
    return all(obj is not None for obj in objects)


def any_not_none(*objects) -> bool:
    return any(obj is not None for obj in objects)


def require_not_none(obj: T | None, name: str = 'value') -> T:
    if obj is None:
        raise TypeError(f'{name} cannot be None')
    return obj


def require_none_else(obj, else_obj: R) -> R | None:
    return None if obj is None else else_obj


def require_not_none_else_raise(obj: T | None, exception_factory: Callable[[], BaseException]) -> T:
    if obj is None:
        raise require_not_none(exception_factory, 'exception_factory')()
    return obj


def same_class(o1, o2) -> bool:
    return type(require_not_none(o1, 'o1')) is type(require_not_none(o2, 'o2'))


def equals(*objects) -> bool:
    if not objects:
        return False
    first = objects[0]
    return all(first == obj for obj in objects[1:])
