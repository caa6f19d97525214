from typing import Any, Generic, TypeVar

L = TypeVar('L')
M = TypeVar('M')
R = TypeVar('R')


class Triple(Generic[L, M, R]):
    def __init__(self, left: L, middle: M, right: R, immutable: bool = True):
        self._left = left
        self._middle = middle
        self._right = right
        self._immutable = immutable

    @classmethod
    def of(cls, left: L, middle: M, right: R) -> 'Triple[L, M, R]':
        return cls(left, middle, right, immutable=True)

    @classmethod
    def mutable_of(cls, left: L, middle: M, right: R) -> 'Triple[L, M, R]':
        return cls(left, middle, right, immutable=False)

    @classmethod
    def of_not_none(cls, left: L, middle: M, right: R, immutable: bool = True) -> 'Triple[L, M, R]':
        if left is None or middle is None or right is None:
            raise TypeError('Triple values cannot be None')
        return cls(left, middle, right, immutable=immutable)

    def _check_mutable(self):
        if self._immutable:
            raise TypeError(f'{type(self).__name__} is immutable.')

    def freeze(self) -> 'Triple[L, M, R]':
        self._immutable = True
        return self

    def unfreeze(self) -> 'Triple[L, M, R]':
        self._immutable = False
        return self

    @property
    def immutable(self) -> bool:
        return self._immutable

    @property
    def left(self) -> L:
        return self._left

    @left.setter
    def left(self, left: L):
        self._check_mutable()
        self._left = left

    @property
    def middle(self) -> M:
        return self._middle

    @middle.setter
    def middle(self, middle: M):
        self._check_mutable()
        self._middle = middle

    @property
    def right(self) -> R:
        return self._right

    @right.setter
    def right(self, right: R):
        self._check_mutable()
        self._right = right

    def __iter__(self):
        return iter((self._left, self._middle, self._right))

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if other is None or type(self) is not type(other):
            return False
        return (
            self._left == other._left
            and self._middle == other._middle
            and self._right == other._right
        )

    def __hash__(self) -> int:
        return hash(self._left) ^ hash(self._middle) ^ hash(self._right)

    def __str__(self) -> str:
        return f'({self._left}, {self._middle}, {self._right})'

    def __repr__(self) -> str:
        return (
            f'Triple({self._left!r}, {self._middle!r}, {self._right!r}, '
            f'immutable={self._immutable})'
        )

    def format(self, fmt: str) -> str:
        return fmt.format(self._left, self._middle, self._right)

    def to_dict(self) -> dict[str, Any]:
        return {
            'left': self._left,
            'middle': self._middle,
            'right': self._right,
            'immutable': self._immutable,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'Triple':
        return cls(**data)
