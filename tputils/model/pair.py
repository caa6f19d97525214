from typing import Any, Generic, Mapping, TypeVar

L = TypeVar('L')
R = TypeVar('R')


class Pair(Generic[L, R]):
    def __init__(self, left: L, right: R, immutable: bool = True):
        self._left = left
        self._right = right
        self._immutable = immutable

    @classmethod
    def of(cls, left: L, right: R) -> 'Pair[L, R]':
        return cls(left, right, immutable=True)

    @classmethod
    def mutable_of(cls, left: L, right: R) -> 'Pair[L, R]':
        return cls(left, right, immutable=False)

    @classmethod
    def of_not_none(cls, left: L, right: R, immutable: bool = True) -> 'Pair[L, R]':
        if left is None or right is None:
            raise TypeError('Pair values cannot be None')
        return cls(left, right, immutable=immutable)

    @classmethod
    def of_entry(cls, entry: tuple[L, R] | None, immutable: bool = True) -> 'Pair[L, R]':
        if entry is None:
            return cls(None, None, immutable=immutable)
        key, value = entry
        return cls(key, value, immutable=immutable)

    @classmethod
    def of_mapping(cls, mapping: Mapping[L, R] | None, immutable: bool = True) -> set['Pair[L, R]'] | None:
        if mapping is None:
            return None
        return {cls(k, v, immutable=immutable) for k, v in mapping.items()}

    def _check_mutable(self):
        if self._immutable:
            raise TypeError(f'{type(self).__name__} is immutable.')

    def freeze(self) -> 'Pair[L, R]':
        self._immutable = True
        return self

    def unfreeze(self) -> 'Pair[L, R]':
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
    def right(self) -> R:
        return self._right

    @right.setter
    def right(self, right: R):
        self._check_mutable()
        self._right = right

    # Map entry view
    @property
    def key(self) -> L:
        return self._left

    @property
    def value(self) -> R:
        return self._right

    @value.setter
    def value(self, value: R):
        self.right = value

    def __iter__(self):
        return iter((self._left, self._right))

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if other is None or type(self) is not type(other):
            return False
        return self._left == other._left and self._right == other._right

    def __hash__(self) -> int:
        return hash(self._left) ^ hash(self._right)

    def __str__(self) -> str:
        return f'({self._left}, {self._right})'

    def __repr__(self) -> str:
        return f'Pair({self._left!r}, {self._right!r}, immutable={self._immutable})'

    def format(self, fmt: str) -> str:
        return fmt.format(self._left, self._right)

    def to_dict(self) -> dict[str, Any]:
        return {'left': self._left, 'right': self._right, 'immutable': self._immutable}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'Pair':
        return cls(**data)
