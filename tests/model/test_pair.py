import unittest

import pytest

from tputils.model.pair import Pair


class TestPair:
    def test_of_is_immutable(self):
        pair = Pair.of(1, 'a')

        assert pair.immutable
        with pytest.raises(TypeError, match='Pair is immutable.'):
            pair.left = 2
        with pytest.raises(TypeError):
            pair.value = 'b'

    def test_mutable_of(self):
        pair = Pair.mutable_of(1, 'a')

        pair.left = 2
        pair.value = 'b'

        assert pair.left == 2
        assert pair.right == 'b'

    def test_freeze_and_unfreeze(self):
        pair = Pair.mutable_of(1, 2).freeze()

        with pytest.raises(TypeError):
            pair.right = 3

        pair.unfreeze().right = 3
        assert pair.right == 3

    def test_of_not_none(self):
        with pytest.raises(TypeError):
            Pair.of_not_none(None, 1)

    def test_entry_view(self):
        pair = Pair.of_entry(('key', 'value'))

        assert pair.key == 'key'
        assert pair.value == 'value'
        assert Pair.of_entry(None).left is None

    def test_of_mapping(self):
        pairs = Pair.of_mapping({'a': 1, 'b': 2})

        assert pairs == {Pair.of('a', 1), Pair.of('b', 2)}
        assert Pair.of_mapping(None) is None

    def test_equality_ignores_mutability(self):
        assert Pair.of(1, 2) == Pair.mutable_of(1, 2)
        assert hash(Pair.of(1, 2)) == hash(Pair.mutable_of(1, 2))
        assert Pair.of(1, 2) != Pair.of(2, 1)
        assert Pair.of(1, 2) != (1, 2)

    def test_unpacking(self):
        left, right = Pair.of('x', 'y')

        assert (left, right) == ('x', 'y')

    def test_str_and_format(self):
        pair = Pair.of(1, 'a')

        assert str(pair) == '(1, a)'
        assert pair.format('{0}={1}') == '1=a'

    def test_to_dict_from_dict(self):
        pair = Pair.mutable_of('k', [1, 2])

        data = pair.to_dict()
        restored = Pair.from_dict(data)

        assert data == {'left': 'k', 'right': [1, 2], 'immutable': False}
        assert restored == pair
        assert not restored.immutable


if __name__ == '__main__':
    unittest.main()
