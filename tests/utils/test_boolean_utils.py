import unittest

import pytest

from tputils.utils import boolean_utils


class TestBooleanUtils:
    def test_predicates(self):
        assert boolean_utils.is_true(True)
        assert not boolean_utils.is_true(None)
        assert not boolean_utils.is_true(1)
        assert boolean_utils.is_false(False)
        assert not boolean_utils.is_false(None)
        assert boolean_utils.is_none_or_true(None)
        assert boolean_utils.is_none_or_false(None)
        assert not boolean_utils.is_none_or_false(True)

    def test_variadic(self):
        assert boolean_utils.all_true(True, True)
        assert not boolean_utils.all_true(True, None)
        assert boolean_utils.any_true(False, True)
        assert boolean_utils.all_false(False, False)
        assert boolean_utils.any_false(True, None)
        assert not boolean_utils.any_false(True, True)

    class TestRequire:
        def test_require_true(self):
            assert boolean_utils.require_true(True) is True
            with pytest.raises(ValueError, match='must be enabled'):
                boolean_utils.require_true(False, 'must be enabled')

        def test_require_with_exception_factory(self):
            with pytest.raises(KeyError):
                boolean_utils.require_false(True, exception_factory=KeyError)

        def test_require_none_or(self):
            assert boolean_utils.require_none_or_true(None) is None
            assert boolean_utils.require_none_or_false(False) is False
            with pytest.raises(ValueError):
                boolean_utils.require_none_or_false(True)

    class TestChoose:
        def test_choose(self):
            assert boolean_utils.choose(True, 'a', 'b') == 'a'
            assert boolean_utils.choose(False, 'a', 'b') == 'b'

        def test_choose_get(self):
            assert boolean_utils.choose_get(True, lambda: 1, lambda: 2) == 1
            assert boolean_utils.choose_get(False, lambda: 1) is None

        def test_choose_else_raise(self):
            assert boolean_utils.choose_else_raise(True, 'a', RuntimeError) == 'a'
            with pytest.raises(RuntimeError):
                boolean_utils.choose_else_raise(False, 'a', RuntimeError)
            with pytest.raises(TypeError):
                boolean_utils.choose_else_raise(True, 'a', None)

        def test_if_wrappers(self):
            calls = []

            boolean_utils.if_true_get(True, lambda: calls.append('true'))
            boolean_utils.if_false_get(True, lambda: calls.append('false'))
            boolean_utils.if_none_or_true_get(None, lambda: calls.append('none'))

            assert calls == ['true', 'none']
            assert boolean_utils.if_false(False, 1, 2) == 1
            assert boolean_utils.if_none_or_false(True, 1, 2) == 2
            with pytest.raises(ValueError):
                boolean_utils.if_true_else_raise(None, 1, ValueError)


if __name__ == '__main__':
    unittest.main()
