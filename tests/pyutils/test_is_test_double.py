from unittest.mock import AsyncMock, MagicMock, Mock, NonCallableMock, create_autospec

from lazylet.pyutils import is_test_double


def describe_is_test_double():
    def recognizes_mocks():
        assert is_test_double(Mock()) is True
        assert is_test_double(MagicMock()) is True
        assert is_test_double(AsyncMock()) is True
        assert is_test_double(NonCallableMock()) is True

    def recognizes_autospecced_functions():
        def func():
            pass  # pragma: no cover

        assert is_test_double(create_autospec(func)) is True

    def does_not_recognize_functions():
        def func():
            pass  # pragma: no cover

        assert is_test_double(func) is False
        assert is_test_double(lambda: None) is False
        assert is_test_double(len) is False

    def does_not_recognize_functions_with_an_attribute_named_mock():
        def func():
            pass  # pragma: no cover

        func.mock = True  # type: ignore
        assert is_test_double(func) is False

    def does_not_recognize_other_values():
        assert is_test_double(None) is False
        assert is_test_double(42) is False
        assert is_test_double("mock") is False
        assert is_test_double(Mock) is False
