import pytest

from fallible.exceptions import (
    ConfigurationError,
    ConstructionError,
    FallibleException,
    InvalidAccessError,
    ResultFault,
)


class TestFallibleException:
    def test_is_exception(self) -> None:
        assert issubclass(FallibleException, Exception)

    def test_can_be_raised_and_caught(self) -> None:
        try:
            raise FallibleException("test")
        except FallibleException as e:
            assert str(e) == "test"


class TestExceptionInheritance:
    @pytest.mark.parametrize("exc_type", [ConfigurationError, ConstructionError, InvalidAccessError, ResultFault])
    def test_inherits_fallible_exception(self, exc_type: type[Exception]) -> None:
        assert issubclass(exc_type, FallibleException)


class TestResultFault:
    def test_carries_error(self) -> None:
        payload = {"code": 404}
        fault = ResultFault(payload)
        assert fault.error is payload

    def test_message_includes_error(self) -> None:
        assert str(ResultFault("not found")) == "Error Result: 'not found'"
