from namespaced_cache.exceptions import (
    CacheError,
    CacheException,
    ClockOverflowError,
    ConfigError,
    DecodeError,
    EncodeError,
)


class TestCacheException:
    def test_is_exception(self) -> None:
        assert issubclass(CacheException, Exception)

    def test_can_be_raised_and_caught(self) -> None:
        try:
            raise CacheException("test")
        except CacheException as e:
            assert str(e) == "test"


class TestExceptionInheritance:
    def test_operation_errors_are_cache_errors(self) -> None:
        for error_type in (EncodeError, DecodeError, ClockOverflowError):
            assert issubclass(error_type, CacheError)
            assert issubclass(error_type, CacheException)

    def test_error_kinds_are_distinct(self) -> None:
        assert not issubclass(EncodeError, DecodeError)
        assert not issubclass(DecodeError, EncodeError)
        assert not issubclass(ClockOverflowError, EncodeError)

    def test_config_error_is_not_an_operation_error(self) -> None:
        assert issubclass(ConfigError, CacheException)
        assert not issubclass(ConfigError, CacheError)
