"""
Tests for the domain error types.

Pure Python; no framework or IO involved.
"""

import pytest

from app.domain.errors import BusinessError


def _raise(error: BaseException) -> BaseException:
    try:
        raise error
    except BaseException as caught:  # noqa: BLE001
        return caught


class TestBusinessErrorConstruction:
    """Tests for the four construction shapes of BusinessError."""

    def test_message_only(self) -> None:
        """The message is kept and used as the string form."""
        error = BusinessError("invalid state")
        assert error.message == "invalid state"
        assert str(error) == "invalid state"
        assert error.cause is None

    def test_cause_only_describes_cause(self) -> None:
        """Without a message, the cause's type and text become the message."""
        cause = ValueError("bad amount")
        error = BusinessError(cause=cause)
        assert error.message == "ValueError: bad amount"
        assert error.__cause__ is cause
        assert error.cause is cause

    def test_cause_without_text_uses_type_name(self) -> None:
        """A cause with no text is described by its type name alone."""
        error = BusinessError(cause=KeyError())
        assert error.message == "KeyError"

    def test_cause_outside_builtins_is_module_qualified(self) -> None:
        """Non-builtin cause types carry their module path."""

        class LedgerError(Exception):
            pass

        error = BusinessError(cause=LedgerError("closed"))
        assert error.message.endswith("LedgerError: closed")
        assert error.message.startswith(LedgerError.__module__ + ".")

    def test_message_and_cause(self) -> None:
        """An explicit message wins over the cause description."""
        cause = RuntimeError("db down")
        error = BusinessError("cannot book", cause)
        assert error.message == "cannot book"
        assert error.__cause__ is cause

    def test_no_arguments_has_no_message(self) -> None:
        """The bare form carries a null message and an empty string form."""
        error = BusinessError()
        assert error.message is None
        assert str(error) == ""

    def test_is_catchable_as_exception(self) -> None:
        """BusinessError propagates like any other exception."""
        with pytest.raises(Exception, match="invalid state"):
            raise BusinessError("invalid state")


class TestBusinessErrorPropagationFlags:
    """Tests for suppress_context and writable_traceback."""

    def test_defaults_keep_traceback(self) -> None:
        """By default the raise-site traceback is recorded."""
        error = _raise(BusinessError("x"))
        assert error.__traceback__ is not None

    def test_unwritable_traceback_hides_origin(self) -> None:
        """With writable_traceback=False no traceback is exposed."""
        error = _raise(BusinessError("x", writable_traceback=False))
        assert error.__traceback__ is None

    def test_context_is_shown_by_default(self) -> None:
        """Implicit context chaining is left alone by default."""
        try:
            try:
                raise KeyError("inner")
            except KeyError:
                raise BusinessError("outer")
        except BusinessError as error:
            assert isinstance(error.__context__, KeyError)
            assert error.__suppress_context__ is False

    def test_suppress_context(self) -> None:
        """suppress_context=True hides the implicit context."""
        try:
            try:
                raise KeyError("inner")
            except KeyError:
                raise BusinessError("outer", suppress_context=True)
        except BusinessError as error:
            assert error.__suppress_context__ is True
