"""
Domain-level errors.

Request-handling code raises these to signal a recoverable domain-rule
violation. They carry no HTTP semantics; the status code is chosen
where errors are mapped to responses at the interface boundary.
No framework imports allowed.
"""

from __future__ import annotations


def _describe(cause: BaseException) -> str:
    """Render a cause as ``"<TypeName>: <text>"``, or just the type name."""
    cls = type(cause)
    name = cls.__qualname__ if cls.__module__ == "builtins" else f"{cls.__module__}.{cls.__qualname__}"
    text = str(cause)
    return f"{name}: {text}" if text else name


class BusinessError(Exception):
    """Raised when a request is invalid per domain rules.

    Args:
        message: Human-readable description. When omitted and a cause is
            given, the cause's description is used.
        cause: The underlying error, exposed as ``__cause__``.
        suppress_context: Hide the implicit ``__context__`` from tracebacks.
        writable_traceback: When False, the traceback captured at the raise
            site is not exposed, so logged output carries no origin trace.
    """

    def __init__(
        self,
        message: str | None = None,
        cause: BaseException | None = None,
        *,
        suppress_context: bool = False,
        writable_traceback: bool = True,
    ) -> None:
        if message is None and cause is not None:
            message = _describe(cause)
        super().__init__(*(() if message is None else (message,)))
        self.message = message
        self._writable_traceback = writable_traceback
        if cause is not None:
            self.__cause__ = cause
        if suppress_context:
            self.__suppress_context__ = True

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    @property
    def __traceback__(self):  # type: ignore[override]
        if not getattr(self, "_writable_traceback", True):
            return None
        return BaseException.__traceback__.__get__(self)

    @__traceback__.setter
    def __traceback__(self, tb) -> None:
        BaseException.__traceback__.__set__(self, tb)
