"""Structured errors for gh-demo.

Every failure that crosses a module boundary is a ``LayeredError`` tagged
with the layer it came from (api, file, ...) and the operation that failed.
Batch operations that tolerate individual failures report them together as
a ``PartialFailureError``.
"""

from __future__ import annotations

from enum import Enum


class ErrorLayer(str, Enum):
    """Layer in which an error originated."""

    API = "api"
    VALIDATION = "validation"
    FILE = "file"
    CONFIG = "config"
    CONTEXT = "context"
    CLEANUP = "cleanup"
    PROJECT = "project"


class GhDemoError(Exception):
    """Base exception for gh-demo errors."""


class LayeredError(GhDemoError):
    """Error tagged with its originating layer and operation.

    Rendered as ``[layer:operation] message`` with ``: cause`` appended
    when an underlying exception is attached.

    Attributes:
        layer: Originating layer.
        operation: Name of the failed operation (e.g. "create_issue").
        message: Human-readable description.
        cause: Underlying exception, if any.
        context: Extra key/value details (paths, titles, indices).
    """

    def __init__(
        self,
        layer: ErrorLayer,
        operation: str,
        message: str,
        cause: BaseException | None = None,
        context: dict[str, str] | None = None,
    ) -> None:
        self.layer = ErrorLayer(layer)
        self.operation = operation
        self.message = message
        self.cause = cause
        self.context: dict[str, str] = dict(context or {})
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.cause is not None:
            return f"[{self.layer.value}:{self.operation}] {self.message}: {self.cause}"
        return f"[{self.layer.value}:{self.operation}] {self.message}"

    def with_context(self, key: str, value: object) -> LayeredError:
        """Attach a context entry and return self for chaining."""
        self.context[key] = str(value)
        return self


class PartialFailureError(GhDemoError):
    """Some items in a batch failed while others succeeded.

    Attributes:
        errors: One message per failed item, in processing order.
    """

    def __init__(self, errors: list[str], summary: str = "some items failed") -> None:
        self.errors = list(errors)
        self.summary = summary
        super().__init__(str(self))

    def __str__(self) -> str:
        joined = "\n  - ".join(self.errors)
        return f"{self.summary}:\n  - {joined}"


def api_error(operation: str, message: str, cause: BaseException | None = None) -> LayeredError:
    return LayeredError(ErrorLayer.API, operation, message, cause)


def validation_error(operation: str, message: str) -> LayeredError:
    return LayeredError(ErrorLayer.VALIDATION, operation, message)


def file_error(operation: str, message: str, cause: BaseException | None = None) -> LayeredError:
    return LayeredError(ErrorLayer.FILE, operation, message, cause)


def config_error(operation: str, message: str, cause: BaseException | None = None) -> LayeredError:
    return LayeredError(ErrorLayer.CONFIG, operation, message, cause)


def cleanup_error(
    operation: str, message: str, cause: BaseException | None = None
) -> LayeredError:
    return LayeredError(ErrorLayer.CLEANUP, operation, message, cause)


def project_error(
    operation: str, message: str, cause: BaseException | None = None
) -> LayeredError:
    return LayeredError(ErrorLayer.PROJECT, operation, message, cause)


def context_error(operation: str) -> LayeredError:
    """Create the error returned when a run is cancelled."""
    return LayeredError(
        ErrorLayer.CONTEXT,
        operation,
        "operation was cancelled (interrupted by user)",
    )


def wrap_with_operation(
    err: BaseException | None, layer: ErrorLayer, operation: str, message: str
) -> LayeredError | None:
    """Wrap an exception in a new layered error, keeping it as the cause.

    Returns None when ``err`` is None so call sites can wrap unconditionally.
    """
    if err is None:
        return None
    return LayeredError(layer, operation, message, err)


def with_context_safe(err: BaseException, key: str, value: object) -> BaseException:
    """Attach context if ``err`` is a LayeredError; otherwise return it unchanged."""
    if isinstance(err, LayeredError):
        return err.with_context(key, value)
    return err


def is_layer(err: BaseException | None, layer: ErrorLayer) -> bool:
    """Check whether ``err`` (or a LayeredError in its cause chain) has ``layer``."""
    current: BaseException | None = err
    while current is not None:
        if isinstance(current, LayeredError):
            if current.layer == layer:
                return True
            current = current.cause
        else:
            current = current.__cause__
    return False


def is_partial_failure(err: BaseException | None) -> bool:
    return isinstance(err, PartialFailureError)


class ErrorCollector:
    """Accumulate errors from a batch operation.

    ``result()`` reduces the collection: no errors gives None, a single
    error is returned as is, and several errors become a
    PartialFailureError listing every message.

    Example:
        >>> collector = ErrorCollector("cleanup_issues")
        >>> collector.add(None)
        >>> collector.result() is None
        True
    """

    def __init__(self, operation: str) -> None:
        self.operation = operation
        self._errors: list[GhDemoError] = []

    def add(self, err: GhDemoError | None) -> None:
        if err is not None:
            self._errors.append(err)

    @property
    def errors(self) -> list[GhDemoError]:
        return list(self._errors)

    def has_errors(self) -> bool:
        return bool(self._errors)

    def result(self) -> GhDemoError | None:
        if not self._errors:
            return None
        if len(self._errors) == 1:
            return self._errors[0]
        return PartialFailureError([str(e) for e in self._errors])
