"""Diagnostic sinks for the header stage.

The stage never reads from a sink; it only emits structured records with a
message. Two capabilities are required: ``info`` and ``warn``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol


class DiagnosticSink(Protocol):
    """Write-only structured logging capability."""

    def info(self, record: Mapping[str, Any], message: str) -> None: ...

    def warn(self, record: Mapping[str, Any], message: str) -> None: ...


def format_record(record: Mapping[str, Any]) -> str:
    return " ".join(f"{key}={value}" for key, value in record.items())


class LoggerSink:
    """Adapts a ``logging.Logger`` to the DiagnosticSink interface.

    The structured record is rendered into the message as ``key=value``
    pairs and also attached to the LogRecord as ``diagnostic`` so that
    handlers can pick it up without parsing.
    """

    def __init__(self, logger: logging.Logger, correlation_id: str | None = None) -> None:
        self._logger = logger
        self._correlation_id = correlation_id

    def _extra(self, record: Mapping[str, Any]) -> dict[str, Any]:
        extra: dict[str, Any] = {"diagnostic": dict(record)}
        if self._correlation_id:
            extra["correlation_id"] = self._correlation_id
        return extra

    def info(self, record: Mapping[str, Any], message: str) -> None:
        self._logger.info(f"{message} | {format_record(record)}", extra=self._extra(record))

    def warn(self, record: Mapping[str, Any], message: str) -> None:
        self._logger.warning(f"{message} | {format_record(record)}", extra=self._extra(record))


class HostLogSink:
    """Wraps a host request logger exposing ``info(record, message)``.

    Host loggers are only guaranteed to provide ``info``. Warnings use the
    host's ``warn``/``warning`` method when there is one and are otherwise
    sent through ``info`` with the level recorded in the record.
    """

    def __init__(self, log: Any) -> None:
        self._log = log

    def info(self, record: Mapping[str, Any], message: str) -> None:
        self._log.info(dict(record), message)

    def warn(self, record: Mapping[str, Any], message: str) -> None:
        for method_name in ("warn", "warning"):
            method = getattr(self._log, method_name, None)
            if callable(method):
                method(dict(record), message)
                return
        self._log.info({**record, "level": "warning"}, message)


@dataclass(frozen=True)
class DiagnosticContext:
    """Per-request diagnostic capability.

    Attributes:
        log: Sink for this request, or None when the caller has no
            structured logger. The header stage then uses its fallback sink.
        request_id: Optional identifier used for log correlation.
    """

    log: DiagnosticSink | None = None
    request_id: str | None = None

    @classmethod
    def for_request(cls, request_id: str, logger: logging.Logger) -> DiagnosticContext:
        """Build a context whose sink tags every record with ``request_id``."""
        return cls(log=LoggerSink(logger, correlation_id=request_id), request_id=request_id)

    @classmethod
    def from_host(cls, host_context: Any) -> DiagnosticContext:
        """Build a context from a host pipeline object shaped like ``ctx.req.log``.

        The lookup happens once here; a missing ``req`` or ``log`` yields a
        context without a sink.
        """
        req = getattr(host_context, "req", None)
        log = getattr(req, "log", None)
        if log is None or not callable(getattr(log, "info", None)):
            return cls()
        return cls(log=HostLogSink(log), request_id=getattr(req, "id", None))
