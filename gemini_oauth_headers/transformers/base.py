"""Base infrastructure for provider request transformers.

This module defines the contract shared by every stage:
- SetHeader / RemoveHeader: tagged header values of a patch
- HeaderPatch: header changes a stage asks the transport layer to apply
- TransformOutcome: body plus optional header patch returned by a stage
- ProviderTransformer: abstract base for stages
"""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from collections.abc import Mapping, MutableMapping
from typing import Any, Union

from gemini_oauth_headers.core.diagnostics import DiagnosticContext
from gemini_oauth_headers.core.provider_config import ProviderConfig


@dataclasses.dataclass(frozen=True)
class SetHeader:
    """Send the header with this value."""

    value: str


@dataclasses.dataclass(frozen=True)
class RemoveHeader:
    """Drop the header even if an earlier stage set it."""


HeaderValue = Union[SetHeader, RemoveHeader]


@dataclasses.dataclass(frozen=True)
class HeaderPatch:
    """Ordered header changes for the transport layer.

    Attributes:
        headers: Mapping of header name to SetHeader or RemoveHeader.
    """

    headers: Mapping[str, HeaderValue]

    def to_wire(self) -> dict[str, str | None]:
        """Serialize to the pipeline format, where None means "drop this header".

        A removed header must never be sent as a literal string; the
        transport layer relies on None to tell the two apart.
        """
        return {
            name: value.value if isinstance(value, SetHeader) else None
            for name, value in self.headers.items()
        }

    def apply(self, headers: MutableMapping[str, str]) -> MutableMapping[str, str]:
        """Apply the patch in place and return the same mapping.

        Header names match case-insensitively, so this works for plain dicts
        as well as ``httpx.Headers``.
        """
        for name, value in self.headers.items():
            for existing in [key for key in headers if key.lower() == name.lower()]:
                del headers[existing]
            if isinstance(value, SetHeader):
                headers[name] = value.value
        return headers


@dataclasses.dataclass(frozen=True)
class TransformOutcome:
    """Result of a request-inbound stage.

    Attributes:
        body: The request body, returned by reference.
        header_patch: Header changes, or None for a pure pass-through.
    """

    body: Any
    header_patch: HeaderPatch | None = None

    @property
    def is_passthrough(self) -> bool:
        return self.header_patch is None

    def to_wire(self) -> dict[str, Any]:
        """Serialize to ``{body, config?: {headers}}``."""
        if self.header_patch is None:
            return {"body": self.body}
        return {"body": self.body, "config": {"headers": self.header_patch.to_wire()}}


class ProviderTransformer(ABC):
    """Base class for provider request/response stages.

    Stages must not mutate their inputs. ``runs_after`` lists the stage
    names that must have run before this one in the host pipeline.
    """

    runs_after: tuple[str, ...] = ()

    @abstractmethod
    def evaluate(
        self,
        request_body: Any,
        provider: ProviderConfig,
        context: DiagnosticContext | None = None,
    ) -> TransformOutcome:
        """Inspect the provider configuration and return the stage outcome.

        Args:
            request_body: Opaque request body; returned unchanged.
            provider: The provider configuration for this request.
            context: Optional per-request diagnostic context.

        Returns:
            A TransformOutcome carrying the body and optional header patch.
        """
        pass

    def on_response(self, response: Any, context: DiagnosticContext | None = None) -> Any:
        """Transform a provider response. Identity unless overridden."""
        return response

    async def transform_request_in(
        self,
        request_body: Any,
        provider: ProviderConfig,
        context: DiagnosticContext | None = None,
    ) -> TransformOutcome:
        """Async entry point for pipelines that await their stages."""
        return self.evaluate(request_body, provider, context)

    async def transform_response_out(
        self, response: Any, context: DiagnosticContext | None = None
    ) -> Any:
        return self.on_response(response, context)

    @property
    def name(self) -> str:
        """Human-readable name for logging and debugging.

        Defaults to the class name. Override for custom names.
        """
        return self.__class__.__name__
