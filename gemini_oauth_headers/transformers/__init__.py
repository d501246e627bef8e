"""Provider request transformers.

Each transformer is one stage of the host pipeline. The Gemini OAuth header
stage must run after the base Gemini stage.
"""

from gemini_oauth_headers.transformers.base import (
    HeaderPatch,
    HeaderValue,
    ProviderTransformer,
    RemoveHeader,
    SetHeader,
    TransformOutcome,
)
from gemini_oauth_headers.transformers.factory import TransformerFactory
from gemini_oauth_headers.transformers.gemini_oauth_headers import (
    API_KEY_HEADER,
    AUTHORIZATION_HEADER,
    GeminiOAuthHeadersTransformer,
)

__all__ = [
    "API_KEY_HEADER",
    "AUTHORIZATION_HEADER",
    "GeminiOAuthHeadersTransformer",
    "HeaderPatch",
    "HeaderValue",
    "ProviderTransformer",
    "RemoveHeader",
    "SetHeader",
    "TransformOutcome",
    "TransformerFactory",
]
