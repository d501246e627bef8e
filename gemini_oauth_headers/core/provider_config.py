from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ProviderConfig:
    """Configuration for a single Gemini provider entry.

    ``use_oauth_token`` keeps whatever value the configuration supplied;
    only the boolean ``True`` enables OAuth mode.
    """

    name: str
    api_key: str | None = None
    use_oauth_token: Any = False
    api_base_url: str | None = None
    models: tuple[str, ...] = field(default_factory=tuple)

    @property
    def uses_oauth(self) -> bool:
        """Check if this provider opted into OAuth Bearer authentication"""
        # "true" or 1 from loose config parsing must not enable OAuth
        return self.use_oauth_token is True

    def __post_init__(self) -> None:
        """Validate configuration after initialization"""
        if not self.name:
            raise ValueError("Provider name is required")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ProviderConfig":
        """Build a config from a provider entry of the JSON configuration.

        Accepts both ``api_key`` and ``apiKey``; an empty ``api_key`` falls
        back to ``apiKey``. Unknown fields are ignored.
        """
        return cls(
            name=data.get("name", ""),
            api_key=data.get("api_key") or data.get("apiKey"),
            use_oauth_token=data.get("useOAuthToken", False),
            api_base_url=data.get("api_base_url"),
            models=tuple(data.get("models") or ()),
        )
