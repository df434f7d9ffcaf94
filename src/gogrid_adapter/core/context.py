from dataclasses import dataclass


@dataclass(frozen=True)
class ProviderContext:
    """Connection details for one GoGrid account on one API endpoint."""

    endpoint: str
    api_key: str | None = None
    shared_secret: str | None = None
    api_version: str = "1.9"
    timeout: float = 30.0

    def has_credentials(self) -> bool:
        return bool(self.api_key and self.shared_secret)
