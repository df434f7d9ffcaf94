from typing import ClassVar

from gogrid_adapter.core.settings import Settings
from gogrid_adapter.core.utils import setup_logger
from gogrid_adapter.providers.gogrid_provider import GoGridProvider

logger = setup_logger(name="providers.provider_factory")


class CloudProviderFactory:
    _instances: ClassVar[dict[tuple[str, str], GoGridProvider]] = {}

    @classmethod
    def get_provider(cls, settings: Settings | None = None) -> GoGridProvider:
        """
        Get a provider instance. Returns cached instance if available.
        Args:
            settings: Settings to build the provider from; read from the
                environment when omitted
        Returns:
            GoGridProvider for the configured endpoint and API key
        """
        if settings is None:
            settings = Settings()
        settings.apply_logging()

        key = (settings.GOGRID_ENDPOINT, settings.GOGRID_API_KEY)
        if key in cls._instances:
            return cls._instances[key]

        logger.info(f"Creating GoGrid provider for {settings.GOGRID_ENDPOINT}")
        provider = GoGridProvider(settings.to_context())
        cls._instances[key] = provider
        return provider

    @classmethod
    def clear_cache(cls):
        """Clear all cached provider instances"""
        cls._instances.clear()
