from gogrid_adapter.core.context import ProviderContext
from gogrid_adapter.core.utils import setup_logger
from gogrid_adapter.providers.gogrid_dc import GoGridDataCenterServices
from gogrid_adapter.providers.gogrid_method import GoGridMethod
from gogrid_adapter.providers.region_cache import RegionCache, shared_region_cache

logger = setup_logger(name="providers.gogrid_provider")


class GoGridProvider:
    """Entry point for one GoGrid account: holds the context and hands out services"""

    def __init__(
        self,
        context: ProviderContext | None,
        method: GoGridMethod | None = None,
        region_cache: RegionCache | None = None,
    ):
        self.context = context
        self._method = method
        self.region_cache = region_cache if region_cache is not None else shared_region_cache
        self._data_center_services: GoGridDataCenterServices | None = None

    def get_context(self) -> ProviderContext | None:
        return self.context

    def get_method(self) -> GoGridMethod:
        if self._method is None:
            self._method = GoGridMethod(self.context)
        return self._method

    def get_data_center_services(self) -> GoGridDataCenterServices:
        if self._data_center_services is None:
            self._data_center_services = GoGridDataCenterServices(self, self.region_cache)
        return self._data_center_services
