from typing import Any

from gogrid_adapter.core.utils import setup_logger
from gogrid_adapter.providers.exceptions import (
    ConfigurationError,
    NotFoundError,
    ParseError,
)
from gogrid_adapter.providers.provider_base import DataCenterServices
from gogrid_adapter.providers.provider_types import DataCenter, Region
from gogrid_adapter.providers.region_cache import RegionCache

logger = setup_logger(name="providers.gogrid_dc")


class GoGridDataCenterServices(DataCenterServices):
    """
    Region and data center discovery based on the GoGrid lookup API.

    GoGrid calls its regions "datacenters" and has nothing below them, so
    each region gets one synthetic data center whose id is the region id
    with an "a" appended.
    """

    def __init__(self, provider, region_cache: RegionCache):
        self.provider = provider
        self.region_cache = region_cache

    def get_provider_term_for_region(self) -> str:
        return "region"

    def get_provider_term_for_data_center(self) -> str:
        return "data center"

    def list_regions(self) -> tuple[Region, ...]:
        ctx = self.provider.get_context()
        if ctx is None or not ctx.endpoint:
            raise ConfigurationError("No region was set for this request")

        cached = self.region_cache.get(ctx.endpoint)
        if cached is not None:
            return cached

        method = self.provider.get_method()
        # GoGrid has always been asked for load balancer types first;
        # the answer is not used.
        method.lookup("loadbalancer.type")
        region_list = method.lookup("datacenter")

        if region_list is None:
            return ()

        # {"summary": {"total": 3, "start": 0, "numpages": 0, "returned": 3},
        #  "status": "success", "method": "/common/lookup/list",
        #  "list": [{"id": 1, "description": "US West 1 Datacenter", "name": "US-West-1", "object": "option"}, ...]}
        regions = []
        for entry in region_list:
            region = self._to_region(entry)
            if region is not None:
                regions.append(region)

        logger.debug(f"Loaded {len(regions)} regions from {ctx.endpoint}")
        return self.region_cache.put(ctx.endpoint, regions)

    def get_region(self, region_id: str) -> Region | None:
        for region in self.list_regions():
            if region.region_id == region_id:
                return region
        return None

    def list_data_centers(self, region_id: str) -> tuple[DataCenter, ...]:
        region = self.get_region(region_id)
        if region is None:
            raise NotFoundError(f"No such region: {region_id}")
        return (DataCenter.for_region(region),)

    def get_data_center(self, data_center_id: str) -> DataCenter | None:
        for region in self.list_regions():
            dc = DataCenter.for_region(region)
            if dc.data_center_id == data_center_id:
                return dc
        return None

    @staticmethod
    def _get_string(entry: dict, key: str) -> str | None:
        value = entry.get(key)
        if value is None:
            return None
        # bool is an int subclass but never a valid id or name
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            logger.error(f"Failed to parse JSON from cloud: '{key}' is {type(value).__name__}")
            raise ParseError(f"Expected a string for '{key}', got {value!r}")
        return str(value)

    def _to_region(self, entry: Any) -> Region | None:
        if not isinstance(entry, dict):
            logger.error(f"Failed to parse JSON from cloud: expected an object, got {entry!r}")
            raise ParseError(f"Expected a region object, got {entry!r}")

        region_id = self._get_string(entry, "id")
        description = self._get_string(entry, "description")
        name = self._get_string(entry, "name")
        if name is None:
            name = description

        if region_id is None:
            return None
        if name is None:
            name = region_id

        jurisdiction = name[:2] if len(name) > 2 else "US"
        return Region(region_id=region_id, name=name, jurisdiction=jurisdiction)
