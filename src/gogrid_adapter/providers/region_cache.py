import threading
from collections.abc import Iterable

from gogrid_adapter.providers.provider_types import Region


class RegionCache:
    """
    Region lists keyed by API endpoint.

    Reads take no lock. Writers are serialized and the last writer wins;
    concurrent misses for the same endpoint may each fetch, which is harmless
    because the region list is a function of the endpoint alone. Entries are
    never evicted.
    """

    def __init__(self):
        self._entries: dict[str, tuple[Region, ...]] = {}
        self._lock = threading.Lock()

    def get(self, endpoint: str) -> tuple[Region, ...] | None:
        return self._entries.get(endpoint)

    def put(self, endpoint: str, regions: Iterable[Region]) -> tuple[Region, ...]:
        frozen = tuple(regions)
        with self._lock:
            self._entries[endpoint] = frozen
        return frozen


# Shared by every provider in the process unless one is given its own cache
shared_region_cache = RegionCache()
