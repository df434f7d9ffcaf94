import pytest

from gogrid_adapter.core.context import ProviderContext
from gogrid_adapter.providers.gogrid_provider import GoGridProvider
from gogrid_adapter.providers.region_cache import RegionCache

ENDPOINT = "https://api.gogrid.test/api"


class FakeMethod:
    """Stands in for GoGridMethod, answering lookups from a dict"""

    def __init__(self, answers=None, errors=None, hooks=None):
        self.answers = answers or {}
        self.errors = errors or {}
        self.hooks = hooks or {}
        self.calls = []

    def lookup(self, category, **params):
        self.calls.append(category)
        if category in self.hooks:
            self.hooks[category]()
        if category in self.errors:
            raise self.errors[category]
        return self.answers.get(category)


@pytest.fixture
def context():
    return ProviderContext(endpoint=ENDPOINT, api_key="key", shared_secret="secret")


@pytest.fixture
def region_cache():
    return RegionCache()


@pytest.fixture
def region_payload():
    return [
        {"id": 1, "description": "US West 1 Datacenter", "name": "US-West-1", "object": "option"},
        {"id": 2, "description": "US East 1 Datacenter", "name": "US-East-1", "object": "option"},
        {"id": 3, "description": "EU-West-1 Datacenter", "name": "EU-West-1", "object": "option"},
    ]


@pytest.fixture
def method(region_payload):
    return FakeMethod({"loadbalancer.type": [], "datacenter": region_payload})


@pytest.fixture
def make_services(context, region_cache):
    """Build services whose datacenter lookup answers with the given payload"""

    def _make(payload, errors=None, hooks=None):
        fake = FakeMethod({"datacenter": payload}, errors=errors, hooks=hooks)
        provider = GoGridProvider(context, method=fake, region_cache=region_cache)
        return provider.get_data_center_services(), fake

    return _make


@pytest.fixture
def provider(context, method, region_cache):
    return GoGridProvider(context, method=method, region_cache=region_cache)


@pytest.fixture
def services(provider):
    return provider.get_data_center_services()
