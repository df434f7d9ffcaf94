from gogrid_adapter.providers.provider_types import CloudErrorType, ErrorDescriptor


class CloudError(Exception):
    """Base exception for everything raised while talking to GoGrid"""

    pass


class ConfigurationError(CloudError):
    """No endpoint or credentials were configured for the request"""

    pass


class NotFoundError(CloudError):
    """A referenced region does not exist"""

    pass


class ParseError(CloudError):
    """GoGrid returned a payload that could not be understood"""

    pass


class TransportError(CloudError):
    """The request never produced an HTTP response"""

    pass


class GoGridError(CloudError):
    """
    An error response from GoGrid, either because of a fault on the GoGrid
    side or a problem with the request.
    """

    def __init__(self, descriptor: ErrorDescriptor):
        super().__init__(
            f"{descriptor.http_status_code} {descriptor.provider_code}: {descriptor.message}"
        )
        self.descriptor = descriptor

    @property
    def error_type(self) -> CloudErrorType:
        return self.descriptor.error_type

    @property
    def http_status_code(self) -> int:
        return self.descriptor.http_status_code

    @property
    def provider_code(self) -> str:
        return self.descriptor.provider_code

    @property
    def message(self) -> str:
        return self.descriptor.message
