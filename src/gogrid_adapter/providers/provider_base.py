from abc import ABC, abstractmethod
from collections.abc import Sequence

from gogrid_adapter.providers.provider_types import DataCenter, Region


class DataCenterServices(ABC):
    """Abstract base class for region and data center discovery"""

    @abstractmethod
    def list_regions(self) -> Sequence[Region]:
        """Get all regions for the active endpoint"""
        pass

    @abstractmethod
    def get_region(self, region_id: str) -> Region | None:
        """Get a region by id, or None if it does not exist"""
        pass

    @abstractmethod
    def list_data_centers(self, region_id: str) -> Sequence[DataCenter]:
        """
        Get the data centers of a region

        Args:
            region_id: Id of the region to list

        Raises:
            NotFoundError: if the region does not exist
        """
        pass

    @abstractmethod
    def get_data_center(self, data_center_id: str) -> DataCenter | None:
        """Get a data center by id, or None if it does not exist"""
        pass

    @abstractmethod
    def get_provider_term_for_region(self) -> str:
        """What the provider calls a region"""
        pass

    @abstractmethod
    def get_provider_term_for_data_center(self) -> str:
        """What the provider calls a data center"""
        pass
