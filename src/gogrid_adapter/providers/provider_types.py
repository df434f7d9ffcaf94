from dataclasses import dataclass
from enum import Enum


class CloudErrorType(Enum):
    GENERAL = "general"
    AUTHENTICATION = "authentication"
    COMMUNICATION = "communication"
    CAPACITY = "capacity"
    QUOTA = "quota"
    THROTTLING = "throttling"


@dataclass(frozen=True)
class Region:
    region_id: str
    name: str
    jurisdiction: str = "US"
    active: bool = True
    available: bool = True


@dataclass(frozen=True)
class DataCenter:
    data_center_id: str
    name: str
    region_id: str
    active: bool = True
    available: bool = True

    @classmethod
    def for_region(cls, region: Region) -> "DataCenter":
        """GoGrid has no zones, so every region carries exactly one data center"""
        return cls(
            data_center_id=region.region_id + "a",
            name=region.name + "a",
            region_id=region.region_id,
        )


@dataclass(frozen=True)
class ErrorDescriptor:
    http_status_code: int
    provider_code: str
    message: str = ""
    error_type: CloudErrorType = CloudErrorType.GENERAL
