"""Data models for volume requests and list filters."""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping


# A volume as returned by the control plane, keyed by camelCase wire names
VolumeRecord = Mapping[str, Any]


class SortKey(str, Enum):
    """Fields the control plane can sort volume listings by."""
    ID = 'id'
    NAME = 'name'
    STATUS = 'status'
    AVAILABILITY_ZONE = 'availabilityzone'
    PROFILE_ID = 'profileid'
    TENANT_ID = 'tenantid'
    SIZE = 'size'
    POOL_ID = 'poolid'
    DESCRIPTION = 'description'


class SortDir(str, Enum):
    """Sort direction of volume listings."""
    ASC = 'asc'
    DESC = 'desc'


@dataclass(frozen=True)
class VolumeOptions:
    """Flag values bound for one subcommand invocation.

    Each subcommand fills in only the flags it declares; the rest keep
    their zero values.
    """
    name: str = ''
    description: str = ''
    availability_zone: str = ''
    profile_id: str = ''
    pool_id: str = ''
    snapshot_id: str = ''
    snapshot_from_cloud: bool = False
    # list only
    limit: str = '50'
    offset: str = '0'
    sort_dir: SortDir = SortDir.DESC
    sort_key: SortKey = SortKey.ID
    volume_id: str = ''
    tenant_id: str = ''
    user_id: str = ''
    status: str = ''
    group_id: str = ''


@dataclass(frozen=True)
class VolumeRequest:
    """Payload of a create, update or delete call."""
    name: str = ''
    description: str = ''
    size: int = 0
    availability_zone: str = ''
    profile_id: str = ''
    pool_id: str = ''
    snapshot_id: str = ''
    snapshot_from_cloud: bool = False

    def to_body(self) -> Dict[str, Any]:
        """Serialize to the wire shape, leaving out unset fields."""
        body = {
            'name': self.name,
            'description': self.description,
            'size': self.size,
            'availabilityZone': self.availability_zone,
            'profileId': self.profile_id,
            'poolId': self.pool_id,
            'snapshotId': self.snapshot_id,
            'snapshotFromCloud': self.snapshot_from_cloud,
        }
        return {k: v for k, v in body.items() if v}


@dataclass(frozen=True)
class ExtendVolumeRequest:
    """Payload of an extend call."""
    new_size: int

    def to_body(self) -> Dict[str, Any]:
        return {'newSize': self.new_size}


@dataclass(frozen=True)
class VolumeFilter:
    """Query of a list call: pagination, sort spec and equality filters."""
    limit: str = '50'
    offset: str = '0'
    sort_dir: SortDir = SortDir.DESC
    sort_key: SortKey = SortKey.ID
    volume_id: str = ''
    name: str = ''
    description: str = ''
    tenant_id: str = ''
    user_id: str = ''
    availability_zone: str = ''
    status: str = ''
    pool_id: str = ''
    profile_id: str = ''
    group_id: str = ''

    def to_query(self) -> Dict[str, str]:
        """Map every filter to its wire key, empty values included."""
        return {
            'limit': self.limit,
            'offset': self.offset,
            'sortDir': self.sort_dir.value,
            'sortKey': self.sort_key.value,
            'Id': self.volume_id,
            'Name': self.name,
            'Description': self.description,
            'TenantId': self.tenant_id,
            'UserId': self.user_id,
            'AvailabilityZone': self.availability_zone,
            'Status': self.status,
            'PoolId': self.pool_id,
            'ProfileId': self.profile_id,
            'GroupId': self.group_id,
        }
