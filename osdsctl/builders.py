"""Build request payloads from validated arguments and bound options."""
from .models import ExtendVolumeRequest, VolumeFilter, VolumeOptions, VolumeRequest


def build_create_request(size: int, options: VolumeOptions) -> VolumeRequest:
    # snapshot_from_cloud passes through even without a snapshot id
    return VolumeRequest(
        name=options.name,
        description=options.description,
        availability_zone=options.availability_zone,
        size=size,
        profile_id=options.profile_id,
        pool_id=options.pool_id,
        snapshot_id=options.snapshot_id,
        snapshot_from_cloud=options.snapshot_from_cloud,
    )


def build_update_request(options: VolumeOptions) -> VolumeRequest:
    """Partial update: only name and description are ever sent."""
    return VolumeRequest(name=options.name, description=options.description)


def build_delete_request(options: VolumeOptions) -> VolumeRequest:
    return VolumeRequest(profile_id=options.profile_id)


def build_extend_request(new_size: int) -> ExtendVolumeRequest:
    return ExtendVolumeRequest(new_size=new_size)


def build_list_filter(options: VolumeOptions) -> VolumeFilter:
    return VolumeFilter(
        limit=options.limit,
        offset=options.offset,
        sort_dir=options.sort_dir,
        sort_key=options.sort_key,
        volume_id=options.volume_id,
        name=options.name,
        description=options.description,
        tenant_id=options.tenant_id,
        user_id=options.user_id,
        availability_zone=options.availability_zone,
        status=options.status,
        pool_id=options.pool_id,
        profile_id=options.profile_id,
        group_id=options.group_id,
    )
