import logging
from typing import List, NoReturn, Optional

import typer

from osdsctl.builders import (
    build_create_request, build_delete_request, build_extend_request,
    build_list_filter, build_update_request,
)
from osdsctl.client import VolumeClient
from osdsctl.config import ClientSettings
from osdsctl.exceptions import OsdsctlError, UsageError, strip_http_error
from osdsctl.models import SortDir, SortKey, VolumeOptions
from osdsctl.output import KeyList, json_formatter, print_dict, print_list
from osdsctl.validators import check_args_num, parse_non_negative, parse_size

logger = logging.getLogger(__name__)

app = typer.Typer(help="manage volumes in the cluster", invoke_without_command=True)

vol_formatters = {"Metadata": json_formatter}

CREATE_KEYS: KeyList = ["Id", "CreatedAt", "Name", "Description", "Size", "AvailabilityZone",
                        "Status", "PoolId", "ProfileId", "Metadata", "GroupId", "MultiAttach"]
SHOW_KEYS: KeyList = ["Id", "CreatedAt", "UpdatedAt", "Name", "Description", "Size",
                      "AvailabilityZone", "Status", "PoolId", "ProfileId", "Metadata", "GroupId",
                      "SnapshotId", "MultiAttach"]
LIST_KEYS: KeyList = ["Id", "Name", "Description", "Size", "Status", "ProfileId", "AvailabilityZone"]
UPDATE_KEYS: KeyList = ["Id", "UpdatedAt", "Name", "Description", "Size", "AvailabilityZone",
                        "Status", "PoolId", "ProfileId", "Metadata", "GroupId", "MultiAttach"]
EXTEND_KEYS: KeyList = ["Id", "CreatedAt", "UpdatedAt", "Name", "Description", "Size",
                        "AvailabilityZone", "Status", "PoolId", "ProfileId", "Metadata", "GroupId",
                        "MultiAttach"]


def get_client(ctx: typer.Context):
    """Return the injected client, or build one from the resolved settings."""
    obj = ctx.ensure_object(dict)
    if obj.get("client") is None:
        overrides = obj.get("overrides", {})
        try:
            settings = ClientSettings.resolve(**overrides)
        except ValueError as e:
            raise OsdsctlError(str(e)) from e
        obj["client"] = VolumeClient(settings)
    return obj["client"]


def fail(ctx: typer.Context, err: OsdsctlError) -> NoReturn:
    """Report a failed stage and terminate the invocation."""
    logger.debug(f"{ctx.command_path} failed: {err!r}")
    if isinstance(err, UsageError):
        typer.echo(str(err), err=True)
        typer.echo(ctx.get_usage(), err=True)
    else:
        typer.echo(f"Error: {strip_http_error(err)}", err=True)
    raise typer.Exit(code=1)


def _profile(ctx: typer.Context, local: str) -> str:
    return local or ctx.ensure_object(dict).get("profile", "")


@app.callback()
def volume(
    ctx: typer.Context,
    profile: str = typer.Option("", "--profile", "-p", help="the id of profile configured by admin"),
):
    """manage volumes in the cluster"""
    ctx.ensure_object(dict)["profile"] = profile
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_usage())
        raise typer.Exit(code=1)


@app.command("create")
def create_volume(
    ctx: typer.Context,
    args: Optional[List[str]] = typer.Argument(None, metavar="<size>"),
    name: str = typer.Option("", "--name", "-n", help="the name of created volume"),
    description: str = typer.Option("", "--description", "-d", help="the description of created volume"),
    az: str = typer.Option("", "--az", "-a", help="the availability zone of created volume"),
    snapshot: str = typer.Option("", "--snapshot", "-s", help="the snapshot to create volume"),
    pool: str = typer.Option("", "--pool", "-l", help="the pool to create volume"),
    snapshot_from_cloud: bool = typer.Option(False, "--snapshotFromCloud", "-c", help="download snapshot from cloud"),
    profile: str = typer.Option("", "--profile", "-p", help="the id of profile configured by admin"),
):
    """create a volume in the cluster

    Example: osdsctl volume create 1 --name vol-name
    """
    try:
        args = check_args_num(args, 1)
        size = parse_size(args[0])
        options = VolumeOptions(
            name=name,
            description=description,
            availability_zone=az,
            profile_id=_profile(ctx, profile),
            pool_id=pool,
            snapshot_id=snapshot,
            snapshot_from_cloud=snapshot_from_cloud,
        )
        resp = get_client(ctx).create_volume(build_create_request(size, options))
    except OsdsctlError as err:
        fail(ctx, err)
    print_dict(resp, CREATE_KEYS, vol_formatters)


@app.command("show")
def show_volume(
    ctx: typer.Context,
    args: Optional[List[str]] = typer.Argument(None, metavar="<id>"),
):
    """show a volume in the cluster"""
    try:
        args = check_args_num(args, 1)
        resp = get_client(ctx).get_volume(args[0])
    except OsdsctlError as err:
        fail(ctx, err)
    print_dict(resp, SHOW_KEYS, vol_formatters)


@app.command("list")
def list_volumes(
    ctx: typer.Context,
    args: Optional[List[str]] = typer.Argument(None, hidden=True),
    limit: str = typer.Option("50", "--limit", help="the number of entries displayed per page"),
    offset: str = typer.Option("0", "--offset", help="all requested data offsets"),
    sort_dir: SortDir = typer.Option(
        SortDir.DESC, "--sortDir", case_sensitive=False,
        help="the sort direction of all requested data. supports asc or desc(default)",
    ),
    sort_key: SortKey = typer.Option(
        SortKey.ID, "--sortKey", case_sensitive=False,
        help="the sort key of all requested data. supports id(default), name, status, "
             "availabilityzone, profileid, tenantid, size, poolid, description",
    ),
    volume_id: str = typer.Option("", "--id", help="list volume by id"),
    name: str = typer.Option("", "--name", help="list volume by name"),
    description: str = typer.Option("", "--description", help="list volume by description"),
    tenant_id: str = typer.Option("", "--tenantId", help="list volume by tenantId"),
    user_id: str = typer.Option("", "--userId", help="list volume by storage userId"),
    status: str = typer.Option("", "--status", help="list volume by status"),
    pool_id: str = typer.Option("", "--poolId", help="list volume by poolId"),
    availability_zone: str = typer.Option("", "--availabilityZone", help="list volume by availability zone"),
    profile_id: str = typer.Option("", "--profileId", help="list volume by profile id"),
    group_id: str = typer.Option("", "--groupId", help="list volume by volume group id"),
):
    """list all volumes in the cluster"""
    try:
        check_args_num(args, 0)
        options = VolumeOptions(
            limit=parse_non_negative(limit, "limit"),
            offset=parse_non_negative(offset, "offset"),
            sort_dir=sort_dir,
            sort_key=sort_key,
            volume_id=volume_id,
            name=name,
            description=description,
            tenant_id=tenant_id,
            user_id=user_id,
            status=status,
            pool_id=pool_id,
            availability_zone=availability_zone,
            profile_id=profile_id,
            group_id=group_id,
        )
        resp = get_client(ctx).list_volumes(build_list_filter(options))
    except OsdsctlError as err:
        fail(ctx, err)
    print_list(resp, LIST_KEYS, vol_formatters)


@app.command("delete")
def delete_volume(
    ctx: typer.Context,
    args: Optional[List[str]] = typer.Argument(None, metavar="<id>"),
    profile: str = typer.Option("", "--profile", "-p", help="the id of profile configured by admin"),
):
    """delete a volume in the cluster"""
    try:
        args = check_args_num(args, 1)
        options = VolumeOptions(profile_id=_profile(ctx, profile))
        get_client(ctx).delete_volume(args[0], build_delete_request(options))
    except OsdsctlError as err:
        fail(ctx, err)


@app.command("update")
def update_volume(
    ctx: typer.Context,
    args: Optional[List[str]] = typer.Argument(None, metavar="<id>"),
    name: str = typer.Option("", "--name", "-n", help="the name of updated volume"),
    description: str = typer.Option("", "--description", "-d", help="the description of updated volume"),
):
    """update a volume in the cluster"""
    try:
        args = check_args_num(args, 1)
        options = VolumeOptions(name=name, description=description)
        resp = get_client(ctx).update_volume(args[0], build_update_request(options))
    except OsdsctlError as err:
        fail(ctx, err)
    print_dict(resp, UPDATE_KEYS, vol_formatters)


@app.command("extend")
def extend_volume(
    ctx: typer.Context,
    args: Optional[List[str]] = typer.Argument(None, metavar="<id> <new size>"),
):
    """extend a volume in the cluster"""
    try:
        args = check_args_num(args, 2)
        new_size = parse_size(args[1], "new size")
        resp = get_client(ctx).extend_volume(args[0], build_extend_request(new_size))
    except OsdsctlError as err:
        fail(ctx, err)
    print_dict(resp, EXTEND_KEYS, vol_formatters)
