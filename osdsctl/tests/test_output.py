import json

from osdsctl.commands.volume import LIST_KEYS, SHOW_KEYS, vol_formatters
from osdsctl.output import print_dict, print_list, project, wire_key


def test_wire_key():
    assert wire_key("Id") == "id"
    assert wire_key("AvailabilityZone") == "availabilityZone"
    assert wire_key("MultiAttach") == "multiAttach"


def test_project_selects_declared_fields_in_order():
    record = {
        "id": "vol-1", "createdAt": "2017-10-24T15:04:05", "updatedAt": "2017-10-25T15:04:05",
        "name": "foo", "description": "d", "size": 1, "availabilityZone": "default",
        "status": "available", "poolId": "pool-1", "profileId": "prof-1",
        "metadata": {"k": "v"}, "groupId": "", "snapshotId": "snap-1", "multiAttach": False,
        "tenantId": "t1", "userId": "u1", "attachStatus": "detached", "extra": [1, 2],
    }
    row = project(record, SHOW_KEYS, vol_formatters)
    assert list(row) == SHOW_KEYS
    assert row["Id"] == "vol-1"
    assert row["SnapshotId"] == "snap-1"
    assert row["MultiAttach"] == "false"
    assert json.loads(row["Metadata"]) == {"k": "v"}


def test_project_renders_missing_fields_empty():
    row = project({"id": "vol-1"}, LIST_KEYS, vol_formatters)
    assert list(row) == LIST_KEYS
    assert row["Name"] == ""


def test_metadata_is_formatted_as_indented_json():
    row = project({"metadata": {"a": "1"}}, ["Metadata"], vol_formatters)
    assert row["Metadata"] == '{\n  "a": "1"\n}'


def test_print_dict_and_list(capsys):
    print_dict({"id": "vol-1", "name": "foo"}, ["Id", "Name"])
    print_list([{"id": "vol-2", "name": "bar"}], ["Id", "Name"])
    out = capsys.readouterr().out
    assert "Property" in out
    assert "vol-1" in out
    assert "vol-2" in out
    assert "bar" in out


def test_print_dict_shows_bracketed_values_verbatim(capsys):
    print_dict({"name": "[bold]prod[/bold]", "description": "see [docs]"}, ["Name", "Description"])
    out = capsys.readouterr().out
    assert "[bold]prod[/bold]" in out
    assert "see [docs]" in out


def test_print_list_with_unbalanced_closing_tag(capsys):
    print_list([{"id": "v1", "name": "a[/b]"}], ["Id", "Name"])
    assert "a[/b]" in capsys.readouterr().out
