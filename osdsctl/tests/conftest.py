from unittest.mock import Mock

import pytest
from typer.testing import CliRunner

from osdsctl.client import VolumeClient


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def spy_client():
    """Stand-in for the remote client that records every call."""
    client = Mock(spec=VolumeClient)
    client.create_volume.return_value = {"id": "vol-1", "name": "foo", "size": 100}
    client.get_volume.return_value = {"id": "vol-1", "name": "foo", "size": 100}
    client.list_volumes.return_value = [{"id": "vol-1", "name": "foo", "size": 1}]
    client.update_volume.return_value = {"id": "vol-1", "name": "bar", "size": 1}
    client.extend_volume.return_value = {"id": "vol-1", "name": "foo", "size": 20}
    client.delete_volume.return_value = None
    return client
