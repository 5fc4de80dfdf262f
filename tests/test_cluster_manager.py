"""Unit tests for connection handling."""

from unittest.mock import MagicMock, patch

import pytest
from pymongo.errors import ConnectionFailure, ServerSelectionTimeoutError

import cluster_manager


@patch("cluster_manager.MongoClient")
def test_connect_checks_server(mock_client_cls):
    client = mock_client_cls.return_value

    assert cluster_manager.connect_to_cluster("mongodb://localhost:27017") is client

    mock_client_cls.assert_called_once_with(
        "mongodb://localhost:27017",
        serverSelectionTimeoutMS=cluster_manager.SERVER_SELECTION_TIMEOUT_MS,
    )
    client.server_info.assert_called_once_with()


@pytest.mark.parametrize(
    "error, message",
    [
        (ServerSelectionTimeoutError("no servers"), "timed out"),
        (ConnectionFailure("refused"), "Failed to connect"),
    ],
)
@patch("cluster_manager.MongoClient")
def test_connect_failure_closes_client(mock_client_cls, error, message):
    client = mock_client_cls.return_value
    client.server_info.side_effect = error

    with pytest.raises(ConnectionError, match=message):
        cluster_manager.connect_to_cluster("mongodb://localhost:27017")

    client.close.assert_called_once_with()


def test_get_collection():
    client = MagicMock()

    collection = cluster_manager.get_collection(client, "plp_bookstore", "books")

    client.__getitem__.assert_called_once_with("plp_bookstore")
    client.__getitem__.return_value.__getitem__.assert_called_once_with("books")
    assert collection is client.__getitem__.return_value.__getitem__.return_value
