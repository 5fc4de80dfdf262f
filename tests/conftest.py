from unittest.mock import MagicMock

import pytest


def make_cursor(docs=None):
    """A find() cursor double whose chained calls return itself."""
    cursor = MagicMock(name="cursor")
    cursor.sort.return_value = cursor
    cursor.skip.return_value = cursor
    cursor.limit.return_value = cursor
    cursor.__iter__.side_effect = lambda: iter(list(docs or []))
    return cursor


@pytest.fixture()
def books():
    """A ``books`` collection double with realistic write/explain/index results."""
    collection = MagicMock(name="books")
    collection.name = "books"
    collection.find.side_effect = lambda *args, **kwargs: make_cursor()
    collection.aggregate.side_effect = lambda *args, **kwargs: iter([])
    collection.update_one.return_value = MagicMock(matched_count=1, modified_count=1)
    collection.delete_one.return_value = MagicMock(deleted_count=1)
    collection.database.command.return_value = {
        "executionStats": {
            "nReturned": 1,
            "executionTimeMillis": 0,
            "totalDocsExamined": 1,
            "totalKeysExamined": 1,
        }
    }
    collection.create_index.side_effect = lambda keys: "_".join(
        f"{field}_{direction}" for field, direction in keys
    )
    collection.index_information.return_value = {
        "_id_": {"key": [("_id", 1)]},
        "title_1": {"key": [("title", 1)]},
    }
    return collection
