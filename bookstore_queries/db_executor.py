"""
Database executor: runs query specs, writes, explain and index creation
against a single collection.
"""

from typing import Any, Dict, List, Sequence, Tuple

from pymongo.collection import Collection
from pymongo.errors import ExecutionTimeout

from logger import logger

# ---------------------- CONSTANTS ----------------------

QUERY_TIMEOUT_MS = 5000
EXPLAIN_VERBOSITY = "executionStats"


# ---------------------- QUERIES ----------------------

def execute_query(collection: Collection, mongo_query: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Execute a find or aggregate spec and return the matching documents."""
    query_type = mongo_query.get("type")

    try:
        if query_type == "find":
            cursor = collection.find(
                mongo_query.get("filter", {}),
                mongo_query.get("projection"),
                max_time_ms=QUERY_TIMEOUT_MS,
            )

            if mongo_query.get("sort"):
                cursor = cursor.sort(mongo_query["sort"])
            if mongo_query.get("skip"):
                cursor = cursor.skip(mongo_query["skip"])
            if mongo_query.get("limit"):
                cursor = cursor.limit(mongo_query["limit"])

            results = list(cursor)

        elif query_type == "aggregate":
            pipeline = list(mongo_query.get("pipeline", []))
            results = list(collection.aggregate(pipeline, maxTimeMS=QUERY_TIMEOUT_MS))

        else:
            raise ValueError(f"Unsupported query type: {query_type!r}")

    except ExecutionTimeout:
        raise TimeoutError("Query timed out after exceeding the time limit.")

    logger.debug("%s on %s returned %d documents", query_type, collection.name, len(results))
    return results


# ---------------------- WRITES ----------------------

def update_price(collection: Collection, title: str, price: float) -> Dict[str, int]:
    result = collection.update_one({"title": title}, {"$set": {"price": price}})
    logger.info("Updated price of %r: matched=%d modified=%d",
                title, result.matched_count, result.modified_count)
    return {"matched": result.matched_count, "modified": result.modified_count}


def delete_by_title(collection: Collection, title: str) -> Dict[str, int]:
    result = collection.delete_one({"title": title})
    logger.info("Deleted %r: deleted=%d", title, result.deleted_count)
    return {"deleted": result.deleted_count}


# ---------------------- EXPLAIN & INDEXES ----------------------

def explain_query(collection: Collection, mongo_filter: Dict[str, Any]) -> Dict[str, Any]:
    """Return the ``executionStats`` explain output for a find on ``mongo_filter``.

    ``Cursor.explain()`` always uses the server's default verbosity, so the
    ``explain`` command is issued directly to request execution statistics.
    """
    return collection.database.command(
        "explain",
        {"find": collection.name, "filter": mongo_filter},
        verbosity=EXPLAIN_VERBOSITY,
    )


def create_index(collection: Collection, keys: Sequence[Tuple[str, int]]) -> str:
    """Create an index and return its name (e.g. ``title_1``)."""
    name = collection.create_index(list(keys))
    logger.info("Index %s ready on %s", name, collection.name)
    return name


def list_indexes(collection: Collection) -> List[Dict[str, Any]]:
    """Return ``name``, ``keys`` and ``unique`` for every index on the collection."""
    indexes: List[Dict[str, Any]] = []
    for name, info in collection.index_information().items():
        indexes.append({
            "name": name,
            "keys": info.get("key", []),
            "unique": info.get("unique", False),
        })
    return indexes
