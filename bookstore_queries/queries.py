"""
Query specifications for the bookstore walkthrough.

Builders return plain dicts that ``db_executor.execute_query`` consumes:

  - find:      ``{"type": "find", "filter", "projection", "sort", "skip", "limit"}``
  - aggregate: ``{"type": "aggregate", "pipeline"}``

``sort`` is a list of ``(field, direction)`` pairs, matching what
``Cursor.sort`` accepts.
"""

from typing import Any, Dict, List, Optional, Tuple

from pymongo import ASCENDING, DESCENDING

# ---------------------- DEMO PARAMETERS ----------------------

DEFAULT_GENRE = "Fiction"
DEFAULT_AFTER_YEAR = 1960
DEFAULT_AUTHOR = "Harper Lee"

UPDATE_TITLE = "To Kill a Mockingbird"
NEW_PRICE = 35.55
DELETE_TITLE = "The Great Gatsby"

IN_STOCK_AFTER_YEAR = 2010
PRICE_LIMIT = 10
PER_PAGE = 5

EXPLAIN_TITLE = "Wuthering Heights"

TITLE_INDEX: List[Tuple[str, int]] = [("title", ASCENDING)]
AUTHOR_YEAR_INDEX: List[Tuple[str, int]] = [
    ("author", ASCENDING),
    ("published_year", DESCENDING),
]


# ---------------------- FIND SPECS ----------------------

def _find(
    mongo_filter: Optional[Dict[str, Any]] = None,
    projection: Optional[Dict[str, int]] = None,
    sort: Optional[List[Tuple[str, int]]] = None,
    skip: int = 0,
    limit: int = 0,
) -> Dict[str, Any]:
    return {
        "type": "find",
        "filter": mongo_filter or {},
        "projection": projection,
        "sort": sort,
        "skip": skip,
        "limit": limit,
    }


def books_in_genre(genre: str = DEFAULT_GENRE) -> Dict[str, Any]:
    return _find({"genre": genre})


def books_published_after(year: int = DEFAULT_AFTER_YEAR) -> Dict[str, Any]:
    return _find({"published_year": {"$gt": year}})


def books_by_author(author: str = DEFAULT_AUTHOR) -> Dict[str, Any]:
    return _find({"author": author})


def in_stock_published_after(year: int = IN_STOCK_AFTER_YEAR) -> Dict[str, Any]:
    """In-stock books newer than ``year``, projected to title, author and price."""
    return _find(
        {"in_stock": True, "published_year": {"$gt": year}},
        projection={"title": 1, "author": 1, "price": 1, "_id": 0},
    )


def sorted_by_price(direction: int = ASCENDING, limit: int = PRICE_LIMIT) -> Dict[str, Any]:
    return _find(sort=[("price", direction)], limit=limit)


def page_of_books(page: int, per_page: int = PER_PAGE) -> Dict[str, Any]:
    """One page of the unfiltered collection. Pages are 1-based."""
    page = max(1, page)
    return _find(skip=(page - 1) * per_page, limit=per_page)


def title_lookup(title: str = EXPLAIN_TITLE) -> Dict[str, Any]:
    return {"title": title}


# ---------------------- AGGREGATION PIPELINES ----------------------

def _aggregate(pipeline: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {"type": "aggregate", "pipeline": pipeline}


def average_price_by_genre() -> Dict[str, Any]:
    return _aggregate([
        {"$group": {
            "_id": "$genre",
            "avgPrice": {"$avg": "$price"},
            "count": {"$sum": 1},
        }},
        {"$sort": {"avgPrice": DESCENDING}},
    ])


def author_with_most_books() -> Dict[str, Any]:
    return _aggregate([
        {"$group": {"_id": "$author", "count": {"$sum": 1}}},
        {"$sort": {"count": DESCENDING}},
        {"$limit": 1},
    ])


def books_by_decade() -> Dict[str, Any]:
    """Count books per publication decade (1960, 1970, ...), oldest first."""
    return _aggregate([
        {"$addFields": {
            "decadeStart": {
                "$multiply": [
                    {"$floor": {"$divide": ["$published_year", 10]}},
                    10,
                ],
            },
        }},
        {"$group": {"_id": "$decadeStart", "count": {"$sum": 1}}},
        {"$sort": {"_id": ASCENDING}},
    ])
