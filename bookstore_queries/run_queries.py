#!/usr/bin/env python3
"""
Bookstore query walkthrough
===========================

Usage:
    python run_queries.py

Connects to the MongoDB server configured in ``.env`` (see ``config.py``)
and runs, against the ``books`` collection:

  - basic filters, a price update and a delete
  - projection, sorting and pagination
  - aggregation pipelines (average price by genre, top author, decades)
  - explain before and after creating indexes

The update, the delete and the index creation modify the collection.
"""

import sys
from typing import Optional

from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.collection import Collection

import queries
from cluster_manager import connect_to_cluster, get_collection
from config import COLLECTION_NAME, DATABASE_NAME, MONGO_URI
from db_executor import (
    create_index,
    delete_by_title,
    execute_query,
    explain_query,
    list_indexes,
    update_price,
)
from logger import logger
from response_formatter import (
    author_rows,
    book_rows,
    console,
    decade_rows,
    genre_rows,
    render_section,
    render_summary,
    render_table,
    summarize_explain,
)


# ---------------------- SECTIONS ----------------------

def run_basic_queries(books: Collection) -> None:
    render_section("Basic queries")

    docs = execute_query(books, queries.books_in_genre(queries.DEFAULT_GENRE))
    render_table(
        f'Books in genre "{queries.DEFAULT_GENRE}":',
        book_rows(docs, {"title": "title", "author": "author", "published_year": "year"}),
    )

    docs = execute_query(books, queries.books_published_after(queries.DEFAULT_AFTER_YEAR))
    render_table(
        f"Books published after {queries.DEFAULT_AFTER_YEAR}:",
        book_rows(docs, {"title": "title", "published_year": "year"}),
    )

    docs = execute_query(books, queries.books_by_author(queries.DEFAULT_AUTHOR))
    render_table(
        f"Books by {queries.DEFAULT_AUTHOR}:",
        book_rows(docs, {"title": "title", "published_year": "year"}),
    )

    updated = update_price(books, queries.UPDATE_TITLE, queries.NEW_PRICE)
    render_summary(f'Update price of "{queries.UPDATE_TITLE}"', updated)

    deleted = delete_by_title(books, queries.DELETE_TITLE)
    render_summary(f'Delete "{queries.DELETE_TITLE}"', deleted)


def run_advanced_queries(books: Collection) -> None:
    render_section("Advanced queries")

    docs = execute_query(books, queries.in_stock_published_after(queries.IN_STOCK_AFTER_YEAR))
    render_table(
        f"In-stock and published after {queries.IN_STOCK_AFTER_YEAR} (title, author, price):",
        book_rows(docs, ["title", "author", "price"]),
    )

    cheapest = execute_query(books, queries.sorted_by_price(ASCENDING))
    priciest = execute_query(books, queries.sorted_by_price(DESCENDING))
    render_table(f"Top {queries.PRICE_LIMIT} cheapest:", book_rows(cheapest, ["title", "price"]))
    render_table(f"Top {queries.PRICE_LIMIT} most expensive:", book_rows(priciest, ["title", "price"]))

    for page in (1, 2):
        docs = execute_query(books, queries.page_of_books(page))
        render_table(f"Page {page} ({queries.PER_PAGE} per page):", book_rows(docs, ["title"]))


def run_aggregations(books: Collection) -> None:
    render_section("Aggregation pipelines")

    results = execute_query(books, queries.average_price_by_genre())
    render_table("Average price by genre:", genre_rows(results))

    results = execute_query(books, queries.author_with_most_books())
    render_table("Author with most books:", author_rows(results))

    results = execute_query(books, queries.books_by_decade())
    render_table("Books by publication decade:", decade_rows(results))


def run_indexing(books: Collection) -> None:
    render_section("Indexing & explain")

    title_filter = queries.title_lookup(queries.EXPLAIN_TITLE)

    before = summarize_explain(explain_query(books, title_filter))
    render_summary("Explain (before index)", before.model_dump())

    name = create_index(books, queries.TITLE_INDEX)
    render_summary("Created index on title", {"name": name})

    after = summarize_explain(explain_query(books, title_filter))
    render_summary("Explain (after index)", after.model_dump())

    name = create_index(books, queries.AUTHOR_YEAR_INDEX)
    render_summary("Created compound index on author + published_year", {"name": name})

    render_table("Indexes:", list_indexes(books))


# ---------------------- ENTRY POINT ----------------------

def run(
    mongo_uri: str = MONGO_URI,
    database_name: str = DATABASE_NAME,
    collection_name: str = COLLECTION_NAME,
) -> bool:
    """Run every query section in order. Returns ``False`` if anything failed."""
    client: Optional[MongoClient] = None
    try:
        client = connect_to_cluster(mongo_uri)
        books = get_collection(client, database_name, collection_name)

        run_basic_queries(books)
        run_advanced_queries(books)
        run_aggregations(books)
        run_indexing(books)

        console.print("\nAll done.")
        return True
    except Exception as e:
        logger.exception("Error running queries: %s", e)
        return False
    finally:
        if client is not None:
            client.close()
            logger.info("Connection closed")


def main() -> int:
    return 0 if run() else 1


if __name__ == "__main__":
    sys.exit(main())
