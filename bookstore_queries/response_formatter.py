"""
Response formatter: turns query results into console tables and summaries.

Rows are plain dicts; ``render_table`` takes its columns from the first row.
"""

from decimal import Decimal
from typing import Any, Dict, Iterable, List, Mapping, Union

from rich.console import Console
from rich.table import Table
from rich.text import Text

from models import NOT_AVAILABLE, Book, ExplainSummary, plain_value

console = Console()

# columns may be a list of field names or a {field: header} mapping
Columns = Union[List[str], Mapping[str, str]]


# ---------------------- ROW BUILDERS ----------------------

def book_rows(docs: Iterable[Dict[str, Any]], columns: Columns) -> List[Dict[str, Any]]:
    """Validate documents as ``Book`` and keep only the requested columns."""
    if not isinstance(columns, Mapping):
        columns = {c: c for c in columns}

    rows = []
    for doc in docs:
        book = Book.model_validate(doc)
        rows.append({header: getattr(book, field) for field, header in columns.items()})
    return rows


def format_price(value: Any) -> str:
    """Two decimals for numbers (``Decimal128`` included); anything else as text."""
    value = plain_value(value)
    if value is None:
        return NOT_AVAILABLE
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return str(value)
    return f"{value:.2f}"


def genre_rows(results: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [
        {
            "genre": g.get("_id"),
            "avgPrice": format_price(g.get("avgPrice")),
            "count": g.get("count", 0),
        }
        for g in results
    ]


def author_rows(results: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [{"author": a.get("_id"), "count": a.get("count", 0)} for a in results]


def decade_label(decade_start: Any) -> str:
    """``1960.0`` -> ``"1960s"``; books without a year have no decade."""
    decade_start = plain_value(decade_start)
    if decade_start is None:
        return NOT_AVAILABLE
    if isinstance(decade_start, (float, Decimal)) and decade_start == int(decade_start):
        decade_start = int(decade_start)
    return f"{decade_start}s"


def decade_rows(results: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [{"decade": decade_label(d.get("_id")), "count": d.get("count", 0)} for d in results]


def summarize_explain(explain_doc: Dict[str, Any]) -> ExplainSummary:
    stats = explain_doc.get("executionStats") or {}
    return ExplainSummary(**{
        name: stats[name]
        for name in ExplainSummary.model_fields
        if stats.get(name) is not None
    })


# ---------------------- CONSOLE OUTPUT ----------------------

def _cell(value: Any) -> Text:
    # Text keeps values like "[('title', 1)]" from being read as markup
    if value is None:
        return Text("")
    return Text(str(value))


def render_section(name: str) -> None:
    console.print(f"\n[bold]=== {name.upper()} ===[/bold]")


def render_table(title: str, rows: List[Dict[str, Any]]) -> None:
    """Print ``rows`` under ``title``; an empty result prints a marker instead."""
    if not rows:
        console.print(f"\n{title}", markup=False)
        console.print("[dim](no results)[/dim]")
        return

    table = Table(title=title, title_justify="left")
    table.add_column("(index)", style="dim")
    for column in rows[0]:
        table.add_column(str(column))

    for i, row in enumerate(rows):
        table.add_row(Text(str(i)), *(_cell(row.get(column)) for column in rows[0]))

    console.print()
    console.print(table)


def render_summary(label: str, values: Mapping[str, Any]) -> None:
    """Print ``label -> key: value, key: value`` on one line."""
    pairs = ", ".join(f"{key}: {value}" for key, value in values.items())
    console.print(f"\n{label} -> {pairs}", markup=False)
