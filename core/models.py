# =============================================================================
# core/models.py  -  Data Models (the "nouns" of the catalog)
# =============================================================================
#
# These dataclasses define the shape of every piece of catalog data that
# flows from the upstream API to the text formatter.  They carry no
# behaviour beyond a from_api() constructor that reads the upstream JSON.
#
# WHY FROZEN DATACLASSES?
#   Every tool call builds fresh objects from one upstream response and
#   throws them away afterwards.  Nothing should ever edit them in between,
#   so they are frozen and use tuples instead of lists.
#
# MISSING FIELDS:
#   The upstream API leaves out fields it has no data for.  from_api()
#   maps a missing field to None (or an empty tuple), and the formatter
#   drops the matching line.  No placeholders are invented here.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Optional


def _strings(value: Any) -> tuple[str, ...]:
    """Normalise an optional JSON array of names into a tuple of strings."""
    if not value:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(str(item) for item in value)


# -----------------------------------------------------------------------------
# BookSummary - one entry in a list of books (search, genre, bestsellers...)
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class BookSummary:
    """The fields shown for a book inside a multi-book result."""

    title: str
    price: Any                         # Number or preformatted string, as sent
    in_stock: bool = False
    authors: tuple[str, ...] = ()
    isbn: Optional[str] = None
    genres: tuple[str, ...] = ()
    description: Optional[str] = None
    url: Optional[str] = None          # Purchase link on the storefront

    @classmethod
    def from_api(cls, data: dict) -> "BookSummary":
        return cls(
            title=data.get("title", ""),
            price=data.get("price"),
            in_stock=bool(data.get("in_stock")),
            authors=_strings(data.get("authors")),
            isbn=data.get("isbn") or None,
            genres=_strings(data.get("genres")),
            description=data.get("description") or None,
            url=data.get("url") or None,
        )


# -----------------------------------------------------------------------------
# BookDetail - a single-book lookup (get_book)
# -----------------------------------------------------------------------------
# A superset of BookSummary.  Kept as a subclass so the formatter can treat
# a detail as a summary wherever only the common fields matter.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class BookDetail(BookSummary):
    """Everything the upstream API knows about one book."""

    alternate_title: Optional[str] = None
    publisher: Optional[str] = None
    pages: Optional[int] = None
    cover_type: Optional[str] = None   # "Paperback", "Hardcover", ...
    edition: Optional[str] = None
    weight_grams: Optional[float] = None
    languages: tuple[str, ...] = ()
    average_rating: Optional[float] = None
    reviews_count: int = 0

    @classmethod
    def from_api(cls, data: dict) -> "BookDetail":
        summary = BookSummary.from_api(data)
        return cls(
            title=summary.title,
            price=summary.price,
            in_stock=summary.in_stock,
            authors=summary.authors,
            isbn=summary.isbn,
            genres=summary.genres,
            description=summary.description,
            url=summary.url,
            alternate_title=data.get("alternate_title") or None,
            publisher=data.get("publisher") or None,
            pages=data.get("pages") or None,
            cover_type=data.get("cover_type") or None,
            edition=data.get("edition") or None,
            weight_grams=data.get("weight_grams") or None,
            languages=_strings(data.get("languages")),
            average_rating=data.get("average_rating") or None,
            reviews_count=data.get("reviews_count") or 0,
        )


# -----------------------------------------------------------------------------
# Genre - one node of the (two-level) genre tree
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Genre:
    """A catalog genre.  parent_slug is reported, never validated."""

    name: str
    slug: str
    parent_slug: Optional[str] = None

    @classmethod
    def from_api(cls, data: dict) -> "Genre":
        return cls(
            name=data.get("name", ""),
            slug=data.get("slug", ""),
            parent_slug=data.get("parent_slug") or None,
        )


# -----------------------------------------------------------------------------
# PageMeta - the "meta" half of a list envelope
# -----------------------------------------------------------------------------
# Pagination notices are driven ONLY by what the upstream reports here.
# If has_more is absent we assume there is nothing more to fetch.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class PageMeta:
    """Pagination and count metadata returned alongside a list."""

    page: Optional[int] = None
    results_on_page: Optional[int] = None
    total: Optional[int] = None
    has_more: bool = False

    @classmethod
    def from_api(cls, meta: Optional[dict]) -> "PageMeta":
        meta = meta or {}
        return cls(
            page=meta.get("page"),
            results_on_page=meta.get("results_on_page"),
            total=meta.get("total"),
            has_more=bool(meta.get("has_more")),
        )


# -----------------------------------------------------------------------------
# Author - an author plus the books the store carries by them
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Author:
    """An author record from /authors/{slug}."""

    name: str
    slug: str
    books: tuple[BookSummary, ...] = field(default_factory=tuple)
    books_count: int = 0               # Total reported upstream, not len(books)

    @classmethod
    def from_api(cls, envelope: dict) -> "Author":
        data = envelope.get("data") or {}
        author = data.get("author") or {}
        books = tuple(BookSummary.from_api(b) for b in data.get("books") or [])
        meta = envelope.get("meta") or {}
        return cls(
            name=author.get("name", ""),
            slug=author.get("slug", ""),
            books=books,
            books_count=(meta["books_count"]
                         if meta.get("books_count") is not None else len(books)),
        )
