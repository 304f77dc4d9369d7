# =============================================================================
# core/formatting.py  -  Catalog Data → Agent-Readable Text
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns the dataclasses from core/models.py into the plain-text (light
#   Markdown) blocks that the tools hand back to the agent.
#
# THE OMIT-IF-ABSENT RULE:
#   Every renderer builds a list of candidate lines where a missing field
#   yields None, then drops the Nones.  A book without an ISBN simply has no
#   "ISBN:" line; we never print "ISBN: n/a".  Field order is fixed by the
#   order of the list, so two renders of the same data are identical.
#
# CONTEXT BUDGET:
#   The agent only sees what is printed here.  Keep the lines short and
#   label every value so the LLM can't mistake a price for a page count.
# =============================================================================

from typing import Iterable, Optional

from core.models import Author, BookDetail, BookSummary, Genre, PageMeta

BOOK_SEPARATOR = "\n\n---\n\n"
MORE_RESULTS_NOTICE = "_More results available, increase the page number._"


def _number(value) -> str:
    """Render 450.0 as "450" and leave everything else alone."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _join_lines(parts: Iterable[Optional[str]]) -> str:
    return "\n".join(part for part in parts if part)


def _authors_line(book: BookSummary) -> Optional[str]:
    return f"by {', '.join(book.authors)}" if book.authors else None


def _price_line(book: BookSummary) -> str:
    stock = "In Stock" if book.in_stock else "Out of Stock"
    return f"Price: {_number(book.price)} | {stock}"


def book_to_text(book: BookSummary) -> str:
    """Render a book as it appears inside a list of results."""
    return _join_lines([
        f"**{book.title}**",
        _authors_line(book),
        _price_line(book),
        f"ISBN: {book.isbn}" if book.isbn else None,
        f"Genres: {', '.join(book.genres)}" if book.genres else None,
        f"\n{book.description}" if book.description else None,
        f"\nBuy: {book.url}" if book.url else None,
    ])


def book_detail_to_text(book: BookDetail) -> str:
    """Render the full single-book view used by get_book."""
    rating = None
    if book.average_rating:
        rating = (f"Rating: {_number(book.average_rating)}/5 "
                  f"({book.reviews_count} reviews)")

    return _join_lines([
        f"**{book.title}**",
        f"({book.alternate_title})" if book.alternate_title else None,
        _authors_line(book),
        _price_line(book),
        f"ISBN: {book.isbn}" if book.isbn else None,
        f"Publisher: {book.publisher}" if book.publisher else None,
        f"Pages: {book.pages}" if book.pages else None,
        f"Format: {book.cover_type}" if book.cover_type else None,
        f"Edition: {book.edition}" if book.edition else None,
        f"Weight: {_number(book.weight_grams)}g" if book.weight_grams else None,
        f"Languages: {', '.join(book.languages)}" if book.languages else None,
        f"Genres: {', '.join(book.genres)}" if book.genres else None,
        rating,
        f"\n{book.description}" if book.description else None,
        f"\nBuy: {book.url}" if book.url else None,
    ])


def books_to_text(books: Iterable[BookSummary]) -> str:
    """Render several books separated by a horizontal rule.

    Returns an empty string for an empty list so callers can test it.
    """
    return BOOK_SEPARATOR.join(book_to_text(book) for book in books)


def with_more_notice(text: str, meta: PageMeta) -> str:
    """Append the "more results" notice when the upstream says there is more."""
    if meta.has_more:
        return f"{text}\n\n{MORE_RESULTS_NOTICE}"
    return text


def genre_to_line(genre: Genre) -> str:
    line = f"- {genre.name} ({genre.slug})"
    if genre.parent_slug:
        line += f" - under {genre.parent_slug}"
    return line


def genres_to_text(genres: Iterable[Genre], total: Optional[int]) -> str:
    genres = list(genres)
    count = total if total is not None else len(genres)
    lines = "\n".join(genre_to_line(g) for g in genres)
    return f"{count} genres available:\n\n{lines}"


def author_to_text(author: Author) -> str:
    header = f"**{author.name}**\n{author.books_count} books available"
    books = books_to_text(author.books)
    return f"{header}\n\n{books}" if books else header
