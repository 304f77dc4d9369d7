"""Tests for constructing models from upstream JSON."""
import dataclasses

import pytest

from core.models import Author, BookDetail, BookSummary, Genre, PageMeta

from tests.samples import ALCHEMIST, ATOMIC_HABITS


def test_book_summary_from_api():
    book = BookSummary.from_api(ATOMIC_HABITS)

    assert book.title == "Atomic Habits"
    assert book.authors == ("James Clear",)
    assert book.in_stock is True
    assert book.genres == ("Self-Help", "Psychology")


def test_missing_optional_fields_become_none():
    book = BookSummary.from_api(ALCHEMIST)

    assert book.isbn is None
    assert book.genres == ()
    assert book.description is None
    assert book.url is None


def test_models_are_frozen():
    book = BookSummary.from_api(ATOMIC_HABITS)
    with pytest.raises(dataclasses.FrozenInstanceError):
        book.title = "Something else"


def test_book_detail_defaults():
    detail = BookDetail.from_api(ALCHEMIST)

    assert detail.title == "The Alchemist"
    assert detail.languages == ()
    assert detail.average_rating is None
    assert detail.reviews_count == 0


def test_genre_parent_is_optional():
    assert Genre.from_api({"name": "Manga", "slug": "manga"}).parent_slug is None


def test_page_meta_from_api():
    meta = PageMeta.from_api({"page": 2, "results_on_page": 20, "has_more": True})
    assert (meta.page, meta.results_on_page, meta.has_more) == (2, 20, True)
    assert PageMeta.from_api({}).has_more is False


def test_author_count_comes_from_meta():
    author = Author.from_api({
        "data": {
            "author": {"name": "James Clear", "slug": "james-clear"},
            "books": [ATOMIC_HABITS],
        },
        "meta": {"books_count": 3},
    })

    assert author.name == "James Clear"
    assert len(author.books) == 1
    assert author.books_count == 3


def test_null_books_count_falls_back_to_book_count():
    author = Author.from_api({
        "data": {
            "author": {"name": "James Clear", "slug": "james-clear"},
            "books": [ATOMIC_HABITS, ALCHEMIST],
        },
        "meta": {"books_count": None},
    })

    assert author.books_count == 2


def test_single_string_name_lists_are_not_split():
    book = BookDetail.from_api(dict(ALCHEMIST, authors="Paulo Coelho",
                                    genres="Fiction", languages="English"))

    assert book.authors == ("Paulo Coelho",)
    assert book.genres == ("Fiction",)
    assert book.languages == ("English",)
