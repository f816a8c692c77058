"""Unit tests for AuthorsResourceParameters."""

from __future__ import annotations

from librarium.library import AuthorsResourceParameters, LibrarySettings


class TestClamping:
    def test_defaults(self) -> None:
        p = AuthorsResourceParameters()
        assert (p.page_number, p.page_size, p.order_by) == (1, 10, "Name")

    def test_page_size_capped(self) -> None:
        assert AuthorsResourceParameters(page_size=500).page_size == 20

    def test_page_size_floor(self) -> None:
        assert AuthorsResourceParameters(page_size=0).page_size == 1

    def test_page_number_floor(self) -> None:
        assert AuthorsResourceParameters(page_number=-3).page_number == 1

    def test_custom_max(self) -> None:
        assert AuthorsResourceParameters(page_size=40, max_page_size=50).page_size == 40


class TestFromQuery:
    def test_reads_camel_case_keys(self) -> None:
        p = AuthorsResourceParameters.from_query(
            {"genre": "Horror", "searchQuery": "king", "orderBy": "age desc", "pageNumber": "2", "pageSize": "5"}
        )
        assert p.genre == "Horror"
        assert p.search_query == "king"
        assert p.order_by == "age desc"
        assert (p.page_number, p.page_size) == (2, 5)

    def test_garbage_numbers_fall_back(self) -> None:
        p = AuthorsResourceParameters.from_query({"pageNumber": "two", "pageSize": "x"})
        assert (p.page_number, p.page_size) == (1, 10)

    def test_blank_values_are_unset(self) -> None:
        p = AuthorsResourceParameters.from_query({"genre": " ", "orderBy": ""})
        assert p.genre is None
        assert p.order_by == "Name"

    def test_uses_settings(self) -> None:
        settings = LibrarySettings(default_page_size=3, max_page_size=4, default_order_by="Genre")
        p = AuthorsResourceParameters.from_query({"pageSize": "9"}, settings)
        assert p.page_size == 4
        assert p.order_by == "Genre"
        assert AuthorsResourceParameters.from_query({}, settings).page_size == 3


class TestLinks:
    def test_for_page_keeps_filters(self) -> None:
        p = AuthorsResourceParameters(genre="Horror", page_number=2, page_size=5)
        nxt = p.for_page(3)
        assert (nxt.genre, nxt.page_number, nxt.page_size) == ("Horror", 3, 5)

    def test_for_page_clamps(self) -> None:
        assert AuthorsResourceParameters().for_page(0).page_number == 1

    def test_to_query_round_trip(self) -> None:
        p = AuthorsResourceParameters(search_query="king", order_by="Age", page_number=2, page_size=5)
        assert p.to_query() == {"searchQuery": "king", "orderBy": "Age", "pageNumber": "2", "pageSize": "5"}
        assert AuthorsResourceParameters.from_query(p.to_query()) == p
