"""Filtering, sorting and paging helpers behind the list views."""
from datetime import date, datetime

from services.listing_service import filter_records, page_count, paginate, sort_records

RECORDS = [
    {"_id": "1", "name": "Asha", "status": "New", "createdAt": datetime(2026, 3, 1, 9, 0)},
    {"_id": "2", "name": "Ravi", "status": "Active", "createdAt": datetime(2026, 3, 5, 18, 30)},
    {"_id": "3", "name": "Meera", "status": "New", "createdAt": "2026-03-10T12:00:00"},
    {"_id": "4", "name": "asharam", "status": "Lost", "createdAt": None},
]


def test_search_is_case_insensitive_over_whole_record():
    assert [r["_id"] for r in filter_records(RECORDS, search="ASHA")] == ["1", "4"]
    assert [r["_id"] for r in filter_records(RECORDS, search="active")] == ["2"]


def test_status_filter_and_all():
    assert [r["_id"] for r in filter_records(RECORDS, status="New")] == ["1", "3"]
    assert len(filter_records(RECORDS, status="all")) == 4


def test_date_range_is_inclusive_of_end_day():
    result = filter_records(RECORDS, start=date(2026, 3, 1), end=date(2026, 3, 5))
    assert [r["_id"] for r in result] == ["1", "2"]


def test_open_ended_range():
    assert [r["_id"] for r in filter_records(RECORDS, start="2026-03-05")] == ["2", "3"]


def test_filtering_is_pure():
    first = filter_records(RECORDS, search="a", status="New")
    second = filter_records(RECORDS, search="a", status="New")
    assert first == second
    assert len(RECORDS) == 4


def test_sort_puts_missing_values_last():
    ordered = sort_records(RECORDS, "createdAt", descending=True)
    assert [r["_id"] for r in ordered] == ["3", "2", "1", "4"]
    assert [r["name"] for r in sort_records(RECORDS, "name")] == ["Asha", "asharam", "Meera", "Ravi"]


class TestPaginate:
    def test_page_count_has_a_floor_of_one(self):
        assert page_count(0, 10) == 1
        assert page_count(10, 10) == 1
        assert page_count(11, 10) == 2

    def test_empty_list_has_one_empty_page(self):
        page = paginate([], 1, 10)
        assert page["items"] == []
        assert page["page"] == 1
        assert page["pageCount"] == 1

    def test_slices_requested_page(self):
        page = paginate(list(range(23)), 3, 10)
        assert page["items"] == [20, 21, 22]
        assert page["pageCount"] == 3
        assert page["total"] == 23

    def test_out_of_range_page_is_clamped(self):
        assert paginate(list(range(23)), 7, 10)["page"] == 3
        assert paginate(list(range(23)), 0, 10)["items"] == list(range(10))
