import pytest

from vending.domain import ChangeReport, Denomination, break_down


def test_from_counts_drops_zeros_and_orders_descending():
    report = ChangeReport.from_counts(
        {
            Denomination.FIVE_KR: 2,
            Denomination.HUNDRED_KR: 1,
            Denomination.TEN_KR: 0,
        }
    )

    assert [e.denomination for e in report] == [
        Denomination.HUNDRED_KR,
        Denomination.FIVE_KR,
    ]
    assert report.as_dict() == {
        Denomination.HUNDRED_KR: 1,
        Denomination.FIVE_KR: 2,
    }
    assert report.total_value == 110


def test_lines_format():
    report = ChangeReport.from_counts(
        {Denomination.HUNDRED_KR: 2, Denomination.ONE_KR: 1}
    )

    assert report.lines() == ["100 kr: 2 notes", "1 kr: 1 notes"]


def test_empty_report():
    report = ChangeReport()

    assert report.is_empty
    assert len(report) == 0
    assert report.lines() == []


def test_break_down_uses_largest_notes_first():
    assert break_down(186) == {
        Denomination.HUNDRED_KR: 1,
        Denomination.FIFTY_KR: 1,
        Denomination.TWENTY_KR: 1,
        Denomination.TEN_KR: 1,
        Denomination.FIVE_KR: 1,
        Denomination.ONE_KR: 1,
    }


def test_break_down_prefers_held_notes():
    held = {Denomination.TWENTY_KR: 5}

    assert break_down(100, held=held) == {Denomination.TWENTY_KR: 5}


def test_break_down_never_uses_more_held_notes_than_available():
    held = {Denomination.TWENTY_KR: 3}

    assert break_down(45, held=held) == {
        Denomination.TWENTY_KR: 2,
        Denomination.FIVE_KR: 1,
    }


def test_break_down_zero():
    assert break_down(0) == {}


def test_break_down_rejects_negative_amount():
    with pytest.raises(ValueError):
        break_down(-1)
