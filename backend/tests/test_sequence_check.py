from objects_checker.validators import FindingCode, SequenceCheck

from tests._builders import objects_with_ids


def _run(ids, reporter):
    SequenceCheck().run([], objects_with_ids(*ids), reporter)
    return reporter.findings


def test_consecutive_ids_report_nothing(reporter) -> None:
    assert _run([1, 2, 3], reporter) == []


def test_gap_reports_size_and_boundaries(reporter) -> None:
    findings = _run([1, 4], reporter)

    assert len(findings) == 1
    assert findings[0].code == FindingCode.ID_SEQUENCE_GAP
    assert findings[0].message == "There's 3 number gap between Ids '1' and '4'"


def test_gap_is_measured_from_previous_sorted_id(reporter) -> None:
    findings = _run([1, 2, 4], reporter)

    assert [f.message for f in findings] == ["There's 2 number gap between Ids '2' and '4'"]


def test_missing_start_is_gap_from_zero(reporter) -> None:
    findings = _run([3, 4], reporter)

    assert [f.message for f in findings] == ["There's 3 number gap between Ids '0' and '3'"]


def test_ids_are_sorted_before_walking(reporter) -> None:
    assert _run([5, 3, 1, 4, 2], reporter) == []


def test_duplicate_ids_are_not_gaps(reporter) -> None:
    assert _run([1, 1, 2, 2, 3], reporter) == []


def test_every_gap_is_reported(reporter) -> None:
    findings = _run([2, 5, 6, 10], reporter)

    assert [f.message for f in findings] == [
        "There's 2 number gap between Ids '0' and '2'",
        "There's 3 number gap between Ids '2' and '5'",
        "There's 4 number gap between Ids '6' and '10'",
    ]
    assert reporter.warning_count == 0


def test_empty_catalog_reports_nothing(reporter) -> None:
    assert _run([], reporter) == []
