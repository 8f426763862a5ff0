"""Tests for ChecklistCompletionEvaluator (mocked document repo)."""

from datetime import UTC, datetime, timedelta

import pytest

from app.application.dtos.document import StoredDocument
from app.application.services import ChecklistCompletionEvaluator, percent_rounded
from app.domain.entities import ChecklistDefinition, DataItem, FileItem, ModalItem
from app.domain.enums import MissingReason

_T0 = datetime(2026, 1, 1, tzinfo=UTC)


def _doc(
    document_type: str,
    *,
    version: int = 1,
    was_reviewed: bool = True,
    minutes: int = 0,
) -> StoredDocument:
    return StoredDocument(
        entity_type="employees",
        entity_id="e1",
        document_type=document_type,
        version=version,
        was_reviewed=was_reviewed,
        created_at=_T0 + timedelta(minutes=minutes),
    )


class MockDocumentRepo:
    """Returns the given documents newest first and records calls."""

    def __init__(self, documents: list[StoredDocument] | None = None):
        self.documents = documents or []
        self.calls: list[tuple[str, str, list[str]]] = []

    async def list_for_entity(self, entity_type, entity_id, document_types):
        self.calls.append((entity_type, entity_id, list(document_types)))
        found = [d for d in self.documents if d.document_type in document_types]
        return sorted(found, key=lambda d: d.created_at, reverse=True)


class FailingDocumentRepo:
    async def list_for_entity(self, entity_type, entity_id, document_types):
        raise ConnectionError("document store down")


def _definition(*items, key: str = "pre_hiring") -> ChecklistDefinition:
    return ChecklistDefinition(
        key=key, name="Pre-Hiring Checklist", entity_type="employees", items=items
    )


FILES = _definition(
    FileItem("resume", "Resume/CV"),
    FileItem("government_id", "Government ID"),
    FileItem("work_authorization", "Work Authorization", required=False),
    FileItem("background_check_consent", "Background Check Consent"),
)


@pytest.mark.parametrize(
    ("part", "total", "expected"),
    [(0, 3, 0), (1, 3, 33), (2, 3, 67), (1, 8, 13), (1, 2, 50), (3, 3, 100), (0, 0, 100)],
)
def test_percent_rounded_half_up(part: int, total: int, expected: int) -> None:
    assert percent_rounded(part, total) == expected


async def test_no_required_items_is_complete_without_storage_read() -> None:
    """A checklist with only optional items is 100% and never reads documents."""
    repo = MockDocumentRepo()
    evaluator = ChecklistCompletionEvaluator(repo)
    definition = _definition(FileItem("other_documents", "Other", required=False))

    result = await evaluator.evaluate("e1", "employees", definition)

    assert result.is_complete is True
    assert result.percent_complete == 100
    assert result.total_required == 0
    assert result.uploaded_count == 0
    assert result.reviewed_count == 0
    assert result.missing_items == ()
    assert repo.calls == []


async def test_missing_and_unreviewed_documents() -> None:
    """Absent documents are NOT_UPLOADED, unreviewed ones NOT_REVIEWED, in item order."""
    repo = MockDocumentRepo([_doc("resume"), _doc("government_id", was_reviewed=False)])
    evaluator = ChecklistCompletionEvaluator(repo)

    result = await evaluator.evaluate("e1", "employees", FILES)

    assert result.is_complete is False
    assert result.total_required == 3
    assert result.uploaded_count == 2
    assert result.reviewed_count == 1
    assert result.percent_complete == 33
    assert [(m.key, m.label, m.reason) for m in result.missing_items] == [
        ("government_id", "Government ID", MissingReason.NOT_REVIEWED),
        ("background_check_consent", "Background Check Consent", MissingReason.NOT_UPLOADED),
    ]


async def test_reads_only_required_document_types_once() -> None:
    repo = MockDocumentRepo()
    await ChecklistCompletionEvaluator(repo).evaluate("e1", "employees", FILES)
    assert repo.calls == [
        ("employees", "e1", ["resume", "government_id", "background_check_consent"])
    ]


async def test_all_reviewed_is_complete() -> None:
    repo = MockDocumentRepo(
        [_doc("resume"), _doc("government_id"), _doc("background_check_consent")]
    )
    result = await ChecklistCompletionEvaluator(repo).evaluate("e1", "employees", FILES)
    assert result.is_complete is True
    assert result.percent_complete == 100
    assert result.reviewed_count == result.total_required == 3


async def test_latest_version_decides_review_state() -> None:
    """An unreviewed v2 hides a reviewed v1 of the same document type."""
    repo = MockDocumentRepo(
        [
            _doc("resume", version=1, was_reviewed=True, minutes=0),
            _doc("resume", version=2, was_reviewed=False, minutes=5),
        ]
    )
    definition = _definition(FileItem("resume", "Resume/CV"))

    result = await ChecklistCompletionEvaluator(repo).evaluate("e1", "employees", definition)

    assert result.is_complete is False
    assert result.missing_items[0].reason == MissingReason.NOT_REVIEWED


async def test_equal_versions_newest_row_wins() -> None:
    """When two rows share the highest version, the newest created_at wins."""
    repo = MockDocumentRepo(
        [
            _doc("resume", version=1, was_reviewed=False, minutes=0),
            _doc("resume", version=1, was_reviewed=True, minutes=10),
        ]
    )
    definition = _definition(FileItem("resume", "Resume/CV"))

    result = await ChecklistCompletionEvaluator(repo).evaluate("e1", "employees", definition)

    assert result.is_complete is True


async def test_file_item_uses_document_type_key() -> None:
    repo = MockDocumentRepo([_doc("drivers_license")])
    definition = _definition(FileItem("licenses", "Licenses", document_type="drivers_license"))

    result = await ChecklistCompletionEvaluator(repo).evaluate("e1", "employees", definition)

    assert result.is_complete is True
    assert repo.calls[0][2] == ["drivers_license"]


async def test_data_item_not_filled() -> None:
    definition = _definition(
        DataItem("driver_rates", "Driver Rates"),
        DataItem("driver_background", "Driver Background"),
    )
    evaluator = ChecklistCompletionEvaluator(MockDocumentRepo())

    result = await evaluator.evaluate(
        "e1", "drivers", definition, attributes={"driver_rates": "0.55/mile", "driver_background": "  "}
    )

    assert result.total_required == 2
    assert result.reviewed_count == 1
    assert result.percent_complete == 50
    assert [(m.key, m.reason) for m in result.missing_items] == [
        ("driver_background", MissingReason.NOT_FILLED)
    ]


async def test_attributes_none_treated_as_empty() -> None:
    definition = _definition(DataItem("driver_rates", "Driver Rates"))
    result = await ChecklistCompletionEvaluator(MockDocumentRepo()).evaluate(
        "e1", "drivers", definition, attributes=None
    )
    assert result.missing_items[0].reason == MissingReason.NOT_FILLED


async def test_modal_item_uses_named_validator() -> None:
    definition = _definition(
        ModalItem("activity_history", "Activity History", validator="has_three")
    )
    evaluator = ChecklistCompletionEvaluator(
        MockDocumentRepo(), {"has_three": lambda v: isinstance(v, list) and len(v) == 3}
    )

    failed = await evaluator.evaluate(
        "e1", "drivers", definition, attributes={"activity_history": [1, 2]}
    )
    passed = await evaluator.evaluate(
        "e1", "drivers", definition, attributes={"activity_history": [1, 2, 3]}
    )

    assert failed.missing_items[0].reason == MissingReason.VALIDATION_FAILED
    assert passed.is_complete is True


async def test_mixed_items_count_toward_total() -> None:
    """File, data and modal items all count toward total_required; uploads count files only."""
    definition = _definition(
        FileItem("resume", "Resume/CV"),
        DataItem("phone", "Phone"),
        ModalItem("activity_history", "Activity History", validator="non_empty"),
    )
    result = await ChecklistCompletionEvaluator(MockDocumentRepo([_doc("resume")])).evaluate(
        "e1", "employees", definition, attributes={"phone": "555-0100"}
    )
    assert result.total_required == 3
    assert result.uploaded_count == 1
    assert result.reviewed_count == 2
    assert result.percent_complete == 67


async def test_blank_label_falls_back_to_key() -> None:
    definition = _definition(FileItem("resume", ""))
    result = await ChecklistCompletionEvaluator(MockDocumentRepo()).evaluate(
        "e1", "employees", definition
    )
    assert result.missing_items[0].label == "resume"


async def test_storage_error_propagates() -> None:
    with pytest.raises(ConnectionError):
        await ChecklistCompletionEvaluator(FailingDocumentRepo()).evaluate(
            "e1", "employees", FILES
        )


async def test_only_optional_item_missing_does_not_count() -> None:
    definition = _definition(
        FileItem("resume", "Resume/CV"),
        FileItem("work_authorization", "Work Authorization", required=False),
    )

    result = await ChecklistCompletionEvaluator(MockDocumentRepo()).evaluate(
        "e1", "employees", definition
    )

    assert [(m.key, m.reason) for m in result.missing_items] == [
        ("resume", MissingReason.NOT_UPLOADED)
    ]
    assert result.total_required == 1
    assert result.percent_complete == 0
    assert result.is_complete is False


async def test_repeated_evaluation_gives_equal_results() -> None:
    repo = MockDocumentRepo(
        [_doc("resume"), _doc("government_id", was_reviewed=False)]
    )
    evaluator = ChecklistCompletionEvaluator(repo)

    first = await evaluator.evaluate("e1", "employees", FILES)
    second = await evaluator.evaluate("e1", "employees", FILES)

    assert first == second
    assert first.percent_complete == 33


async def test_missing_file_label_comes_from_its_own_item() -> None:
    """A data item keyed like another item's document type does not lend its label."""
    definition = _definition(
        DataItem("licenses", "License Number"),
        FileItem("license_scan", "License Scan", document_type="licenses"),
    )

    result = await ChecklistCompletionEvaluator(MockDocumentRepo()).evaluate(
        "e1", "drivers", definition, attributes={"licenses": "D123-456"}
    )

    assert [(m.key, m.label) for m in result.missing_items] == [
        ("licenses", "License Scan")
    ]


async def test_unreviewable_file_satisfied_by_upload() -> None:
    definition = _definition(
        FileItem("incident_documents", "Documents", reviewable=False),
        FileItem("claim_documents", "Claim Documents", reviewable=False),
        key="documents",
    )
    repo = MockDocumentRepo([_doc("incident_documents", was_reviewed=False)])

    result = await ChecklistCompletionEvaluator(repo).evaluate("i1", "incidents", definition)

    assert result.reviewed_count == 1
    assert result.percent_complete == 50
    assert [(m.key, m.reason) for m in result.missing_items] == [
        ("claim_documents", MissingReason.NOT_UPLOADED)
    ]
