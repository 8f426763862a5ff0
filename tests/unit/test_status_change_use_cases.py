"""Tests for progress, preview and gated status change use cases (mocked repos)."""

from dataclasses import replace
from datetime import UTC, datetime

import pytest

from app.application.dtos.document import StoredDocument
from app.application.dtos.entity import EntityRecord
from app.application.services import ChecklistCompletionEvaluator, TransitionGateEvaluator
from app.application.use_cases import (
    ChangeEntityStatusUseCase,
    GetChecklistProgressUseCase,
    PreviewStatusChangeUseCase,
)
from app.core.checklists import build_default_registry
from app.domain.exceptions import (
    EntityVersionConflictException,
    ResourceNotFoundException,
    StatusTransitionNotPermittedException,
    TransitionBlockedException,
)

_NOW = datetime(2026, 1, 1, tzinfo=UTC)
_ACTIVITY = [{"start_date": "2000-01-01", "till_now": True}]


class MockEntityRepo:
    """In-memory entity store with optimistic versioning."""

    def __init__(self, *entities: EntityRecord, lose_race: bool = False):
        self.entities = {(e.entity_type, e.id): e for e in entities}
        self.lose_race = lose_race
        self.locked: list[str] = []
        self.writes: list[tuple[str, str]] = []

    async def get_by_id(self, entity_type, entity_id, *, for_update=False):
        if for_update:
            self.locked.append(entity_id)
        return self.entities.get((entity_type, entity_id))

    async def update_status_if_version(self, entity_type, entity_id, expected_version, new_status):
        current = self.entities[(entity_type, entity_id)]
        if self.lose_race or current.version != expected_version:
            return None
        updated = replace(current, status=new_status, version=current.version + 1)
        self.entities[(entity_type, entity_id)] = updated
        self.writes.append((entity_id, new_status))
        return updated


class MockDocumentRepo:
    def __init__(self, reviewed: list[str] | None = None):
        self.reviewed = reviewed or []

    async def list_for_entity(self, entity_type, entity_id, document_types):
        return [
            StoredDocument(
                entity_type=entity_type,
                entity_id=entity_id,
                document_type=t,
                version=1,
                was_reviewed=True,
                created_at=_NOW,
            )
            for t in self.reviewed
            if t in document_types
        ]


def _employee(status: str = "new", version: int = 1, **attributes) -> EntityRecord:
    return EntityRecord(
        id="emp-1",
        entity_type="employees",
        status=status,
        version=version,
        attributes=attributes,
    )


PRE_HIRING_DOCS = ["resume", "government_id", "background_check_consent"]


@pytest.fixture
def make_use_cases():
    """Build (progress, preview, change) use cases over the built-in registry."""

    def _make(entity_repo: MockEntityRepo, reviewed: list[str] | None = None):
        registry = build_default_registry()
        completion = ChecklistCompletionEvaluator(MockDocumentRepo(reviewed), registry.validators)
        gate = TransitionGateEvaluator(completion)
        return (
            GetChecklistProgressUseCase(entity_repo, completion, registry),
            PreviewStatusChangeUseCase(entity_repo, gate, registry),
            ChangeEntityStatusUseCase(entity_repo, gate, registry),
        )

    return _make


async def test_progress_returns_every_checklist_in_order(make_use_cases) -> None:
    progress, _, _ = make_use_cases(MockEntityRepo(_employee()), ["resume"])
    results = await progress.execute("employees", "emp-1")
    assert [r.checklist_key for r in results] == ["pre_hiring", "onboarding", "documents"]
    assert results[0].reviewed_count == 1
    assert results[0].total_required == 4


async def test_progress_single_checklist(make_use_cases) -> None:
    progress, _, _ = make_use_cases(MockEntityRepo(_employee()))
    results = await progress.execute("employees", "emp-1", checklist_key="onboarding")
    assert [r.checklist_key for r in results] == ["onboarding"]


async def test_progress_unknown_entity_or_checklist(make_use_cases) -> None:
    progress, _, _ = make_use_cases(MockEntityRepo(_employee()))
    with pytest.raises(ResourceNotFoundException):
        await progress.execute("employees", "missing")
    with pytest.raises(ResourceNotFoundException):
        await progress.execute("employees", "emp-1", checklist_key="nope")


async def test_preview_blocked_by_incomplete_checklist(make_use_cases) -> None:
    _, preview, _ = make_use_cases(MockEntityRepo(_employee()), ["resume"])
    decision = await preview.execute("employees", "emp-1", "under_review")
    assert decision.allowed is False
    assert decision.blocking_checklists == ("pre_hiring",)


async def test_preview_forbidden_transition_skips_checklists(make_use_cases) -> None:
    _, preview, _ = make_use_cases(MockEntityRepo(_employee()))
    decision = await preview.execute("employees", "emp-1", "active")
    assert decision.allowed is False
    assert "not permitted" in decision.reason
    assert decision.checklist_results == ()


async def test_change_writes_when_gates_pass(make_use_cases) -> None:
    repo = MockEntityRepo(_employee(activity_history=_ACTIVITY))
    _, _, change = make_use_cases(repo, PRE_HIRING_DOCS)

    updated = await change.execute("employees", "emp-1", "under_review", expected_version=1)

    assert updated.status == "under_review"
    assert updated.version == 2
    assert repo.locked == ["emp-1"]
    assert repo.writes == [("emp-1", "under_review")]


async def test_change_blocked_does_not_write(make_use_cases) -> None:
    repo = MockEntityRepo(_employee())
    _, _, change = make_use_cases(repo, ["resume"])

    with pytest.raises(TransitionBlockedException) as exc_info:
        await change.execute("employees", "emp-1", "under_review")

    exc = exc_info.value
    assert exc.error_code == "TRANSITION_BLOCKED"
    assert exc.message.startswith("Pre-Hiring Checklist must be 100% complete")
    assert exc.details["blocking_checklists"] == ["pre_hiring"]
    (details,) = exc.details["checklist_results"]
    assert details["percent_complete"] == 25
    assert {m["reason"] for m in details["missing_items"]} == {"not_uploaded", "not_filled"}
    assert repo.writes == []


async def test_change_forbidden_by_workflow(make_use_cases) -> None:
    repo = MockEntityRepo(_employee())
    _, _, change = make_use_cases(repo, PRE_HIRING_DOCS)
    with pytest.raises(StatusTransitionNotPermittedException):
        await change.execute("employees", "emp-1", "terminated")
    assert repo.writes == []


async def test_change_without_workflow_allows_any_pair(make_use_cases) -> None:
    claim = EntityRecord(id="c1", entity_type="wcb_claims", status="new", version=3)
    repo = MockEntityRepo(claim)
    _, _, change = make_use_cases(repo)
    updated = await change.execute("wcb_claims", "c1", "closed")
    assert updated.status == "closed"
    assert updated.version == 4


async def test_change_same_status_is_noop(make_use_cases) -> None:
    repo = MockEntityRepo(_employee())
    _, _, change = make_use_cases(repo)
    entity = await change.execute("employees", "emp-1", "new")
    assert entity.version == 1
    assert repo.writes == []


async def test_change_stale_expected_version(make_use_cases) -> None:
    repo = MockEntityRepo(_employee(version=4))
    _, _, change = make_use_cases(repo, PRE_HIRING_DOCS)
    with pytest.raises(EntityVersionConflictException) as exc_info:
        await change.execute("employees", "emp-1", "rejected", expected_version=3)
    assert exc_info.value.details["actual_version"] == 4


async def test_change_lost_race_raises_conflict(make_use_cases) -> None:
    repo = MockEntityRepo(_employee(), lose_race=True)
    _, _, change = make_use_cases(repo)
    with pytest.raises(EntityVersionConflictException):
        await change.execute("employees", "emp-1", "rejected")


async def test_change_unknown_entity(make_use_cases) -> None:
    _, _, change = make_use_cases(MockEntityRepo())
    with pytest.raises(ResourceNotFoundException):
        await change.execute("employees", "missing", "under_review")
