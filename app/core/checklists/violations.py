"""Violation checklist: a single unreviewed document slot, no gates."""

from app.domain.entities import ChecklistDefinition, FileItem

ENTITY_TYPE = "violations"

DOCUMENTS = ChecklistDefinition(
    key="documents",
    name="Violation Documents",
    entity_type=ENTITY_TYPE,
    items=(FileItem("violation_documents", "Violation Documents", reviewable=False),),
)

DEFINITIONS = (DOCUMENTS,)
