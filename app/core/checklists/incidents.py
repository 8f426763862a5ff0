"""Incident checklist. Incident paperwork has no review step and gates nothing."""

from app.domain.entities import ChecklistDefinition, FileItem

ENTITY_TYPE = "incidents"

DOCUMENTS = ChecklistDefinition(
    key="documents",
    name="Incident Documents",
    entity_type=ENTITY_TYPE,
    items=(
        FileItem("incident_documents", "Documents", reviewable=False),
        FileItem("claim_documents", "Claim Documents", reviewable=False),
    ),
)

DEFINITIONS = (DOCUMENTS,)
