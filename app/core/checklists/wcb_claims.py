"""WCB (workers' compensation) claim checklists. Claims have no status workflow."""

from app.domain.entities import ChecklistDefinition, DataItem, FileItem
from app.domain.value_objects import TransitionKey

ENTITY_TYPE = "wcb_claims"

DOCUMENTS = ChecklistDefinition(
    key="documents",
    name="Documents Checklist",
    entity_type=ENTITY_TYPE,
    items=(
        FileItem("wcb_worker_report", "Worker Report (Form 6/C060)"),
        FileItem("wcb_employer_report", "Employer Report (Form 7)"),
        FileItem("wcb_medical_report", "Healthcare Provider Report (Form 8)", required=False),
    ),
    gates=frozenset({TransitionKey("new", "submitted")}),
)

MEDICAL = ChecklistDefinition(
    key="medical",
    name="Medical Details",
    entity_type=ENTITY_TYPE,
    items=(
        DataItem("injury_type", "Injury Type"),
        DataItem("body_part_affected", "Body Part Affected"),
        DataItem("severity_level", "Injury Severity"),
        DataItem("doctor_name", "Physician Name", required=False),
        DataItem("doctor_phone", "Physician Phone", required=False),
        DataItem("actual_return_date", "Return to Work Date", required=False),
    ),
)

DEFINITIONS = (DOCUMENTS, MEDICAL)
