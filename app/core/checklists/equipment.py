"""Equipment (trailers, chassis) activation checklist and status workflow."""

from app.core.checklists.trucks import UNIT_EDGES, UNIT_STATUSES
from app.domain.entities import ChecklistDefinition, DataItem, FileItem, StatusWorkflow
from app.domain.value_objects import TransitionKey

ENTITY_TYPE = "equipment"

ACTIVATION = ChecklistDefinition(
    key="activation",
    name="Equipment Checklist",
    entity_type=ENTITY_TYPE,
    items=(
        DataItem("unit_number", "Unit Number"),
        DataItem("make", "Make"),
        DataItem("model", "Model"),
        DataItem("vin", "VIN"),
        DataItem("year", "Year"),
        DataItem("terminal", "Terminal"),
        DataItem("value_in_cad", "Value In CAD"),
        DataItem("equipment_type", "Equipment Type"),
        DataItem("owned_by", "Owned By"),
        DataItem("remarks", "Remarks", required=False),
        FileItem("equipment_license_plates", "License Plate"),
        FileItem("equipment_safety_docs", "Safety"),
        FileItem("equipment_registration_docs", "Registration"),
        FileItem("equipment_bill_of_sales", "Bill of Sale"),
        FileItem("equipment_other_documents", "Other Documents", required=False),
    ),
    gates=frozenset({TransitionKey("NW", "AC")}),
)

DEFINITIONS = (ACTIVATION,)

WORKFLOW = StatusWorkflow.from_edges(ENTITY_TYPE, UNIT_STATUSES, UNIT_EDGES)
