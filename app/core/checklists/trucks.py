"""Truck activation checklist and the truck status workflow."""

from app.domain.entities import ChecklistDefinition, DataItem, FileItem, StatusWorkflow
from app.domain.value_objects import TransitionKey

ENTITY_TYPE = "trucks"

# Shared by trucks and equipment (NW new, AC active, SL sold, TL total loss,
# OS out of service, LE left the fleet).
UNIT_STATUSES = ("NW", "AC", "OS", "SL", "TL", "LE")
UNIT_EDGES = {
    "NW": ("AC",),
    "AC": ("OS", "SL", "TL", "LE"),
    "OS": ("AC", "SL", "TL", "LE"),
}

ACTIVATION = ChecklistDefinition(
    key="activation",
    name="Truck Checklist",
    entity_type=ENTITY_TYPE,
    items=(
        DataItem("truck_license_plates", "License Plate"),
        FileItem("truck_safety_docs", "Safety"),
        FileItem("truck_registration_docs", "Registration"),
        FileItem("truck_bill_of_sales", "Bill of Sale", required=False),
        FileItem("truck_other_documents", "Other Documents", required=False),
    ),
    gates=frozenset({TransitionKey("NW", "AC")}),
)

DEFINITIONS = (ACTIVATION,)

WORKFLOW = StatusWorkflow.from_edges(ENTITY_TYPE, UNIT_STATUSES, UNIT_EDGES)
