"""Driver checklists (recruiting, safety) and the driver status workflow.

Driver statuses use the two-letter codes of the dispatch system
(NW new, AR application received, RO ready for orientation, TR trainee, AC active, ...).
"""

from app.domain.entities import (
    ChecklistDefinition,
    DataItem,
    FileItem,
    ModalItem,
    StatusWorkflow,
)
from app.domain.value_objects import TransitionKey

ENTITY_TYPE = "drivers"

RECRUITING = ChecklistDefinition(
    key="recruiting",
    name="Recruiting Checklist",
    entity_type=ENTITY_TYPE,
    items=(
        FileItem("licenses", "Driver Licenses"),
        FileItem("abstracts", "Abstracts"),
        FileItem("immigration_doc", "Immigration Docs"),
        FileItem("criminal_records", "Criminal Records"),
        FileItem("log_books", "Log Books from Previous Employment"),
        ModalItem("activity_history", "Activity History", validator="activity_period_10y"),
        DataItem("driver_background", "Driver Background"),
        FileItem("sin", "SIN"),
        FileItem("void_check", "Void Check"),
        FileItem("passports", "Passports"),
        FileItem("us_visas", "US Visas"),
        FileItem("incorp_docs", "Incorp Docs", required=False),
        FileItem("gst_docs", "GST Docs", required=False),
        FileItem("consents", "Consent to Personal Investigation"),
        FileItem("reference_checks", "Reference Checks"),
        FileItem("driver_prescreenings", "Driver Pre-screenings"),
        DataItem("driver_rates", "Driver Rates"),
        FileItem("knowledge_tests", "Knowledge Test"),
        FileItem("road_tests", "Road Test"),
        FileItem("prehire_quizes", "Pre-hire Quizzes"),
        FileItem("employment_contracts", "Employment Contract"),
    ),
    gates=frozenset({TransitionKey("RO", "TR")}),
)

SAFETY = ChecklistDefinition(
    key="safety",
    name="Safety Checklist",
    entity_type=ENTITY_TYPE,
    items=(
        FileItem("tdg_cards", "TDG Card"),
        FileItem("good_to_go_cards", "GTG Cards"),
        FileItem("lcv_certificates", "LCV Certificate"),
        FileItem("lcv_licenses", "LCV License"),
        FileItem("abstract_request_forms", "Abstract Request Form"),
        FileItem("driver_memos", "Driver Memos"),
        FileItem("gtg_quizes", "GTG Quiz"),
        FileItem("tax_papers", "Tax Papers"),
        FileItem("mentor_forms", "Mentor Form"),
        FileItem("ctpat_papers", "CTPAT Memo", required=False),
        FileItem("ctpat_quiz", "CTPAT Quiz", required=False),
        FileItem("winter_courses", "Winter Courses", required=False),
        FileItem("annual_performance_reviews", "Annual Performance Review", required=False),
        FileItem("certificates_of_violations", "Certificates of Violations", required=False),
        FileItem("pdic_certificates", "PDIC Certificate", required=False),
        FileItem("driver_statements", "Driver Statements", required=False),
        FileItem("other_documents", "Other Documents", required=False),
    ),
    gates=frozenset({TransitionKey("TR", "AC")}),
)

DEFINITIONS = (RECRUITING, SAFETY)

WORKFLOW = StatusWorkflow.from_edges(
    ENTITY_TYPE,
    statuses=("NW", "AR", "UR", "OH", "RO", "RJ", "TR", "AC", "VA", "WCB", "OL", "SP", "RE", "TE"),
    edges={
        "NW": ("AR", "RJ"),
        "AR": ("NW", "UR", "OH", "RO", "RJ"),
        "UR": ("OH", "RO", "RJ"),
        "OH": ("UR", "RJ"),
        "RO": ("TR", "RJ"),
        "TR": ("AC", "TE"),
        "AC": ("VA", "WCB", "OL", "SP", "RE", "TE"),
        "VA": ("AC",),
        "WCB": ("AC", "TE"),
        "OL": ("AC", "TE"),
        "SP": ("AC", "TE"),
    },
)
