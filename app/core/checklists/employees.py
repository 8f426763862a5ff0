"""Employee checklists (pre-hiring, onboarding, documents) and the employee status workflow."""

from app.domain.entities import (
    ChecklistDefinition,
    DataItem,
    FileItem,
    ModalItem,
    StatusWorkflow,
)
from app.domain.value_objects import TransitionKey

ENTITY_TYPE = "employees"

PRE_HIRING = ChecklistDefinition(
    key="pre_hiring",
    name="Pre-Hiring Checklist",
    entity_type=ENTITY_TYPE,
    items=(
        FileItem("resume", "Resume/CV"),
        FileItem("government_id", "Government ID"),
        FileItem("work_authorization", "Work Authorization", required=False),
        FileItem("immigration_documents", "Immigration Documents", required=False),
        FileItem("education_verification", "Education Verification", required=False),
        FileItem(
            "professional_certifications", "Professional Certifications", required=False
        ),
        FileItem("background_check_consent", "Background Check Consent"),
        DataItem("activity_history", "Activity History"),
    ),
    gates=frozenset({TransitionKey("new", "under_review")}),
)

ONBOARDING = ChecklistDefinition(
    key="onboarding",
    name="Onboarding Checklist",
    entity_type=ENTITY_TYPE,
    items=(
        FileItem("employment_contract", "Employment Contract"),
        FileItem("company_policies", "Company Policies Acknowledgement", required=False),
        FileItem("confidentiality_agreement", "Confidentiality Agreement", required=False),
        FileItem("sin_ssn", "SIN/SSN"),
        FileItem("direct_deposit", "Direct Deposit (Void Cheque)"),
        FileItem("tax_forms", "Tax Forms"),
        FileItem("benefits_enrollment", "Benefits Enrollment", required=False),
        FileItem("safety_training", "Safety Training Certificates", required=False),
        FileItem("other_documents", "Other Documents", required=False),
    ),
    gates=frozenset(
        {
            TransitionKey("offer_accepted", "trainee"),
            TransitionKey("offer_accepted", "active"),
        }
    ),
)

# Standing employee file; shown with progress, gates nothing.
DOCUMENTS = ChecklistDefinition(
    key="documents",
    name="Employee Checklist",
    entity_type=ENTITY_TYPE,
    items=(
        DataItem("terminal", "Terminal"),
        DataItem("employee_id", "Employee ID"),
        DataItem("card_number", "Card Number"),
        DataItem("hiring_date", "Hiring Date"),
        DataItem("title", "Title"),
        DataItem("department", "Department"),
        DataItem("rate", "Rate"),
        DataItem("immigration_status", "Immigration Status"),
        FileItem("id_documents", "ID Documents"),
        FileItem("immigration_doc", "Immigration Docs"),
        ModalItem("activity_history", "Activity History", validator="activity_period_10y"),
        FileItem("sin", "SIN"),
        FileItem("void_check", "Void Check"),
        FileItem("employee_memos", "Employee Memos"),
        FileItem("tax_papers", "Tax Papers"),
        FileItem("employee_ctpat_papers", "CTPAT Papers", required=False),
        FileItem("consents", "Consent to Personal Investigation", required=False),
        FileItem("employment_contracts", "Employment Contract", required=False),
        FileItem("passports", "Passports", required=False),
        FileItem("us_visas", "US Visas", required=False),
        FileItem("employee_resumes", "Resumes", required=False),
        FileItem("other_documents", "Other Documents", required=False),
    ),
)

DEFINITIONS = (PRE_HIRING, ONBOARDING, DOCUMENTS)

WORKFLOW = StatusWorkflow.from_edges(
    ENTITY_TYPE,
    statuses=(
        "new",
        "under_review",
        "application_on_hold",
        "rejected",
        "offer_accepted",
        "trainee",
        "active",
        "vacation",
        "on_leave",
        "wcb",
        "suspended",
        "resigned",
        "terminated",
    ),
    edges={
        "new": ("under_review", "rejected"),
        "under_review": ("application_on_hold", "rejected", "offer_accepted"),
        "application_on_hold": ("under_review", "rejected"),
        "offer_accepted": ("trainee", "active", "rejected"),
        "trainee": ("active", "terminated"),
        "active": ("vacation", "on_leave", "wcb", "resigned", "suspended", "terminated"),
        "vacation": ("active",),
        "on_leave": ("active", "terminated"),
        "wcb": ("active", "terminated"),
        "suspended": ("active", "terminated"),
    },
)
