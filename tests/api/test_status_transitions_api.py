"""API tests for checklist progress and status transitions (SQLite-backed)."""

from httpx import AsyncClient


ACTIVITY = [{"start_date": "2000-01-01", "till_now": True}]
PRE_HIRING_REVIEWED = [
    ("resume", True),
    ("government_id", True),
    ("background_check_consent", True),
]
BLOCKED_REASON = (
    "Pre-Hiring Checklist must be 100% complete "
    "(all required documents uploaded and reviewed)"
)


async def test_list_checklists_for_entity_type(client: AsyncClient) -> None:
    response = await client.get("/api/v1/checklists/employees")
    assert response.status_code == 200
    data = response.json()
    assert [c["key"] for c in data["checklists"]] == ["pre_hiring", "onboarding", "documents"]
    pre_hiring = data["checklists"][0]
    assert pre_hiring["gates"] == ["new → under_review"]
    assert pre_hiring["required_document_types"] == [
        "resume",
        "government_id",
        "background_check_consent",
    ]
    assert pre_hiring["items"][-1] == {
        "key": "activity_history",
        "label": "Activity History",
        "kind": "data",
        "required": True,
        "document_type": None,
        "validator": None,
        "reviewable": None,
    }
    assert pre_hiring["items"][0]["reviewable"] is True
    assert data["workflow"]["transitions"]["new"] == ["under_review", "rejected"]


async def test_list_checklists_without_workflow(client: AsyncClient) -> None:
    response = await client.get("/api/v1/checklists/wcb_claims")
    assert response.status_code == 200
    assert response.json()["workflow"] is None


async def test_list_checklists_unknown_entity_type(client: AsyncClient) -> None:
    response = await client.get("/api/v1/checklists/boats")
    assert response.status_code == 404
    assert response.json()["error"] == "RESOURCE_NOT_FOUND"


async def test_progress_reports_missing_items(
    client: AsyncClient, seed_entity
) -> None:
    entity = await seed_entity(
        "employees",
        "new",
        documents=[("resume", True), ("government_id", False)],
    )

    response = await client.get(f"/api/v1/checklists/employees/{entity.id}/progress")

    assert response.status_code == 200
    data = response.json()
    pre_hiring, onboarding, documents = data["checklists"]
    assert pre_hiring["checklist_key"] == "pre_hiring"
    assert pre_hiring["is_complete"] is False
    assert pre_hiring["uploaded_count"] == 2
    assert pre_hiring["reviewed_count"] == 1
    assert pre_hiring["total_required"] == 4
    assert pre_hiring["percent_complete"] == 25
    assert [(m["key"], m["reason"]) for m in pre_hiring["missing_items"]] == [
        ("government_id", "not_reviewed"),
        ("background_check_consent", "not_uploaded"),
        ("activity_history", "not_filled"),
    ]
    assert onboarding["percent_complete"] == 0
    assert documents["checklist_key"] == "documents"
    assert documents["total_required"] == 15


async def test_progress_single_checklist_and_not_found(
    client: AsyncClient, seed_entity
) -> None:
    entity = await seed_entity("trucks", "NW", {"truck_license_plates": "AB-1"})

    response = await client.get(
        f"/api/v1/checklists/trucks/{entity.id}/progress",
        params={"checklist_key": "activation"},
    )
    assert response.status_code == 200
    (activation,) = response.json()["checklists"]
    assert activation["reviewed_count"] == 1

    missing_checklist = await client.get(
        f"/api/v1/checklists/trucks/{entity.id}/progress",
        params={"checklist_key": "nope"},
    )
    assert missing_checklist.status_code == 404

    missing_entity = await client.get("/api/v1/checklists/trucks/nonexistent/progress")
    assert missing_entity.status_code == 404


async def test_evaluate_blocked_returns_200(
    client: AsyncClient, seed_entity
) -> None:
    entity = await seed_entity("employees", "new", documents=[("resume", True)])

    response = await client.post(
        f"/api/v1/status-transitions/employees/{entity.id}/evaluate",
        json={"to_status": "under_review"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["allowed"] is False
    assert data["from_status"] == "new"
    assert data["reason"] == BLOCKED_REASON
    assert data["blocking_checklists"] == ["pre_hiring"]
    assert data["checklist_results"][0]["checklist_key"] == "pre_hiring"


async def test_evaluate_ungated_transition_allowed(
    client: AsyncClient, seed_entity
) -> None:
    entity = await seed_entity("employees", "new")
    response = await client.post(
        f"/api/v1/status-transitions/employees/{entity.id}/evaluate",
        json={"to_status": "rejected"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["allowed"] is True
    assert data["reason"] is None
    assert data["checklist_results"] == []


async def test_evaluate_requires_to_status(
    client: AsyncClient, seed_entity
) -> None:
    entity = await seed_entity("employees", "new")
    response = await client.post(
        f"/api/v1/status-transitions/employees/{entity.id}/evaluate", json={}
    )
    assert response.status_code == 422
    assert response.json()["error"] == "VALIDATION_ERROR"


async def test_blank_to_status_rejected_on_both_routes(
    client: AsyncClient, seed_entity
) -> None:
    entity = await seed_entity("wcb_claims", "new")
    url = f"/api/v1/status-transitions/wcb_claims/{entity.id}"

    evaluated = await client.post(f"{url}/evaluate", json={"to_status": "   "})
    changed = await client.patch(url, json={"to_status": " \t "})

    for response in (evaluated, changed):
        assert response.status_code == 422
        assert response.json()["error"] == "VALIDATION_ERROR"


async def test_to_status_surrounding_whitespace_stripped(
    client: AsyncClient, seed_entity
) -> None:
    entity = await seed_entity("employees", "new")
    response = await client.post(
        f"/api/v1/status-transitions/employees/{entity.id}/evaluate",
        json={"to_status": " rejected "},
    )
    assert response.status_code == 200
    assert response.json()["to_status"] == "rejected"


async def test_change_status_when_complete(
    client: AsyncClient, seed_entity
) -> None:
    entity = await seed_entity(
        "employees",
        "new",
        {"activity_history": ACTIVITY},
        PRE_HIRING_REVIEWED,
    )

    response = await client.patch(
        f"/api/v1/status-transitions/employees/{entity.id}",
        json={"to_status": "under_review", "expected_version": 1},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "under_review"
    assert data["version"] == 2

    again = await client.patch(
        f"/api/v1/status-transitions/employees/{entity.id}",
        json={"to_status": "offer_accepted", "expected_version": 1},
    )
    assert again.status_code == 409
    assert again.json()["error"] == "ENTITY_VERSION_CONFLICT"


async def test_change_status_blocked_leaves_entity_unchanged(
    client: AsyncClient, seed_entity
) -> None:
    entity = await seed_entity("employees", "new", documents=[("resume", True)])

    response = await client.patch(
        f"/api/v1/status-transitions/employees/{entity.id}",
        json={"to_status": "under_review"},
    )

    assert response.status_code == 409
    body = response.json()
    assert body["error"] == "TRANSITION_BLOCKED"
    assert body["message"] == BLOCKED_REASON
    assert body["details"]["blocking_checklists"] == ["pre_hiring"]

    check = await client.post(
        f"/api/v1/status-transitions/employees/{entity.id}/evaluate",
        json={"to_status": "under_review"},
    )
    assert check.json()["from_status"] == "new"


async def test_change_status_not_permitted(
    client: AsyncClient, seed_entity
) -> None:
    entity = await seed_entity("trucks", "NW")
    response = await client.patch(
        f"/api/v1/status-transitions/trucks/{entity.id}",
        json={"to_status": "SL"},
    )
    assert response.status_code == 422
    assert response.json()["error"] == "TRANSITION_NOT_PERMITTED"


async def test_change_status_unknown_entity(client: AsyncClient) -> None:
    response = await client.patch(
        "/api/v1/status-transitions/employees/nonexistent",
        json={"to_status": "under_review"},
    )
    assert response.status_code == 404


async def test_change_truck_activation_gate(
    client: AsyncClient, seed_entity
) -> None:
    """The latest registration version must be reviewed before NW → AC."""
    entity = await seed_entity(
        "trucks",
        "NW",
        {"truck_license_plates": "AB-1204"},
        [
            ("truck_safety_docs", True),
            ("truck_registration_docs", True, 1),
            ("truck_registration_docs", False, 2),
        ],
    )

    blocked = await client.patch(
        f"/api/v1/status-transitions/trucks/{entity.id}", json={"to_status": "AC"}
    )
    assert blocked.status_code == 409
    (result,) = blocked.json()["details"]["checklist_results"]
    assert result["missing_items"] == [
        {"key": "truck_registration_docs", "label": "Registration", "reason": "not_reviewed"}
    ]
