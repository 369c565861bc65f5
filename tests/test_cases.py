from legacore.models.case import Case


def _create(client, **fields):
    data = {"title": "Recover vehicle lien", **fields}
    response = client.post("/api/cases/", json=data)
    assert response.status_code == 201, response.text
    return response.json()


class TestCaseCreation:
    def test_create_with_defaults(self, client, tenant):
        case = _create(client)

        assert case["status"] == "OPEN"
        assert case["priority"] == 3
        assert case["currency"] == "USD"
        assert case["tenant_id"] == tenant.id
        assert case["document_count"] == 0
        assert case["assigned_to"] is None

    def test_case_number_format(self, client, tenant):
        case = _create(client)

        prefix, millis, suffix = case["case_number"].split("-")
        assert prefix == "HBU"
        assert millis.isdigit()
        assert 0 <= int(suffix) <= 999

    def test_case_number_collision_regenerates(self, client, tenant, db_session, monkeypatch):
        taken = _create(client)["case_number"]
        numbers = iter([taken, "HBU-1-1"])
        monkeypatch.setattr(
            "legacore.services.case_service.generate_case_number", lambda slug: next(numbers)
        )

        case = _create(client, title="Second")

        assert case["case_number"] == "HBU-1-1"
        assert db_session.query(Case).count() == 2

    def test_case_number_collision_exhausted(self, client, tenant, db_session, monkeypatch):
        taken = _create(client)["case_number"]
        monkeypatch.setattr(
            "legacore.services.case_service.generate_case_number", lambda slug: taken
        )

        response = client.post("/api/cases/", json={"title": "Second"})

        assert response.status_code == 500
        assert db_session.query(Case).count() == 1

    def test_assign_to_member(self, client, member):
        case = _create(client, assigned_to_id=member.id)

        assert case["assigned_to"] == {"id": member.id, "name": "Alice", "email": member.email}

    def test_cannot_assign_to_other_tenant_user(self, client, tenant, outsider):
        response = client.post("/api/cases/", json={"title": "X", "assigned_to_id": outsider.id})

        assert response.status_code == 404

    def test_missing_title(self, client, tenant):
        response = client.post("/api/cases/", json={"description": "no title"})

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Missing required fields: title"

    def test_priority_out_of_range(self, client, tenant):
        response = client.post("/api/cases/", json={"title": "X", "priority": 9})

        assert response.status_code == 400


class TestCaseListing:
    def test_empty(self, client, tenant):
        response = client.get("/api/cases/")

        assert response.status_code == 200
        assert response.json() == {
            "data": [],
            "pagination": {"total": 0, "page": 1, "limit": 10, "pages": 0},
        }

    def test_pagination(self, client, tenant):
        for i in range(3):
            _create(client, title=f"Case {i}")

        body = client.get("/api/cases/?limit=2&page=1").json()

        assert [c["title"] for c in body["data"]] == ["Case 2", "Case 1"]
        assert body["pagination"] == {"total": 3, "page": 1, "limit": 2, "pages": 2}

        second = client.get("/api/cases/?limit=2&page=2").json()
        assert [c["title"] for c in second["data"]] == ["Case 0"]

    def test_page_past_end_is_empty(self, client, tenant):
        _create(client)

        body = client.get("/api/cases/?page=5").json()

        assert body["data"] == []
        assert body["pagination"]["total"] == 1

    def test_status_filter_with_clamped_limit(self, client, tenant):
        _create(client, title="Open one")
        _create(client, title="Closed one", status="CLOSED")

        body = client.get("/api/cases/?status=OPEN&limit=200").json()

        assert [c["title"] for c in body["data"]] == ["Open one"]
        assert body["pagination"]["limit"] == 100

    def test_invalid_status(self, client, tenant):
        response = client.get("/api/cases/?status=DONE")

        assert response.status_code == 400
        assert response.json()["error"]["message"].startswith("Invalid status. Must be one of:")

    def test_search_is_literal(self, client, tenant):
        _create(client, title="Recovery 50% fee")
        _create(client, title="Plain case")

        underscore = client.get("/api/cases/", params={"search": "_"}).json()
        percent = client.get("/api/cases/", params={"search": "50%"}).json()

        assert underscore["data"] == []
        assert [c["title"] for c in percent["data"]] == ["Recovery 50% fee"]

    def test_search_and_assignee(self, client, member):
        _create(client, title="Vehicle lien", assigned_to_id=member.id)
        _create(client, title="Vehicle audit")

        body = client.get(f"/api/cases/?search=vehicle&assignedToId={member.id}").json()

        assert [c["title"] for c in body["data"]] == ["Vehicle lien"]

    def test_document_count(self, client, member):
        case = _create(client)
        client.post(
            "/api/documents/",
            json={"title": "Lien notice", "uploaded_by_id": member.id, "case_id": case["id"]},
        )

        listed = client.get("/api/cases/").json()["data"][0]

        assert listed["document_count"] == 1
        assert client.get(f"/api/cases/{case['id']}").json()["document_count"] == 1


class TestCaseIsolation:
    def test_other_tenant_cases_invisible(self, client, tenant, other_tenant, db_session):
        db_session.add(Case(case_number="ACM-1-1", title="Theirs", tenant_id=other_tenant.id))
        db_session.commit()
        theirs = db_session.query(Case).filter_by(case_number="ACM-1-1").one()
        _create(client, title="Ours")

        body = client.get("/api/cases/").json()

        assert [c["title"] for c in body["data"]] == ["Ours"]
        assert body["pagination"]["total"] == 1
        assert client.get(f"/api/cases/{theirs.id}").status_code == 404
        assert client.patch(f"/api/cases/{theirs.id}", json={"title": "Mine"}).status_code == 404

    def test_switching_served_tenant(self, client, tenant, other_tenant, serve):
        _create(client, title="Ours")

        serve("acme-legal")

        assert client.get("/api/cases/").json()["data"] == []


class TestCaseUpdate:
    def test_any_status_transition(self, client, tenant):
        case = _create(client, status="CLOSED")

        response = client.patch(f"/api/cases/{case['id']}", json={"status": "OPEN", "priority": 1})

        assert response.status_code == 200
        assert response.json()["status"] == "OPEN"
        assert response.json()["priority"] == 1
        assert response.json()["case_number"] == case["case_number"]

    def test_reassign(self, client, member):
        case = _create(client)

        response = client.patch(f"/api/cases/{case['id']}", json={"assigned_to_id": member.id})

        assert response.json()["assigned_to"]["id"] == member.id

    def test_get_missing(self, client, tenant):
        response = client.get("/api/cases/999")

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Case 999 not found"
