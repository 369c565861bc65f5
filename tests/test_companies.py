class TestCompanyCreation:
    """Tests for creating companies (tenants)"""

    def test_create_company_success(self, client):
        data = {
            "name": "Acme Legal",
            "slug": "acme-legal",
            "industry": "Legal",
            "domain": "acme.example",
        }

        response = client.post("/api/companies/", json=data)

        assert response.status_code == 201
        company = response.json()
        assert company["slug"] == "acme-legal"
        assert company["active"] is True
        assert "id" in company
        assert "created_at" in company

    def test_duplicate_slug_conflicts(self, client):
        client.post("/api/companies/", json={"name": "Acme Legal", "slug": "acme-legal"})

        response = client.post("/api/companies/", json={"name": "Acme Other", "slug": "acme-legal"})

        assert response.status_code == 409
        assert response.json()["error"]["code"] == "ConflictException"

        # First record untouched
        original = client.get("/api/companies/acme-legal").json()
        assert original["name"] == "Acme Legal"

    def test_duplicate_name_conflicts(self, client):
        client.post("/api/companies/", json={"name": "Acme Legal", "slug": "acme-legal"})

        response = client.post("/api/companies/", json={"name": "Acme Legal", "slug": "acme-2"})

        assert response.status_code == 409

    def test_slug_must_be_url_safe(self, client):
        response = client.post("/api/companies/", json={"name": "Acme", "slug": "Acme Legal!"})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "ValidationException"

    def test_missing_fields(self, client):
        response = client.post("/api/companies/", json={"industry": "Legal"})

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Missing required fields: name, slug"


class TestCompanyRetrieval:
    def test_list_with_counts(self, client, tenant, member, other_tenant):
        response = client.get("/api/companies/")

        assert response.status_code == 200
        body = response.json()
        assert body["pagination"]["total"] == 2
        by_slug = {c["slug"]: c for c in body["data"]}
        assert by_slug["hbu-asset-recovery"]["counts"] == {"users": 1, "cases": 0, "documents": 0}
        assert by_slug["acme-legal"]["counts"]["users"] == 0

    def test_search(self, client, tenant, other_tenant):
        response = client.get("/api/companies/?search=acme")

        assert [c["slug"] for c in response.json()["data"]] == ["acme-legal"]

    def test_active_filter(self, client, tenant, make_tenant):
        make_tenant("dormant-co", active=False)

        response = client.get("/api/companies/?active=false")

        assert [c["slug"] for c in response.json()["data"]] == ["dormant-co"]

    def test_active_filter_rejects_garbage(self, client, tenant):
        response = client.get("/api/companies/?active=maybe")

        assert response.status_code == 400

    def test_get_by_slug(self, client, tenant):
        response = client.get("/api/companies/hbu-asset-recovery")

        assert response.status_code == 200
        assert response.json()["name"] == "HBU Asset Recovery"

    def test_get_unknown(self, client):
        response = client.get("/api/companies/nobody")

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Company not found"


class TestCompanyUpdate:
    def test_update_fields(self, client, tenant):
        response = client.patch(
            "/api/companies/hbu-asset-recovery",
            json={"description": "Asset recovery services", "active": False},
        )

        assert response.status_code == 200
        company = response.json()
        assert company["description"] == "Asset recovery services"
        assert company["active"] is False
        assert company["slug"] == "hbu-asset-recovery"

    def test_slug_is_immutable(self, client, tenant):
        response = client.patch("/api/companies/hbu-asset-recovery", json={"slug": "new-slug"})

        assert response.status_code == 400
        assert client.get("/api/companies/hbu-asset-recovery").status_code == 200

    def test_rename_to_taken_name(self, client, tenant, other_tenant):
        response = client.patch("/api/companies/hbu-asset-recovery", json={"name": "Acme Legal"})

        assert response.status_code == 409
