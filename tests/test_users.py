from legacore.core.security import verify_password
from legacore.models.user import User
from legacore.schemas.user_schemas import UserResponse, redact_credentials

CREDENTIAL_KEYS = {"password", "password_hash", "salt"}


class TestUserCreation:
    def test_create_user_success(self, client, tenant, db_session):
        data = {
            "email": "carol@hbu.example",
            "password": "long-enough-pw",
            "company_id": tenant.id,
            "name": "Carol",
        }

        response = client.post("/api/users/", json=data)

        assert response.status_code == 201
        user = response.json()
        assert user["email"] == "carol@hbu.example"
        assert user["role"] == "USER"
        assert user["company"] == {"id": tenant.id, "name": "HBU Asset Recovery", "slug": tenant.slug}
        assert CREDENTIAL_KEYS.isdisjoint(user)

        stored = db_session.get(User, user["id"])
        assert verify_password("long-enough-pw", stored.password_hash, stored.salt)

    def test_duplicate_email(self, client, tenant, member):
        data = {"email": member.email, "password": "long-enough-pw", "company_id": tenant.id}

        response = client.post("/api/users/", json=data)

        assert response.status_code == 409

    def test_unknown_company(self, client):
        data = {"email": "x@y.example", "password": "long-enough-pw", "company_id": 999}

        response = client.post("/api/users/", json=data)

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Company not found"

    def test_short_password(self, client, tenant):
        data = {"email": "x@y.example", "password": "short", "company_id": tenant.id}

        response = client.post("/api/users/", json=data)

        assert response.status_code == 400

    def test_invalid_role(self, client, tenant):
        data = {
            "email": "x@y.example",
            "password": "long-enough-pw",
            "company_id": tenant.id,
            "role": "OWNER",
        }

        assert client.post("/api/users/", json=data).status_code == 400


class TestUserListing:
    def test_list_never_exposes_credentials(self, client, member, outsider):
        response = client.get("/api/users/")

        assert response.status_code == 200
        body = response.json()
        assert body["pagination"]["total"] == 2
        for user in body["data"]:
            assert CREDENTIAL_KEYS.isdisjoint(user)
            assert set(user["company"]) == {"id", "name", "slug"}

    def test_filter_by_company(self, client, member, outsider, other_tenant):
        response = client.get(f"/api/users/?companyId={other_tenant.id}")

        assert [u["email"] for u in response.json()["data"]] == ["bob@acme.example"]

    def test_search(self, client, member, outsider):
        response = client.get("/api/users/?search=ALICE")

        assert [u["email"] for u in response.json()["data"]] == ["alice@hbu.example"]

    def test_invalid_role_filter(self, client, member):
        response = client.get("/api/users/?role=ROOT")

        assert response.status_code == 400
        assert "Invalid role" in response.json()["error"]["message"]


class TestRedaction:
    def test_redact_credentials(self):
        row = {"id": 1, "email": "a@b.example", "password_hash": "h", "salt": "s", "password": "p"}

        assert redact_credentials(row) == {"id": 1, "email": "a@b.example"}

    def test_response_model_drops_credentials_from_mappings(self, member):
        data = {
            "id": member.id,
            "email": member.email,
            "name": member.name,
            "role": "USER",
            "active": True,
            "tenant_id": member.tenant_id,
            "created_at": member.created_at,
            "updated_at": member.updated_at,
            "password_hash": member.password_hash,
            "salt": member.salt,
        }

        dumped = UserResponse.model_validate(data).model_dump()

        assert CREDENTIAL_KEYS.isdisjoint(dumped)
