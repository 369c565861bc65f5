def _create(client, uploader, **fields):
    data = {"title": "Engagement letter", "uploaded_by_id": uploader.id, **fields}
    response = client.post("/api/documents/", json=data)
    assert response.status_code == 201, response.text
    return response.json()


class TestDocumentCreation:
    def test_defaults(self, client, member):
        doc = _create(client, member)

        assert doc["type"] == "OTHER"
        assert doc["filename"] == "document.pdf"
        assert doc["filepath"] == "/uploads/hbu-asset-recovery/document.pdf"
        assert doc["mime_type"] == "application/pdf"
        assert doc["filesize"] == 0
        assert doc["uploaded_by"] == {"id": member.id, "name": "Alice", "email": member.email}

    def test_explicit_file_metadata(self, client, member):
        doc = _create(
            client,
            member,
            type="INVOICE",
            filename="inv-001.pdf",
            filepath="/archive/inv-001.pdf",
            filesize=2048,
        )

        assert doc["type"] == "INVOICE"
        assert doc["filepath"] == "/archive/inv-001.pdf"
        assert doc["filesize"] == 2048

    def test_uploader_from_other_tenant(self, client, tenant, outsider):
        response = client.post("/api/documents/", json={"title": "X", "uploaded_by_id": outsider.id})

        assert response.status_code == 404

    def test_case_from_other_tenant(self, client, member, outsider, serve):
        serve("acme-legal")
        foreign_case = client.post("/api/cases/", json={"title": "Theirs"}).json()
        serve("hbu-asset-recovery")

        response = client.post(
            "/api/documents/",
            json={"title": "X", "uploaded_by_id": member.id, "case_id": foreign_case["id"]},
        )

        assert response.status_code == 404

    def test_negative_filesize(self, client, member):
        response = client.post(
            "/api/documents/", json={"title": "X", "uploaded_by_id": member.id, "filesize": -1}
        )

        assert response.status_code == 400

    def test_invalid_type(self, client, member):
        response = client.post(
            "/api/documents/", json={"title": "X", "uploaded_by_id": member.id, "type": "SPREADSHEET"}
        )

        assert response.status_code == 400


class TestDocumentListing:
    def test_filters(self, client, member):
        case = client.post("/api/cases/", json={"title": "Lien"}).json()
        _create(client, member, title="Contract A", type="CONTRACT", case_id=case["id"])
        _create(client, member, title="Contract B", type="CONTRACT")
        _create(client, member, title="Invoice", type="INVOICE")

        by_type = client.get("/api/documents/?type=CONTRACT").json()
        by_case = client.get(f"/api/documents/?caseId={case['id']}").json()
        by_search = client.get("/api/documents/?search=invoice").json()

        assert [d["title"] for d in by_type["data"]] == ["Contract B", "Contract A"]
        assert [d["title"] for d in by_case["data"]] == ["Contract A"]
        assert [d["title"] for d in by_search["data"]] == ["Invoice"]

    def test_invalid_type_filter(self, client, tenant):
        assert client.get("/api/documents/?type=SPREADSHEET").status_code == 400

    def test_isolation(self, client, member, outsider, serve):
        _create(client, member)

        serve("acme-legal")

        assert client.get("/api/documents/").json()["pagination"]["total"] == 0
