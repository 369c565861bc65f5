from datetime import datetime, UTC


def _record(client, name, value, period):
    response = client.post(
        "/api/analytics/", json={"metric_name": name, "metric_value": value, "period": period}
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestRecordMetric:
    def test_default_period_is_current_month(self, client, tenant):
        record = _record(client, "revenue", 10, None)

        assert record["period"] == datetime.now(UTC).strftime("%Y-%m")
        assert record["metadata"] == {}

    def test_quarter_period(self, client, tenant):
        assert _record(client, "revenue", 10, "2024-Q2")["period"] == "2024-Q2"

    def test_invalid_period(self, client, tenant):
        response = client.post(
            "/api/analytics/", json={"metric_name": "revenue", "metric_value": 1, "period": "June"}
        )

        assert response.status_code == 400

    def test_missing_value(self, client, tenant):
        response = client.post("/api/analytics/", json={"metric_name": "revenue"})

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Missing required fields: metric_value"


class TestListMetrics:
    def test_aggregated_page(self, client, tenant):
        _record(client, "revenue", 100, "2024-01")
        _record(client, "revenue", 200, "2024-02")
        _record(client, "users", 5, "2024-02")

        body = client.get("/api/analytics/").json()

        assert [r["metric_name"] for r in body["data"]] == ["users", "revenue", "revenue"]
        assert body["pagination"]["total"] == 3
        assert body["aggregated"] == [
            {
                "name": "users",
                "values": [{"period": "2024-02", "value": 5.0}],
                "total": 5.0,
                "avg": 5.0,
                "count": 1,
            },
            {
                "name": "revenue",
                "values": [
                    {"period": "2024-02", "value": 200.0},
                    {"period": "2024-01", "value": 100.0},
                ],
                "total": 300.0,
                "avg": 150.0,
                "count": 2,
            },
        ]

    def test_aggregates_only_the_returned_page(self, client, tenant):
        for value in (1, 2, 3):
            _record(client, "visits", value, "2024-01")

        body = client.get("/api/analytics/?limit=2").json()

        assert body["aggregated"][0]["count"] == 2
        assert body["aggregated"][0]["total"] == 5.0

    def test_filters(self, client, tenant):
        _record(client, "revenue", 100, "2024-01")
        _record(client, "revenue", 200, "2024-02")
        _record(client, "users", 5, "2024-02")

        by_period = client.get("/api/analytics/?period=2024-02").json()
        by_metric = client.get("/api/analytics/?metric=revenue").json()

        assert by_period["pagination"]["total"] == 2
        assert by_metric["pagination"]["total"] == 2
        assert [g["name"] for g in by_metric["aggregated"]] == ["revenue"]

    def test_empty(self, client, tenant):
        body = client.get("/api/analytics/").json()

        assert body["data"] == []
        assert body["aggregated"] == []

    def test_other_tenant_metrics_hidden(self, client, tenant, other_tenant, serve):
        serve("acme-legal")
        _record(client, "revenue", 999, "2024-01")
        serve("hbu-asset-recovery")
        _record(client, "users", 5, "2024-01")

        body = client.get("/api/analytics/").json()

        assert [(r["metric_name"], r["metric_value"]) for r in body["data"]] == [("users", 5.0)]
        assert body["pagination"]["total"] == 1
        assert [g["name"] for g in body["aggregated"]] == ["users"]
        assert body["aggregated"][0]["total"] == 5.0
