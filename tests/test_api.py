"""Tests for the HTTP API."""

import pytest

from salonbook.api.app import create_app
from salonbook.config import Settings
from salonbook.database.errors import StoreError
from salonbook.domain.record import RecordService

RECORD = {
    "date": "2024-01-15",
    "customer_name": "Alice",
    "service": "Haircut",
    "staff": "Barber",
    "price": 100,
    "payment_type": "Cash",
}


def _post_record(api_client, **changes):
    response = api_client.post("/api/records", json={**RECORD, **changes})
    assert response.status_code == 200, response.text
    return response.json()


class TestMeta:
    def test_health(self, api_client):
        response = api_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "OK"
        assert body["environment"] == "production"
        assert "timestamp" in body
        assert "status" in body["pool"]

    def test_index_lists_endpoints(self, api_client):
        body = api_client.get("/").json()

        assert body["endpoints"]["api"]["records"] == "/api/records"

    def test_unknown_route(self, api_client):
        response = api_client.get("/api/appointments")

        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "error": "Endpoint not found",
            "path": "/api/appointments",
            "method": "GET",
        }


class TestRecords:
    def test_create_record(self, api_client):
        body = _post_record(api_client)

        assert isinstance(body["id"], int)
        assert body["date"] == "2024-01-15"
        assert body["price"] == 100
        assert body["payment_type"] == "Cash"
        assert body["created_at"]

    def test_invalid_payment_type_is_400(self, api_client):
        response = api_client.post("/api/records", json={**RECORD, "payment_type": "Cheque"})

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert "Cash, Card, Bank" in body["error"]

    def test_missing_price_is_400(self, api_client):
        payload = {key: value for key, value in RECORD.items() if key != "price"}

        response = api_client.post("/api/records", json=payload)

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request"

    def test_daily_and_monthly_lists(self, api_client):
        _post_record(api_client)
        _post_record(api_client, date="2024-01-31")
        _post_record(api_client, date="2024-02-01")

        daily = api_client.get("/api/records/daily/2024-01-15").json()
        monthly = api_client.get("/api/records/monthly/2024/1").json()

        assert len(daily) == 1
        assert [r["date"] for r in monthly] == ["2024-01-31", "2024-01-15"]

    def test_invalid_date_is_400(self, api_client):
        response = api_client.get("/api/records/daily/yesterday-ish")

        assert response.status_code == 400

    def test_invalid_month_is_400(self, api_client):
        response = api_client.get("/api/records/monthly/2024/13")

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid month: 2024-13"

    def test_huge_year_is_400(self, api_client):
        response = api_client.get("/api/records/monthly/99999999999999999999/02")

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid month: 99999999999999999999-02"

    def test_delete_record(self, api_client):
        created = _post_record(api_client)

        response = api_client.delete(f"/api/records/{created['id']}")

        assert response.status_code == 200
        assert response.json() == {"message": "Record deleted successfully", "record": created}
        assert api_client.get("/api/records/daily/2024-01-15").json() == []

    def test_delete_missing_record_is_404(self, api_client):
        response = api_client.delete("/api/records/9999")

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Record not found"}


class TestExpenses:
    def test_create_list_delete(self, api_client):
        response = api_client.post(
            "/api/expenses",
            json={"date": "2024-01-15", "type": "Rent", "amount": "2500.50", "payment_type": "Bank"},
        )
        assert response.status_code == 200
        expense = response.json()
        assert expense["amount"] == 2500.5
        assert expense["description"] is None

        assert len(api_client.get("/api/expenses/daily/2024-01-15").json()) == 1
        assert len(api_client.get("/api/expenses/monthly/2024/1").json()) == 1

        deleted = api_client.delete(f"/api/expenses/{expense['id']}").json()
        assert deleted["message"] == "Expense deleted successfully"
        assert deleted["expense"]["id"] == expense["id"]
        assert api_client.delete(f"/api/expenses/{expense['id']}").status_code == 404

    def test_empty_type_is_stored(self, api_client):
        response = api_client.post(
            "/api/expenses",
            json={"date": "2024-01-15", "type": "", "amount": "10", "payment_type": "Cash"},
        )

        assert response.status_code == 200
        assert response.json()["type"] == ""


class TestCustomers:
    def test_create_and_fetch_with_records(self, api_client):
        customer = api_client.post("/api/customers", json={"name": "Alice", "phone": "555"}).json()
        _post_record(api_client)
        _post_record(api_client, customer_name="Bob")

        body = api_client.get(f"/api/customers/{customer['id']}").json()

        assert body["customer"]["name"] == "Alice"
        assert len(body["records"]) == 1
        assert body["records"][0]["customer_name"] == "Alice"

    def test_duplicate_customer_is_400(self, api_client):
        api_client.post("/api/customers", json={"name": "Alice"})

        response = api_client.post("/api/customers", json={"name": "Alice"})

        assert response.status_code == 400
        assert response.json()["error"] == "Customer with this name already exists"
        assert len(api_client.get("/api/customers").json()) == 1

    def test_empty_name_is_stored(self, api_client):
        response = api_client.post("/api/customers", json={"name": ""})

        assert response.status_code == 200
        assert response.json()["name"] == ""

    def test_missing_customer_is_404(self, api_client):
        response = api_client.get("/api/customers/77")

        assert response.status_code == 404
        assert response.json()["error"] == "Customer not found"


class TestReferenceData:
    @pytest.mark.parametrize("path, label", [("services", "Service"), ("staff", "Staff member")])
    def test_soft_delete_flow(self, api_client, path, label):
        created = api_client.post(f"/api/{path}", json={"name": "Item"}).json()
        assert created["active"] is True

        duplicate = api_client.post(f"/api/{path}", json={"name": "Item"})
        assert duplicate.status_code == 400
        assert duplicate.json()["error"] == f"{label} with this name already exists"

        deactivated = api_client.delete(f"/api/{path}/{created['id']}")
        assert deactivated.status_code == 200
        assert deactivated.json()["active"] is False

        assert api_client.get(f"/api/{path}").json() == []
        inactive = api_client.get(f"/api/{path}", params={"includeInactive": "true"}).json()
        assert [item["name"] for item in inactive] == ["Item"]

        missing = api_client.delete(f"/api/{path}/9999")
        assert missing.status_code == 404
        assert missing.json()["error"] == f"{label} not found"

    def test_expense_types_are_read_only(self, api_client, expense_type_service):
        expense_type_service.create("Rent")

        assert [t["name"] for t in api_client.get("/api/expense-types").json()] == ["Rent"]
        assert api_client.post("/api/expense-types", json={"name": "Gas"}).status_code == 405


class TestReports:
    def test_daily_summary_shape(self, api_client):
        _post_record(api_client, price=100, payment_type="Cash")
        _post_record(api_client, price=50, payment_type="Card")
        api_client.post(
            "/api/expenses",
            json={"date": "2024-01-15", "type": "Supplies", "amount": 30, "payment_type": "Cash"},
        )

        body = api_client.get("/api/reports/daily-summary/2024-01-15").json()

        assert body["date"] == "2024-01-15"
        assert body["income"]["total"] == {"count": 2, "amount": 150}
        assert sorted(g["total"] for g in body["income"]["byPaymentType"]) == [50, 100]
        assert body["expenses"]["total"] == {"count": 1, "amount": 30}
        assert body["netProfit"] == 120

    def test_daily_summary_empty_day(self, api_client):
        body = api_client.get("/api/reports/daily-summary/2030-01-01").json()

        assert body["netProfit"] == 0
        assert body["income"]["total"]["count"] == 0
        assert body["expenses"]["byPaymentType"] == []

    def test_staff_performance(self, api_client):
        _post_record(api_client, price=100, service="Haircut")
        _post_record(api_client, price=200, service="Beard")

        rows = api_client.get("/api/reports/staff-performance/2024-01-01/2024-01-31").json()

        assert len(rows) == 1
        assert rows[0]["staff"] == "Barber"
        assert rows[0]["service_count"] == 2
        assert rows[0]["total_revenue"] == 300
        assert rows[0]["average_price"] == 150
        assert sorted(rows[0]["services_provided"]) == ["Beard", "Haircut"]

    def test_service_analysis(self, api_client):
        _post_record(api_client, price=100)
        _post_record(api_client, price=140)

        rows = api_client.get("/api/reports/service-analysis/2024-01-01/2024-01-31").json()

        assert rows == [
            {
                "service": "Haircut",
                "count": 2,
                "total_revenue": 240,
                "average_price": 120,
                "min_price": 100,
                "max_price": 140,
            }
        ]

    def test_reversed_range_is_empty(self, api_client):
        _post_record(api_client, price=100)

        response = api_client.get("/api/reports/staff-performance/2024-02-01/2024-01-01")

        assert response.status_code == 200
        assert response.json() == []


class TestServerErrors:
    def test_store_failure_is_generic_500(self, api_client, monkeypatch):
        def fail(self, day):
            raise StoreError("could not connect to server", code="operational")

        monkeypatch.setattr(RecordService, "list_daily", fail)

        response = api_client.get("/api/records/daily/2024-01-15")

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Internal server error"}

    def test_unexpected_error_hides_message_outside_development(self, api_client, monkeypatch):
        def fail(self, day):
            raise RuntimeError("secret detail")

        monkeypatch.setattr(RecordService, "list_daily", fail)

        response = api_client.get("/api/records/daily/2024-01-15")

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Internal server error"}

    def test_unexpected_error_shows_message_in_development(self, temp_db, monkeypatch):
        from fastapi.testclient import TestClient

        def fail(self, day):
            raise RuntimeError("secret detail")

        monkeypatch.setattr(RecordService, "list_daily", fail)
        client = TestClient(
            create_app(db=temp_db, settings=Settings(environment="development")),
            raise_server_exceptions=False,
        )

        response = client.get("/api/records/daily/2024-01-15")

        assert response.status_code == 500
        assert response.json()["message"] == "secret detail"
