from __future__ import annotations

from datetime import date

from conftest import ACTOR_HEADERS
from portal.services.report_service import ReportService
from portal.utils.date_utils import utc_today


def test_beneficiaries_report(client, create_beneficiary):
    create_beneficiary(name="Ann, K", city="Pune")

    response = client.get("/api/reports/beneficiaries.csv")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert f'beneficiaries-{utc_today().isoformat()}.csv' in response.headers["content-disposition"]
    header, row = response.text.splitlines()
    assert header.startswith("id,name,date_of_birth,gender")
    assert '"Ann, K"' in row
    assert '"Pune"' in row


def test_attendance_report_is_flattened(client, create_beneficiary):
    beneficiary = create_beneficiary(name="Ravi")
    client.put(
        "/api/attendance/2024-06-15",
        json={"attendance": {beneficiary["id"]: True}, "notes": {beneficiary["id"]: "On time"}},
        headers=ACTOR_HEADERS,
    )

    response = client.get("/api/reports/attendance.csv")

    assert response.status_code == 200
    assert response.text.splitlines() == [
        "date,beneficiary_name,disability_type,present,notes",
        '"2024-06-15","Ravi","visual","Yes","On time"',
    ]


def test_empty_report(client):
    response = client.get("/api/reports/attendance.csv")

    assert response.status_code == 404
    assert response.json()["error"] == "No data to export"


def test_attendance_rows_respect_limit(client, create_beneficiary, db_session):
    beneficiary = create_beneficiary(name="Ravi")
    for day in ("2024-06-13", "2024-06-14", "2024-06-15"):
        client.put(f"/api/attendance/{day}", json={"attendance": {beneficiary["id"]: True}}, headers=ACTOR_HEADERS)

    rows = ReportService(db_session).attendance_rows(limit=2)

    assert [row["date"] for row in rows] == [date(2024, 6, 15), date(2024, 6, 14)]
