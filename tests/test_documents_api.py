from __future__ import annotations

import io

import pytest
from fastapi import UploadFile
from sqlalchemy.exc import OperationalError

from conftest import ACTOR_HEADERS
from portal.config import settings
from portal.dependencies import ActorContext
from portal.exceptions import ValidationError
from portal.main import app
from portal.models.document import Document
from portal.routers import documents as documents_router
from portal.services.document_service import DocumentService
from portal.services.storage import BlobStorage, get_storage
from portal.utils.constants import DocumentType


def upload(client, document_type="identity_proof", filename="aadhaar.pdf", content=b"%PDF-1.4", beneficiary_id=None, headers=ACTOR_HEADERS):
    data = {"document_type": document_type}
    if beneficiary_id:
        data["beneficiary_id"] = beneficiary_id
    return client.post(
        "/api/documents",
        files={"file": (filename, content, "application/octet-stream")},
        data=data,
        headers=headers,
    )


def stored_files(storage: BlobStorage):
    return [p for p in storage.root.rglob("*") if p.is_file()]


class SpyStorage(BlobStorage):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.uploads = []

    def upload(self, path, content):
        self.uploads.append(path)
        return super().upload(path, content)


@pytest.fixture
def spy_storage(client, tmp_path):
    spy = SpyStorage(tmp_path, "documents", "/storage")
    app.dependency_overrides[get_storage] = lambda: spy
    return spy


def test_upload_stores_blob_and_pending_metadata(client, storage, create_beneficiary):
    beneficiary = create_beneficiary()

    response = upload(client, beneficiary_id=beneficiary["id"])

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "pending"
    assert body["uploaded_by"] == "staff-1"
    assert body["file_size"] == len(b"%PDF-1.4")
    assert body["file_path"].startswith("staff-1/identity_proof_")
    assert body["file_path"].endswith(".pdf")
    assert storage.download(body["file_path"]) == b"%PDF-1.4"


def test_upload_rejects_oversized_file_without_storing(client, spy_storage):
    response = upload(client, content=b"0" * (15 * 1024 * 1024))

    assert response.status_code == 400
    assert response.json()["error"] == "File size must be less than 10MB"
    assert spy_storage.uploads == []


class TrackingFile(io.BytesIO):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.reads = []

    def read(self, size=-1):
        self.reads.append(size)
        return super().read(size)


def test_declared_oversize_is_rejected_before_reading(db_session, storage):
    body = TrackingFile(b"0" * 16)
    upload_file = UploadFile(body, size=settings.max_upload_bytes + 1, filename="scan.pdf")

    with pytest.raises(ValidationError, match="File size must be less than 10MB"):
        documents_router.upload_document(
            file=upload_file,
            document_type=DocumentType.IDENTITY_PROOF,
            beneficiary_id=None,
            actor=ActorContext("staff-1"),
            service=DocumentService(db_session, storage),
        )

    assert body.reads == []
    assert stored_files(storage) == []


def test_undeclared_size_reads_at_most_one_byte_past_ceiling(db_session, storage):
    body = TrackingFile(b"0" * (settings.max_upload_bytes + 4096))
    upload_file = UploadFile(body, filename="scan.pdf")

    with pytest.raises(ValidationError, match="File size must be less than 10MB"):
        documents_router.upload_document(
            file=upload_file,
            document_type=DocumentType.IDENTITY_PROOF,
            beneficiary_id=None,
            actor=ActorContext("staff-1"),
            service=DocumentService(db_session, storage),
        )

    assert body.reads == [settings.max_upload_bytes + 1]
    assert stored_files(storage) == []


def test_upload_rejects_executable_without_storing(client, spy_storage):
    response = upload(client, filename="setup.exe", content=b"MZ")

    assert response.status_code == 400
    assert response.json()["error"].startswith("File type not supported")
    assert spy_storage.uploads == []


def test_upload_requires_session(client, spy_storage):
    response = upload(client, headers={})

    assert response.status_code == 401
    assert spy_storage.uploads == []


def test_upload_rejects_unknown_document_type(client):
    response = upload(client, document_type="ration_card")

    assert response.status_code == 422
    assert response.json()["error"].startswith("document_type:")


def test_upload_for_unknown_beneficiary(client, spy_storage):
    response = upload(client, beneficiary_id="missing")

    assert response.status_code == 404
    assert spy_storage.uploads == []


def test_failed_metadata_insert_removes_blob(db_session, storage, monkeypatch):
    def failing_commit():
        raise OperationalError("INSERT", {}, Exception("database is locked"))

    monkeypatch.setattr(db_session, "commit", failing_commit)
    service = DocumentService(db_session, storage)

    with pytest.raises(OperationalError):
        service.upload_document("photo.png", b"png", DocumentType.PASSPORT_PHOTO, ActorContext(user_id="staff-1"))

    assert stored_files(storage) == []


def test_beneficiary_stats_and_completion(client, create_beneficiary):
    beneficiary = create_beneficiary()
    for doc_type in ("identity_proof", "identity_proof", "passport_photo"):
        assert upload(client, document_type=doc_type, beneficiary_id=beneficiary["id"]).status_code == 201

    stats = client.get(f"/api/documents/beneficiaries/{beneficiary['id']}/stats").json()

    assert stats["total"] == 3
    assert stats["pending"] == 3
    assert stats["completed"] == 2
    assert stats["total_required"] == 7
    assert stats["percentage"] == 29
    assert stats["by_type"]["identity_proof"] == 2
    assert stats["missing_types"][0] == "disability_certificate"
    assert "identity_proof" not in stats["missing_types"]


def test_stats_for_unknown_beneficiary(client):
    assert client.get("/api/documents/beneficiaries/missing/stats").status_code == 404


def test_list_filters(client, create_beneficiary):
    beneficiary = create_beneficiary()
    upload(client, document_type="identity_proof", filename="aadhaar.pdf", beneficiary_id=beneficiary["id"])
    upload(client, document_type="medical_report", filename="report.pdf", beneficiary_id=beneficiary["id"])

    everything = client.get(f"/api/documents/beneficiaries/{beneficiary['id']}").json()
    by_type = client.get(f"/api/documents/beneficiaries/{beneficiary['id']}", params={"type": "medical_report"}).json()
    by_name = client.get(f"/api/documents/beneficiaries/{beneficiary['id']}", params={"search": "AADHAAR"}).json()

    assert everything["total_count"] == 2
    assert by_type["filtered_count"] == 1
    assert by_type["documents"][0]["name"] == "report.pdf"
    assert [d["name"] for d in by_name["documents"]] == ["aadhaar.pdf"]


def test_my_documents_and_stats(client):
    upload(client, document_type="identity_proof")
    upload(client, document_type="birth_certificate", filename="birth.jpg", headers={"X-User-Id": "staff-2"})

    mine = client.get("/api/documents/mine", headers=ACTOR_HEADERS).json()
    stats = client.get("/api/documents/mine/stats", headers=ACTOR_HEADERS).json()

    assert [d["type"] for d in mine["documents"]] == ["identity_proof"]
    assert stats["total"] == 1
    assert stats["missing_types"] is None


def test_review_status_update(client):
    document = upload(client).json()

    response = client.patch(
        f"/api/documents/{document['id']}/status",
        json={"status": "approved", "notes": "Verified"},
        headers=ACTOR_HEADERS,
    )

    assert response.status_code == 200
    assert response.json()["status"] == "approved"
    assert response.json()["notes"] == "Verified"


def test_review_rejects_unknown_status(client):
    document = upload(client).json()

    response = client.patch(f"/api/documents/{document['id']}/status", json={"status": "lost"}, headers=ACTOR_HEADERS)

    assert response.status_code == 422


def test_download_and_public_url(client):
    document = upload(client, filename="aadhaar.pdf", content=b"file-bytes").json()

    download = client.get(f"/api/documents/{document['id']}/download")
    url = client.get(f"/api/documents/{document['id']}/url").json()["url"]

    assert download.status_code == 200
    assert download.content == b"file-bytes"
    assert url == f"/storage/documents/{document['file_path']}"


def test_delete_removes_blob_and_row(client, storage, db_session):
    document = upload(client).json()

    response = client.delete(f"/api/documents/{document['id']}", headers=ACTOR_HEADERS)

    assert response.status_code == 200
    assert stored_files(storage) == []
    assert db_session.query(Document).count() == 0


def test_delete_succeeds_when_blob_already_gone(client, storage, db_session):
    document = upload(client).json()
    storage.remove([document["file_path"]])

    response = client.delete(f"/api/documents/{document['id']}", headers=ACTOR_HEADERS)

    assert response.status_code == 200
    assert db_session.query(Document).count() == 0


def test_document_exists(client, create_beneficiary):
    beneficiary = create_beneficiary()
    upload(client, document_type="income_certificate", beneficiary_id=beneficiary["id"])

    found = client.get("/api/documents/exists", params={"type": "income_certificate"}, headers=ACTOR_HEADERS).json()
    missing = client.get("/api/documents/exists", params={"type": "caste_certificate"}, headers=ACTOR_HEADERS).json()

    assert found == {"exists": True}
    assert missing == {"exists": False}


def test_beneficiaries_with_counts_and_completion_filter(client, create_beneficiary):
    complete = create_beneficiary(name="Complete Case")
    partial = create_beneficiary(name="Partial Case")
    create_beneficiary(name="Empty Case")
    for doc_type in [t.value for t in DocumentType]:
        upload(client, document_type=doc_type, beneficiary_id=complete["id"])
    upload(client, document_type="passport_photo", beneficiary_id=partial["id"])

    everyone = client.get("/api/documents/beneficiaries").json()
    by_name = {b["name"]: b for b in everyone["beneficiaries"]}

    assert by_name["Complete Case"]["percentage"] == 100
    assert by_name["Partial Case"]["completed_documents"] == 1
    assert by_name["Empty Case"]["completion_status"] == "missing"

    for completion, expected in [("complete", "Complete Case"), ("incomplete", "Partial Case"), ("missing", "Empty Case")]:
        filtered = client.get("/api/documents/beneficiaries", params={"completion": completion}).json()
        assert [b["name"] for b in filtered["beneficiaries"]] == [expected]

    overview = client.get("/api/documents/overview").json()
    assert overview == {
        "total_students": 3,
        "students_with_complete_documents": 1,
        "total_documents": 8,
        "pending_documents": 8,
    }


def test_document_types_catalogue(client):
    types = client.get("/api/documents/types").json()

    assert len(types) == 7
    assert types[0] == {
        "value": "disability_certificate",
        "label": "Disability Certificate",
        "description": "Official disability certificate from government authority",
    }
