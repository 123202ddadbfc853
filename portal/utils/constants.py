"""
Constants for beneficiary, attendance and document records.
"""
from enum import Enum


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class DisabilityType(str, Enum):
    PHYSICAL = "physical"
    VISUAL = "visual"
    HEARING = "hearing"
    INTELLECTUAL = "intellectual"
    MULTIPLE = "multiple"
    OTHER = "other"


class DocumentType(str, Enum):
    """Required compliance paperwork, in declaration order."""
    DISABILITY_CERTIFICATE = "disability_certificate"
    IDENTITY_PROOF = "identity_proof"
    PASSPORT_PHOTO = "passport_photo"
    BIRTH_CERTIFICATE = "birth_certificate"
    MEDICAL_REPORT = "medical_report"
    INCOME_CERTIFICATE = "income_certificate"
    CASTE_CERTIFICATE = "caste_certificate"


class DocumentStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


# Every beneficiary is expected to supply one of each
REQUIRED_DOCUMENT_TYPES = [t.value for t in DocumentType]

DOCUMENT_TYPE_LABELS = {
    DocumentType.DISABILITY_CERTIFICATE.value: "Disability Certificate",
    DocumentType.IDENTITY_PROOF.value: "Identity Proof (Aadhaar Card)",
    DocumentType.PASSPORT_PHOTO.value: "Passport-sized Photo",
    DocumentType.BIRTH_CERTIFICATE.value: "Birth Certificate",
    DocumentType.MEDICAL_REPORT.value: "Medical Reports",
    DocumentType.INCOME_CERTIFICATE.value: "Income Certificate",
    DocumentType.CASTE_CERTIFICATE.value: "Caste Certificate",
}

DOCUMENT_TYPE_DESCRIPTIONS = {
    DocumentType.DISABILITY_CERTIFICATE.value: "Official disability certificate from government authority",
    DocumentType.IDENTITY_PROOF.value: "Aadhaar card or other valid government ID proof",
    DocumentType.PASSPORT_PHOTO.value: "Recent passport-sized photograph",
    DocumentType.BIRTH_CERTIFICATE.value: "Official birth certificate",
    DocumentType.MEDICAL_REPORT.value: "Medical reports and assessments related to disability",
    DocumentType.INCOME_CERTIFICATE.value: "Income certificate from competent authority",
    DocumentType.CASTE_CERTIFICATE.value: "Caste certificate (if applicable for reservations)",
}

# Completion filter values for the beneficiary document overview
COMPLETION_FILTERS = ["all", "complete", "incomplete", "missing"]

BENEFICIARY_ORDERINGS = ["name", "created_at"]
