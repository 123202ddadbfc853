"""
Beneficiary API endpoints.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from portal.database import get_db
from portal.dependencies import ActorContext, get_current_actor
from portal.schemas.beneficiary import BeneficiaryDraft, BeneficiaryListResponse, BeneficiaryRecord
from portal.services.beneficiary_service import BeneficiaryService
from typing import Optional

router = APIRouter()


@router.get("", response_model=BeneficiaryListResponse)
def list_beneficiaries(
    order_by: str = Query("name", pattern="^(name|created_at)$", description="Sort by name or newest first"),
    search: Optional[str] = Query(None, description="Match name, guardian name or city"),
    db: Session = Depends(get_db)
):
    """
    Get the beneficiary directory.

    - **order_by**: `name` (A-Z) or `created_at` (newest first)
    - **search**: case-insensitive filter on name, guardian name and city
    """
    beneficiaries = BeneficiaryService(db).list_beneficiaries(order_by=order_by, search=search)

    return {
        "beneficiaries": beneficiaries,
        "total_count": len(beneficiaries),
        "order_by": order_by,
        "search": search,
    }


@router.post("", response_model=BeneficiaryRecord, status_code=201)
def create_beneficiary(
    draft: BeneficiaryDraft,
    actor: ActorContext = Depends(get_current_actor),
    db: Session = Depends(get_db)
):
    """Register a new beneficiary."""
    return BeneficiaryService(db).create_beneficiary(draft, actor)


@router.get("/{beneficiary_id}", response_model=BeneficiaryRecord)
def get_beneficiary(beneficiary_id: str, db: Session = Depends(get_db)):
    """Get a single beneficiary with derived age."""
    return BeneficiaryService(db).get_beneficiary(beneficiary_id)


@router.put("/{beneficiary_id}", response_model=BeneficiaryRecord)
def update_beneficiary(
    beneficiary_id: str,
    draft: BeneficiaryDraft,
    actor: ActorContext = Depends(get_current_actor),
    db: Session = Depends(get_db)
):
    """Update a beneficiary in place."""
    return BeneficiaryService(db).update_beneficiary(beneficiary_id, draft)
