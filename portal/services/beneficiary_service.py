"""
Beneficiary service - registration and directory queries.
"""
import logging
from sqlalchemy.orm import Session
from sqlalchemy import func, or_
from portal.dependencies import ActorContext
from portal.exceptions import NotFoundError, ValidationError
from portal.models.beneficiary import Beneficiary
from portal.schemas.beneficiary import BeneficiaryDraft
from portal.utils.constants import BENEFICIARY_ORDERINGS
from typing import List, Optional

logger = logging.getLogger(__name__)


class BeneficiaryService:
    """Business logic for beneficiary records."""

    def __init__(self, db: Session):
        self.db = db

    def _draft_values(self, draft: BeneficiaryDraft) -> dict:
        values = draft.model_dump()
        values["gender"] = draft.gender.value
        values["disability_type"] = draft.disability_type.value
        if draft.guardian_email is not None:
            values["guardian_email"] = str(draft.guardian_email)
        return values

    def create_beneficiary(self, draft: BeneficiaryDraft, actor: ActorContext) -> Beneficiary:
        """Insert a new beneficiary stamped with the creating user."""
        beneficiary = Beneficiary(**self._draft_values(draft), created_by=actor.user_id)
        self.db.add(beneficiary)
        self.db.commit()
        self.db.refresh(beneficiary)
        logger.info(f"Beneficiary {beneficiary.id} created by {actor.user_id}")
        return beneficiary

    def update_beneficiary(self, beneficiary_id: str, draft: BeneficiaryDraft) -> Beneficiary:
        """Overwrite a beneficiary in place."""
        beneficiary = self.get_beneficiary(beneficiary_id)
        for key, value in self._draft_values(draft).items():
            setattr(beneficiary, key, value)
        self.db.commit()
        self.db.refresh(beneficiary)
        logger.info(f"Beneficiary {beneficiary.id} updated")
        return beneficiary

    def get_beneficiary(self, beneficiary_id: str) -> Beneficiary:
        beneficiary = self.db.get(Beneficiary, beneficiary_id)
        if beneficiary is None:
            raise NotFoundError(f"Beneficiary {beneficiary_id} not found")
        return beneficiary

    def list_beneficiaries(
        self,
        order_by: str = "name",
        search: Optional[str] = None
    ) -> List[Beneficiary]:
        """
        Fetch all beneficiaries.

        Args:
            order_by: ``name`` (A-Z) or ``created_at`` (newest first)
            search: Case-insensitive match on name, guardian name or city

        Returns:
            List of beneficiaries
        """
        if order_by not in BENEFICIARY_ORDERINGS:
            raise ValidationError(f"order_by must be one of: {', '.join(BENEFICIARY_ORDERINGS)}")

        query = self.db.query(Beneficiary)

        if search:
            term = search.lower()
            query = query.filter(or_(
                func.lower(Beneficiary.name).contains(term, autoescape=True),
                func.lower(Beneficiary.guardian_name).contains(term, autoescape=True),
                func.lower(Beneficiary.city).contains(term, autoescape=True),
            ))

        if order_by == "created_at":
            query = query.order_by(Beneficiary.created_at.desc())
        else:
            query = query.order_by(Beneficiary.name)

        return query.all()

    def count(self) -> int:
        return self.db.query(func.count(Beneficiary.id)).scalar() or 0
