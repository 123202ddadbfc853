"""
Database initialization script.

Creates the portal tables and optionally imports beneficiaries from a CSV
file whose columns match the registration form fields.
Run this once before starting the API server.
"""
import argparse
import os
import sys
import pandas as pd
from tqdm import tqdm
import logging
from pydantic import ValidationError

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from portal.config import ensure_directories
from portal.database import SessionLocal, init_db
from portal.dependencies import ActorContext
from portal.schemas.beneficiary import BeneficiaryDraft
from portal.services.beneficiary_service import BeneficiaryService

# Setup logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

SEED_USER = "seed-script"


def clean_row(row: pd.Series) -> dict:
    """Drop empty cells so optional fields fall back to their defaults."""
    values = {}
    for key, value in row.items():
        if pd.isna(value):
            continue
        values[str(key).strip()] = str(value).strip()
    return values


def load_beneficiaries(db, csv_file: str) -> int:
    """Validate and insert beneficiaries from a CSV file."""
    logger.info(f"Loading beneficiaries from {csv_file}...")

    df = pd.read_csv(csv_file, dtype=str)
    service = BeneficiaryService(db)
    actor = ActorContext(user_id=SEED_USER)

    loaded = 0
    for idx, row in tqdm(df.iterrows(), total=len(df), desc="    Rows"):
        try:
            draft = BeneficiaryDraft(**clean_row(row))
        except ValidationError as e:
            first = e.errors()[0]
            logger.warning(f"  Row {idx + 2} skipped: {'.'.join(str(p) for p in first['loc'])}: {first['msg']}")
            continue
        service.create_beneficiary(draft, actor)
        loaded += 1

    logger.info(f"Loaded {loaded} of {len(df)} beneficiaries")
    return loaded


def main():
    parser = argparse.ArgumentParser(description="Initialize the portal database")
    parser.add_argument("--beneficiaries-csv", help="CSV file of beneficiaries to import")
    args = parser.parse_args()

    ensure_directories()
    init_db()
    logger.info("Tables created")

    if not args.beneficiaries_csv:
        return

    if not os.path.exists(args.beneficiaries_csv):
        logger.error(f"File not found: {args.beneficiaries_csv}")
        sys.exit(1)

    db = SessionLocal()
    try:
        load_beneficiaries(db, args.beneficiaries_csv)
    except Exception as e:
        logger.error(f"Error during initialization: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
