from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session
from app.crud import country as crud_country
from app.db.deps import get_db
from app.db.init_db import init_db
from app.schemas.schemas import CountryOut
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/countries")
def list_countries(db: Session = Depends(get_db)):
    try:
        countries = crud_country.get_countries(db)
    except Exception as e:
        logger.error(f"Countries fetch error: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch countries")
    return {"success": True, "data": [CountryOut.model_validate(c) for c in countries]}

@router.get("/init")
def initialize_database(request: Request):
    """Re-run schema creation and seeding. Already-populated tables are untouched."""
    try:
        seeded = init_db(request.app.state.engine, request.app.state.session_factory)
    except Exception as e:
        logger.error(f"Database initialization error: {e}")
        raise HTTPException(status_code=500, detail="Failed to initialize database")
    return {
        "success": True,
        "message": "Database initialized and seeded successfully",
        "data": seeded,
    }
