from typing import List, Optional
from sqlalchemy.orm import Session
from app.models.models import Country

def get_countries(db: Session) -> List[Country]:
    return db.query(Country).order_by(Country.name.asc()).all()

def get_country_by_id(db: Session, country_id: int) -> Optional[Country]:
    return db.query(Country).filter(Country.id == country_id).first()

def get_country_by_code(db: Session, code: str) -> Optional[Country]:
    return db.query(Country).filter(Country.code == code.upper()).first()
