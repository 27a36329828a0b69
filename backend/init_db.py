from database import engine, Base, SessionLocal
from config import app_config
from constants import Role
from models import User
from sqlalchemy.orm import Session
from services.security import hash_password
import logging

logger = logging.getLogger(__name__)


def bootstrap_admin(db: Session, email: str | None, password: str | None) -> User | None:
    """
    Create the initial ADMIN account if credentials are configured.

    An existing account with the same email is left untouched, so restarts
    never reset a changed password.

    Returns:
        The created admin, or None if nothing was created
    """
    if not email or not password:
        return None

    if db.query(User).filter(User.email == email).first():
        logger.debug(f"Admin bootstrap skipped, {email} already exists")
        return None

    admin = User(
        name="Administrator",
        email=email,
        password=hash_password(password),
        role=Role.ADMIN.value
    )
    db.add(admin)
    db.commit()
    logger.info(f"Bootstrapped admin account {email}")
    return admin


def init_database():
    """Create all tables and the optional bootstrap admin"""
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        bootstrap_admin(db, app_config.ADMIN_EMAIL, app_config.ADMIN_PASSWORD)
    finally:
        db.close()

    logger.info("Database initialized")


if __name__ == "__main__":
    init_database()
