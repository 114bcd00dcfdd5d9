# libms/repositories/admin.py
from typing import Optional
from sqlalchemy.orm import Session
from ..models import Admin, utcnow
from ..security import hash_like, verify_password

class AdminRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, admin_id: int) -> Optional[Admin]:
        """Get an admin by primary key"""
        return self.session.query(Admin).filter(Admin.id == admin_id).first()

    def get_by_username(self, username: str) -> Optional[Admin]:
        """Get an admin by login name"""
        return self.session.query(Admin).filter(Admin.username == username).first()

    def create(
        self,
        username: str,
        password_hash: str,
        full_name: Optional[str] = None,
        email: Optional[str] = None
    ) -> Admin:
        """Create an admin account from an already hashed password"""
        admin = Admin(username=username, password=password_hash, full_name=full_name, email=email)
        self.session.add(admin)
        self.session.flush()
        return admin

    def authenticate(self, username: str, password: str) -> Optional[Admin]:
        """Return the admin if the username exists and the password matches"""
        admin = self.get_by_username(username)
        if admin and verify_password(password, admin.password):
            return admin
        return None

    def change_password(self, admin_id: int, current_password: str, new_password: str) -> bool:
        """Replace the password after checking the current one. False if the admin is missing or the check fails."""
        admin = self.get_by_id(admin_id)
        if not admin or not verify_password(current_password, admin.password):
            return False
        admin.password = hash_like(admin.password, new_password)
        admin.updated_at = utcnow()
        self.session.flush()
        return True
