# libms/models/admin.py
from datetime import datetime
from sqlalchemy import Integer, DateTime, Index, func
from sqlalchemy.orm import Mapped, mapped_column
from .base import Base, utcnow
from .types import BoundedString

class Admin(Base):
    __tablename__ = 'admin'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    full_name: Mapped[str | None] = mapped_column('FullName', BoundedString(100), nullable=True)
    email: Mapped[str | None] = mapped_column('AdminEmail', BoundedString(120), nullable=True)
    username: Mapped[str] = mapped_column('UserName', BoundedString(100), nullable=False)
    password: Mapped[str] = mapped_column('Password', BoundedString(100), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        'updationDate', DateTime, nullable=False,
        default=utcnow, onupdate=utcnow, server_default=func.current_timestamp()
    )

    __table_args__ = (
        Index('idx_admin_username', 'UserName'),
        {'sqlite_autoincrement': True, 'mysql_engine': 'InnoDB'}
    )

    def __repr__(self) -> str:
        return f"<Admin id={self.id} username={self.username!r}>"
