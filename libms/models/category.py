# libms/models/category.py
from sqlalchemy import Integer
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin
from .types import BoundedString

INACTIVE = 0
ACTIVE = 1

class Category(Base, TimestampMixin):
    __tablename__ = 'tblcategory'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str | None] = mapped_column('CategoryName', BoundedString(150), nullable=True, unique=True)
    status: Mapped[int | None] = mapped_column('Status', Integer, nullable=True)

    # Relationships
    books = relationship('Book', back_populates='category', passive_deletes='all')

    __table_args__ = {'sqlite_autoincrement': True, 'mysql_engine': 'InnoDB'}

    @property
    def is_active(self) -> bool:
        return self.status == ACTIVE

    def __repr__(self) -> str:
        return f"<Category id={self.id} name={self.name!r} status={self.status}>"
