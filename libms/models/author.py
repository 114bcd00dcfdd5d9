# libms/models/author.py
from sqlalchemy import Integer
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin
from .types import BoundedString

class Author(Base, TimestampMixin):
    __tablename__ = 'tblauthors'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str | None] = mapped_column('AuthorName', BoundedString(159), nullable=True, unique=True)

    # Relationships
    books = relationship('Book', back_populates='author', passive_deletes='all')

    __table_args__ = {'sqlite_autoincrement': True, 'mysql_engine': 'InnoDB'}

    def __repr__(self) -> str:
        return f"<Author id={self.id} name={self.name!r}>"
