# libms/models/book.py
from decimal import Decimal
from sqlalchemy import Integer, ForeignKey, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, RegistrationMixin
from .types import BoundedString, StrictNumeric

class Book(Base, RegistrationMixin):
    __tablename__ = 'tblbooks'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str | None] = mapped_column('BookName', BoundedString(255), nullable=True)
    category_id: Mapped[int | None] = mapped_column(
        'CatId', Integer, ForeignKey('tblcategory.id', ondelete='CASCADE', name='FK_books_category'), nullable=True
    )
    author_id: Mapped[int | None] = mapped_column(
        'AuthorId', Integer, ForeignKey('tblauthors.id', ondelete='CASCADE', name='FK_books_author'), nullable=True
    )
    # Free text: the application never validated ISBNs, so letters and dashes are stored as given
    isbn: Mapped[str | None] = mapped_column('ISBNNumber', BoundedString(25), nullable=True)
    price: Mapped[Decimal | None] = mapped_column('BookPrice', StrictNumeric(10, 2), nullable=True)
    image: Mapped[str | None] = mapped_column('BookImage', BoundedString(250), nullable=True)
    is_issued: Mapped[int] = mapped_column('isIssued', Integer, default=0, server_default='0')

    # Relationships
    category = relationship('Category', back_populates='books')
    author = relationship('Author', back_populates='books')
    issues = relationship('IssuedBookDetail', back_populates='book', passive_deletes='all')

    __table_args__ = (
        # Search indexes
        Index('idx_books_name', 'BookName'),
        Index('idx_books_isbn', 'ISBNNumber'),

        {'sqlite_autoincrement': True, 'mysql_engine': 'InnoDB'}
    )

    def __repr__(self) -> str:
        return f"<Book id={self.id} name={self.name!r}>"
