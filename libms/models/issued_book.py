# libms/models/issued_book.py
from datetime import datetime
from decimal import Decimal
from sqlalchemy import Integer, DateTime, ForeignKey, Index, func
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, utcnow
from .types import StrictNumeric

NOT_RETURNED = 0
RETURNED = 1

class IssuedBookDetail(Base):
    """A book lent to a student, with its due/return date and any fine charged"""
    __tablename__ = 'tblissuedbookdetails'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    book_id: Mapped[int | None] = mapped_column(
        'BookId', Integer, ForeignKey('tblbooks.id', ondelete='CASCADE', name='FK_issuedbook_book'), nullable=True
    )
    student_id: Mapped[int | None] = mapped_column(
        'StudentID', Integer, ForeignKey('tblstudents.id', ondelete='CASCADE', name='FK_issuedbook_student'),
        nullable=True
    )
    issued_at: Mapped[datetime | None] = mapped_column(
        'IssuesDate', DateTime, nullable=True, default=utcnow, server_default=func.current_timestamp()
    )
    return_date: Mapped[datetime | None] = mapped_column('ReturnDate', DateTime, nullable=True)
    # Column name is misspelled in the deployed schema
    return_status: Mapped[int | None] = mapped_column('RetrunStatus', Integer, default=NOT_RETURNED, server_default='0')
    fine: Mapped[Decimal | None] = mapped_column('Fine', StrictNumeric(10, 2), nullable=True)

    # Relationships
    book = relationship('Book', back_populates='issues')
    student = relationship('Student', back_populates='issues')

    __table_args__ = (
        Index('idx_issued_student_status', 'StudentID', 'RetrunStatus'),

        {'sqlite_autoincrement': True, 'mysql_engine': 'InnoDB'}
    )

    @property
    def is_returned(self) -> bool:
        return self.return_status == RETURNED

    def __repr__(self) -> str:
        return f"<IssuedBookDetail id={self.id} book_id={self.book_id} student_id={self.student_id}>"
