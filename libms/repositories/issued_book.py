# libms/repositories/issued_book.py

from datetime import datetime, timedelta
from decimal import Decimal
from typing import List, Optional
from sqlalchemy import func, or_
from sqlalchemy.orm import Session, joinedload
from libms.config import LOAN_PERIOD_DAYS
from libms.models import IssuedBookDetail, Book, Student, utcnow
from libms.models.issued_book import NOT_RETURNED, RETURNED

class IssuedBookRepository:
    """Repository for lending books to students and taking them back."""

    def __init__(self, session: Session):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def get_by_id(self, issue_id: int) -> Optional[IssuedBookDetail]:
        return (
            self.session.query(IssuedBookDetail)
            .filter(IssuedBookDetail.id == issue_id)
            .first()
        )

    def issue_book(
        self,
        student_pk: int,
        book_id: int,
        loan_days: int = LOAN_PERIOD_DAYS,
        issued_at: Optional[datetime] = None
    ) -> Optional[IssuedBookDetail]:
        """Lend a book to a student and mark the book as issued.

        Args:
            student_pk: Primary key of the student
            book_id: ID of the book being lent
            loan_days: Days until the book is due back
            issued_at: Issue time (default: now)

        Returns:
            The new IssuedBookDetail with its due date in return_date,
            or None if the student or book does not exist
        """
        book = self.session.query(Book).filter(Book.id == book_id).first()
        student = self.session.query(Student).filter(Student.id == student_pk).first()
        if not book or not student:
            return None

        issued_at = issued_at or utcnow()
        issue = IssuedBookDetail(
            book_id=book.id,
            student_id=student.id,
            issued_at=issued_at,
            return_date=issued_at + timedelta(days=loan_days),
            return_status=NOT_RETURNED
        )
        self.session.add(issue)
        book.is_issued = 1
        self.session.flush()
        return issue

    def return_book(
        self,
        issue_id: int,
        fine: Optional[Decimal | float | str] = None
    ) -> Optional[IssuedBookDetail]:
        """Record a book coming back.

        Args:
            issue_id: ID of the issue record
            fine: Optional fine charged for the loan

        Returns:
            The updated IssuedBookDetail, or None if the record does not exist
        """
        issue = self.get_by_id(issue_id)
        if not issue:
            return None

        issue.return_status = RETURNED
        issue.return_date = utcnow()
        issue.fine = fine
        if issue.book is not None:
            issue.book.is_issued = 0

        self.session.flush()
        return issue

    def get_issued_books(self, student_pk: int) -> List[IssuedBookDetail]:
        """Get every issue record of a student, with the book loaded, ordered by ID.

        Args:
            student_pk: Primary key of the student

        Returns:
            List of IssuedBookDetail objects; book name and ISBN are on .book
        """
        return (
            self.session.query(IssuedBookDetail)
            .options(joinedload(IssuedBookDetail.book))
            .filter(IssuedBookDetail.student_id == student_pk)
            .order_by(IssuedBookDetail.id)
            .all()
        )

    def get_current_issues(self, student_pk: int) -> List[IssuedBookDetail]:
        """Books the student still has"""
        return (
            self.session.query(IssuedBookDetail)
            .options(joinedload(IssuedBookDetail.book))
            .filter(
                IssuedBookDetail.student_id == student_pk,
                or_(
                    IssuedBookDetail.return_status == NOT_RETURNED,
                    IssuedBookDetail.return_status.is_(None)
                )
            )
            .order_by(IssuedBookDetail.id)
            .all()
        )

    def get_returned_books(self, student_pk: int) -> List[IssuedBookDetail]:
        """Books the student has brought back"""
        return (
            self.session.query(IssuedBookDetail)
            .options(joinedload(IssuedBookDetail.book))
            .filter(
                IssuedBookDetail.student_id == student_pk,
                IssuedBookDetail.return_status == RETURNED
            )
            .order_by(IssuedBookDetail.id)
            .all()
        )

    def count_outstanding(self, student_pk: Optional[int] = None) -> int:
        """Count books not yet returned, for one student or the whole library"""
        query = self.session.query(func.count(IssuedBookDetail.id)).filter(
            or_(
                IssuedBookDetail.return_status == NOT_RETURNED,
                IssuedBookDetail.return_status.is_(None)
            )
        )
        if student_pk is not None:
            query = query.filter(IssuedBookDetail.student_id == student_pk)
        return query.scalar()
