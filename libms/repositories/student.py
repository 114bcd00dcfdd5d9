# libms/repositories/student.py
from typing import List, Optional
from sqlalchemy.orm import Session
from ..models import Student, utcnow
from ..models.student import ACTIVE, BLOCKED
from ..security import hash_like, verify_password

class StudentRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, student_pk: int) -> Optional[Student]:
        """Get a student by primary key"""
        return self.session.query(Student).filter(Student.id == student_pk).first()

    def get_by_student_id(self, student_id: str) -> Optional[Student]:
        """Get a student by the library-issued student id (e.g. SID001)"""
        return self.session.query(Student).filter(Student.student_id == student_id).first()

    def get_by_email(self, email: str) -> Optional[Student]:
        return self.session.query(Student).filter(Student.email == email).first()

    def register(
        self,
        student_id: str,
        full_name: str,
        email: str,
        mobile_number: str,
        password_hash: str,
        status: int = ACTIVE
    ) -> Student:
        """Sign a student up.

        Raises IntegrityError if the student id or email is already taken.
        """
        student = Student(
            student_id=student_id,
            full_name=full_name,
            email=email,
            mobile_number=mobile_number,
            password=password_hash,
            status=status
        )
        self.session.add(student)
        self.session.flush()
        return student

    def search_by_student_id(self, pattern: str) -> List[Student]:
        """Find students whose id matches a SQL LIKE pattern ('SID001', 'SID%', '%')"""
        return (
            self.session.query(Student)
            .filter(Student.student_id.like(pattern))
            .order_by(Student.id)
            .all()
        )

    def set_status(self, student_pk: int, status: int) -> Optional[Student]:
        student = self.get_by_id(student_pk)
        if not student:
            return None
        student.status = status
        student.updated_at = utcnow()
        self.session.flush()
        return student

    def block(self, student_pk: int) -> Optional[Student]:
        return self.set_status(student_pk, BLOCKED)

    def activate(self, student_pk: int) -> Optional[Student]:
        return self.set_status(student_pk, ACTIVE)

    def update_profile(
        self,
        student_pk: int,
        full_name: Optional[str] = None,
        mobile_number: Optional[str] = None
    ) -> Optional[Student]:
        """Update name and mobile number. The email is the login and cannot be changed here."""
        student = self.get_by_id(student_pk)
        if not student:
            return None
        if full_name is not None:
            student.full_name = full_name
        if mobile_number is not None:
            student.mobile_number = mobile_number
        student.updated_at = utcnow()
        self.session.flush()
        return student

    def authenticate(self, email: str, password: str) -> Optional[Student]:
        """Return the student for a matching email and password, or None.

        Blocked students cannot log in even with the right password.
        """
        student = self.get_by_email(email)
        if not student or not verify_password(password, student.password):
            return None
        if student.status != ACTIVE:
            return None
        return student

    def change_password(self, email: str, current_password: str, new_password: str) -> bool:
        """Replace the password after checking the current one"""
        student = self.get_by_email(email)
        if not student or not verify_password(current_password, student.password):
            return False
        student.password = hash_like(student.password, new_password)
        student.updated_at = utcnow()
        self.session.flush()
        return True
