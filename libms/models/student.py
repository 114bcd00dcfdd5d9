# libms/models/student.py
from sqlalchemy import Integer
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, RegistrationMixin
from .types import BoundedString

BLOCKED = 0
ACTIVE = 1

class Student(Base, RegistrationMixin):
    __tablename__ = 'tblstudents'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    student_id: Mapped[str | None] = mapped_column('StudentId', BoundedString(100), nullable=True, unique=True)
    full_name: Mapped[str | None] = mapped_column('FullName', BoundedString(120), nullable=True)
    email: Mapped[str | None] = mapped_column('EmailId', BoundedString(120), nullable=True, unique=True)
    mobile_number: Mapped[str | None] = mapped_column('MobileNumber', BoundedString(11), nullable=True)
    password: Mapped[str | None] = mapped_column('Password', BoundedString(120), nullable=True)
    status: Mapped[int | None] = mapped_column('Status', Integer, nullable=True)

    # Relationships
    issues = relationship(
        'IssuedBookDetail', back_populates='student', passive_deletes='all'
    )

    __table_args__ = {'sqlite_autoincrement': True, 'mysql_engine': 'InnoDB'}

    @property
    def is_active(self) -> bool:
        return self.status == ACTIVE

    def __repr__(self) -> str:
        return f"<Student id={self.id} student_id={self.student_id!r} status={self.status}>"
