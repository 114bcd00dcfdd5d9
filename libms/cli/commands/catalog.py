# libms/cli/commands/catalog.py
import click
from libms.database import Database
from libms.repositories import BookRepository, StudentRepository, IssuedBookRepository
from ..utils import print_books_page, print_issues

@click.command()
@click.option('--prefix', default=None, help='Only list books whose name starts with this')
@click.option('--page', default=1, type=click.IntRange(min=1), help='Page number, starting at 1')
@click.option('--per-page', default=10, type=click.IntRange(min=1), help='Books per page')
def books(prefix: str, page: int, per_page: int):
    """List books one page at a time

    Example:
        libms books --per-page 5 --page 2
        libms books --prefix "Test Book"
    """
    with Database.get_instance().get_db() as session:
        book_repo = BookRepository(session)
        page_books, total = book_repo.paginate(prefix, page=page, per_page=per_page)
        print_books_page(page_books, page, per_page, total)

@click.command()
@click.argument('student_id')
@click.option('--current', 'which', flag_value='current', help='Only books not yet returned')
@click.option('--returned', 'which', flag_value='returned', help='Only returned books')
@click.option('--all', 'which', flag_value='all', default=True, help='Every issue record (default)')
def issued(student_id: str, which: str):
    """Show the books issued to a student

    STUDENT_ID is the library student id, e.g. TEST001.
    """
    with Database.get_instance().get_db() as session:
        student = StudentRepository(session).get_by_student_id(student_id)
        if not student:
            click.echo(click.style(f"\nStudent not found: {student_id}", fg='red'))
            raise click.exceptions.Exit(1)

        issue_repo = IssuedBookRepository(session)
        if which == 'current':
            issues = issue_repo.get_current_issues(student.id)
        elif which == 'returned':
            issues = issue_repo.get_returned_books(student.id)
        else:
            issues = issue_repo.get_issued_books(student.id)

        click.echo("\n" + click.style("Issued books for ", fg='blue') +
                   click.style(f"{student.full_name} ({student.student_id})", fg='cyan'))
        print_issues(issues)
