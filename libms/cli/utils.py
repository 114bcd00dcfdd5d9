import click
from typing import List, Optional
from libms.models import Book, IssuedBookDetail

def print_step(label: str, ok: bool, detail: Optional[str] = None) -> None:
    """Print one line of a multi-step operation as OK / FAILED"""
    status = click.style("OK", fg='green') if ok else click.style("FAILED", fg='red')
    line = click.style(f"{label}: ", fg='blue') + status
    if detail:
        line += click.style(f" ({detail})", fg='cyan')
    click.echo(line)

def print_books_page(books: List[Book], page: int, per_page: int, total: int) -> None:
    """Print one page of the book listing with its position in the whole"""
    pages = (total + per_page - 1) // per_page if total else 0
    click.echo("\n" + click.style("Books ", fg='blue') +
               click.style(f"page {page} of {pages}", fg='cyan') +
               click.style(f" ({total} total)", fg='blue'))

    if not books:
        click.echo(click.style("No books found", fg='yellow'))
        return

    for book in books:
        price = f"{book.price:.2f}" if book.price is not None else "-"
        click.echo(click.style(f"{book.id:>5} ", fg='cyan') +
                   f"{book.name}" +
                   click.style(f"  ISBN {book.isbn or '-'}  price {price}", fg='blue'))

def print_issues(issues: List[IssuedBookDetail]) -> None:
    """Print issue records with book name, ISBN and dates"""
    if not issues:
        click.echo(click.style("No issued books found", fg='yellow'))
        return

    for issue in issues:
        returned = issue.is_returned
        color = 'green' if returned else 'yellow'
        name = issue.book.name if issue.book else '(deleted book)'
        isbn = issue.book.isbn if issue.book else '-'
        click.echo(click.style(f"{issue.id:>5} ", fg='cyan') + f"{name}" +
                   click.style(f"  ISBN {isbn or '-'}", fg='blue'))
        issued_on = f"{issue.issued_at:%Y-%m-%d}" if issue.issued_at else "-"
        click.echo(click.style(f"      Issued: {issued_on}", fg='blue') +
                   click.style(f"  {'Returned' if returned else 'Due'}: ", fg=color) +
                   click.style(f"{issue.return_date:%Y-%m-%d}" if issue.return_date else '-', fg=color) +
                   (click.style(f"  Fine: {issue.fine}", fg='red') if issue.fine else ''))
