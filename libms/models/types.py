# libms/models/types.py
from decimal import Decimal, InvalidOperation
from sqlalchemy import Numeric, String
from sqlalchemy.types import TypeDecorator


class BoundedString(TypeDecorator):
    """String that rejects values longer than the column instead of truncating them"""
    impl = String
    cache_ok = True

    def process_bind_param(self, value, dialect):
        limit = self.impl.length
        if value is not None and limit is not None and len(value) > limit:
            raise ValueError(f"Data too long: {len(value)} characters exceeds column limit of {limit}")
        return value


class StrictNumeric(TypeDecorator):
    """Numeric column that refuses anything that does not parse as a finite decimal.

    Strings such as 'XYZ' or '$29.99' raise instead of being coerced to 0.
    """
    impl = Numeric
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if isinstance(value, bool):
            raise ValueError(f"Incorrect decimal value: '{value}'")
        if isinstance(value, Decimal):
            parsed = value
        else:
            try:
                parsed = Decimal(str(value).strip())
            except InvalidOperation:
                raise ValueError(f"Incorrect decimal value: '{value}'") from None
        if not parsed.is_finite():
            raise ValueError(f"Incorrect decimal value: '{value}'")
        return parsed
