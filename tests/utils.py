# tests/utils.py
from typing import List, Dict, Any
from sqlalchemy import inspect, text
from sqlalchemy.orm import Session

# Login password of the sample students
STUDENT_PASSWORD = "Password@123"

class DBInspector:
    def __init__(self, session: Session):
        self.session = session
        self.inspector = inspect(session.connection())

    def get_table_info(self, table_name: str) -> Dict[str, Any]:
        """Get detailed information about a specific table"""
        return {
            'columns': self.inspector.get_columns(table_name),
            'foreign_keys': self.inspector.get_foreign_keys(table_name)
        }

    def get_all_tables(self) -> List[str]:
        """Get list of all tables in database"""
        return self.inspector.get_table_names()

    def count_rows(self, table_name: str) -> int:
        """Get row count for a table"""
        result = self.session.execute(text(f"SELECT COUNT(*) FROM {table_name}"))
        return result.scalar()

    def describe_table(self, table_name: str) -> str:
        """Get a human-readable description of a table"""
        info = self.get_table_info(table_name)

        description = [f"\nTable: {table_name}"]
        description.append("\nColumns:")
        for col in info['columns']:
            nullable = "NULL" if col['nullable'] else "NOT NULL"
            default = f"DEFAULT {col['default']}" if col['default'] is not None else ""
            description.append(f"  - {col['name']}: {col['type']} {nullable} {default}")

        if info['foreign_keys']:
            description.append("\nForeign Keys:")
            for fk in info['foreign_keys']:
                ondelete = fk.get('options', {}).get('ondelete')
                description.append(
                    f"  - {', '.join(fk['constrained_columns'])} -> "
                    f"{fk['referred_table']}({', '.join(fk['referred_columns'])})"
                    + (f" ON DELETE {ondelete}" if ondelete else "")
                )

        description.append(f"\nRow Count: {self.count_rows(table_name)}")
        return "\n".join(description)

def print_table_schema(session: Session, table_name: str):
    """Print detailed schema information for a table"""
    print(DBInspector(session).describe_table(table_name))

def compare_model_to_db(session: Session, model_class) -> List[str]:
    """Compare a model's columns with the columns of its table"""
    differences = []
    db_info = DBInspector(session).get_table_info(model_class.__tablename__)

    # Column.name is the database name (e.g. BookName), not the attribute key
    model_columns = {c.name for c in inspect(model_class).columns}
    db_columns = {c['name'] for c in db_info['columns']}

    for col_name in sorted(model_columns - db_columns):
        differences.append(f"Column '{col_name}' exists in model but not in database")
    for col_name in sorted(db_columns - model_columns):
        differences.append(f"Column '{col_name}' exists in database but not in model")

    return differences
