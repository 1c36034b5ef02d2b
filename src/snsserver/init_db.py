"""Create every table directly from the ORM metadata (development only)."""

from snsserver.db.session import create_tables

if __name__ == "__main__":
    create_tables()
    print("Database initialized.")
