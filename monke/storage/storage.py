"""
SQLite expense store.

The module hides all work with the expenses database:
- creating the schema (the expenses table) on first run;
- inserting new expense records;
- reading every record back ordered by day;
- deleting all records and restarting the id sequence.

ExpenseRepository wraps a single connection that lives for the whole
command. open_repository() is the way to get one: it creates the config
directory, opens the file, ensures the table and guarantees the connection
is closed on every exit path.
"""

import logging
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from monke.core.errors import SchemaMismatchError, StorageError
from monke.domain.domain import Expense

logger = logging.getLogger(__name__)

CREATE_TABLE_SQL = """
    CREATE TABLE IF NOT EXISTS expenses (
        "id" INTEGER NOT NULL PRIMARY KEY AUTOINCREMENT,
        "title" TEXT,
        "amount" REAL,
        "day" INTEGER,
        "category" TEXT
    )
"""


class ExpenseRepository:
    """
    Repository over the expenses table.

    Returns Expense domain objects instead of raw rows and translates
    sqlite3 failures into StorageError.

    Parameters
    ----------
    connection : sqlite3.Connection
        Open connection to the expense database. The repository does not
        own it; whoever opened it closes it.
    """

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._conn = connection

    def init_schema(self) -> None:
        """
        Create the expenses table if it does not exist yet.

        Columns:
        - id: auto-incrementing primary key (tracked in sqlite_sequence);
        - title: expense title;
        - amount: expense amount;
        - day: day of the month (1-28);
        - category: optional category, NULL or empty when absent.
        """
        try:
            self._conn.execute(CREATE_TABLE_SQL)
            self._conn.commit()
        except sqlite3.Error as e:
            raise StorageError(f"Error creating table: {e}") from e

    def add(self, title: str, amount: float, day: int, category: str | None = None) -> int:
        """
        Insert one expense.

        Parameters
        ----------
        title : str
            Non-empty title, already validated.
        amount : float
            Expense amount.
        day : int
            Day of the month, already validated.
        category : str, optional
            Category name. Stored as given; folding into "Uncategorized"
            happens when rendering.

        Returns
        -------
        int
            Identifier assigned to the new record.
        """
        try:
            cursor = self._conn.execute(
                "INSERT INTO expenses (title, amount, day, category) VALUES (?, ?, ?, ?)",
                (title, amount, day, category),
            )
            self._conn.commit()
        except sqlite3.OperationalError as e:
            if "no column named day" in str(e):
                raise SchemaMismatchError() from e
            raise StorageError(f"Error executing insert statement: {e}") from e
        except sqlite3.Error as e:
            raise StorageError(f"Error executing insert statement: {e}") from e

        logger.debug("Inserted expense id=%s day=%s", cursor.lastrowid, day)
        return cursor.lastrowid

    def list_expenses(self) -> list[Expense]:
        """
        Read every expense ordered by day ascending.

        Rows that cannot be turned into an Expense (for example a NULL
        amount written by another tool) are logged and skipped.

        Returns
        -------
        list[Expense]
            All readable records; ties on day keep insertion order.

        Raises
        ------
        SchemaMismatchError
            The table predates the day column.
        StorageError
            Any other database failure.
        """
        try:
            rows = self._conn.execute(
                "SELECT id, title, amount, day, category FROM expenses ORDER BY day ASC, id ASC"
            ).fetchall()
        except sqlite3.OperationalError as e:
            if "no such column: day" in str(e):
                raise SchemaMismatchError() from e
            raise StorageError(f"Error querying expenses: {e}") from e
        except sqlite3.Error as e:
            raise StorageError(f"Error querying expenses: {e}") from e

        expenses: list[Expense] = []
        for row in rows:
            try:
                expenses.append(_row_to_expense(row))
            except (TypeError, ValueError) as e:
                logger.error("Error scanning row %r: %s", row, e)
                continue
        return expenses

    def count(self) -> int:
        try:
            (total,) = self._conn.execute("SELECT COUNT(*) FROM expenses").fetchone()
        except sqlite3.Error as e:
            raise StorageError(f"Error counting expenses: {e}") from e
        return total

    def clear(self) -> int:
        """
        Delete every expense and restart id numbering from 1.

        The delete is committed before the sequence reset, so a failing
        reset only produces a warning and the records stay deleted.

        Returns
        -------
        int
            Number of deleted records.
        """
        try:
            cursor = self._conn.execute("DELETE FROM expenses")
            self._conn.commit()
        except sqlite3.Error as e:
            raise StorageError(f"Error deleting expenses: {e}") from e

        deleted = cursor.rowcount
        try:
            self._conn.execute("DELETE FROM sqlite_sequence WHERE name = 'expenses'")
            self._conn.commit()
        except sqlite3.Error as e:
            logger.warning("Could not reset sequence counter: %s", e)

        logger.info("Deleted %s expenses", deleted)
        return deleted


def _row_to_expense(row: tuple) -> Expense:
    expense_id, title, amount, day, category = row
    if title is None or amount is None or day is None:
        raise ValueError("missing required column value")
    return Expense(
        id=int(expense_id),
        title=str(title),
        amount=float(amount),
        day=int(day),
        category=category if category is None else str(category),
    )


@contextmanager
def open_repository(db_path: Path) -> Iterator[ExpenseRepository]:
    """
    Open the expense store for the duration of one command.

    Creates the parent directory when needed, opens the database, makes sure
    the table exists and closes the connection when the block exits,
    whether or not an exception was raised.

    Parameters
    ----------
    db_path : Path
        Location of the SQLite file. ":memory:" is accepted as well.

    Yields
    ------
    ExpenseRepository
        Repository bound to the open connection.
    """
    if str(db_path) != ":memory:":
        try:
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Error creating config directory: {e}") from e

    try:
        conn = sqlite3.connect(db_path)
    except sqlite3.Error as e:
        raise StorageError(f"Error opening database: {e}") from e

    try:
        repository = ExpenseRepository(conn)
        repository.init_schema()
        logger.debug("Opened expense store at %s", db_path)
        yield repository
    finally:
        conn.close()
