"""SQLite storage backend for local runs."""

import sqlite3
import logging
from typing import List, Optional, Iterator
from .base import StorageBackend, GraphResult

logger = logging.getLogger(__name__)

_COLUMNS = (
    "graph6, num_vertices, num_edges, game_chromatic_number, "
    "first_vertex, first_color, nodes"
)


def _row_to_result(row: sqlite3.Row) -> GraphResult:
    return GraphResult(
        graph6=row["graph6"],
        num_vertices=row["num_vertices"],
        num_edges=row["num_edges"],
        game_chromatic_number=row["game_chromatic_number"],
        first_vertex=row["first_vertex"],
        first_color=row["first_color"],
        nodes=row["nodes"],
    )


def _result_to_row(result: GraphResult) -> tuple:
    return (
        result.graph6,
        result.num_vertices,
        result.num_edges,
        result.game_chromatic_number,
        result.first_vertex,
        result.first_color,
        result.nodes,
    )


class SQLiteBackend(StorageBackend):
    """
    SQLite storage implementation.

    One row per solved graph, keyed by its graph6 string, so a rerun over
    the same corpus skips everything already solved.
    """

    def __init__(self, db_path: str = "game_chromatic.db", fast_mode: bool = False):
        """
        Initialize SQLite backend.

        Args:
            db_path: Path to database file (use ":memory:" for in-memory)
            fast_mode: Disable durability (journal_mode=OFF, synchronous=OFF) for speed
                      WARNING: No crash recovery! Only for batches that can be re-run.
        """
        self.db_path = db_path
        self.fast_mode = fast_mode
        self.conn = sqlite3.connect(db_path, timeout=30.0)
        self.conn.row_factory = sqlite3.Row  # Enable dict-like access
        self._create_schema()
        self._optimize()

    def _create_schema(self) -> None:
        """Create database schema."""
        self.conn.executescript(
            """
            CREATE TABLE IF NOT EXISTS game_results (
                graph6 TEXT PRIMARY KEY,                 -- canonical graph6 encoding
                num_vertices INTEGER NOT NULL,           -- 1..64
                num_edges INTEGER NOT NULL,
                game_chromatic_number INTEGER NOT NULL,  -- 1..63
                first_vertex INTEGER,                    -- Alice's opening move
                first_color INTEGER,
                nodes INTEGER NOT NULL DEFAULT 0         -- search effort
            );

            CREATE INDEX IF NOT EXISTS idx_num_vertices ON game_results(num_vertices);
        """
        )
        self.conn.commit()

    def _optimize(self) -> None:
        """Apply SQLite pragmas."""
        if self.fast_mode:
            self.conn.executescript(
                """
                PRAGMA journal_mode = OFF;           -- No journal (NO CRASH RECOVERY!)
                PRAGMA synchronous = OFF;            -- Don't wait for disk writes
                PRAGMA temp_store = MEMORY;
            """
            )
            logger.warning("FAST MODE ENABLED: No crash recovery! Database may corrupt if process dies.")
        else:
            self.conn.executescript(
                """
                PRAGMA journal_mode = WAL;           -- Write-Ahead Logging
                PRAGMA synchronous = NORMAL;         -- Balanced durability
                PRAGMA temp_store = MEMORY;
            """
            )
            logger.debug(f"SQLite database opened: {self.db_path}")

    def insert(self, result: GraphResult) -> bool:
        """Insert single result."""
        try:
            self.conn.execute(
                f"INSERT INTO game_results ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?)",
                _result_to_row(result),
            )
            return True
        except sqlite3.IntegrityError:  # Duplicate primary key
            return False

    def insert_batch(self, results: List[GraphResult]) -> int:
        """Bulk insert with INSERT OR IGNORE deduplication."""
        if not results:
            return 0
        cursor = self.conn.executemany(
            f"INSERT OR IGNORE INTO game_results ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?)",
            [_result_to_row(r) for r in results],
        )
        return cursor.rowcount if cursor.rowcount > 0 else len(results)

    def exists(self, graph6: str) -> bool:
        """Check if result exists."""
        cursor = self.conn.execute(
            "SELECT 1 FROM game_results WHERE graph6 = ?", (graph6,)
        )
        return cursor.fetchone() is not None

    def get(self, graph6: str) -> Optional[GraphResult]:
        """Retrieve result by graph6 string."""
        cursor = self.conn.execute(
            f"SELECT {_COLUMNS} FROM game_results WHERE graph6 = ?", (graph6,)
        )
        row = cursor.fetchone()
        if row:
            return _row_to_result(row)
        return None

    def iter_results(self, num_vertices: Optional[int] = None) -> Iterator[GraphResult]:
        """Iterate results ordered by graph6."""
        if num_vertices is None:
            cursor = self.conn.execute(
                f"SELECT {_COLUMNS} FROM game_results ORDER BY graph6"
            )
        else:
            cursor = self.conn.execute(
                f"SELECT {_COLUMNS} FROM game_results WHERE num_vertices = ? ORDER BY graph6",
                (num_vertices,),
            )
        for row in cursor:
            yield _row_to_result(row)

    def count_results(self, num_vertices: Optional[int] = None) -> int:
        """Count results."""
        if num_vertices is None:
            cursor = self.conn.execute("SELECT COUNT(*) FROM game_results")
        else:
            cursor = self.conn.execute(
                "SELECT COUNT(*) FROM game_results WHERE num_vertices = ?", (num_vertices,)
            )
        return cursor.fetchone()[0]

    def get_max_game_chromatic_number(self) -> int:
        """Get maximum stored game chromatic number."""
        cursor = self.conn.execute("SELECT MAX(game_chromatic_number) FROM game_results")
        result = cursor.fetchone()[0]
        return result if result is not None else -1

    def flush(self) -> None:
        """Commit pending transactions."""
        self.conn.commit()

    def close(self) -> None:
        """Close database connection."""
        self.conn.commit()
        self.conn.close()
