"""PostgreSQL storage backend for shared result databases."""

import psycopg2
import psycopg2.extras
from typing import List, Optional, Iterator
from .base import StorageBackend, GraphResult

_COLUMNS = (
    "graph6, num_vertices, num_edges, game_chromatic_number, "
    "first_vertex, first_color, nodes"
)


def _row_to_result(row) -> GraphResult:
    return GraphResult(
        graph6=row[0],
        num_vertices=row[1],
        num_edges=row[2],
        game_chromatic_number=row[3],
        first_vertex=row[4],
        first_color=row[5],
        nodes=row[6],
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


class PostgreSQLBackend(StorageBackend):
    """
    PostgreSQL storage implementation.

    Lets several machines working through one graph corpus share a single
    result table.
    """

    def __init__(
        self,
        host: str = "localhost",
        port: int = 5432,
        database: str = "coloring_game",
        user: str = "postgres",
        password: str = "",
    ):
        """
        Initialize PostgreSQL backend.

        Args:
            host: Database host
            port: Database port
            database: Database name
            user: Database user
            password: Database password (empty defers to libpq, e.g. PGPASSWORD)
        """
        self.host = host
        self.port = port
        self.database = database
        self.user = user

        self.conn = psycopg2.connect(
            host=host,
            port=port,
            database=database,
            user=user,
            password=password or None,
        )
        self.conn.autocommit = False  # Manual transaction control
        self._create_schema()

    def _create_schema(self) -> None:
        """Create database schema."""
        with self.conn.cursor() as cursor:
            cursor.execute(
                """
                CREATE TABLE IF NOT EXISTS game_results (
                    graph6 TEXT PRIMARY KEY,
                    num_vertices SMALLINT NOT NULL,
                    num_edges SMALLINT NOT NULL,
                    game_chromatic_number SMALLINT NOT NULL,
                    first_vertex SMALLINT,
                    first_color SMALLINT,
                    nodes BIGINT NOT NULL DEFAULT 0
                );

                CREATE INDEX IF NOT EXISTS idx_num_vertices ON game_results(num_vertices);
            """
            )
            self.conn.commit()

    def insert(self, result: GraphResult) -> bool:
        """Insert single result."""
        try:
            with self.conn.cursor() as cursor:
                cursor.execute(
                    f"INSERT INTO game_results ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s)",
                    _result_to_row(result),
                )
                return True
        except psycopg2.IntegrityError:  # Duplicate primary key
            self.conn.rollback()
            return False

    def insert_batch(self, results: List[GraphResult]) -> int:
        """Bulk insert with deduplication."""
        if not results:
            return 0

        with self.conn.cursor() as cursor:
            psycopg2.extras.execute_values(
                cursor,
                f"""
                INSERT INTO game_results ({_COLUMNS})
                VALUES %s
                ON CONFLICT (graph6) DO NOTHING
            """,
                [_result_to_row(r) for r in results],
                page_size=1000,
            )
            return cursor.rowcount if cursor.rowcount > 0 else len(results)

    def exists(self, graph6: str) -> bool:
        """Check if result exists."""
        with self.conn.cursor() as cursor:
            cursor.execute("SELECT 1 FROM game_results WHERE graph6 = %s", (graph6,))
            return cursor.fetchone() is not None

    def get(self, graph6: str) -> Optional[GraphResult]:
        """Retrieve result by graph6 string."""
        with self.conn.cursor() as cursor:
            cursor.execute(
                f"SELECT {_COLUMNS} FROM game_results WHERE graph6 = %s", (graph6,)
            )
            row = cursor.fetchone()
            if row:
                return _row_to_result(row)
            return None

    def iter_results(self, num_vertices: Optional[int] = None) -> Iterator[GraphResult]:
        """Iterate results ordered by graph6 (server-side cursor)."""
        with self.conn.cursor(name="results_cursor") as cursor:
            if num_vertices is None:
                cursor.execute(f"SELECT {_COLUMNS} FROM game_results ORDER BY graph6")
            else:
                cursor.execute(
                    f"SELECT {_COLUMNS} FROM game_results WHERE num_vertices = %s ORDER BY graph6",
                    (num_vertices,),
                )
            for row in cursor:
                yield _row_to_result(row)

    def count_results(self, num_vertices: Optional[int] = None) -> int:
        """Count results."""
        with self.conn.cursor() as cursor:
            if num_vertices is None:
                cursor.execute("SELECT COUNT(*) FROM game_results")
            else:
                cursor.execute(
                    "SELECT COUNT(*) FROM game_results WHERE num_vertices = %s",
                    (num_vertices,),
                )
            return cursor.fetchone()[0]

    def get_max_game_chromatic_number(self) -> int:
        """Get maximum stored game chromatic number."""
        with self.conn.cursor() as cursor:
            cursor.execute("SELECT MAX(game_chromatic_number) FROM game_results")
            result = cursor.fetchone()[0]
            return result if result is not None else -1

    def flush(self) -> None:
        """Commit pending transactions."""
        self.conn.commit()

    def close(self) -> None:
        """Close database connection."""
        self.conn.commit()
        self.conn.close()
