"""Abstract base class for result storage backends."""

from abc import ABC, abstractmethod
from typing import List, Optional, Iterator
from dataclasses import dataclass


@dataclass
class GraphResult:
    """
    Solved game chromatic number of one graph.
    """

    graph6: str  # Canonical graph6 encoding (primary key)
    num_vertices: int
    num_edges: int
    game_chromatic_number: int  # Smallest palette size Alice wins with
    first_vertex: Optional[int] = None  # Alice's opening move at that palette size
    first_color: Optional[int] = None
    nodes: int = 0  # Search nodes spent over all palette sizes tried


class StorageBackend(ABC):
    """Abstract interface for result storage."""

    @abstractmethod
    def insert(self, result: GraphResult) -> bool:
        """
        Insert single result.

        Args:
            result: Result to insert

        Returns:
            True if inserted, False if the graph was already stored
        """
        pass

    @abstractmethod
    def insert_batch(self, results: List[GraphResult]) -> int:
        """
        Bulk insert results, skipping graphs already stored.

        Args:
            results: List of results to insert

        Returns:
            Number of results attempted
        """
        pass

    @abstractmethod
    def exists(self, graph6: str) -> bool:
        """
        Check if a graph already has a stored result.

        Args:
            graph6: Canonical graph6 string

        Returns:
            True if exists
        """
        pass

    @abstractmethod
    def get(self, graph6: str) -> Optional[GraphResult]:
        """
        Retrieve result by graph6 string.

        Args:
            graph6: Canonical graph6 string

        Returns:
            GraphResult or None if not found
        """
        pass

    @abstractmethod
    def iter_results(self, num_vertices: Optional[int] = None) -> Iterator[GraphResult]:
        """
        Iterate stored results, optionally only graphs of one order.

        Args:
            num_vertices: Optional vertex count filter

        Yields:
            Stored results ordered by graph6 string
        """
        pass

    @abstractmethod
    def count_results(self, num_vertices: Optional[int] = None) -> int:
        """
        Count stored results, optionally filtered by vertex count.

        Args:
            num_vertices: Optional vertex count filter

        Returns:
            Result count
        """
        pass

    @abstractmethod
    def get_max_game_chromatic_number(self) -> int:
        """
        Get the largest stored game chromatic number.

        Returns:
            Maximum value, or -1 if empty
        """
        pass

    @abstractmethod
    def flush(self) -> None:
        """Ensure all pending writes are persisted."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Cleanup and close connection."""
        pass

    def __enter__(self):
        """Context manager support."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager cleanup."""
        self.close()
