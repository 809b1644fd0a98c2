"""Writing DRAT proofs of unsatisfiability."""

from __future__ import annotations

import gzip
import os
from collections.abc import Iterable
from typing import TextIO


class DratWriter:
    """Write added and deleted clauses to a DRAT proof file, optionally gzipped."""

    def __init__(self, path: str | os.PathLike[str], compressed: bool = False) -> None:
        if compressed:
            self._stream: TextIO = gzip.open(path, "wt", encoding="ascii")
        else:
            self._stream = open(path, "w", encoding="ascii")

    def _write_clause(self, clause: Iterable[int]) -> None:
        self._stream.write("".join(f"{literal} " for literal in clause) + "0 \n")

    def add_clause(self, clause: Iterable[int]) -> None:
        """Record the addition of ``clause``."""
        self._write_clause(clause)

    def delete_clause(self, clause: Iterable[int]) -> None:
        """Record the deletion of ``clause``."""
        self._stream.write("d ")
        self._write_clause(clause)

    def close(self) -> None:
        """Flush and close the proof file."""
        if not self._stream.closed:
            self._stream.close()

    def __enter__(self) -> DratWriter:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


class DratProofHandler:
    """Receive proof steps from a solver and pass them to a DRAT writer."""

    def __init__(self, path: str | os.PathLike[str], compressed: bool = False) -> None:
        self._writer = DratWriter(path, compressed)

    def add_clause(self, clause: Iterable[int]) -> None:
        """Record a learnt clause."""
        self._writer.add_clause(clause)

    def delete_clause(self, clause: Iterable[int]) -> None:
        """Record a deleted clause."""
        self._writer.delete_clause(clause)

    def close(self) -> None:
        """Close the underlying proof file."""
        self._writer.close()

    def __enter__(self) -> DratProofHandler:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()