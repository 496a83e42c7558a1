"""
Transposition table of proven positions.

Only exact results are cached: once a canonical state key is proven, the
proof is a fixed truth about that state and is never replaced. Visit and
win statistics stay in the search tree and are not persisted.

The durable form is a single SQLite file that is rewritten wholesale on
every save. A new database is built next to the target and moved into
place with os.replace, so an interrupted save leaves the previous file
intact. Load failures fall back to an empty table.
"""

from __future__ import annotations

import logging
import os
import sqlite3
from contextlib import closing
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, ItemsView, Optional

from avengement_solver.core.types import ProofStatus, TranspositionRecord
from avengement_solver.memory.schema import SCHEMA, SCHEMA_VERSION

logger = logging.getLogger(__name__)


class TranspositionTable:
    """
    In-memory map of state hash → TranspositionRecord.

    Attributes:
        proven_nodes: Running count of nodes proven across all runs
            sharing this table (persisted with it).
        hits / misses: Lookup counters for the current process.
        saved_at: Timestamp of the save this table was loaded from.
    """

    def __init__(self, proven_nodes: int = 0):
        self._table: Dict[str, TranspositionRecord] = {}
        self.proven_nodes = proven_nodes
        self.hits = 0
        self.misses = 0
        self.saved_at: Optional[str] = None

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def lookup(self, state_hash: str) -> Optional[TranspositionRecord]:
        """Fetch a proof and count the hit or miss."""
        record = self._table.get(state_hash)
        if record is None:
            self.misses += 1
        else:
            self.hits += 1
        return record

    def get(self, state_hash: str) -> Optional[TranspositionRecord]:
        """Fetch a proof without touching the counters."""
        return self._table.get(state_hash)

    @property
    def hit_rate(self) -> float:
        lookups = self.hits + self.misses
        return self.hits / lookups if lookups else 0.0

    # -------------------------------------------------------------------------
    # Recording
    # -------------------------------------------------------------------------

    def store(self, state_hash: str, record: TranspositionRecord) -> bool:
        """
        Record a proof. Entries are write-once.

        Returns:
            True if the key was new, False if it already held a proof.
            A conflicting proof is logged and discarded.
        """
        existing = self._table.get(state_hash)
        if existing is None:
            self._table[state_hash] = record
            return True

        if existing != record:
            logger.warning(
                "Conflicting proof for %s: keeping %s/P%d, discarding %s/P%d",
                state_hash,
                existing.proof_status.value, existing.proof_player,
                record.proof_status.value, record.proof_player,
            )
        return False

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, state_hash: object) -> bool:
        return state_hash in self._table

    def items(self) -> ItemsView[str, TranspositionRecord]:
        return self._table.items()

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    @classmethod
    def load(cls, path: str | Path) -> "TranspositionTable":
        """
        Load a table from disk.

        A missing or unreadable file yields an empty table; this never raises.
        """
        path = Path(path)
        if not path.exists():
            logger.info("No cache at %s - starting with an empty table", path)
            return cls()

        try:
            with closing(sqlite3.connect(f"{path.resolve().as_uri()}?mode=ro", uri=True)) as conn:
                meta = dict(conn.execute("SELECT key, value FROM metadata").fetchall())
                rows = conn.execute(
                    "SELECT state_hash, proof_status, proof_player FROM proofs"
                ).fetchall()

            table = cls(proven_nodes=int(meta.get("proven_nodes", 0)))
            table.saved_at = meta.get("timestamp")
            for state_hash, status, player in rows:
                table._table[state_hash] = TranspositionRecord(ProofStatus(status), int(player))
        except (sqlite3.Error, ValueError, TypeError) as e:
            logger.warning("Error loading cache %s: %s - starting with an empty table", path, e)
            return cls()

        logger.info("Loaded cache: %d positions, %d proven nodes", len(table), table.proven_nodes)
        return table

    def save(self, path: str | Path) -> bool:
        """
        Write the whole table to `path`, replacing any previous file.

        Returns:
            True on success. Failures are logged and reported as False.
        """
        path = Path(path)
        tmp_path = path.with_suffix(path.suffix + ".tmp")

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            if tmp_path.exists():
                tmp_path.unlink()

            with closing(sqlite3.connect(str(tmp_path))) as conn:
                conn.executescript(SCHEMA)
                conn.executemany(
                    "INSERT INTO proofs (state_hash, proof_status, proof_player) VALUES (?,?,?)",
                    [(h, r.proof_status.value, r.proof_player) for h, r in self._table.items()],
                )
                conn.executemany(
                    "INSERT INTO metadata (key, value) VALUES (?,?)",
                    [
                        ("proven_nodes", str(self.proven_nodes)),
                        ("timestamp", datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")),
                        ("size", str(len(self._table))),
                        ("schema_version", str(SCHEMA_VERSION)),
                    ],
                )
                conn.commit()

            os.replace(tmp_path, path)
        except (sqlite3.Error, OSError):
            logger.exception("Error saving cache to %s", path)
            try:
                tmp_path.unlink(missing_ok=True)
            except OSError:
                logger.debug("Could not remove %s", tmp_path)
            return False

        logger.info("Cache saved: %d positions", len(self._table))
        return True
