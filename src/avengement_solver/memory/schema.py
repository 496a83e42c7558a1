"""
Database schema for the persisted transposition table.

Tables:
    proofs   - Canonical state hash → proof record
    metadata - Key-value store (proven_nodes, timestamp, size, schema_version)
"""

SCHEMA_VERSION = 1

SCHEMA = """
CREATE TABLE IF NOT EXISTS proofs (
    state_hash TEXT PRIMARY KEY,
    proof_status TEXT NOT NULL,
    proof_player INTEGER NOT NULL
);

CREATE TABLE IF NOT EXISTS metadata (
    key TEXT PRIMARY KEY,
    value TEXT
);
"""
