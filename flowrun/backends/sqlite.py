"""SQLite workflow store for persistent storage.

This backend uses aiosqlite so saved workflows survive process restarts.
"""

import json
from pathlib import Path
from typing import List, Optional

import aiosqlite

from flowrun.backends.base import WorkflowRecord, _now


class SQLiteWorkflowStore:
    """SQLite-based workflow storage backend.

    The database schema:
    - id: TEXT PRIMARY KEY
    - name: TEXT
    - description: TEXT
    - nodes: TEXT (JSON-encoded list)
    - edges: TEXT (JSON-encoded list)
    - created_at: TEXT (ISO-8601)
    - updated_at: TEXT (ISO-8601)
    """

    def __init__(self, db_path: str = "flowrun_workflows.db"):
        """Initialize SQLite store.

        Args:
            db_path: Path to SQLite database file
        """
        self.db_path = db_path
        self._initialized = False

    async def _ensure_initialized(self):
        """Ensure database and table exist."""
        if self._initialized:
            return

        db_dir = Path(self.db_path).parent
        if db_dir and not db_dir.exists():
            db_dir.mkdir(parents=True, exist_ok=True)

        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                CREATE TABLE IF NOT EXISTS workflows (
                    id TEXT PRIMARY KEY,
                    name TEXT NOT NULL,
                    description TEXT,
                    nodes TEXT NOT NULL,
                    edges TEXT NOT NULL,
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
                """
            )
            await db.execute(
                """
                CREATE INDEX IF NOT EXISTS idx_workflows_created_at
                ON workflows(created_at)
                """
            )
            await db.commit()

        self._initialized = True

    async def save(self, record: WorkflowRecord) -> None:
        """Insert a workflow or update it.

        An update keeps the stored created_at and stamps updated_at with
        the current time.

        Args:
            record: Workflow to persist
        """
        await self._ensure_initialized()

        nodes_json = json.dumps(record.nodes)
        edges_json = json.dumps(record.edges)

        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO workflows (id, name, description, nodes, edges, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(id)
                DO UPDATE SET
                    name = excluded.name,
                    description = excluded.description,
                    nodes = excluded.nodes,
                    edges = excluded.edges,
                    updated_at = ?
                """,
                (
                    record.id,
                    record.name,
                    record.description,
                    nodes_json,
                    edges_json,
                    record.created_at.isoformat(),
                    record.updated_at.isoformat(),
                    _now().isoformat(),
                ),
            )
            await db.commit()

    async def load(self, workflow_id: str) -> Optional[WorkflowRecord]:
        """Load a workflow.

        Args:
            workflow_id: Workflow identifier

        Returns:
            WorkflowRecord or None if not found
        """
        await self._ensure_initialized()

        async with aiosqlite.connect(self.db_path) as db:
            async with db.execute(
                "SELECT id, name, description, nodes, edges, created_at, updated_at "
                "FROM workflows WHERE id = ?",
                (workflow_id,),
            ) as cursor:
                row = await cursor.fetchone()
                return self._row_to_record(row) if row else None

    async def delete(self, workflow_id: str) -> None:
        await self._ensure_initialized()

        async with aiosqlite.connect(self.db_path) as db:
            await db.execute("DELETE FROM workflows WHERE id = ?", (workflow_id,))
            await db.commit()

    async def exists(self, workflow_id: str) -> bool:
        await self._ensure_initialized()

        async with aiosqlite.connect(self.db_path) as db:
            async with db.execute(
                "SELECT 1 FROM workflows WHERE id = ? LIMIT 1",
                (workflow_id,),
            ) as cursor:
                row = await cursor.fetchone()
                return row is not None

    async def list_workflows(self) -> List[WorkflowRecord]:
        """List all workflows.

        Returns:
            Records ordered by created_at (newest first)
        """
        await self._ensure_initialized()

        async with aiosqlite.connect(self.db_path) as db:
            async with db.execute(
                "SELECT id, name, description, nodes, edges, created_at, updated_at "
                "FROM workflows ORDER BY created_at DESC"
            ) as cursor:
                rows = await cursor.fetchall()
                return [self._row_to_record(row) for row in rows]

    @staticmethod
    def _row_to_record(row) -> WorkflowRecord:
        return WorkflowRecord.from_dict(
            {
                "id": row[0],
                "name": row[1],
                "description": row[2],
                "nodes": json.loads(row[3]),
                "edges": json.loads(row[4]),
                "created_at": row[5],
                "updated_at": row[6],
            }
        )

    def __repr__(self) -> str:
        return f"SQLiteWorkflowStore(db_path='{self.db_path}')"
