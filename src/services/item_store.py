"""SQLite-based jewelry item catalog for Atelier.

Stores cataloged items with their product details and the generated assets
saved against them. Uses aiosqlite for async database operations.
"""

import json
import logging
import uuid
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

import aiosqlite

from models.assets import GeneratedAsset
from models.jewelry import JewelryItem, JewelryType, ProductDetails

logger = logging.getLogger(__name__)

# Default database path
DEFAULT_DB_PATH = ".atelier/items.db"


class ItemNotFoundError(LookupError):
    """No item with the requested id."""

    pass


class ItemStore:
    """Async SQLite item catalog.

    Generated assets are stored exactly as the orchestrator hands them over
    (type, content, is_image) and are deleted with their item.
    """

    def __init__(self, db_path: str | Path = DEFAULT_DB_PATH):
        """Initialize item store with database path.

        Args:
            db_path: Path to SQLite database file. Parent directory
                     will be created if it doesn't exist.
        """
        self.db_path = Path(db_path)
        self.db: aiosqlite.Connection | None = None

    async def connect(self) -> None:
        """Open the connection and create the schema."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        self.db = await aiosqlite.connect(str(self.db_path))
        self.db.row_factory = aiosqlite.Row

        await self.db.execute("PRAGMA journal_mode=WAL")
        await self.db.execute("PRAGMA foreign_keys=ON")

        await self.db.execute("""
            CREATE TABLE IF NOT EXISTS jewelry_items (
                id TEXT PRIMARY KEY,
                name TEXT NOT NULL,
                type TEXT NOT NULL,
                description TEXT,
                details JSON NOT NULL,
                images JSON NOT NULL DEFAULT '[]',
                created_at TEXT NOT NULL
            )
        """)

        await self.db.execute("""
            CREATE TABLE IF NOT EXISTS generated_assets (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                item_id TEXT NOT NULL REFERENCES jewelry_items (id) ON DELETE CASCADE,
                type TEXT NOT NULL,
                content TEXT NOT NULL,
                is_image INTEGER NOT NULL,
                created_at TEXT NOT NULL
            )
        """)

        await self.db.execute("""
            CREATE INDEX IF NOT EXISTS idx_generated_assets_item
            ON generated_assets (item_id, id DESC)
        """)

        await self.db.commit()
        logger.info(f"Item store connected: {self.db_path}")

    async def close(self) -> None:
        """Close database connection."""
        if self.db:
            await self.db.close()
            self.db = None
            logger.info("Item store connection closed")

    def _require_db(self) -> aiosqlite.Connection:
        if self.db is None:
            raise RuntimeError("Database not connected. Call connect() first.")
        return self.db

    async def create_item(
        self,
        name: str,
        details: ProductDetails,
        description: Optional[str] = None,
        images: Optional[list[str]] = None,
    ) -> JewelryItem:
        """Catalog a new item.

        Args:
            name: Display name
            details: Product details (``type`` is taken from here)
            description: Optional saved description text
            images: Optional image references (URLs or data URLs)

        Returns:
            The created item

        Raises:
            RuntimeError: If database is not connected
        """
        db = self._require_db()
        item = JewelryItem(
            id=str(uuid.uuid4()),
            name=name,
            type=details.type,
            details=details,
            description=description,
            images=list(images or []),
        )
        await db.execute(
            "INSERT INTO jewelry_items (id, name, type, description, details, images, created_at) "
            "VALUES (?, ?, ?, ?, ?, ?, ?)",
            (
                item.id,
                item.name,
                item.type.value,
                item.description,
                json.dumps(details.to_dict()),
                json.dumps(item.images),
                item.created_at.isoformat(),
            ),
        )
        await db.commit()

        logger.info(f"Created item {item.id} ({item.type.value} '{item.name}')")
        return item

    async def get_item(self, item_id: str) -> JewelryItem:
        """Get an item by ID.

        Raises:
            ItemNotFoundError: If no item has this id
            RuntimeError: If database is not connected
        """
        db = self._require_db()
        async with db.execute("SELECT * FROM jewelry_items WHERE id = ?", (item_id,)) as cursor:
            row = await cursor.fetchone()
        if row is None:
            raise ItemNotFoundError(f"Item not found: {item_id}")
        return self._row_to_item(row)

    async def list_items(self, limit: int = 100) -> list[JewelryItem]:
        """List items, newest first."""
        db = self._require_db()
        async with db.execute(
            "SELECT * FROM jewelry_items ORDER BY created_at DESC LIMIT ?", (limit,)
        ) as cursor:
            rows = await cursor.fetchall()
        return [self._row_to_item(row) for row in rows]

    async def update_item(
        self,
        item_id: str,
        name: Optional[str] = None,
        details: Optional[ProductDetails] = None,
        description: Optional[str] = None,
        images: Optional[list[str]] = None,
    ) -> JewelryItem:
        """Update the given fields of an item; ``None`` leaves a field as is.

        Raises:
            ItemNotFoundError: If no item has this id
        """
        db = self._require_db()
        item = await self.get_item(item_id)

        if name is not None:
            item.name = name
        if details is not None:
            item.details = details
            item.type = details.type
        if description is not None:
            item.description = description
        if images is not None:
            item.images = list(images)

        await db.execute(
            "UPDATE jewelry_items SET name = ?, type = ?, description = ?, details = ?, images = ? "
            "WHERE id = ?",
            (
                item.name,
                item.type.value,
                item.description,
                json.dumps(item.details.to_dict()),
                json.dumps(item.images),
                item_id,
            ),
        )
        await db.commit()

        logger.debug(f"Updated item {item_id}")
        return item

    async def delete_item(self, item_id: str) -> None:
        """Delete an item and its saved assets.

        Raises:
            ItemNotFoundError: If no item has this id
        """
        db = self._require_db()
        async with db.execute(
            "DELETE FROM jewelry_items WHERE id = ? RETURNING id", (item_id,)
        ) as cursor:
            row = await cursor.fetchone()
        await db.commit()

        if row is None:
            raise ItemNotFoundError(f"Item not found: {item_id}")
        logger.info(f"Deleted item {item_id}")

    async def save_assets(self, item_id: str, assets: list[GeneratedAsset]) -> int:
        """Attach generated assets to an item.

        Returns:
            Number of assets saved

        Raises:
            ItemNotFoundError: If no item has this id
        """
        db = self._require_db()
        await self.get_item(item_id)

        now = datetime.now().isoformat()
        await db.executemany(
            "INSERT INTO generated_assets (item_id, type, content, is_image, created_at) "
            "VALUES (?, ?, ?, ?, ?)",
            [(item_id, a.type.value, a.content, int(a.is_image), now) for a in assets],
        )
        await db.commit()

        logger.info(f"Saved {len(assets)} asset(s) to item {item_id}")
        return len(assets)

    async def list_assets(self, item_id: str) -> list[dict[str, Any]]:
        """List an item's saved assets, newest first.

        Raises:
            ItemNotFoundError: If no item has this id
        """
        db = self._require_db()
        await self.get_item(item_id)

        async with db.execute(
            "SELECT * FROM generated_assets WHERE item_id = ? ORDER BY id DESC", (item_id,)
        ) as cursor:
            rows = await cursor.fetchall()

        return [
            {
                "id": row["id"],
                "item_id": row["item_id"],
                **GeneratedAsset.from_dict(
                    {"type": row["type"], "content": row["content"], "is_image": bool(row["is_image"])}
                ).to_dict(),
                "created_at": row["created_at"],
            }
            for row in rows
        ]

    def _row_to_item(self, row: aiosqlite.Row) -> JewelryItem:
        try:
            details = ProductDetails.from_dict(json.loads(row["details"]))
        except json.JSONDecodeError:
            logger.warning(f"Failed to parse details for item {row['id']}")
            details = ProductDetails(name=row["name"], type=row["type"])

        try:
            images = json.loads(row["images"] or "[]")
        except json.JSONDecodeError:
            logger.warning(f"Failed to parse images for item {row['id']}")
            images = []

        return JewelryItem(
            id=row["id"],
            name=row["name"],
            type=JewelryType.parse(row["type"]),
            details=details,
            description=row["description"],
            images=images,
            created_at=datetime.fromisoformat(row["created_at"]),
        )
