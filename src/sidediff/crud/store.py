"""Two-panel item store: in-memory cache backed by SQL persistence"""

import logging
from typing import Any, Optional

from sqlalchemy.engine import Engine
from sqlmodel import Session

from sidediff.core.intake import (
    MAX_ITEM_BYTES, PREVIEW_LENGTH, ItemType, item_fields, validate_item_data,
)
from sidediff.crud.items import delete_item, delete_panel, insert_item, list_items, max_item_id
from sidediff.crud.tables import CompareItem


logger = logging.getLogger(__name__)

PANELS = (1, 2)


def panel_name(panel: int) -> str:
    return "Original" if panel == 1 else "Modified"


def _check_panel(panel: int) -> int:
    if panel not in PANELS:
        raise ValueError(f"Invalid panel {panel}: expected 1 (Original) or 2 (Modified)")
    return panel


class CompareStore:
    """Items for the Original (1) and Modified (2) panels.

    Reads are served from memory; every write is committed to the database
    before the cache changes. Ids are issued by the store, increasing across
    both panels, and re-seeded from the highest stored id on reload().
    """

    def __init__(
        self,
        engine: Engine,
        max_item_bytes: int = MAX_ITEM_BYTES,
        preview_length: int = PREVIEW_LENGTH,
        ):
        self.engine = engine
        self.max_item_bytes = max_item_bytes
        self.preview_length = preview_length
        self._panels: dict[int, dict[int, CompareItem]] = {p: {} for p in PANELS}
        self._current_id = 0
        self.reload()

    def _session(self) -> Session:
        return Session(self.engine, expire_on_commit=False)

    def reload(self) -> None:
        """Re-read both panels from the database and re-seed id issuance."""
        with self._session() as session:
            for panel in PANELS:
                self._panels[panel] = {item.id: item for item in list_items(session, panel)}
            self._current_id = max_item_id(session)
        logger.info(
            "Loaded %d Original and %d Modified items (next id %d)",
            len(self._panels[1]), len(self._panels[2]), self._current_id + 1,
        )

    def add_item(
        self,
        panel: int,
        data: str,
        item_type: ItemType = ItemType.clipboard,
        source: Optional[str] = None,
        metadata: Optional[dict[str, Any]] = None,
        ) -> CompareItem:
        """Validate and persist a new item. Raises ValueError on invalid data or panel."""
        _check_panel(panel)
        errors = validate_item_data(data, self.max_item_bytes)
        if errors:
            raise ValueError(f"Validation failed: {', '.join(errors)}")

        fields = item_fields(data, item_type, source, metadata, self.preview_length)
        item = CompareItem(
            panel=panel,
            type=ItemType(item_type).value,
            data=data,
            length=len(data),
            preview=fields["preview"],
            source=fields["source"],
            meta=fields["metadata"],
        )
        with self._session() as session:
            try:
                # another store may have written since our last reload
                item.id = max(self._current_id, max_item_id(session)) + 1
                insert_item(session, item)
                session.commit()
            except Exception:
                session.rollback()
                logger.exception("Failed to save item to %s", panel_name(panel))
                raise

        self._current_id = item.id
        self._panels[panel][item.id] = item
        logger.info("Saved item %d to %s (%d chars)", item.id, panel_name(panel), item.length)
        return item

    def get_item(self, panel: int, item_id: int) -> CompareItem | None:
        return self._panels[_check_panel(panel)].get(item_id)

    def list_items(self, panel: int) -> list[CompareItem]:
        """Items in panel ordered by id ascending."""
        items = self._panels[_check_panel(panel)]
        return [items[k] for k in sorted(items)]

    def remove_item(self, panel: int, item_id: int) -> None:
        """Delete one item. Raises ValueError if it is not in panel."""
        if self.get_item(panel, item_id) is None:
            raise ValueError(f"Item {item_id} not found in {panel_name(panel)}")
        with self._session() as session:
            try:
                delete_item(session, panel, item_id)
                session.commit()
            except Exception:
                session.rollback()
                logger.exception("Failed to remove item %d from %s", item_id, panel_name(panel))
                raise
        del self._panels[panel][item_id]
        logger.info("Removed item %d from %s", item_id, panel_name(panel))

    def clear_panel(self, panel: int) -> int:
        """Delete every item in panel. Returns the number removed."""
        _check_panel(panel)
        with self._session() as session:
            try:
                removed = delete_panel(session, panel)
                session.commit()
            except Exception:
                session.rollback()
                logger.exception("Failed to clear %s", panel_name(panel))
                raise
        self._panels[panel].clear()
        logger.info("Cleared %d items from %s", removed, panel_name(panel))
        return removed

    def stats(self) -> dict[str, int]:
        p1, p2 = len(self._panels[1]), len(self._panels[2])
        return {"panel1_count": p1, "panel2_count": p2, "total_items": p1 + p2}
