"""Item persistence: insert, lookup, listing, and panel-scoped deletion"""

from sqlalchemy import func
from sqlmodel import Session, select

from sidediff.crud.tables import CompareItem


def get_item(session: Session, panel: int, item_id: int) -> CompareItem | None:
    """Return the item with item_id in panel, or None if not found."""
    return session.exec(
        select(CompareItem)
        .where(CompareItem.panel == panel)
        .where(CompareItem.id == item_id)
    ).one_or_none()


def list_items(session: Session, panel: int) -> list[CompareItem]:
    """Return all items in panel ordered by id ascending."""
    return list(
        session.exec(
            select(CompareItem)
            .where(CompareItem.panel == panel)
            .order_by(CompareItem.id.asc())
        ).all()
    )


def max_item_id(session: Session) -> int:
    """Highest id across both panels, or 0 when empty."""
    return session.exec(select(func.max(CompareItem.id))).one() or 0


def insert_item(session: Session, item: CompareItem) -> CompareItem:
    """Add item and flush so caller-assigned ids are checked. Does not commit."""
    session.add(item)
    session.flush()
    return item


def delete_item(session: Session, panel: int, item_id: int) -> bool:
    """Delete one item. Returns False if it was not in panel. Flushes, does not commit."""
    item = get_item(session, panel, item_id)
    if item is None:
        return False
    session.delete(item)
    session.flush()
    return True


def delete_panel(session: Session, panel: int) -> int:
    """Delete every item in panel. Returns count deleted. Flushes, does not commit."""
    items = list_items(session, panel)
    for item in items:
        session.delete(item)
    session.flush()
    return len(items)
