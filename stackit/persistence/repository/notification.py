"""PostgreSQL implementation of Notification repository."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional, Sequence
from uuid import UUID

from sqlalchemy import delete, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.model import Notification
from stackit.domain.repository import NotificationRepository
from stackit.domain.value import NotificationId, UserId
from stackit.persistence.mappers import notification_to_dict, row_to_notification
from stackit.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @asynccontextmanager
    async def isolated(self) -> AsyncIterator[None]:
        """Run the enclosed statements in a SAVEPOINT."""
        async with self.session.begin_nested():
            yield

    async def save(self, notification: Notification) -> Notification:
        """Insert a notification.

        Runs in a SAVEPOINT: a failed insert must not abort the transaction
        that stored the content which triggered it.
        """
        async with self.session.begin_nested():
            await self.session.execute(
                insert(notifications_table).values(**notification_to_dict(notification))
            )
        return notification

    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        stmt = select(notifications_table).where(
            notifications_table.c.id == notification_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_notification(row._asdict()) if row else None

    async def find_by_user(self, user_id: UserId, limit: int = 50) -> list[Notification]:
        """Find a user's notifications, newest first."""
        stmt = (
            select(notifications_table)
            .where(notifications_table.c.user_id == user_id)
            .order_by(desc(notifications_table.c.created_at))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(row._asdict()) for row in result.fetchall()]

    async def count_unread(self, user_id: UserId) -> int:
        """Count a user's unread notifications."""
        stmt = (
            select(func.count())
            .select_from(notifications_table)
            .where(
                notifications_table.c.user_id == user_id,
                notifications_table.c.is_read.is_(False),
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def mark_read(self, notification_id: NotificationId) -> Optional[Notification]:
        """Mark one notification read."""
        stmt = (
            update(notifications_table)
            .where(notifications_table.c.id == notification_id)
            .values(is_read=True)
            .returning(notifications_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_notification(row._asdict()) if row else None

    async def mark_all_read(self, user_id: UserId) -> int:
        """Mark every unread notification of a user read."""
        result = await self.session.execute(
            update(notifications_table)
            .where(
                notifications_table.c.user_id == user_id,
                notifications_table.c.is_read.is_(False),
            )
            .values(is_read=True)
        )
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def delete_by_related(self, related_ids: Sequence[UUID]) -> int:
        """Delete notifications linking to any of the given entities."""
        if not related_ids:
            return 0
        result = await self.session.execute(
            delete(notifications_table).where(
                notifications_table.c.related_id.in_(list(related_ids))
            )
        )
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
