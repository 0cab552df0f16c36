"""PostgreSQL implementation of User repository."""

from typing import Optional, Sequence

from sqlalchemy import desc, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.model import User
from stackit.domain.repository import UserQuery, UserRepository
from stackit.domain.value import UserId
from stackit.persistence.mappers import row_to_user, user_to_dict
from stackit.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email (case-insensitive)."""
        stmt = select(users_table).where(
            func.lower(users_table.c.email) == email.lower()
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by their username."""
        stmt = select(users_table).where(users_table.c.username == username)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_usernames(self, usernames: Sequence[str]) -> list[User]:
        """Find users by username in a single query."""
        if not usernames:
            return []
        stmt = select(users_table).where(users_table.c.username.in_(list(usernames)))
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        existing = await self.find_by_id(user.id)

        user_dict = user_to_dict(user)

        if existing:
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            stmt = users_table.insert().values(**user_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return user

    async def count(self) -> int:
        """Count all users."""
        result = await self.session.execute(
            select(func.count()).select_from(users_table)
        )
        return result.scalar() or 0

    async def search_by_username(self, fragment: str, limit: int = 10) -> list[User]:
        """Find users whose username contains fragment.

        Wildcards in fragment match literally.
        """
        stmt = (
            select(users_table)
            .where(users_table.c.username.icontains(fragment, autoescape=True))
            .order_by(users_table.c.username)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def find_all(self, query: UserQuery) -> list[User]:
        """Find users newest first with role and search filters."""
        stmt = select(users_table)
        if query.role is not None:
            stmt = stmt.where(users_table.c.role == query.role.value)
        if query.search:
            stmt = stmt.where(
                or_(
                    users_table.c.username.icontains(query.search, autoescape=True),
                    users_table.c.email.icontains(query.search, autoescape=True),
                )
            )
        stmt = (
            stmt.order_by(desc(users_table.c.created_at))
            .limit(query.limit)
            .offset(query.offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]
