from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from models.user import User

class UserDAO:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_email(self, email: str) -> User | None:
        # Stored addresses keep the case they were registered with
        result = await self.db.execute(select(User).where(func.lower(User.email) == email.lower()))
        return result.scalars().first()

    async def create_user(self, user: User) -> User:
        self.db.add(user)
        await self.db.commit()
        await self.db.refresh(user)
        return user
