from typing import Dict, Iterable, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
import uuid

from campushub.db.models.user import User as UserModel
from campushub.domains.entities.user import UserEntity


class UserRepository:
    """Репозиторий для работы с пользователями"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_uuid(self, user_uuid: uuid.UUID) -> Optional[UserEntity]:
        """Получение пользователя по UUID"""
        result = await self.session.execute(
            select(UserModel).where(UserModel.uuid == user_uuid)
        )
        db_user = result.scalar_one_or_none()
        return self._to_domain(db_user) if db_user else None

    async def get_many(self, user_uuids: Iterable[uuid.UUID]) -> Dict[uuid.UUID, UserEntity]:
        """Пользователи по набору UUID одним запросом"""
        ids = set(user_uuids)
        if not ids:
            return {}

        result = await self.session.execute(
            select(UserModel).where(UserModel.uuid.in_(ids))
        )
        return {db_user.uuid: self._to_domain(db_user) for db_user in result.scalars().all()}

    def _to_domain(self, db_user: UserModel) -> UserEntity:
        return UserEntity(
            id=db_user.uuid,
            name=db_user.name,
            profile_picture=db_user.profile_picture
        )
