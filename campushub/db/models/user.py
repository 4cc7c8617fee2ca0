from sqlalchemy import Column, String, Boolean

from campushub.db.base import BaseModel


class User(BaseModel):
    __tablename__ = "users"

    email = Column(String(255), unique=True, index=True, nullable=False)
    name = Column(String(100), nullable=False)
    profile_picture = Column(String(500), nullable=True)
    is_active = Column(Boolean, default=True)
