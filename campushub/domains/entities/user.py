from dataclasses import dataclass
from uuid import UUID
from typing import Optional

@dataclass
class UserEntity:
    id: UUID
    name: str
    profile_picture: Optional[str] = None
