from pydantic import BaseModel, Field, field_validator, ConfigDict
from typing import Optional, List
import uuid
from datetime import datetime


class CommentCreate(BaseModel):
    """Схема для создания комментария или ответа"""
    content: str = Field(..., min_length=1, max_length=1000)

    @field_validator('content')
    @classmethod
    def validate_content(cls, v):
        if not v.strip():
            raise ValueError('Comment cannot be empty')
        return v.strip()


class CommentAuthor(BaseModel):
    id: uuid.UUID
    name: str
    profile_picture: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class CommentResponse(BaseModel):
    """Схема для ответа с данными добавленного узла"""
    id: uuid.UUID
    author_id: uuid.UUID
    content: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CommentThreadNode(CommentResponse):
    """Узел дерева комментариев с данными автора"""
    author: Optional[CommentAuthor] = None
    replies: List["CommentThreadNode"] = []


class CommentThreadResponse(BaseModel):
    entity_id: uuid.UUID
    max_depth: int
    total: int
    comments: List[CommentThreadNode]
CommentThreadNode.model_rebuild()
