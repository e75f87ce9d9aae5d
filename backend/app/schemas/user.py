from uuid import UUID

from app.schemas.base import CamelModel


class UserResponse(CamelModel):
    id: UUID
    username: str
