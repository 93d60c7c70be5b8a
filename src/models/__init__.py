from src.models.base import Base, BaseModel, CreatedStamp, TimeStamp

__all__ = [
    "Base",
    "BaseModel",
    "CreatedStamp",
    "TimeStamp",
]
