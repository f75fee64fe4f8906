from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Any, Optional, Union
from datetime import datetime

STATUS_ACTIVE = "active"
DEFAULT_OWNER_ID = "pwa-user"

# JSON en camelCase (ownerId, createdAt); columnas en snake_case
_wire_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class ReminderCreate(BaseModel):
    model_config = _wire_config

    text: Optional[str] = None
    owner_id: Optional[str] = None

class ReminderUpdate(BaseModel):
    # Parcial: los valores se escriben tal cual (cualquier tipo JSON); claves extra se toleran
    model_config = ConfigDict(extra="allow")

    text: Any = None
    status: Any = None

class Reminder(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    id: Union[int, str]
    text: str
    owner_id: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
