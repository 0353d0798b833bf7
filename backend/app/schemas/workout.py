from typing import Annotated, Literal
from datetime import datetime
from pydantic import BaseModel, StringConstraints

TitleStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=200)]
DescriptionStr = Annotated[str, StringConstraints(strip_whitespace=True, max_length=1000)]
Visibility = Literal["public", "private", "friends"]

class WorkoutCreate(BaseModel):
    title: TitleStr
    description: DescriptionStr | None = None
    visibility: Visibility = "private"

class WorkoutUpdate(BaseModel):
    title: TitleStr | None = None
    description: DescriptionStr | None = None
    visibility: Visibility | None = None

class WorkoutRead(BaseModel):
    id: int
    user_id: int
    title: str
    description: str | None = None
    visibility: str
    created_at: datetime | None = None

    model_config = {"from_attributes": True}
