from pydantic import BaseModel

class ExerciseBrief(BaseModel):
    id: int
    slug: str
    name: str

    model_config = {"from_attributes": True}

class RPEValueRead(BaseModel):
    id: int
    value: int
    label: str
    description: str | None = None

    model_config = {"from_attributes": True}
