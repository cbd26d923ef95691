from pydantic import BaseModel


class SeedResult(BaseModel):
    users_created: int
    skills_created: int
    drills_created: int
    sessions_created: int
    message: str


class ClearResult(BaseModel):
    sessions_deleted: int
    drills_deleted: int
    skills_deleted: int
    users_deleted: int
    message: str
