from datetime import date

from pydantic import BaseModel


class User(BaseModel):
    id: int
    name: str


class Event(BaseModel):
    title: str
    date: date
