# hal_greeting/models/greeting.py

from pydantic import field_validator

from hal_greeting.models.hal import HalResource


class Greeting(HalResource):
    id: int
    content: str

    @field_validator("content")
    @classmethod
    def _not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("content must not be empty")
        return value
