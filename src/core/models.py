# src/core/models.py - v1
"""Shared Pydantic domain models.

``Student`` mirrors the upstream backend payload. Field names are
snake_case in Python and accept the backend's camelCase keys on input.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Student(BaseModel):
    """Snapshot of a student record as returned by the backend."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    id: int = 0
    name: str = ""
    email: str = ""
    system_access: bool = False
    phone: str = ""
    gender: str = ""
    dob: str = ""
    class_name: str = Field(default="", alias="class")
    section: str = ""
    roll: int = 0
    current_address: str = ""
    permanent_address: str = ""
    father_name: str = ""
    father_phone: str = ""
    mother_name: str = ""
    mother_phone: str = ""
    guardian_name: str = ""
    guardian_phone: str = ""
    relation_of_guardian: str = ""
    admission_date: str = ""
    reporter_name: str = ""
    last_updated: str = ""
