# path: geojson-mock-api/app/models/task_models.py

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class Task(BaseModel):
    id: str = Field(examples=["12345"])
    title: str = Field(examples=["Buy groceries"])
    description: Optional[str] = Field(default=None, examples=["Milk, Bread, Butter"])
    completed: bool


class TaskInput(BaseModel):
    title: str = Field(examples=["Buy groceries"])
    description: Optional[str] = Field(default=None, examples=["Milk, Bread, Butter"])
    completed: Optional[bool] = None
