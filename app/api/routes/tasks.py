# path: geojson-mock-api/app/api/routes/tasks.py

from __future__ import annotations

import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from app.api.deps import get_stores
from app.models.task_models import Task, TaskInput
from app.services.mock_store import MockStores

router = APIRouter(prefix="/tasks", tags=["tasks"])

NOT_FOUND = {404: {"description": "Task not found."}}


def _get_task(stores: MockStores, task_id: str) -> Task:
    task = stores.tasks.get(task_id)
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found.")
    return task


@router.get("", response_model=List[Task], response_model_exclude_none=True, summary="List Tasks")
def list_tasks(stores: MockStores = Depends(get_stores)) -> List[Task]:
    return stores.tasks.values()


@router.post(
    "",
    response_model=Task,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create Task",
)
def create_task(body: TaskInput, stores: MockStores = Depends(get_stores)) -> Task:
    task_id = uuid.uuid4().hex[:8]
    task = Task(
        id=task_id,
        title=body.title,
        description=body.description,
        completed=bool(body.completed),
    )
    return stores.tasks.put(task_id, task)


@router.get(
    "/{taskId}",
    response_model=Task,
    response_model_exclude_none=True,
    responses=NOT_FOUND,
    summary="Get Task",
)
def get_task(taskId: str, stores: MockStores = Depends(get_stores)) -> Task:
    return _get_task(stores, taskId)


@router.put(
    "/{taskId}",
    response_model=Task,
    response_model_exclude_none=True,
    responses=NOT_FOUND,
    summary="Update Task",
)
def update_task(taskId: str, body: TaskInput, stores: MockStores = Depends(get_stores)) -> Task:
    current = _get_task(stores, taskId)
    task = Task(
        id=taskId,
        title=body.title,
        description=body.description,
        completed=current.completed if body.completed is None else body.completed,
    )
    return stores.tasks.put(taskId, task)


@router.delete(
    "/{taskId}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=NOT_FOUND,
    summary="Delete Task",
)
def delete_task(taskId: str, stores: MockStores = Depends(get_stores)) -> Response:
    if stores.tasks.pop(taskId) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
