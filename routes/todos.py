from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import List, Optional
import logging

from database import TODOS
from models.todo import TodoCreate, TodoEntry, TodoStats, TodoUpdate
from models.user import UserOut
from routes.auth import get_current_user
from services import mongo_service
from utils.serializers import parse_object_id

router = APIRouter(prefix="/api/todos", tags=["To-Do"])
logger = logging.getLogger(__name__)


@router.get("", response_model=List[TodoEntry], summary="List the current user's to-dos")
async def list_todos(
    search: Optional[str] = None,
    show_completed: bool = Query(default=True, alias="showCompleted"),
    current_user: UserOut = Depends(get_current_user),
):
    query = {"userId": current_user.id}
    if not show_completed:
        query["completed"] = False
    todos = await mongo_service.list_documents(TODOS, query)
    if search:
        todos = [todo for todo in todos if search.lower() in todo.get("text", "").lower()]
    return todos


@router.get("/stats", response_model=TodoStats, summary="Count total, completed and pending to-dos")
async def todo_stats(current_user: UserOut = Depends(get_current_user)):
    total = await mongo_service.count_documents(TODOS, {"userId": current_user.id})
    completed = await mongo_service.count_documents(TODOS, {"userId": current_user.id, "completed": True})
    return TodoStats(total=total, completed=completed, pending=total - completed)


@router.post("", response_model=TodoEntry, status_code=status.HTTP_201_CREATED, summary="Add a to-do")
async def create_todo(todo: TodoCreate, current_user: UserOut = Depends(get_current_user)):
    todo_data = todo.model_dump(by_alias=True)
    todo_data["userId"] = current_user.id
    todo_data["completed"] = False
    return await mongo_service.create_document(TODOS, todo_data)


@router.patch("/{todo_id}", response_model=TodoEntry, summary="Edit or complete a to-do")
async def update_todo(todo_id: str, changes: TodoUpdate, current_user: UserOut = Depends(get_current_user)):
    updated = await mongo_service.update_document(
        TODOS,
        parse_object_id(todo_id),
        changes.model_dump(by_alias=True, exclude_unset=True),
        query={"userId": current_user.id},
    )
    if not updated:
        raise HTTPException(status_code=404, detail="To-do not found")
    return updated


@router.delete("/{todo_id}", summary="Delete a to-do")
async def delete_todo(todo_id: str, current_user: UserOut = Depends(get_current_user)):
    deleted = await mongo_service.delete_document(TODOS, parse_object_id(todo_id), query={"userId": current_user.id})
    if not deleted:
        raise HTTPException(status_code=404, detail="To-do not found")
    logger.info(f"To-do {todo_id} deleted by {current_user.email}")
    return {"message": "To-do deleted"}
