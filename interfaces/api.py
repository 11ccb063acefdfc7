# interfaces/api.py
import logging
from typing import Optional, Tuple

from fastapi import APIRouter, Cookie, Depends, HTTPException, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

import config
from application.view_state import TaskView
from domain.exceptions import ModalStateError
from interfaces.sessions import ViewRegistry

logger = logging.getLogger(__name__)

router = APIRouter()


def get_registry(request: Request) -> ViewRegistry:
    return request.app.state.views


def get_view_id(task_view_id: Optional[str] = Cookie(default=None, alias=config.VIEW_COOKIE)) -> Optional[str]:
    return task_view_id


def current_view(request: Request, view_id: Optional[str] = Depends(get_view_id)) -> Tuple[str, TaskView]:
    """Resolves the TaskView behind the request cookie, creating one on first show."""
    return get_registry(request).get_or_create(view_id)


def with_view_cookie(response, view_id: str):
    response.set_cookie(config.VIEW_COOKIE, view_id, httponly=True, samesite="lax")
    return response


def back_to_list(view_id: str) -> RedirectResponse:
    """Post/Redirect/Get: every handled event lands back on the list."""
    return with_view_cookie(RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER), view_id)


def render(request: Request, view_id: str, view: TaskView, status_code: int = status.HTTP_200_OK):
    context = view.render_context()
    context["app_title"] = request.app.title
    response = request.app.state.templates.TemplateResponse(
        request, "tasks.html", context, status_code=status_code
    )
    return with_view_cookie(response, view_id)


@router.get("/", response_class=HTMLResponse)
async def show_tasks(request: Request, view_ctx: Tuple[str, TaskView] = Depends(current_view)):
    """Renders the task list and whichever modal is open."""
    view_id, view = view_ctx
    return render(request, view_id, view)


@router.post("/tasks/new")
async def open_add_form(view_ctx: Tuple[str, TaskView] = Depends(current_view)):
    view_id, view = view_ctx
    view.open_add()
    return back_to_list(view_id)


@router.post("/tasks", response_class=HTMLResponse)
async def submit_add_form(request: Request, view_ctx: Tuple[str, TaskView] = Depends(current_view)):
    """Validates the add form; on failure the modal is re-rendered with its errors."""
    view_id, view = view_ctx
    form = await request.form()
    try:
        view.submit_add(form)
    except ModalStateError as e:
        logger.warning(f"Rejected add submit: {e}")
        raise HTTPException(status_code=409, detail=str(e))
    if view.has_errors:
        return render(request, view_id, view, status_code=422)
    return back_to_list(view_id)


@router.post("/tasks/{task_id}/edit")
async def open_edit_form(task_id: int, view_ctx: Tuple[str, TaskView] = Depends(current_view)):
    view_id, view = view_ctx
    if not view.open_edit(task_id):
        raise HTTPException(status_code=404, detail="Task not found")
    return back_to_list(view_id)


@router.post("/tasks/{task_id}", response_class=HTMLResponse)
async def submit_edit_form(request: Request, task_id: int, view_ctx: Tuple[str, TaskView] = Depends(current_view)):
    view_id, view = view_ctx
    form = await request.form()
    try:
        view.submit_edit(task_id, form)
    except ModalStateError as e:
        logger.warning(f"Rejected edit submit: {e}")
        raise HTTPException(status_code=409, detail=str(e))
    if view.has_errors:
        return render(request, view_id, view, status_code=422)
    return back_to_list(view_id)


@router.post("/tasks/{task_id}/delete")
async def delete_task(task_id: int, view_ctx: Tuple[str, TaskView] = Depends(current_view)):
    """Hard delete, no confirmation step."""
    view_id, view = view_ctx
    view.delete(task_id)
    return back_to_list(view_id)


@router.post("/modal/cancel")
async def cancel_modal(view_ctx: Tuple[str, TaskView] = Depends(current_view)):
    view_id, view = view_ctx
    view.cancel()
    return back_to_list(view_id)


@router.post("/view/close")
async def close_view(request: Request, view_id: Optional[str] = Depends(get_view_id)):
    """Tears the view down; its tasks are gone for good."""
    get_registry(request).discard(view_id)
    response = RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)
    response.delete_cookie(config.VIEW_COOKIE)
    return response
