from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse
from typing import Optional
import logging

from services import form_service
from services.form_schema_service import UnknownEntityError

router = APIRouter(prefix="/api/forms", tags=["Forms"])
logger = logging.getLogger(__name__)


@router.get("/{entity_type}", response_class=HTMLResponse, summary="Render the add-form of an entity")
async def render_form(entity_type: str, request: Request, on_change: Optional[str] = None):
    """
    Built-in fields plus configured custom fields as an HTML fragment.
    Query parameters other than `on_change` pre-fill matching inputs.
    """
    values = {key: value for key, value in request.query_params.items() if key != "on_change"}
    try:
        form_html = await form_service.render_entity_form(entity_type, values, on_change=on_change)
    except UnknownEntityError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return HTMLResponse(content=str(form_html))
