from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class Page(BaseModel):
    """One visible page of a filtered list view."""
    model_config = ConfigDict(populate_by_name=True)

    items: List[Dict[str, Any]]
    page: int
    page_count: int = Field(alias="pageCount")
    page_size: int = Field(alias="pageSize")
    total: int
    placeholder: Optional[str] = None
