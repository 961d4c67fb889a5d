from pydantic import BaseModel
from typing import Any, Dict, Optional


# Fields are optional so that missing values are reported as 400 with an
# "error" body by the routes, the same way for every endpoint.

class CreateGraphRequest(BaseModel):
    name: Optional[str] = None


class UpdateGraphRequest(BaseModel):
    data: Optional[Dict[str, Any]] = None  # {"nodes": [...], "edges": [...]}


class ComponentRequest(BaseModel):
    componentNodes: Optional[Any] = None  # node ids of one reported component


class SuggestFixRequest(BaseModel):
    node1: Optional[str] = None
    node2: Optional[str] = None
