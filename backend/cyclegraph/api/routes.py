import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from cyclegraph.db.repository import GraphRepository
from cyclegraph.db.session import get_db
from cyclegraph.errors import GraphNotFoundError, LLMNotConfiguredError, SuggestionError
from cyclegraph.graph import GraphAnalyzer, GraphData, TinyCycle
from cyclegraph.llm.suggestions import SuggestionService
from cyclegraph.schemas import (
    ComponentRequest,
    CreateGraphRequest,
    SuggestFixRequest,
    UpdateGraphRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/graphs",
    tags=["graphs"],
)

analyzer = GraphAnalyzer()
_suggestion_service: Optional[SuggestionService] = None


def get_suggestion_service() -> SuggestionService:
    global _suggestion_service
    if _suggestion_service is None:
        _suggestion_service = SuggestionService()
    return _suggestion_service


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def component_nodes_of(request: Optional[ComponentRequest]) -> Optional[List[str]]:
    nodes: Any = request.componentNodes if request else None
    if not isinstance(nodes, list):
        return None
    return [str(n) for n in nodes]


# ============================================================
# GRAPH DOCUMENTS
# ============================================================

@router.get("")
def list_graphs(db: Session = Depends(get_db)):
    try:
        return GraphRepository(db).list_graphs()
    except Exception:
        logger.exception("[Routes] Error fetching graphs")
        return error_response(500, "Failed to fetch graphs")


@router.get("/{graph_id}")
def get_graph(graph_id: str, db: Session = Depends(get_db)):
    try:
        return GraphRepository(db).get(graph_id)
    except GraphNotFoundError:
        return error_response(404, "Graph not found")
    except Exception:
        logger.exception("[Routes] Error fetching graph %s", graph_id)
        return error_response(500, "Failed to fetch graph")


@router.post("", status_code=201)
def create_graph(request: Optional[CreateGraphRequest] = None, db: Session = Depends(get_db)):
    if request is None or not request.name:
        return error_response(400, "Name is required")

    try:
        return GraphRepository(db).create(request.name)
    except Exception:
        logger.exception("[Routes] Error creating graph")
        return error_response(500, "Failed to create graph")


@router.put("/{graph_id}")
def update_graph(graph_id: str, request: Optional[UpdateGraphRequest] = None, db: Session = Depends(get_db)):
    if request is None or not request.data:
        return error_response(400, "Data is required")

    try:
        GraphRepository(db).update_data(graph_id, request.data)
        return {"message": "Graph updated successfully"}
    except GraphNotFoundError:
        return error_response(404, "Graph not found")
    except Exception:
        logger.exception("[Routes] Error updating graph %s", graph_id)
        return error_response(500, "Failed to update graph")


@router.delete("/{graph_id}")
def delete_graph(graph_id: str, db: Session = Depends(get_db)):
    try:
        GraphRepository(db).delete(graph_id)
        return {"message": "Graph deleted successfully"}
    except GraphNotFoundError:
        return error_response(404, "Graph not found")
    except Exception:
        logger.exception("[Routes] Error deleting graph %s", graph_id)
        return error_response(500, "Failed to delete graph")


# ============================================================
# ANALYSIS
# ============================================================

@router.post("/{graph_id}/analyze")
def analyze_graph(graph_id: str, db: Session = Depends(get_db)):
    try:
        return analyzer.analyze(GraphRepository(db).get_data(graph_id))
    except GraphNotFoundError:
        return error_response(404, "Graph not found")
    except Exception:
        logger.exception("[Routes] Error analyzing graph %s", graph_id)
        return error_response(500, "Failed to analyze graph")


@router.post("/{graph_id}/find-cycles")
def find_cycles(graph_id: str, request: Optional[ComponentRequest] = None, db: Session = Depends(get_db)):
    component_nodes = component_nodes_of(request)
    if component_nodes is None:
        return error_response(400, "Component nodes array is required")

    try:
        graph = GraphData.from_dict(GraphRepository(db).get_data(graph_id))
        return analyzer.find_cycles(graph, component_nodes)
    except GraphNotFoundError:
        return error_response(404, "Graph not found")
    except Exception:
        logger.exception("[Routes] Error finding cycles in graph %s", graph_id)
        return error_response(500, "Failed to find cycles")


@router.post("/{graph_id}/detect-tiny-cycles")
def detect_tiny_cycles(graph_id: str, request: Optional[ComponentRequest] = None, db: Session = Depends(get_db)):
    component_nodes = component_nodes_of(request)
    if component_nodes is None:
        return error_response(400, "Component nodes array is required")

    try:
        graph = GraphData.from_dict(GraphRepository(db).get_data(graph_id))
        return analyzer.detect_tiny_cycles(graph, component_nodes)
    except GraphNotFoundError:
        return error_response(404, "Graph not found")
    except Exception:
        logger.exception("[Routes] Error detecting tiny cycles in graph %s", graph_id)
        return error_response(500, "Failed to detect tiny cycles")


# ============================================================
# FIX SUGGESTIONS
# ============================================================

@router.post("/{graph_id}/suggest-fix")
def suggest_fix(
    graph_id: str,
    request: Optional[SuggestFixRequest] = None,
    db: Session = Depends(get_db),
    service: SuggestionService = Depends(get_suggestion_service),
):
    if request is None or not request.node1 or not request.node2:
        return error_response(400, "node1 and node2 are required")

    try:
        graph = GraphData.from_dict(GraphRepository(db).get_data(graph_id))
        cycle = TinyCycle(node1=request.node1, node2=request.node2)
        suggestion = service.suggest_fix(
            cycle,
            graph.label_of(request.node1),
            graph.label_of(request.node2),
        )
        return suggestion.to_dict()
    except GraphNotFoundError:
        return error_response(404, "Graph not found")
    except LLMNotConfiguredError as e:
        logger.warning("[Routes] Suggestions unavailable: %s", e)
        return error_response(503, str(e))
    except SuggestionError as e:
        return error_response(502, str(e))
    except Exception:
        logger.exception("[Routes] Error generating suggestion for graph %s", graph_id)
        return error_response(500, "Failed to generate suggestion")
