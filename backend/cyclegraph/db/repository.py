"""
Graph document store.

Graphs are stored as one row each, with the editor's node/edge document kept
as JSON text. The analysis engine only ever sees the decoded document.
"""

import json
import logging
import secrets
import time
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from cyclegraph.db.models import EMPTY_GRAPH_DATA, GraphRecord
from cyclegraph.errors import GraphNotFoundError

logger = logging.getLogger(__name__)


def new_graph_id() -> str:
    return f"graph_{int(time.time() * 1000)}_{secrets.token_hex(3)}"


def decode_data(raw: str) -> Dict[str, Any]:
    if not raw:
        return {"nodes": [], "edges": []}
    data = json.loads(raw)
    data.setdefault("nodes", [])
    data.setdefault("edges", [])
    return data


class GraphRepository:
    def __init__(self, db: Session):
        self.db = db

    def _require(self, graph_id: str) -> GraphRecord:
        record = self.db.get(GraphRecord, graph_id)
        if record is None:
            raise GraphNotFoundError(graph_id)
        return record

    def list_graphs(self) -> List[Dict[str, Any]]:
        records = (
            self.db.query(GraphRecord)
            .order_by(GraphRecord.created_at.desc(), GraphRecord.id.desc())
            .all()
        )
        return [
            {
                "id": r.id,
                "name": r.name,
                "createdAt": r.created_at.isoformat() if r.created_at else None,
            }
            for r in records
        ]

    def get(self, graph_id: str) -> Dict[str, Any]:
        record = self._require(graph_id)
        return {
            "id": record.id,
            "name": record.name,
            "data": decode_data(record.data),
        }

    def get_data(self, graph_id: str) -> Dict[str, Any]:
        return decode_data(self._require(graph_id).data)

    def create(self, name: str) -> Dict[str, str]:
        record = GraphRecord(id=new_graph_id(), name=name, data=EMPTY_GRAPH_DATA)
        self.db.add(record)
        self.db.commit()
        logger.info("[DB] Created graph %s (%s)", record.id, name)
        return {"id": record.id, "name": record.name}

    def update_data(self, graph_id: str, data: Dict[str, Any]) -> None:
        record = self._require(graph_id)
        record.data = json.dumps(data)
        self.db.commit()

    def delete(self, graph_id: str) -> None:
        record = self._require(graph_id)
        self.db.delete(record)
        self.db.commit()
        logger.info("[DB] Deleted graph %s", graph_id)
