from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()

EMPTY_GRAPH_DATA = '{"nodes": [], "edges": []}'


class GraphRecord(Base):
    __tablename__ = "graphs"

    id = Column(String(64), primary_key=True)
    name = Column(Text, nullable=False)
    data = Column(Text, nullable=False, default=EMPTY_GRAPH_DATA)  # JSON document
    created_at = Column(DateTime(timezone=True), server_default=func.now())
