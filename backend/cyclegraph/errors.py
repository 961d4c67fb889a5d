class CycleGraphError(Exception):
    """Base class for errors raised outside the analysis engine."""


class GraphNotFoundError(CycleGraphError):
    def __init__(self, graph_id: str):
        super().__init__(f"Graph '{graph_id}' not found")
        self.graph_id = graph_id


class LLMNotConfiguredError(CycleGraphError):
    """No suggestion endpoint is configured."""


class SuggestionError(CycleGraphError):
    """The text generator failed or returned something unusable."""
