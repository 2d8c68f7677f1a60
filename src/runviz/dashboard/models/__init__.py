from .schemas import SelectionRequest, SelectionResponse, StateResponse, SummaryResponse, SummaryRow

__all__ = ["SelectionRequest", "SelectionResponse", "StateResponse", "SummaryResponse", "SummaryRow"]
