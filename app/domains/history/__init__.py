from app.domains.history.entities import HistoryManager

__all__ = ["HistoryManager"]
