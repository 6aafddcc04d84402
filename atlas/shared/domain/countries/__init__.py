from .models import Country, FetchState, FetchStatus
from .ports import DataSource

__all__ = ["Country", "FetchState", "FetchStatus", "DataSource"]
