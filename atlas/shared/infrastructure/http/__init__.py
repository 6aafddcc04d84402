from .base import DataFetchError, ParseError, TransportError
from .country_service import CountryService

__all__ = ["CountryService", "DataFetchError", "ParseError", "TransportError"]
