from .countries_view import CountriesView, format_population

__all__ = ["CountriesView", "format_population"]
