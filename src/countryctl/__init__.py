"""countryctl — cities, countries, and the geography between them."""

__version__ = "0.1.0"
