"""Domain layer — points, cities, and the country aggregate.

This layer depends only on the standard library.
It must never import from services, config, output, or commands.
"""
