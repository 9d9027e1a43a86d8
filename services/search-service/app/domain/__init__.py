"""
Domain layer - catalog records and domain errors.

This layer contains the objects the search layer scores and ranks,
independent of where the catalog data comes from.
"""
