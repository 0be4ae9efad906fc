"""Data stores for persistence.

Stores handle:
- Ratings file: the JSON tally document, atomic saves, the mutation lock

No business/ranking logic in stores - that belongs in services.
"""
