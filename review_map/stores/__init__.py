"""
Store directory core.

Responsibilities:
- Model stores, their video reviews and genres.
- Load them from the hosted database, falling back to a sample dataset.
- Filter stores by keyword, genre, rating and area.
- Project filtered stores onto map markers and build outbound links.
"""
