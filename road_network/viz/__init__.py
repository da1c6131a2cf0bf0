"""Text rendering of cities, roads and the matrix views."""
