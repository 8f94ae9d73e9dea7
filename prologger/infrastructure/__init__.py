"""Infrastructure: console output, date rendering and listener dispatch."""
