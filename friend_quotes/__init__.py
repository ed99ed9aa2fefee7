"""Friend Quotes – paginated friendship quotes served over HTTP."""
