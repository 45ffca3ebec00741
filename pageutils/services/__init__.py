"""Page helpers grouped by concern: query strings, strings, numbers, environment detection and async."""
