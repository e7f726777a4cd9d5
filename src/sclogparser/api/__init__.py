"""HTTP API over the parser and renderer."""
