"""Output contracts (JSON schemas) for rendered depictions."""
