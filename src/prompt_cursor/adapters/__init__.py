"""Host integrations that drive a Cursor from a UI toolkit."""
