"""Widget Store: catalogue, community comments and a safe Markdown renderer."""
