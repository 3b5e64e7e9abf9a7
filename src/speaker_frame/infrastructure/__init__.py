"""Infrastructure layer: directory API client, storage and exceptions."""
