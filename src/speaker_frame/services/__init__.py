"""Service layer of the speaker frame."""
