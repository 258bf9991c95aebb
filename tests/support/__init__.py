"""Host calendar collaborator for differential tests (not part of the core)."""
