"""Host types implementing the canonical contracts, for tests only."""
