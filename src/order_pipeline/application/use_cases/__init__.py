"""Use cases - Application workflows over order batches and single orders."""
