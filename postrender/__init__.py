"""Post-render step for generated book sources: strip literal lines from the root file."""
