"""HTTP surface for the analysis pipeline."""
