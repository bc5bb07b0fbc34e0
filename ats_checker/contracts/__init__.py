"""Shared contracts between the analysis pipeline and its HTTP surface."""
