"""Agent-facing components."""
