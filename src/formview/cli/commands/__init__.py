"""Click commands for the formview CLI."""
