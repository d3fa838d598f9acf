"""Shared library code for formview: errors, logging and attribute rendering."""
