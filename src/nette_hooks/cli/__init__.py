"""Nette hooks command line interface."""
