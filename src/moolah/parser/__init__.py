"""Parsing of user input lines into populated command objects."""
