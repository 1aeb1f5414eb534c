"""Data-access layer for the Mflix movie catalog."""
