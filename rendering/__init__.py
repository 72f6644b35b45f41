"""Pygame front end for the biots simulation."""
