"""Stateless helpers shared by discord-content consumers."""
