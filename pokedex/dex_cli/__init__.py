"""Typer client for the Pokédex API."""
