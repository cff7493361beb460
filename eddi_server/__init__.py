"""Asyncio building blocks for a game server: TCP acceptor, client and task registries, UDP transmitter."""

__version__ = "0.1.0"