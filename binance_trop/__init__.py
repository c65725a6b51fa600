"""Models, request builders and a spot stream client for the Binance spot and futures APIs."""

__version__ = "0.2.0"