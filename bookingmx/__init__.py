"""Top-level package for BookingMx.

The core is a city proximity graph: raw city/edge lists are validated,
built into an undirected weighted graph and queried for cities near a
destination. Around it sit a reservation API client, configuration,
dependency wiring and a command-line front-end.
"""

__version__ = "1.0.0"
