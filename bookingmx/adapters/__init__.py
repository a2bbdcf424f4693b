"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to external systems like:
- Graph datasets (bundled sample, CSV files)
- The reservation HTTP API
"""
