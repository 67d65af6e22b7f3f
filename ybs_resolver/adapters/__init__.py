"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to external systems like:
- Transit data storage (JSON files)
- Itinerary search (breadth-first solver)
- Text understanding (rule-based extraction)
"""
