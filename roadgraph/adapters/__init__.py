"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to external systems like:
- Road-network data files (whitespace-separated text, street CSV)
- Exporters (KML, Folium)
"""
