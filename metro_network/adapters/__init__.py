"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the graph core to external collaborators:
- Network storage (CSV files)
- Fare rules (zone/distance pricing)
- Rendering engines (Folium)
"""
