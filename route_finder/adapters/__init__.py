"""Adapters layer - Concrete implementations of ports.

- Route solving over the weight matrix
- Map rendering (Folium)
"""
