"""Render market movers into paginated SVG charts."""
