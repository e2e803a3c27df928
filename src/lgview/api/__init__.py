"""API module for lgview.

Serves linkage group diagram data for report pages.
"""
