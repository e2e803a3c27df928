"""Display module for report page diagrams.

Reads linkage groups, markers and QTLs and shapes them into track data
for the client-side diagram.
"""
