"""Report module for rendering and persisting hash reports.

This package contains:
- path: Folder-name derivation and relativization of file paths
- formatter: Report value, text rendering and report filename
- writer: Atomic UTF-8 persistence of a report
"""
