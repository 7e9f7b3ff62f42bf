"""Analysis modules for dataset profiling.

This package contains modules for:
- typing: Column type inference
- statistics: Column statistics
- correlation: Correlation and dependency detection
- charts: Chart-type suggestions
"""
