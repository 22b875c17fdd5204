"""
Global constants used throughout the package
"""

# Road distance of a vertex that cannot be reached from the start vertex
UNREACHABLE = -1

# Weight stored on every edge of an unweighted graph
UNWEIGHTED = 0

# Arbitrary start vertex for the tree routines (diameter, center)
DEFAULT_START = 0

LOG_FORMAT = "%(levelname)s | %(message)s"
