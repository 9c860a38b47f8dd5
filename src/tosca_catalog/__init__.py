"""
tosca-catalog - node-type extraction for packaged TOSCA service archives

Walks every service template of a CSAR archive, builds a unified catalog of
node-type definitions (including types pulled from the global substitution
library), marks nested composite components and guards their recursive
expansion against cycles.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
