"""bloodcell — pixel classification and cluster counting for blood smear images."""

__version__ = "0.1.0"
