"""Random undirected graphs, Eulerian circuits and graph algorithms served over TCP."""

__version__ = "0.1.0"