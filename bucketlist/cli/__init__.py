"""Console front end for the bucketlist client."""

__version__ = "0.1.0"
