"""ghrel - publish a GitHub release and its assets from CI."""

__version__ = "0.1.0"
