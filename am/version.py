__version__ = "0.3.0"
version = __version__
version_info = tuple(int(x) for x in __version__.split("."))
