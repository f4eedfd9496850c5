__version__ = version = "0.1.0"
__version_tuple__ = version_tuple = (0, 1, 0)

__author__ = "double-ended-peekable contributors"
__author_email__ = None
