"""Front-desk reservation store for a single restaurant"""

__version__ = "1.0.0"
