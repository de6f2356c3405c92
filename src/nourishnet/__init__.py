"""NourishNet delivery route sequencing."""

__version__ = "0.1.0"
