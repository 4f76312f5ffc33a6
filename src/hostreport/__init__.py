"""hostreport: Windows host inventory rendered as a tabbed HTML report."""

__version__ = "0.1.0"
