"""HashGen: write multi-algorithm digest reports next to files."""
__version__ = "1.0.0"
