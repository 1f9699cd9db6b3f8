"""Free-text test case to CSV converter."""
