"""WordPress version checker.

Scans a directory tree for WordPress installations and compares each
installed version against the latest release published by WordPress.org.
"""

__version__ = "0.1.0"
