"""Test utilities for vanity applications::

    from vanityurls.testing import TestClient
"""

from vanityurls.testing.client import TestClient

__all__ = ["TestClient"]
