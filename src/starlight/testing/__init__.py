"""In-process test client: ``from starlight.testing import TestClient``."""

from starlight.testing.client import TestClient

__all__ = ["TestClient"]
