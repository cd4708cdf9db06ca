import sys
import os
from unittest.mock import Mock

import pytest

# Ensure src/ is on sys.path so 'panda_client' is importable without installing
SRC = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src'))
if SRC not in sys.path:
    sys.path.insert(0, SRC)


@pytest.fixture
def rest_client():
    """Provide a mock REST client bound to cloud 'default-cloud'."""
    client = Mock(spec=['get', 'post', 'put', 'delete', 'get_cloud_id'])
    client.get_cloud_id.return_value = 'default-cloud'
    return client
