"""Common type definitions."""

from typing import Any, Dict, Union
from pathlib import Path

# Type alias for paths
PathLike = Union[str, Path]

# Request parameters as handed to the transport
Params = Dict[str, Any]

# Request parameters after normalization for the wire
WireParams = Dict[str, str]
