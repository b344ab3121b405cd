"""Type aliases used across kvconf."""

from __future__ import annotations

import os
from typing import Any, Callable

RawConfig = dict[str, str]
ConfigPath = str | os.PathLike
Setter = Callable[[Any], None]
