"""
Environment adapter backed by the process environment or an explicit mapping.
"""

import os
from collections.abc import Mapping
from typing import Optional

from typing_extensions import override

from irongen.ports.environment.environment_port import EnvironmentPort


class OsEnvironmentAdapter(EnvironmentPort):
    """Read variables from ``os.environ`` unless a fixed mapping is given."""

    def __init__(self, variables: Optional[Mapping[str, str]] = None):
        self._variables: Mapping[str, str] = (
            os.environ if variables is None else dict(variables)
        )

    @override
    def get(self, key: str) -> Optional[str]:
        return self._variables.get(key)
