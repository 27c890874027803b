"""Infrastructure layer — terminal and external-process integration.

Every OS-level detail the dispatch core must not know about lives here,
behind the protocols declared in :mod:`kli.core.protocols`.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from kli.infra.fzf import FzfOptions, FzfSelector, SubprocessRunner, detect_fzf, require_fzf
from kli.infra.terminal import SystemTerminalProbe

__all__: list[str] = [
    "FzfOptions",
    "FzfSelector",
    "SubprocessRunner",
    "SystemTerminalProbe",
    "detect_fzf",
    "require_fzf",
]
