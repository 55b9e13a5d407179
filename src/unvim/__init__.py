"""unvim: Neovim as the external script editor for Unity projects."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
