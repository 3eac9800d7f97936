"""Logger lookup for toylang modules.

Every module logs under the ``toylang`` namespace, so applications can
turn scanner diagnostics on with a single ``logging.getLogger("toylang")``.
The package itself installs no handlers.

Example:
    >>> import logging
    >>> logging.basicConfig(level=logging.DEBUG)
    >>> from toylang import scan
    >>> tokens = scan("x = 1;")  # logs "Scanned 5 tokens from <string>"
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the toylang namespace.

    Args:
        name: Module name, usually __name__

    Returns:
        Logger named ``toylang.<name>``, or ``name`` unchanged when it is
        already ``toylang`` or one of its children.

    Example:
        >>> get_logger("toylang.lexer.core").name
        'toylang.lexer.core'
        >>> get_logger("scanner_tool").name
        'toylang.scanner_tool'
    """
    # "toylang_other" is not a child, so it still gets the prefix
    if name != "toylang" and not name.startswith("toylang."):
        name = f"toylang.{name}"
    return logging.getLogger(name)
