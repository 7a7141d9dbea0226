"""Root logging setup for processes that host the rank store."""

import logging

FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_SHORTHAND = {
    "D": logging.DEBUG,
    "I": logging.INFO,
    "W": logging.WARNING,
    "E": logging.ERROR,
    "C": logging.CRITICAL,
}

_handler = None


def resolve_level(level) -> int:
    """'debug', 'D', 10 → logging.DEBUG. Unknown names fall back to INFO."""
    if isinstance(level, int):
        return level
    if not level:
        return logging.INFO
    text = str(level).strip()
    if text.upper() in _SHORTHAND and len(text) == 1:
        return _SHORTHAND[text.upper()]
    value = logging.getLevelName(text.upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(level="info") -> logging.Logger:
    """Attach one stream handler to the root logger. Repeat calls only change the level."""
    global _handler
    root = logging.getLogger()
    lvl = resolve_level(level)
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(FORMAT))
        root.addHandler(_handler)
    _handler.setLevel(lvl)
    root.setLevel(lvl)
    return root
