from . import languages, proverbs, stories

__all__ = ["languages", "proverbs", "stories"]
