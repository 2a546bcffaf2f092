"""Digital Package Studio - ebook, social posts, bonus, sales script and cover from one topic."""

__version__ = "0.1.0"
