"""Interactive video and audio downloader that drives yt-dlp, with progress parsing and dependency installation."""

__version__ = "0.1.0"