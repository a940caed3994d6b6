"""ghkeep - email/password accounts with GitHub key storage."""

__version__ = "0.1.0"
