"""Process settings and the account table loader."""
