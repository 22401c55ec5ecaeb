"""Process-wide logging and monitoring setup."""
