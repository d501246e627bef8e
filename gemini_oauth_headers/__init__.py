"""Gemini OAuth Headers

A request-transformer stage that swaps Gemini API-key authentication for
OAuth Bearer tokens.
"""

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("gemini-oauth-headers")
except PackageNotFoundError:
    __version__ = "0.1.0"
__author__ = "Gemini OAuth Headers"
