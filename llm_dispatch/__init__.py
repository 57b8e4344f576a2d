"""llm-dispatch

Resolves declarative model descriptions into callable LLM provider clients.
"""

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("llm-dispatch")
except PackageNotFoundError:
    # Fallback for source checkouts
    __version__ = "0.3.0"
__author__ = "llm-dispatch"
