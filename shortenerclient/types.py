from typing import Any
from collections.abc import Callable


# Type aliases for JSON payloads exchanged with the backend
type JSONPayload = dict[str, Any]
type AppConfig = dict[str, Any]

# Link identifiers are integers on the backend but may round-trip as strings
type LinkID = int | str

# Callable performing a hard navigation to a client-side path
type Navigator = Callable[[str], None]
