"""API dependencies shared by the application and its routes."""

from slowapi import Limiter
from slowapi.util import get_remote_address

# Rate limiter keyed by client address; attached to app.state in main
limiter = Limiter(key_func=get_remote_address)
