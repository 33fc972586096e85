"""
NGINX proxygen - interactive reverse proxy configuration generator
Collects a source and a destination endpoint and renders an nginx config block
"""

__version__ = "1.0.0"

from .collector import InputError, get_site
from .models import Endpoint, ReadResult
from .reader import InputReader
from .render import generate_nginx_conf, print_conf

__all__ = [
    "Endpoint",
    "ReadResult",
    "InputReader",
    "InputError",
    "get_site",
    "generate_nginx_conf",
    "print_conf",
    "__version__",
]
