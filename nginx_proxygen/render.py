"""Rendering of the nginx reverse proxy configuration block"""

from .models import Endpoint
from .output import print_success

# Fixed at 180 seconds for connect, send and read
PROXY_TIMEOUT = 180


def generate_nginx_conf(src: Endpoint, dest: Endpoint) -> str:
    """
    Generate the reverse proxy config for src forwarding to dest.

    Only the host names and ports are substituted; $host, $remote_addr and
    $proxy_add_x_forwarded_for are nginx variables and are emitted as-is.
    """
    lines = [
        f"upstream {src.name}",
        "{",
        f"    server {dest.name}:{dest.port}",
        "}",
        "",
        "server",
        "{",
        f"    listen *:{src.port};",
        f"    server_name {src.name};",
        "",
        "    location /",
        "    {",
        f"        proxy_pass https://{dest.name};",
        "        proxy_set_header        Host            $host;",
        "        proxy_set_header        X-Real-IP       $remote_addr;",
        "        proxy_set_header        X-Forwarded-For $proxy_add_x_forwarded_for;",
        f"        proxy_connect_timeout {PROXY_TIMEOUT};",
        f"        proxy_send_timeout {PROXY_TIMEOUT};",
        f"        proxy_read_timeout {PROXY_TIMEOUT};",
        "    }",
        "}",
    ]
    return "\n".join(lines) + "\n"


def print_conf(src: Endpoint, dest: Endpoint):
    """Print the generated config to standard output"""
    print_success("Configuration generated!")
    print()
    # Plain print keeps the document free of console markup processing
    print(generate_nginx_conf(src, dest), end="")
