"""Prompting for and collecting one proxy endpoint"""

import logging

from .models import Endpoint
from .reader import InputReader
from .utils import ERR_NO_FQDN, ERR_NO_PORT, msg_echo, print_newline, print_overflow, print_prompt, print_warning
from .validation import NUM_CHAR, validate_port

logger = logging.getLogger("proxygen.collector")

# Role labels used in prompts
SRC = "source"
DEST = "destination"


class InputError(Exception):
    """Unrecoverable input failure while collecting an endpoint"""

    def __init__(self, func_name: str, category: str, role: str | None = None):
        self.func_name = func_name
        self.category = category
        self.role = role
        super().__init__(f"{category} in function {func_name}")


def get_site(reader: InputReader, role: str, max_len: int = NUM_CHAR) -> Endpoint:
    """
    Prompt for the FQDN and port of one endpoint.

    A warning is printed as soon as a field fails and InputError is raised,
    so callers never see a half-filled endpoint.

    Args:
        reader: Source of operator input
        role: Label used in the prompts ("source" or "destination")
        max_len: FQDN buffer capacity, terminator included

    Returns:
        The populated Endpoint

    Raises:
        InputError: No FQDN was entered, or the port is missing or out of range
    """
    print_prompt(f"Please enter the FQDN of the {role}: ")
    line = reader.read_line(max_len)
    print_overflow("read_line", line.overflow)
    if line.length == 0:
        print_warning("get_site", ERR_NO_FQDN)
        raise InputError("get_site", ERR_NO_FQDN, role)

    print_prompt(f"Please enter the port number of the {role}: ")
    port = reader.read_int()
    if not validate_port(port):
        print_warning("get_site", ERR_NO_PORT)
        raise InputError("get_site", ERR_NO_PORT, role)

    site = Endpoint(name=line.text, name_length=line.length, port=port)
    logger.debug("Collected %s endpoint %s", role, site.address)

    print_newline()
    msg_echo(f"FQDN of the {role}: {site.name}")
    msg_echo(f"Port number of the {role}: {site.port}")
    print_newline()
    return site
