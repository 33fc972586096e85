"""Input limits and port validation"""

import logging

logger = logging.getLogger("proxygen.validation")

# Line buffer capacity, terminator included: at most NUM_CHAR - 1 characters are kept
NUM_CHAR = 100

# Upper port bound is inclusive and deliberately one past 65535
NUM_PORT = 65536


def validate_port(port: int | None) -> bool:
    """Validate port number"""
    if port is None:
        return False
    if port <= 0 or port > NUM_PORT:
        logger.debug("Rejected port %s (allowed 1-%d)", port, NUM_PORT)
        return False
    return True


def is_line_end(char: str) -> bool:
    """Return True for a newline or carriage return"""
    return char in ("\n", "\r")
