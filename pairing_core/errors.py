# pairing_core/errors.py
from __future__ import annotations


class PairingError(Exception):
    """Base class for errors raised by pairing_core."""


class ConfigurationError(PairingError, ValueError):
    """Caller input cannot produce a valid round or schedule."""


class AssignmentError(PairingError, ValueError):
    """A manual team edit would break a round's anchor or partition rules."""
