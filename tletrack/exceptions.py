"""
Error types raised by tletrack.

Propagation failures carry the numeric SGP4 error code so callers can tell a
decayed satellite apart from corrupted elements.
"""

from typing import Optional


# SGP4 error code meanings (Vallado et al. 2006, sgp4init / sgp4)
SGP4_ERROR_MESSAGES = {
    1: "mean elements, ecc >= 1.0 or ecc < -0.001 or a < 0.95 er",
    2: "mean motion less than 0.0",
    3: "pert elements, ecc < 0.0 or ecc > 1.0",
    4: "semi-latus rectum < 0.0",
    5: "epoch elements are sub-orbital",
    6: "satellite has decayed",
}
DEFAULT_SGP4_ERROR_MESSAGE = "Problematic TLE with unknown error."


class TLEError(Exception):
    """Base class for every tletrack error."""


class TLEFormatError(TLEError, ValueError):
    """Input could not be normalized into a two-line record."""


class ChecksumEmptyLineError(TLEError, ValueError):
    """A TLE line had nothing left to sum once its checksum digit was removed."""


class PropagationError(TLEError, RuntimeError):
    """
    The SGP4 propagator rejected the orbital elements.

    Attributes:
        code: SGP4 error code (1-6), or None when the propagator could not
            read the lines at all
        cause: Human-readable description of the code
    """

    def __init__(self, code: Optional[int], cause: Optional[str] = None):
        if cause is None:
            cause = SGP4_ERROR_MESSAGES.get(code, DEFAULT_SGP4_ERROR_MESSAGE)
        self.code = code
        self.cause = cause
        if code is None:
            super().__init__(f"SGP4 error: {cause}")
        else:
            super().__init__(f"SGP4 error {code}: {cause}")
