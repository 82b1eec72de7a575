"""
Conversion between midinotes and frequencies in 12-tone equal temperament

The global functions follow the reference frequency set in the configuration
(see :mod:`tonalkit.config`). This value is meant to be set once, at startup,
and read thereafter. In order to use a custom value without interfering with
any other clients of the library, create a custom Converter

Example:

    >>> cnv = Converter(a4=435)
    >>> cnv.mtof(69)
    435.0
    >>> mtof(69)
    440.0
"""
from __future__ import annotations
import math

import numpy as np

from .common import logger
from .config import config


__all__ = (
    'Converter',
    'mtof',
    'ftom',
    'set_reference_freq',
    'get_reference_freq',
)


class Converter:
    def __init__(self, a4: float | None = None):
        """
        Convert between midinote and frequency

        Args:
            a4: the reference frequency. If not given, the global setting
                (``config['A4']``) is used, at the moment of each conversion
        """
        self._a4 = a4
        self._used = False

    @property
    def a4(self) -> float:
        """The reference frequency used by this converter"""
        return self._a4 if self._a4 is not None else config['A4']

    def set_reference_freq(self, a4: float) -> None:
        """
        Set the reference frequency of this converter

        For the global converter this sets ``config['A4']``, so that the
        value is shared by every conversion in the process
        """
        if self._used and a4 != self.a4:
            logger.warning("Reference frequency changed from %s to %s after "
                           "pitches have been converted. Previous results will "
                           "be inconsistent with new ones", self.a4, a4)
        if self._a4 is None:
            config['A4'] = a4
        else:
            self._a4 = a4

    def get_reference_freq(self) -> float:
        return self.a4

    def mtof(self, midinote: float) -> float:
        """
        Convert a midi-note to a frequency

        Formula::

            2 ** ((midinote - 69) / 12) * A4

        The exponent and the multiplication are computed in extended
        precision (``np.longdouble``), the result is rounded once to float

        See also: set_reference_freq
        """
        self._used = True
        x = np.longdouble(midinote)
        x = np.power(np.longdouble(2), (x - 69) / 12) * np.longdouble(self.a4)
        return float(x)

    def ftom(self, freq: float) -> float:
        """
        Convert a frequency in Hz to a midi-note

        Formula::

            69 + 12 * log2(freq / A4)

        A non-positive frequency raises ValueError

        See also: set_reference_freq
        """
        self._used = True
        return 69.0 + 12.0 * math.log2(freq / self.a4)

    def freqround(self, freq: float) -> float:
        """
        Round freq to the frequency of the nearest semitone
        """
        return self.mtof(round(self.ftom(freq)))


# --- Global functions ---

_converter = Converter()
set_reference_freq = _converter.set_reference_freq
get_reference_freq = _converter.get_reference_freq
mtof = _converter.mtof
ftom = _converter.ftom
freqround = _converter.freqround
