"""
Similar to tuning, but on numpy arrays

Conversions are computed in extended precision (``np.longdouble``) and
the result is cast back to the floating type of the input, so that
float32 arrays do not accumulate rounding errors between the exponent
and the multiplication by the reference frequency
"""
from __future__ import annotations
import numpy as np

from . import tuning


def _reference(a4: float | None) -> float:
    if a4:
        return a4
    # mark the global reference as used
    tuning._converter._used = True
    return tuning.get_reference_freq()


def _outdtype(arr: np.ndarray) -> np.dtype:
    return arr.dtype if np.issubdtype(arr.dtype, np.floating) else np.dtype(float)


def mtof(midinotes: np.ndarray, a4: float | None = None) -> np.ndarray:
    """
    Vectorized version of tuning.mtof

    Args:
        midinotes: an array of midinotes
        a4: the reference frequency. If not given use the global setting
            (see tuning.set_reference_freq)

    Returns:
        the frequencies as a numpy array, with the same float type as midinotes
    """
    a4 = _reference(a4)
    midinotes = np.asarray(midinotes)
    x = np.array(midinotes, dtype=np.longdouble)
    x -= 69
    x /= 12
    np.power(2, x, out=x)
    x *= a4
    return x.astype(_outdtype(midinotes))


def ftom(freqs: np.ndarray, a4: float | None = None) -> np.ndarray:
    """
    Vectorized version of tuning.ftom

    Args:
        freqs: an array of frequencies
        a4: the reference frequency. If not given use the global setting
                (see tuning.set_reference_freq)

    Returns:
        the midi pitch as a numpy array, with the same float type as freqs

    Formula::

        69 + 12 * log2(freq/A4)

    """
    a4 = _reference(a4)
    freqs = np.asarray(freqs)
    x = np.array(freqs, dtype=np.longdouble)
    x /= a4
    np.log2(x, out=x)
    x *= 12
    x += 69
    return x.astype(_outdtype(freqs))


def semitonefreqs(notemin=0, notemax=127) -> np.ndarray:
    """
    Return the frequencies of all semitones between notemin and notemax (inclusive)

    Example
    =======

        # frequencies of the 88 keys of a piano
        >>> semitonefreqs(21, 108)
    """
    return mtof(np.arange(notemin, notemax + 1, dtype=float))
