"""
Global configuration for tonalkit

There is one configuration per process. It is meant to be set once,
at startup, before any pitch is created::

    >>> from tonalkit.config import config
    >>> config['A4'] = 442

Keys are validated: an unknown key raises ``KeyError``, a value out of
range raises ``ValueError``::

    >>> config['A4'] = 5
    ValueError: ...

The reference frequency is better modified via
:func:`tonalkit.tuning.set_reference_freq`, which also warns if the
value changes after conversions have already been performed
"""
import configdict

config = configdict.CheckedDict()
config.addKey('A4', 440.0, type=(int, float), range=(10, 10000),
              doc="Freq of A4 (midinote 69). Normal values are between 440-443, "
                  "but any value can be used")
config.addKey('reprShowFreq', True, type=bool,
              doc="Show the frequency of a Pitch as part of its repr")

config.load()
