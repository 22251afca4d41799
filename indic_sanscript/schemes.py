# -*- coding: utf-8 -*-
"""
indic_sanscript.schemes
~~~~~~~~~~~~~~~~~~~~~~~

Scheme definitions and the store that holds them.

A **scheme** maps a group name (``'vowels'``, ``'consonants'``, ...) to a
:class:`dict` from a canonical key to the scheme's own spelling of that key.
Canonical keys are always Devanagari glyphs, so any two schemes can be
cross-referenced group by group::

    store = SchemeStore()
    store.add_brahmic_scheme('devanagari', {'vowels': {'अ': 'अ'}, ...})
    store.add_roman_scheme('iast', {'vowels': {'अ': 'a'}, ...})

:license: MIT
"""

import copy
import logging
import threading

logger = logging.getLogger(__name__)

#: Groups that carry something other than a key -> string table. They are
#: lifted out of the group data into attributes of :class:`Scheme`.
ALTERNATES = 'alternates'
ACCENTED_VOWEL_ALTERNATES = 'accented_vowel_alternates'
IS_ROMAN_SCHEME = 'isRomanScheme'
RESERVED_GROUPS = frozenset([ALTERNATES, ACCENTED_VOWEL_ALTERNATES,
                             IS_ROMAN_SCHEME])

#: Canonical inherent vowel.
INHERENT_VOWEL = 'अ'

#: Canonical virama.
VIRAMA = '्'

#: Independent Devanagari vowels and their dependent vowel signs. Used to
#: synthesize ``vowel_marks`` for roman schemes that leave it out.
DEVANAGARI_VOWEL_TO_MARKS = {
  'आ': 'ा',
  'इ': 'ि',
  'ई': 'ी',
  'उ': 'ु',
  'ऊ': 'ू',
  'ऋ': 'ृ',
  'ॠ': 'ॄ',
  'ऌ': 'ॢ',
  'ॡ': 'ॣ',
  'ऎ': 'ॆ',
  'ए': 'े',
  'ऐ': 'ै',
  'ऒ': 'ॊ',
  'ओ': 'ो',
  'औ': 'ौ',
}


class Scheme(dict):
  """Represents all of the data associated with a given scheme. In addition
  to storing whether or not a scheme is roman, :class:`Scheme` partitions
  a scheme's characters into important functional groups.

  :class:`Scheme` is just a subclass of :class:`dict` from group name to a
  :class:`dict` of canonical key -> scheme string.

  :param data: a :class:`dict` of initial groups.
  :param alternates: A map from values appearing in `data` to lists of
                     spellings with equal meaning. For example:
                     ``'ṃ' -> ['ṁ']`` in IAST.
  :param accented_vowel_alternates: A map from an accented vowel (a vowel
                                    followed by one accent character) to
                                    lists of other spellings of it, such as
                                    precomposed forms.
  :param is_roman: `True` if the scheme is a romanization and `False`
                   otherwise.
  """

  def __init__(self, data=None, alternates=None,
               accented_vowel_alternates=None, is_roman=True):
    super().__init__(data or {})
    self.alternates = alternates or {}
    self.accented_vowel_alternates = accented_vowel_alternates or {}
    self.is_roman = is_roman

  def group(self, name):
    """Return the table for group `name`, or an empty :class:`dict`."""
    return self.get(name) or {}

  def __repr__(self):
    return '%s(groups=%r, is_roman=%r)' % (
      type(self).__name__, sorted(self.keys()), self.is_roman)


def _to_scheme(data, is_roman):
  """Split raw group data into a :class:`Scheme`, lifting reserved groups out
  into attributes. The result shares nothing mutable with `data`."""
  data = copy.deepcopy(dict(data or {}))
  alternates = data.pop(ALTERNATES, None) or {}
  accented = data.pop(ACCENTED_VOWEL_ALTERNATES, None) or {}
  data.pop(IS_ROMAN_SCHEME, None)

  # A single alternate may be written as a bare string.
  alternates = dict((k, [v] if isinstance(v, str) else list(v))
                    for (k, v) in alternates.items())
  accented = dict((k, [v] if isinstance(v, str) else list(v))
                  for (k, v) in accented.items())
  return Scheme(data, alternates=alternates,
                accented_vowel_alternates=accented, is_roman=is_roman)


class SchemeStore:
  """Holds named schemes. Schemes are registered once and not mutated
  afterwards; registering a name again replaces the old scheme.

  Separate stores are fully independent, so tests and applications can keep
  their own set of schemes.
  """

  def __init__(self):
    self._schemes = {}
    self._lock = threading.Lock()

  def add_brahmic_scheme(self, name, data):
    """Add a Brahmic scheme.

    Schemes are of two types: "Brahmic" and "roman". Brahmic consonants
    have an inherent vowel sound, but roman consonants do not. This is the
    main difference between these two types of scheme.

    :param name: the scheme name
    :param data: a :class:`dict` from group name to a :class:`dict` of
                 canonical key -> value
    """
    scheme = _to_scheme(data, is_roman=False)
    with self._lock:
      self._schemes[name] = scheme
    logger.debug('Registered brahmic scheme %s (%d groups)', name, len(scheme))
    return scheme

  def add_roman_scheme(self, name, data):
    """Add a roman scheme.

    See :meth:`add_brahmic_scheme`. The ``vowel_marks`` group can be
    omitted, in which case it is derived from ``vowels``.
    """
    scheme = _to_scheme(data, is_roman=True)
    if 'vowel_marks' not in scheme:
      vowel_marks = {}
      for (key, value) in scheme.group('vowels').items():
        if key == INHERENT_VOWEL:
          continue
        mark = DEVANAGARI_VOWEL_TO_MARKS.get(key)
        if mark is not None:
          vowel_marks[mark] = value
      scheme['vowel_marks'] = vowel_marks
    with self._lock:
      self._schemes[name] = scheme
    logger.debug('Registered roman scheme %s (%d groups)', name, len(scheme))
    return scheme

  def get(self, name):
    with self._lock:
      return self._schemes.get(name)

  def is_roman(self, name):
    scheme = self.get(name)
    return scheme is not None and scheme.is_roman

  def names(self):
    with self._lock:
      return sorted(self._schemes)

  def __contains__(self, name):
    with self._lock:
      return name in self._schemes

  def __len__(self):
    with self._lock:
      return len(self._schemes)
