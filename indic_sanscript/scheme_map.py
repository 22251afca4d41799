# -*- coding: utf-8 -*-
"""
indic_sanscript.scheme_map
~~~~~~~~~~~~~~~~~~~~~~~~~~

Builds the flat lookup tables that the scanners in
:mod:`indic_sanscript.sanscript` consume, and caches the most recent one.

:license: MIT
"""

import copy
import logging
import threading

from indic_sanscript.schemes import INHERENT_VOWEL, RESERVED_GROUPS, VIRAMA

logger = logging.getLogger(__name__)

#: Groups whose empty values are meaningful and must not fall back to the
#: source value.
EMPTY_ALLOWED_GROUPS = frozenset(['virama', 'zwj', 'skip'])

#: Groups that attach to a preceding consonant.
MARK_GROUPS = frozenset(['vowel_marks', 'virama'])

CONSONANT_GROUPS = frozenset(['consonants', 'extra_consonants'])


class Options:
  """Transliteration options.

  :param skip_sgml: if `True`, text between ``<`` and ``>`` is copied
                    through unchanged.
  :param syncope: if `True`, a consonant with no following vowel does not
                  receive a virama.
  :param preferred_alternates: a map from destination scheme name to a map
                               of literal replacements applied to the
                               final output, e.g.
                               ``{'iast': {'ṃ': 'ṁ'}}``.
  """

  def __init__(self, skip_sgml=False, syncope=False,
               preferred_alternates=None):
    self.skip_sgml = skip_sgml
    self.syncope = syncope
    self.preferred_alternates = preferred_alternates or {}

  def copy(self):
    return Options(self.skip_sgml, self.syncope,
                   copy.deepcopy(self.preferred_alternates))

  def replace(self, **kw):
    """Return a copy with the given fields changed.

    :raises TypeError: for a field that :class:`Options` does not have.
    """
    result = self.copy()
    for (key, value) in kw.items():
      if key not in ('skip_sgml', 'syncope', 'preferred_alternates'):
        raise TypeError('Unexpected keyword argument %s' % key)
      if key == 'preferred_alternates':
        value = value or {}
      setattr(result, key, value)
    return result

  def __eq__(self, other):
    if not isinstance(other, Options):
      return NotImplemented
    return (self.skip_sgml == other.skip_sgml and
            self.syncope == other.syncope and
            self.preferred_alternates == other.preferred_alternates)

  def __repr__(self):
    return 'Options(skip_sgml=%r, syncope=%r, preferred_alternates=%r)' % (
      self.skip_sgml, self.syncope, self.preferred_alternates)


def _chars(values):
  """The set of characters appearing in `values`."""
  return frozenset(''.join(values))


class SchemeMap:
  """Maps one :class:`~indic_sanscript.schemes.Scheme` to another. This class
  grabs the metadata and character data required for
  :func:`~indic_sanscript.sanscript.transliterate`.

  Groups missing from `to_scheme`, and keys missing from a group of
  `to_scheme`, are silently left out of the map.

  :param from_scheme: the source scheme
  :param to_scheme: the destination scheme
  :param from_name: name of the source scheme, for logging and dispatch
  :param to_name: name of the destination scheme
  """

  def __init__(self, from_scheme, to_scheme, from_name=None, to_name=None):
    """Create a mapping from `from_scheme` to `to_scheme`."""
    self.from_name = from_name
    self.to_name = to_name
    self.letters = {}
    self.marks = {}
    self.consonants = {}
    self.accents = {}
    self.from_roman = from_scheme.is_roman
    self.to_roman = to_scheme.is_roman

    alternates = from_scheme.alternates
    token_lengths = []

    for group in from_scheme:
      if group in RESERVED_GROUPS:
        continue
      from_group = from_scheme[group]
      to_group = to_scheme.get(group)
      if not isinstance(from_group, dict) or not isinstance(to_group, dict):
        continue

      for (key, f) in from_group.items():
        if key not in to_group:
          continue
        t = to_group[key]
        if t == '' and group not in EMPTY_ALLOWED_GROUPS:
          t = f

        alts = alternates.get(f, [])
        token_lengths.append(len(f))
        token_lengths.extend(len(alt) for alt in alts)
        tokens = [f] + list(alts)

        if group in MARK_GROUPS:
          for token in tokens:
            self.marks[token] = t
        else:
          for token in tokens:
            self.letters[token] = t
          if group in CONSONANT_GROUPS:
            for token in tokens:
              self.consonants[token] = t
          if group == 'accents':
            for token in tokens:
              self.accents[token] = t

    for (base_accented_vowel, synonyms) in (
        from_scheme.accented_vowel_alternates.items()):
      base_vowel = base_accented_vowel[:-1]
      source_accent = base_accented_vowel[-1:]
      target_accent = self.accents.get(source_accent, source_accent)
      if base_vowel not in self.letters:
        logger.warning('Accented vowel %r has an unmapped base vowel %r '
                       '(%s -> %s)', base_accented_vowel, base_vowel,
                       from_name, to_name)
      for accented_vowel in synonyms:
        # Roman 'a' does not map to any Brahmic vowel mark.
        self.marks[accented_vowel] = (self.marks.get(base_vowel, '') +
                                      target_accent)
        self.letters[accented_vowel] = (self.letters.get(base_vowel, '') +
                                        target_accent)

    self.virama = to_scheme.group('virama').get(VIRAMA, '')
    self.to_scheme_a = to_scheme.group('vowels').get(INHERENT_VOWEL, '')
    self.from_scheme_a = from_scheme.group('vowels').get(INHERENT_VOWEL, '')
    self.max_token_length = max(token_lengths) if token_lengths else 0

    # Glyph sets for the accent/yogavaha reordering passes.
    self.accent_marks = _chars(self.accents.values())
    self.from_accent_tokens = _chars(self.accents.keys())
    self.from_yogavaahas = _chars(from_scheme.group('yogavaahas').values())
    self.to_yogavaahas = _chars(to_scheme.group('yogavaahas').values())

  def __repr__(self):
    return ('SchemeMap(%r -> %r, letters=%d, marks=%d, '
            'max_token_length=%d)' % (self.from_name, self.to_name,
                                      len(self.letters), len(self.marks),
                                      self.max_token_length))


class MapCache:
  """Keeps the most recently built :class:`SchemeMap`.

  The key is ``(from_name, to_name, options)``; options are compared by
  value. A request with any other key discards the cached map.
  """

  def __init__(self):
    self._lock = threading.Lock()
    self._key = None
    self._map = None

  def get(self, from_name, to_name, options, build):
    """Return the map for this key, calling ``build()`` on a miss."""
    with self._lock:
      if self._key is not None:
        (cached_from, cached_to, cached_options) = self._key
        if (cached_from == from_name and cached_to == to_name and
            cached_options == options):
          logger.debug('Scheme map cache hit: %s -> %s', from_name, to_name)
          return self._map

      logger.debug('Building scheme map: %s -> %s', from_name, to_name)
      scheme_map = build()
      self._key = (from_name, to_name, options.copy())
      self._map = scheme_map
      return scheme_map

  def clear(self):
    with self._lock:
      self._key = None
      self._map = None

  def __len__(self):
    with self._lock:
      return 0 if self._map is None else 1
