# -*- coding: utf-8 -*-
"""
indic_sanscript.data
~~~~~~~~~~~~~~~~~~~~

The schemes bundled with the package. Each group is written as a
whitespace-separated list in the same order as the canonical Devanagari
list for that group; a ``-`` marks a glyph that the scheme lacks.

:license: MIT
"""

_s = str.split

# Canonical keys
# --------------
VOWELS = 'अ आ इ ई उ ऊ ऋ ॠ ऌ ॡ ए ऐ ओ औ'
VOWEL_MARKS = 'ा ि ी ु ू ृ ॄ ॢ ॣ े ै ो ौ'
YOGAVAAHAS = 'ं ः ँ'
CONSONANTS = """
             क ख ग घ ङ
             च छ ज झ ञ
             ट ठ ड ढ ण
             त थ द ध न
             प फ ब भ म
             य र ल व
             श ष स ह
             ळ
             """
#: क़ ख़ ग़ ज़ ड़ ढ़ फ़ य़, precomposed.
EXTRA_CONSONANTS = ' '.join(chr(c) for c in range(0x0958, 0x0960))
SYMBOLS = """
          ॐ ऽ । ॥
          ० १ २ ३ ४ ५ ६ ७ ८ ९
          """
#: Udatta and anudatta.
ACCENTS = '॑ ॒'
ZWJ = '\u200d'


def _group(keys, values):
  """Key a scheme's `values` by the canonical `keys`."""
  return dict((k, v) for (k, v) in zip(_s(keys), _s(values)) if v != '-')


def _brahmic(vowels, marks, yogavaahas, virama, consonants, symbols):
  return {
    'vowels': _group(VOWELS, vowels),
    'vowel_marks': _group(VOWEL_MARKS, marks),
    'yogavaahas': _group(YOGAVAAHAS, yogavaahas),
    'virama': {'्': virama},
    'consonants': _group(CONSONANTS, consonants),
    'symbols': _group(SYMBOLS, symbols),
    'accents': _group(ACCENTS, ACCENTS),
  }


# Brahmic schemes
# ---------------
DEVANAGARI = _brahmic(VOWELS, VOWEL_MARKS, YOGAVAAHAS, '्', CONSONANTS,
                      SYMBOLS)
DEVANAGARI['extra_consonants'] = _group(EXTRA_CONSONANTS, EXTRA_CONSONANTS)
DEVANAGARI['zwj'] = {ZWJ: ZWJ}

GUJARATI = _brahmic(
  'અ આ ઇ ઈ ઉ ઊ ઋ ૠ ઌ ૡ એ ઐ ઓ ઔ',
  'ા િ ી ુ ૂ ૃ ૄ ૢ ૣ ે ૈ ો ૌ',
  'ં ઃ ઁ',
  '્',
  """
  ક ખ ગ ઘ ઙ
  ચ છ જ ઝ ઞ
  ટ ઠ ડ ઢ ણ
  ત થ દ ધ ન
  પ ફ બ ભ મ
  ય ર લ વ
  શ ષ સ હ
  ળ
  """,
  """
  ૐ ઽ । ॥
  ૦ ૧ ૨ ૩ ૪ ૫ ૬ ૭ ૮ ૯
  """)

KANNADA = _brahmic(
  'ಅ ಆ ಇ ಈ ಉ ಊ ಋ ೠ ಌ ೡ ಏ ಐ ಓ ಔ',
  'ಾ ಿ ೀ ು ೂ ೃ ೄ ೢ ೣ ೇ ೈ ೋ ೌ',
  'ಂ ಃ ಁ',
  '್',
  """
  ಕ ಖ ಗ ಘ ಙ
  ಚ ಛ ಜ ಝ ಞ
  ಟ ಠ ಡ ಢ ಣ
  ತ ಥ ದ ಧ ನ
  ಪ ಫ ಬ ಭ ಮ
  ಯ ರ ಲ ವ
  ಶ ಷ ಸ ಹ
  ಳ
  """,
  """
  ಓಂ ಽ । ॥
  ೦ ೧ ೨ ೩ ೪ ೫ ೬ ೭ ೮ ೯
  """)

TELUGU = _brahmic(
  'అ ఆ ఇ ఈ ఉ ఊ ఋ ౠ ఌ ౡ ఏ ఐ ఓ ఔ',
  'ా ి ీ ు ూ ృ ౄ ౢ ౣ ే ై ో ౌ',
  'ం ః ఁ',
  '్',
  """
  క ఖ గ ఘ ఙ
  చ ఛ జ ఝ ఞ
  ట ఠ డ ఢ ణ
  త థ ద ధ న
  ప ఫ బ భ మ
  య ర ల వ
  శ ష స హ
  ళ
  """,
  """
  ఓం ఽ । ॥
  ౦ ౧ ౨ ౩ ౪ ౫ ౬ ౭ ౮ ౯
  """)

# Roman schemes
# -------------
# Roman schemes leave out 'vowel_marks'; it is derived from 'vowels' when
# the scheme is added. ॐ is left out where its spelling would also match
# inside ordinary words.
HK = {
  'vowels': _group(VOWELS, 'a A i I u U R RR lR lRR e ai o au'),
  'yogavaahas': _group(YOGAVAAHAS, 'M H ~'),
  'virama': {'्': ''},
  'consonants': _group(CONSONANTS, """
                       k kh g gh G
                       c ch j jh J
                       T Th D Dh N
                       t th d dh n
                       p ph b bh m
                       y r l v
                       z S s h
                       L
                       """),
  'symbols': _group(SYMBOLS, """
                    - ' | ||
                    0 1 2 3 4 5 6 7 8 9
                    """),
  'alternates': {'|': ['.'], '||': ['..']},
}

IAST = {
  'vowels': _group(VOWELS, 'a ā i ī u ū r̥ r̥̄ l̥ l̥̄ e ai o au'),
  'yogavaahas': _group(YOGAVAAHAS, 'ṃ ḥ m̐'),
  'virama': {'्': ''},
  'consonants': _group(CONSONANTS, """
                       k kh g gh ṅ
                       c ch j jh ñ
                       ṭ ṭh ḍ ḍh ṇ
                       t th d dh n
                       p ph b bh m
                       y r l v
                       ś ṣ s h
                       ḻ
                       """),
  'extra_consonants': _group(EXTRA_CONSONANTS, 'q k͟h ġ z r̤ r̤h f ẏ'),
  'symbols': _group(SYMBOLS, """
                    - ' । ॥
                    0 1 2 3 4 5 6 7 8 9
                    """),
  'accents': _group(ACCENTS, '\u0301 \u0331'),
  'zwj': {ZWJ: ''},
  'alternates': {
    'ṃ': ['ṁ'],
    'r̥': ['ṛ'],
    'r̥̄': ['ṝ'],
    'l̥': ['ḷ'],
    'l̥̄': ['ḹ'],
  },
  # Precomposed acute vowels.
  'accented_vowel_alternates': {
    'a\u0301': ['\u00e1'],
    'i\u0301': ['\u00ed'],
    'u\u0301': ['\u00fa'],
    'e\u0301': ['\u00e9'],
    'o\u0301': ['\u00f3'],
  },
}

ITRANS = {
  'vowels': _group(VOWELS, 'a A i I u U RRi RRI LLi LLI e ai o au'),
  'yogavaahas': _group(YOGAVAAHAS, 'M H .N'),
  'virama': {'्': ''},
  'consonants': _group(CONSONANTS, """
                       k kh g gh ~N
                       ch Ch j jh ~n
                       T Th D Dh N
                       t th d dh n
                       p ph b bh m
                       y r l v
                       sh Sh s h
                       L
                       """),
  'extra_consonants': _group(EXTRA_CONSONANTS, 'q K G z .D .Dh f Y'),
  'symbols': _group(SYMBOLS, """
                    OM .a | ||
                    0 1 2 3 4 5 6 7 8 9
                    """),
  'accents': _group(ACCENTS, "\\' \\_"),
  'alternates': {
    'A': ['aa'], 'I': ['ii', 'ee'], 'U': ['uu', 'oo'],
    'RRi': ['R^i'], 'RRI': ['R^I'], 'LLi': ['L^i'], 'LLI': ['L^I'],
    'M': ['.m', '.n'], 'v': ['w'], 'Ch': ['chh'],
  },
  'shortcuts': {'kSh': 'x'},
}

SLP1 = {
  'vowels': _group(VOWELS, 'a A i I u U f F x X e E o O'),
  'yogavaahas': _group(YOGAVAAHAS, 'M H ~'),
  'virama': {'्': ''},
  'consonants': _group(CONSONANTS, """
                       k K g G N
                       c C j J Y
                       w W q Q R
                       t T d D n
                       p P b B m
                       y r l v
                       S z s h
                       L
                       """),
  'symbols': _group(SYMBOLS, """
                    - ' . ..
                    0 1 2 3 4 5 6 7 8 9
                    """),
  'accents': _group(ACCENTS, '/ \\'),
}

BRAHMIC_SCHEMES = {
  'devanagari': DEVANAGARI,
  'gujarati': GUJARATI,
  'kannada': KANNADA,
  'telugu': TELUGU,
}

ROMAN_SCHEMES = {
  'hk': HK,
  'iast': IAST,
  'itrans': ITRANS,
  'slp1': SLP1,
}
