"""Pattern tables for the counting pipeline. Read-only; no business logic.

Every regex used by the exclusion filters and tokenizers lives here so the
abbreviation list, path grammar, and marker syntax can be extended without
touching control flow.
"""

import re

# Decimals count as one word; otherwise alphanumeric runs joined by - _ ' ‘ ’
DEFAULT_WORD_REGEX = r"\d+\.\d+|[A-Za-z0-9]+(?:[-_'‘’][A-Za-z0-9]+)*"

DEFAULT_EXCLUSION_LIST = (
    ".jpg, .jpeg, .png, .gif, .svg, .md, .pdf, .docx, .xlsx, .pptx, .zip, .mp3, .mp4, "
    ".wav, .ogg, .webm, .mov, .avi, .exe, .dll, .bat, .sh, .ps1, .js, .ts, .json, .csv, "
    ".yml, .yaml, .html, .css, .scss, .xml, .ini, .log, .tmp, .bak, .db, .sqlite, .7z, "
    ".rar, .tar, .gz, .bz2, .iso, .img, .bin, .apk, .app, .dmg, .pkg, .deb, .rpm, .msi, "
    ".sys, .dat, .sav, .old, .swp, .lock, .cache, .part, .crdownload, .torrent, .ics, "
    ".eml, .msg, .vcf, .txt"
)

# Region override markers: <!-- cswc-disable --> / %% cswc-enable %%
REGION_MARKER = re.compile(
    r"<!--\s*cswc-(?P<html>disable|enable)\s*-->|%%\s*cswc-(?P<native>disable|enable)\s*%%",
    re.IGNORECASE,
)

# Code
CODE_BLOCK = re.compile(r"```[\s\S]*?```|~~~[\s\S]*?~~~")
INLINE_CODE = re.compile(r"`(?:\\.|[^`\\\n])+`")

# Comments
OBSIDIAN_COMMENT = re.compile(r"%%([\s\S]*?)%%")
HTML_COMMENT = re.compile(r"<!--([\s\S]*?)-->")

# Links
WIKI_LINK_ALIAS = re.compile(r"!?\[\[[^\]|\n]*\|([^\]\n]*)\]\]")
WIKI_LINK = re.compile(r"!?\[\[([^\]|\n]+)\]\]")
MARKDOWN_LINK = re.compile(r"!?\[([^\]\n]*)\]\([^)\n]*\)")

# Headings
ATX_HEADING = re.compile(r"^[ \t]{0,3}(#{1,6})[ \t]+\S.*$")
# Stacked runs ("# # Title") are stripped together
ATX_HEADING_MARKER = re.compile(r"^([ \t]{0,3})(?:#{1,6}[ \t]+)+(?=\S)", re.MULTILINE)
ATX_HEADING_LINE = re.compile(r"^[ \t]{0,3}#{1,6}[ \t]+\S.*(?:\n|$)", re.MULTILINE)
SETEXT_UNDERLINE = re.compile(r"^([^\n]*\S[^\n]*)\n[ \t]{0,3}(?:=+|-+)[ \t]*$", re.MULTILINE)
SETEXT_HEADING_LINES = re.compile(r"^[^\n]*\S[^\n]*\n[ \t]{0,3}(?:=+|-+)[ \t]*(?:\n|$)", re.MULTILINE)

# Paths
DECIMAL_NUMBER = re.compile(r"^\d+\.\d+$")
WINDOWS_DRIVE_PATH = re.compile(r"^[A-Za-z]:[/\\]")
ENVIRONMENT_VARIABLE = re.compile(r"^(?:%[^%]+%|\$[A-Za-z_][A-Za-z0-9_]*)")
WINDOWS_ENVIRONMENT_PATH = re.compile(r"^%[^%]+%[/\\]")
UNC_PATH = re.compile(r"^\\\\[^\\]+\\[^\\]+")
FILE_PROTOCOL = re.compile(r"^file:///")
FILE_PROTOCOL_SPAN = re.compile(r"file:///\S+")
UNIX_PATH = re.compile(r"^/[^/]")
PATH_SEPARATOR = re.compile(r"[/\\]")
TOKEN_TRAILING_PUNCTUATION = ".,;:!?)]}\"'"

# Tokenizer
DOUBLE_QUOTES = re.compile("[\"“”„‟]")
# Compiled with the `regex` library, which supports Unicode properties
EMOJI = r"[\p{Emoji_Presentation}\p{Extended_Pictographic}]"

# Characters
WHITESPACE_RUN = re.compile(r"\s+")
ASCII_LETTER = re.compile(r"[A-Za-z]")

# Sentences
SENTENCE_BOUNDARY = re.compile(r"[.!?]+[\"'”’)]?(?=\s|$)")
SENTENCE_URL = re.compile(r"\b(?:https?|ftp)://\S+|\bwww\.\S+", re.IGNORECASE)
SENTENCE_DRIVE_PATH = re.compile(r"\b[A-Za-z]:[/\\]\S*")
ALPHABETIC = re.compile(r"[^\W\d_]")
DECIMAL_TAIL = re.compile(r"(?:^|\s)\d+\.\d+$")
SHORT_DOTTED_TAIL = re.compile(r"(?:^|\s)(\w+\.\w+)$")
SHORT_DOTTED_MAX_LENGTH = 20

# Non-exhaustive. Matched case-sensitively so "no." or "in." still end a sentence.
ABBREVIATIONS = (
    # titles
    "Mr", "Mrs", "Ms", "Mx", "Dr", "Prof", "Sr", "Jr", "St", "Rev", "Gen", "Col",
    "Capt", "Lt", "Sgt", "Hon", "Gov", "Sen", "Rep",
    # organisations
    "Inc", "Ltd", "Co", "Corp", "Bros", "Dept", "Univ",
    # latin and general short forms
    "e.g", "i.e", "etc", "vs", "cf", "al", "approx", "ca", "viz", "No", "Vol", "Fig",
    "p", "pp", "ch", "sec", "est",
    # months
    "Jan", "Feb", "Mar", "Apr", "Jun", "Jul", "Aug", "Sep", "Sept", "Oct", "Nov", "Dec",
    # units
    "mm", "cm", "km", "kg", "mg", "lb", "lbs", "oz", "ft", "yd", "mi", "hr", "hrs",
    "min", "sec",
)
TLD_SUFFIXES = ("com", "org", "net", "io", "edu", "gov", "co", "uk", "de", "dev", "app")

ABBREVIATION_TAIL = re.compile(
    r"(?:^|[\s(\[])(?:"
    + "|".join(re.escape(a) for a in sorted(set(ABBREVIATIONS), key=len, reverse=True))
    + r")\.[\"'”’)]?$"
)
TLD_TAIL = re.compile(
    r"\S\.(?:" + "|".join(TLD_SUFFIXES) + r")\.[\"'”’)]?$",
    re.IGNORECASE,
)
