"""
Compiled patterns for the four entity extraction passes.

Person and location patterns match their trigger words case-insensitively but
require a real capital-initial token, so they are meant to scan the
case-preserved task text. Scanning lowercased text with them finds nothing.

Date and domain-noun patterns use ASCII digits and word boundaries: dates in
non-Latin digits are ignored and a noun right after an accented letter still
counts as a whole word.
"""

import re


# Pass 1: numeric D/D/YYYY dates and relative day words
DATE_PATTERN = re.compile(
    r"\b\d{1,2}/\d{1,2}/\d{4}|\btoday\b|\btomorrow\b|\bnext week\b",
    re.IGNORECASE | re.ASCII,
)

# Pass 2: capitalised name after "with", "by", "assign to"
PERSON_PATTERN = re.compile(r"\b(?i:with|by|assign\s+to)\s+([A-Z][a-z]+)")

# Pass 3: capitalised place after "at", "in", "to"
LOCATION_PATTERN = re.compile(r"\b(?i:at|in|to)\s+([A-Z][a-z]+)")

# Pass 4: fixed domain vocabulary
DOMAIN_NOUNS = ("bug", "invoice", "inspection", "budget", "office", "system", "materials")

DOMAIN_NOUN_PATTERN = re.compile(
    r"\b(" + "|".join(DOMAIN_NOUNS) + r")\b",
    re.IGNORECASE | re.ASCII,
)
