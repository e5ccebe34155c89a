import re
import string

PAGE_SUFFIX = ".html"

_PUNCTUATION = re.compile("[" + re.escape(string.punctuation) + "]")

# -----------------------------
# WORD MATCHING
# -----------------------------

def match_key(word):
    """
    Strip ASCII punctuation from a word and lower-case it.
    The key is only used for lookup; the word itself is what gets displayed.
    """
    return _PUNCTUATION.sub("", word).lower()


def find_term(word, store):
    """
    Return the first term (in store order) that the word's match key starts with.
    First match wins, even when a longer term would also match.
    Returns None if no term matches.
    """
    key = match_key(word)
    for term in store:
        lowered = term.lower()
        # An empty term would be a prefix of every word
        if lowered and key.startswith(lowered):
            return term
    return None


# -----------------------------
# DEFINITION REWRITING
# -----------------------------

def anchor(term, label):
    return f'<a href="{term}{PAGE_SUFFIX}">{label}</a>'


def rewrite(definition, store):
    """
    Replace every word of a definition that matches a glossary term with a link
    to that term's page. Words are split on whitespace, keep their original text
    (punctuation included) as the link label, and are rejoined with single spaces.
    """
    out = []
    for word in definition.split():
        term = find_term(word, store)
        if term is None:
            out.append(word)
        else:
            out.append(anchor(term, word))
    return " ".join(out).rstrip()


def linked_terms(definition, store):
    """List the distinct terms a definition links to, in order of first appearance."""
    seen = []
    for word in definition.split():
        term = find_term(word, store)
        if term is not None and term not in seen:
            seen.append(term)
    return seen
