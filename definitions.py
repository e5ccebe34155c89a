from debug_tools import DEBUG
from errors import EmptyInputError, GlossaryError
from text_io import FileLineSource


class GlossaryStore:
    """
    Term→definition pairs for one glossary run.
    Iteration follows first-insertion order, which is what the link rewriter
    scans when it looks for the first matching term.
    """

    def __init__(self, pairs=None):
        self._entries = {}
        self.duplicates = []
        self.frozen = False
        if pairs:
            for term, definition in pairs:
                self.add(term, definition)

    def add(self, term: str, definition: str):
        """
        Insert a pair. A repeated term overwrites the earlier definition
        (last write wins) but keeps its original position.
        """
        if self.frozen:
            raise GlossaryError(f"Cannot add '{term}': the glossary is read-only once populated")
        if term in self._entries:
            self.duplicates.append(term)
        self._entries[term] = definition

    def freeze(self):
        self.frozen = True
        return self

    def definition(self, term: str) -> str:
        return self._entries[term]

    def terms(self) -> list[str]:
        return list(self._entries)

    def items(self):
        return list(self._entries.items())

    def sorted_terms(self) -> list[str]:
        """All terms in ordinal (codepoint) order."""
        return sorted(set(self._entries))

    def __getitem__(self, term):
        return self._entries[term]

    def __contains__(self, term):
        return term in self._entries

    def __iter__(self):
        return iter(self._entries)

    def __len__(self):
        return len(self._entries)

    def __eq__(self, other):
        if not isinstance(other, GlossaryStore):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self):
        return f"GlossaryStore({len(self._entries)} terms)"


def read_definition(source) -> str:
    """
    Collect definition lines until an empty line or the end of input.
    Lines are joined with single spaces and the result is trimmed.
    """
    buffer = []
    while not source.at_end():
        line = source.next_line()
        if line == "":
            break
        buffer.append(line + " ")
    return "".join(buffer).strip()


def parse(source) -> GlossaryStore:
    """
    Build a glossary from a line source.
    Each record is a term line followed by definition lines, ended by a blank
    line or the end of input. Raises EmptyInputError when no record is found.
    """
    store = GlossaryStore()

    while not source.at_end():
        term = source.next_line()

        # Extra blank lines between records are separators, not terms
        if term == "":
            continue

        definition = read_definition(source)

        if term in store:
            DEBUG.add_anomaly("duplicate_terms", term)
        if not term.strip():
            DEBUG.add_anomaly("blank_terms", repr(term))
        if not definition:
            DEBUG.add_anomaly("empty_definitions", term)

        store.add(term, definition)

    if len(store) == 0:
        raise EmptyInputError("The glossary input contains no terms; nothing to generate")

    DEBUG.record_terms(store)
    return store.freeze()


def load_glossary(path) -> GlossaryStore:
    """Parse the glossary file at `path`, closing it whether or not parsing succeeds."""
    with FileLineSource(path) as source:
        return parse(source)
