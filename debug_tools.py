# debug_tools.py
# Collects a picture of one glossary run; stays silent unless activated.

import os

ANOMALY_LIMIT = 10


class DebugCollector:
    """
    Records what a glossary run produced: how many terms and pages, which
    pages link where, which terms nothing links to, and odd input records.
    Nothing is recorded while the collector is disabled.
    """

    def __init__(self):
        self.enabled = False
        self.counts = {"terms": None, "pages": None, "links": None}
        self.flow = []
        self.terms = []
        self.links = {}
        self.anomalies = {
            "duplicate_terms": [],
            "blank_terms": [],
            "empty_definitions": [],
        }

    def enable(self):
        self.enabled = True

    def disable(self):
        self.enabled = False

    def reset(self):
        """Drop everything collected so far, keeping the enabled flag."""
        enabled = self.enabled
        self.__init__()
        self.enabled = enabled

    def add_flow(self, message: str):
        if self.enabled:
            self.flow.append(message)

    def set_count(self, key: str, value: int):
        if self.enabled and key in self.counts:
            self.counts[key] = value

    def record_terms(self, terms):
        """Remember the parsed terms, in store order."""
        if self.enabled:
            self.terms = list(terms)
            self.counts["terms"] = len(self.terms)

    def add_link(self, term: str, target: str):
        """Note that the page for `term` links to the page for `target`."""
        if self.enabled:
            self.links.setdefault(term, []).append(target)

    def add_anomaly(self, key: str, item):
        if self.enabled and len(self.anomalies[key]) < ANOMALY_LIMIT:
            self.anomalies[key].append(item)

    def unlinked_terms(self):
        """Terms that no other page links to."""
        targets = {t for term, found in self.links.items() for t in found if t != term}
        return [term for term in self.terms if term not in targets]

    def emit(self):
        """
        Produce a single consolidated report as a formatted string,
        or "" when collection is off.
        """
        if not self.enabled:
            return ""

        report = ["=== DEBUG REPORT START ==="]

        report.append("\nCOUNTS:")
        for k, v in self.counts.items():
            report.append(f"  {k}: {v}")

        report.append("\nFLOW CHECKPOINTS:")
        report.extend(f"  - {step}" for step in self.flow)

        report.append("\nLINKS:")
        for term, targets in self.links.items():
            report.append(f"  {term} -> {', '.join(targets)}")

        unlinked = self.unlinked_terms()
        report.append(f"\nUNLINKED TERMS: {len(unlinked)}")
        report.extend(f"  {term}" for term in unlinked)

        # Only report anomaly kinds that actually occurred
        found = {k: items for k, items in self.anomalies.items() if items}
        if found:
            report.append("\nANOMALIES:")
            for k, items in found.items():
                report.append(f"  {k}: {', '.join(items)}")

        report.append("=== DEBUG REPORT END ===")
        return "\n".join(report)


# A single global collector instance that the pipeline can import.
DEBUG = DebugCollector()

if os.environ.get("GLOSSARY_DEBUG", "").lower() in ("1", "true", "yes", "on"):
    DEBUG.enable()
