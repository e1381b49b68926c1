"""
Split raw GEDCOM record text into facts
"""

import re


XREF_PATTERN = r'[A-Za-z0-9:_-]+'
XREF_REGEX = re.compile(rf'^{XREF_PATTERN}$')
XREF_POINTER_REGEX = re.compile(rf'^@({XREF_PATTERN})@$')


class Fact:
    """A level 1 GEDCOM line together with its nested sub-lines"""

    def __init__(self, gedcom: str, parent=None):
        self.gedcom = gedcom
        self.parent = parent

        lines = gedcom.split('\n')
        self.tag = GedcomFactParser.get_tag(lines[0])
        self.value = GedcomFactParser.join_continuations(
            GedcomFactParser.get_value(lines[0]), lines[1:], level=2
        )

    @property
    def target_xref(self) -> str | None:
        """Xref this fact points at when its value is of the form @X@"""
        match = XREF_POINTER_REGEX.match(self.value)
        return match.group(1) if match else None

    def get_target(self):
        """Resolve the pointed-to record, None when missing or deleted"""
        xref = self.target_xref
        if xref is None or self.parent is None:
            return None
        return self.parent.lookup_record(xref)

    def get_attribute(self, tag: str) -> str:
        """Value of the first level 2 sub-line with this tag, '' if absent"""
        lines = self.gedcom.split('\n')
        for i, line in enumerate(lines[1:], start=1):
            if GedcomFactParser.get_level(line) == 2 and GedcomFactParser.get_tag(line) == tag:
                return GedcomFactParser.join_continuations(
                    GedcomFactParser.get_value(line), lines[i + 1:], level=3
                )
        return ''

    def __repr__(self):
        return f'<Fact {self.tag} {self.value[:30]!r}>'


class GedcomFactParser:
    """Parse the text of one GEDCOM record into its level 1 facts"""

    def parse(self, gedcom: str, parent=None) -> list[Fact]:
        """Return the facts of a record, in record order"""
        return [Fact('\n'.join(chunk), parent) for chunk in self.split_into_facts(gedcom)]

    def split_into_facts(self, gedcom: str) -> list[list[str]]:
        """Split record lines into level 1 chunks, dropping the level 0 header"""
        facts = []
        current_fact = []

        for line in (gedcom or '').split('\n'):
            line = line.strip()
            if not line:
                continue

            level = self.get_level(line)
            if level == 0:
                continue

            if level == 1 and current_fact:
                facts.append(current_fact)
                current_fact = []

            # Orphaned sub-lines before the first level 1 line are ignored
            if level == 1 or current_fact:
                current_fact.append(line)

        if current_fact:
            facts.append(current_fact)

        return facts

    @staticmethod
    def get_level(line: str) -> int:
        """Extract the level number from a GEDCOM line"""
        match = re.match(r'^(\d+)', line)
        return int(match.group(1)) if match else 0

    @staticmethod
    def get_tag(line: str) -> str:
        """Extract the tag from a GEDCOM line, skipping a level 0 xref"""
        parts = line.split()
        if len(parts) > 2 and parts[0] == '0' and parts[1].startswith('@'):
            return parts[2]
        return parts[1] if len(parts) > 1 else ''

    @staticmethod
    def get_value(line: str) -> str:
        """Extract the value from a GEDCOM line"""
        parts = line.split(None, 2)
        if len(parts) > 2 and parts[0] == '0' and parts[1].startswith('@'):
            rest = parts[2].split(None, 1)
            return rest[1] if len(rest) > 1 else ''
        return parts[2] if len(parts) > 2 else ''

    @classmethod
    def join_continuations(cls, value: str, following: list[str], level: int) -> str:
        """Append CONT/CONC lines at the given level that directly follow a value"""
        for line in following:
            if cls.get_level(line) != level:
                break
            tag = cls.get_tag(line)
            if tag == 'CONT':
                value += '\n' + cls.get_value(line)
            elif tag == 'CONC':
                value += cls.get_value(line)
            else:
                break
        return value

    @classmethod
    def record_value(cls, gedcom: str) -> str:
        """Value of the level 0 line of a record with its level 1 continuations"""
        lines = [line.strip() for line in (gedcom or '').split('\n') if line.strip()]
        if not lines:
            return ''
        return cls.join_continuations(cls.get_value(lines[0]), lines[1:], level=1)
