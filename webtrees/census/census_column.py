"""
Census columns generate the value of one column of a census form for an individual
"""

from abc import ABC, abstractmethod


class AbstractCensusColumn(ABC):
    """One column of a census, with its short heading and full title"""

    def __init__(self, census, abbreviation: str, title: str):
        self.census = census
        self.abbreviation = abbreviation
        self.title = title

    @abstractmethod
    def generate(self, individual, head=None) -> str:
        """Value of this column for an individual, relative to the head of household"""


class CensusColumnOccupation(AbstractCensusColumn):
    """The individual's occupation"""

    def generate(self, individual, head=None) -> str:
        for fact in individual.get_facts('OCCU'):
            return fact.value
        return ''
