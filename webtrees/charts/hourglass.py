"""
Pedigree, descendancy and hourglass chart rendering
"""

from flask import render_template

from webtrees.database.models import Individual


def print_pedigree_person(person: Individual | None, context) -> str:
    """HTML box for one individual; private individuals show no details"""
    return render_template('charts/person_box.html', box=person_box_variables(person, context))


def person_box_variables(person: Individual | None, context) -> dict:
    if person is None:
        return {'person': None, 'visible': False, 'name': '', 'sex': 'U', 'birth_year': None}
    visible = person.can_show(context.access_level)
    return {
        'person': person,
        'visible': visible,
        'name': person.get_full_name() if visible else 'Private',
        'sex': person.get_sex() if visible else 'U',
        'birth_year': person.get_birth_year() if visible else None,
    }


class HourglassController:
    """Ancestors and descendants of one individual"""

    def __init__(self, person: Individual, context):
        self.person = person
        self.context = context

    def print_person_pedigree(self, person: Individual, generations: int) -> str:
        """Parents of the individual, recursively for the given number of generations"""
        return render_template(
            'charts/pedigree.html',
            tree=self._ancestors(person, generations),
        )

    def print_descendency(self, person: Individual, generations: int, show_nav: bool = True) -> str:
        """Children of the individual's families, recursively"""
        return render_template(
            'charts/descendancy.html',
            tree=self._descendants(person, generations),
            show_nav=show_nav,
        )

    def setup_javascript(self) -> str:
        return (
            "document.querySelectorAll('.wt-chart-toggle').forEach(function (toggle) {"
            " toggle.addEventListener('click', function () {"
            " toggle.parentElement.classList.toggle('wt-chart-collapsed'); }); });"
        )

    def _can_expand(self, person: Individual) -> bool:
        # Relationships of private individuals are not revealed
        return person.can_show(self.context.access_level)

    def _ancestors(self, person: Individual | None, generations: int) -> dict | None:
        if person is None:
            return None
        node = {'box': person_box_variables(person, self.context), 'father': None, 'mother': None}
        if generations > 0 and self._can_expand(person):
            family = person.get_primary_child_family()
            if family is not None:
                node['father'] = self._ancestors(family.get_husband(), generations - 1)
                node['mother'] = self._ancestors(family.get_wife(), generations - 1)
        return node

    def _descendants(self, person: Individual, generations: int) -> dict:
        node = {'box': person_box_variables(person, self.context), 'families': [], 'has_more': False}
        if not self._can_expand(person):
            return node
        for family in person.get_spouse_families():
            children = family.get_children()
            if generations > 0:
                node['families'].append({
                    'spouse': person_box_variables(family.get_spouse(person), self.context),
                    'children': [self._descendants(child, generations - 1) for child in children],
                })
            elif children:
                node['has_more'] = True
        return node
