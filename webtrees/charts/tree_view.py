"""
Interactive tree viewport
"""

from flask import render_template

from webtrees.charts.hourglass import HourglassController


class TreeView:
    """Scrollable viewport showing an individual with ancestors and descendants"""

    def __init__(self, name: str, context):
        self.name = name
        self.context = context

    def draw_viewport(self, person, generations: int) -> tuple[str, str]:
        """Return the viewport HTML and the script that activates it"""
        controller = HourglassController(person, self.context)
        html = render_template(
            'charts/tree_view.html',
            name=self.name,
            ancestors=controller.print_person_pedigree(person, generations),
            descendants=controller.print_descendency(person, generations, show_nav=False),
        )
        js = f"var {self.name}Handler = new TreeViewHandler('{self.name}');"
        return html, js
