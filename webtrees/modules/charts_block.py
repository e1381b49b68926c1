"""
Charts block: a pedigree, descendants, hourglass or interactive tree chart of one individual
"""

from flask import render_template, url_for

from webtrees.charts import HourglassController, TreeView, print_pedigree_person
from webtrees.database.models import Individual
from webtrees.modules.abstract_module import BlockModule
from webtrees.shared.csrf import check_csrf
from webtrees.shared.gedcom_facts import XREF_REGEX


CHART_TYPES = {
    'pedigree': 'Pedigree',
    'descendants': 'Descendants',
    'hourglass': 'Hourglass chart',
    'treenav': 'Interactive tree',
}
DEFAULT_CHART_TYPE = 'pedigree'
NO_INDIVIDUAL_MESSAGE = 'You must select an individual and a chart type in the block preferences'


class ChartsBlockModule(BlockModule):
    """Dashboard block showing one of several charts for a configured individual"""

    def __init__(self, db_session=None, chart_controller_class=HourglassController, tree_view_class=TreeView):
        super().__init__('charts', db_session)
        self.chart_controller_class = chart_controller_class
        self.tree_view_class = tree_view_class

    def get_title(self) -> str:
        return 'Charts'

    def get_description(self) -> str:
        return 'An alternative way to display charts.'

    def load_ajax(self) -> bool:
        return True

    def is_user_block(self) -> bool:
        return True

    def is_gedcom_block(self) -> bool:
        return True

    def default_pid(self, context) -> str:
        """The signed-in user's own individual, otherwise the tree's root individual"""
        return context.user_gedcomid or context.tree.get_preference('PEDIGREE_ROOT_ID')

    def get_block(self, context, block_id: int, template: bool = True, cfg: dict | None = None) -> str:
        cfg = cfg or {}
        tree = context.tree
        root_id = tree.get_preference('PEDIGREE_ROOT_ID')

        if 'type' in cfg:
            chart_type = cfg['type']
        else:
            chart_type = self.get_block_setting(block_id, 'type', DEFAULT_CHART_TYPE)

        if 'pid' in cfg:
            pid = cfg['pid']
        else:
            pid = self.get_block_setting(block_id, 'pid', self.default_pid(context))

        person = Individual.get_instance(pid, tree.id)
        if person is None:
            self.logger.info(f"Block {block_id}: individual {pid!r} not found, using root {root_id!r}")
            pid = root_id
            self.set_block_setting(block_id, 'pid', pid)
            person = Individual.get_instance(pid, tree.id)

        title = self.get_title()

        if person is not None:
            title, content = self.render_chart(context, chart_type, person, title)
        else:
            content = NO_INDIVIDUAL_MESSAGE

        if not template:
            return content

        config_url = ''
        if context.can_configure_block(self.block_repository.get_block(block_id)):
            config_url = url_for('blocks.edit', tree_name=tree.name, block_id=block_id)

        return render_template(
            'blocks/template.html',
            block=self.get_name().replace('_', '-'),
            id=block_id,
            config_url=config_url,
            title=title,
            content=content,
        )

    def render_chart(self, context, chart_type: str, person: Individual, title: str) -> tuple[str, str]:
        """Title and HTML of one chart; unknown chart types render nothing"""
        renderers = {
            'pedigree': self._render_pedigree,
            'descendants': self._render_descendants,
            'hourglass': self._render_hourglass,
            'treenav': self._render_treenav,
        }
        renderer = renderers.get(chart_type)
        if renderer is None:
            self.logger.debug(f"Unknown chart type {chart_type!r}")
            return title, ''
        return renderer(context, person, person.get_display_name(context.access_level))

    def _render_pedigree(self, context, person, name):
        controller = self.chart_controller_class(person, context)
        content = (
            '<table class="wt-charts-block"><tr>'
            f'<td class="myCharts">{print_pedigree_person(person, context)}</td>'
            f'<td>{controller.print_person_pedigree(person, 1)}</td>'
            '</tr></table>'
            f'<script>{controller.setup_javascript()}</script>'
        )
        return f'Pedigree of {name}', content

    def _render_descendants(self, context, person, name):
        controller = self.chart_controller_class(person, context)
        content = (
            controller.print_descendency(person, 1, False)
            + f'<script>{controller.setup_javascript()}</script>'
        )
        return f'Descendants of {name}', content

    def _render_hourglass(self, context, person, name):
        controller = self.chart_controller_class(person, context)
        content = (
            '<table class="wt-charts-block"><tr>'
            f'<td>{controller.print_descendency(person, 1, False)}</td>'
            f'<td>{controller.print_person_pedigree(person, 1)}</td>'
            '</tr></table>'
            f'<script>{controller.setup_javascript()}</script>'
        )
        return f'Hourglass chart of {name}', content

    def _render_treenav(self, context, person, name):
        tree_view = self.tree_view_class('tvTreeBlock', context)
        html, js = tree_view.draw_viewport(person, 2)
        css_url = url_for('static', filename='css/treeview.css')
        js_url = url_for('static', filename='js/treeview.js')
        content = (
            f"<script>document.head.insertAdjacentHTML('beforeend', "
            f"'<link rel=\"stylesheet\" href=\"{css_url}\" type=\"text/css\">');</script>"
            f'<script src="{js_url}"></script>'
            f'{html}<script>{js}</script>'
        )
        return f'Interactive tree of {name}', content

    def configure_block(self, context, block_id: int, form) -> bool:
        if not form.get('save') or not check_csrf(form):
            return False

        chart_type = form.get('type', '')
        pid = form.get('pid', '').strip()
        if chart_type not in CHART_TYPES or (pid and not XREF_REGEX.match(pid)):
            self.logger.info(f"Ignoring invalid settings for block {block_id}: type={chart_type!r} pid={pid!r}")
            return False

        self.set_block_setting(block_id, 'type', chart_type)
        self.set_block_setting(block_id, 'pid', pid or None)
        return True

    def config_form(self, context, block_id: int) -> str:
        chart_type = self.get_block_setting(block_id, 'type', DEFAULT_CHART_TYPE)
        pid = self.get_block_setting(block_id, 'pid', self.default_pid(context))
        charts = sorted(CHART_TYPES.items(), key=lambda item: item[1].lower())

        return render_template(
            'blocks/charts_config.html',
            charts=charts,
            chart_type=chart_type,
            pid=pid,
            individual=Individual.get_instance(pid, context.tree.id),
            access_level=context.access_level,
        )
