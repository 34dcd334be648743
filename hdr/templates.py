from typing import Dict

import jinja2

from hdr.base import TemplateKind
from hdr.config import Configuration

# Rendered in one pass against the configuration and the per-file values, so
# a value that looks like template syntax is inserted verbatim.
TEMPLATE_SOURCES: Dict[TemplateKind, str] = {
    TemplateKind.SCRIPT: """\
/**
 * @file {{ filename }}
 * @description {{ description }}
 * @license {{ license }}
 * @copyright {{ year }} {{ author }}
 */

""",
    TemplateKind.STYLE: """\
/**
 * @file {{ filename }}
 * @license {{ license }}
 * @copyright {{ year }} {{ author }}
 */

""",
    TemplateKind.MARKUP: """\
<!--
  @file {{ filename }}
  @license {{ license }}
  @copyright {{ year }} {{ author }}
-->

""",
    TemplateKind.SHELL: """\
# @file {{ filename }}
# @license {{ license }}
# @copyright {{ year }} {{ author }}

""",
}

_compiled: Dict[TemplateKind, jinja2.Template] = {}


def _template(kind: TemplateKind) -> jinja2.Template:
    if kind not in _compiled:
        _compiled[kind] = jinja2.Template(TEMPLATE_SOURCES[kind], keep_trailing_newline=True)
    return _compiled[kind]


def render_header(kind: TemplateKind, config: Configuration, filename: str, description: str = "") -> str:
    assert isinstance(kind, TemplateKind), f"Expected TemplateKind, got {type(kind)}"
    return _template(kind).render(
        author=config.author,
        license=config.license,
        year=config.year,
        project_name=config.project_name,
        filename=filename,
        description=description or "")


def template_for(kind: TemplateKind, config: Configuration) -> str:
    """
    Returns the header text for `kind` with the configuration filled in and
    `{filename}` / `{description}` shown as placeholders.
    """
    return render_header(kind, config, "{filename}", "{description}")
