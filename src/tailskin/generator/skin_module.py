"""Generate the TypeScript module that defines a skin's custom element."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

__all__ = ["SkinModuleData", "SkinModuleOptions", "generate_skin_module", "escape_template"]


@dataclass(frozen=True)
class SkinModuleData:
    """Everything the generated module is made of.

    ``imports`` are already-formatted import lines.  When ``stylesheet_href``
    is set the template links that stylesheet instead of inlining ``styles``.
    """

    imports: Sequence[str]
    html: str
    class_name: str
    element_name: str
    styles: str = ""
    stylesheet_href: str | None = None


def escape_template(text: str) -> str:
    """Escape *text* for use inside a JavaScript template literal."""
    return text.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")


def _block(text: str, pad: str) -> list[str]:
    return [pad + line for line in escape_template(text).splitlines() if line.strip()]


@dataclass(frozen=True)
class SkinModuleOptions:
    indent_size: int = 2
    base_import: str = "../media-skin"
    format_imports: Callable[[Sequence[str]], list[str]] | None = None
    format_styles: Callable[[str], str] | None = None
    format_html: Callable[[str], str] | None = None


def generate_skin_module(data: SkinModuleData, options: SkinModuleOptions | None = None) -> str:
    """Render the module text.

    The output depends only on *data* and *options*, so unchanged input
    always produces byte-identical text.
    """
    options = options or SkinModuleOptions()
    unit = " " * options.indent_size
    imports = list(data.imports)
    if options.format_imports is not None:
        imports = options.format_imports(imports)
    styles = options.format_styles(data.styles) if options.format_styles else data.styles
    html = options.format_html(data.html) if options.format_html else data.html

    lines = [f"import {{ MediaSkin }} from '{options.base_import}';", *imports, ""]

    lines.append("export function getTemplateHTML() {")
    lines.append(f"{unit}return /*html*/ `")
    lines.append(f"{unit * 2}${{MediaSkin.getTemplateHTML()}}")
    if data.stylesheet_href:
        lines.append(f'{unit * 2}<link rel="stylesheet" href="{data.stylesheet_href}">')
    elif styles.strip():
        lines.append(f"{unit * 2}<style>")
        lines.extend(_block(styles, unit * 3))
        lines.append(f"{unit * 2}</style>")
    lines.extend(_block(html, unit * 2))
    lines.append(f"{unit}`;")
    lines.append("}")
    lines.append("")

    lines.append(f"export class {data.class_name} extends MediaSkin {{")
    lines.append(f"{unit}static getTemplateHTML: () => string = getTemplateHTML;")
    lines.append("}")
    lines.append("")

    lines.append(f"if (!customElements.get('{data.element_name}')) {{")
    lines.append(f"{unit}customElements.define('{data.element_name}', {data.class_name});")
    lines.append("}")
    return "\n".join(lines) + "\n"
