"""Templated TypeScript module wrapping a serialized theme."""

from tokenpress.config import Settings, get_settings
from tokenpress.domain.theme import ThemeStructure
from tokenpress.services.serializer import INDENT, format_key, format_object


def render_preset_module(
    theme: ThemeStructure,
    source_name: str,
    settings: Settings | None = None,
) -> str:
    """Render the generated preset module.

    Args:
        theme: The assembled theme.
        source_name: File name of the token document, for the header comment.
        settings: Supplies the preset imports and component presets.

    Returns:
        Module source defining ``definePreset(<base>, {...})`` with the
        primitive and semantic trees and the configured components.
    """
    settings = settings or get_settings()

    imports = [
        f"import {{ definePreset }} from '{settings.preset_package}'",
        f"import {settings.base_preset} from '{settings.base_preset_module}'",
    ]
    imports.extend(
        f"import {name} from '{module}'"
        for name, module in settings.component_imports.items()
    )

    theme_dict = theme.to_dict()
    inner = " " * INDENT
    body = [
        f"{inner}primitive: {format_object(theme_dict['primitive'], INDENT)}",
        f"{inner}semantic: {format_object(theme_dict['semantic'], INDENT)}",
    ]
    if settings.component_imports:
        components = ",\n".join(
            f"{inner * 2}{format_key(name)}: {name}"
            for name in settings.component_imports
        )
        body.append(f"{inner}components: {{\n{components}\n{inner}}}")

    return (
        f"// Generated from {source_name}\n"
        "// Do not edit by hand: regenerate with `tokenpress convert`.\n"
        "\n"
        + "\n".join(imports)
        + "\n\n"
        + f"const Default = definePreset({settings.base_preset}, {{\n"
        + ",\n".join(body)
        + "\n});\n"
        "\n"
        "export default {\n"
        f"{inner}preset: Default,\n"
        "};\n"
    )
