"""rcgen scaffolder -- writes React component directories.

Quick usage::

    from rcgen.scaffolder import (
        ComponentGenerator, ComponentRequest, append_export, barrel_path_for,
    )

    request = ComponentRequest(name="foo-bar", target_path="src/components",
                               is_ts=True, is_scss=False)
    result = ComponentGenerator(request).generate()
    append_export(barrel_path_for(request.target_path, True), result.identifier)
"""

from rcgen.scaffolder.barrel import append_export, barrel_path_for
from rcgen.scaffolder.generator import (
    ComponentGenerator,
    ComponentRequest,
    GeneratedFile,
    GenerationResult,
)
from rcgen.scaffolder.templates import (
    LanguageVariant,
    TemplateKind,
    format_template,
    render,
)

__all__ = [
    "ComponentGenerator",
    "ComponentRequest",
    "GeneratedFile",
    "GenerationResult",
    "LanguageVariant",
    "TemplateKind",
    "append_export",
    "barrel_path_for",
    "format_template",
    "render",
]
