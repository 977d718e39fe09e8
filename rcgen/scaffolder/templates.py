"""Component file templates and positional placeholder rendering.

Each template kind has a typed (TypeScript) and an untyped (JavaScript)
body.  Bodies carry positional placeholders ``{0}``, ``{1}``, ... which
:func:`format_template` replaces in index order.  Values are inserted
verbatim; nothing is escaped.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class TemplateKind(str, Enum):
    COMPONENT = "component"
    STORY = "story"
    TEST = "test"
    INDEX = "index"


class LanguageVariant(str, Enum):
    TYPED = "typed"
    UNTYPED = "untyped"


# ---------------------------------------------------------------------------
# Template bodies
# ---------------------------------------------------------------------------

_COMPONENT_TS = """\
import React from "react"
import "./{0}.{1}"

export interface {0}Props {
\t//complete your custom props here
}

const {0} = (props: {0}Props) => {
\treturn <></>
}

export default {0}"""

_COMPONENT_JS = """\
import React from 'react';
import PropTypes from 'prop-types';
import "./{0}.{1}";

export const {0} = ({ ...props }) => {
\treturn <></>;
};

{0}.propTypes = {
\t//Add custom propTypes
};

{0}.defaultProps = {
\t//Add default props values
};"""

_STORY_TS = """\
import React from "react"
import { ComponentStory, ComponentMeta } from "@storybook/react"
import {0} from "./{0}"

export default {
\ttitle: "PortfolioComponentLibrary/{0}",
\tcomponent: {0},
} as ComponentMeta<typeof {0}>

const Template: ComponentStory<typeof {0}> = (args) => <{0} {...args} />

//Stories
export const BasicStory = Template.bind({})
BasicStory.args = {
\t//Add props values for this story
}"""

_STORY_JS = """\
import React from 'react';
import { {0} } from './{0}';

export default {
\ttitle: 'PortfolioComponentLibrary/{0}',
\tcomponent: {0},
\t// More on argTypes: https://storybook.js.org/docs/react/api/argtypes
\targTypes: {
\t\t//Add Custom argTypes here
\t},
};

const Template = (args) => <{0} {...args} />;

//Stories
export const BasicStory = Template.bind({});
BasicStory.args = {
\t//Add props values for this story
};"""

_TEST_TS = """\
import React from "react"
import { render } from "@testing-library/react"

import {0} from "./{0}"

describe("{0}", () => {
\ttest("renders the {0} component", () => {
\t\trender(<{0} />)
\t})
})"""

_TEST_JS = "//javascript component test here"

_INDEX_TS = 'export { default } from "./{0}"'

_INDEX_JS = "//javascript index here"


TEMPLATES: Mapping[TemplateKind, Mapping[LanguageVariant, str]] = MappingProxyType({
    TemplateKind.COMPONENT: MappingProxyType({
        LanguageVariant.TYPED: _COMPONENT_TS,
        LanguageVariant.UNTYPED: _COMPONENT_JS,
    }),
    TemplateKind.STORY: MappingProxyType({
        LanguageVariant.TYPED: _STORY_TS,
        LanguageVariant.UNTYPED: _STORY_JS,
    }),
    TemplateKind.TEST: MappingProxyType({
        LanguageVariant.TYPED: _TEST_TS,
        LanguageVariant.UNTYPED: _TEST_JS,
    }),
    TemplateKind.INDEX: MappingProxyType({
        LanguageVariant.TYPED: _INDEX_TS,
        LanguageVariant.UNTYPED: _INDEX_JS,
    }),
})

BARREL_EXPORT_TEMPLATE = 'export { default as {0} } from "./{0}"'


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def format_template(template: str, *values: str) -> str:
    """Replace every ``{i}`` in *template* with ``values[i]``.

    Indices are processed in ascending order, so a value that itself contains
    a later placeholder (``"{1}"`` passed as value 0) is substituted again.
    """
    result = template
    for index, value in enumerate(values):
        result = result.replace(f"{{{index}}}", value)
    return result


def select_variant(is_ts: bool) -> LanguageVariant:
    """Map the TypeScript flag to a template variant."""
    return LanguageVariant.TYPED if is_ts else LanguageVariant.UNTYPED


def render(kind: TemplateKind, variant: LanguageVariant, *params: str) -> str:
    """Render the *variant* body of template *kind* with positional *params*.

    Parameters per kind:
        component: identifier, style extension (``"scss"`` or ``"css"``)
        story, test, index: identifier
    """
    return format_template(TEMPLATES[kind][variant], *params)
