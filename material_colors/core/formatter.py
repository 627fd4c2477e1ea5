"""Render a colour's identity into a user-defined copy format.

A FormatTemplate has a pattern with $HUE, $VALUE and $ALPHA placeholders
and an optional transform spec of at most three characters:

    x     lower case                 light blue   -> light blue
    X     upper case                 light blue   -> LIGHT BLUE
    Xx    sentence case              light-blue   -> Light Blue
    _X    replacer + casing          light blue   -> LIGHT_BLUE
    dXx   'd' deletes separators     light blue   -> LightBlue

Casing runs first, then every space or hyphen is replaced (by the replacer,
by nothing for 'd', or by a single space when no replacer is given).
Sentence case needs the original word boundaries, so the order matters.

Grouped values are qualified as 'group-value' (accent + a100 -> accent-a100,
or Accent-A100 with Xx). The qualifying hyphen is kept by every separator rule.

An invalid transform spec is not an error: names are substituted untouched.
There is no escape for literal placeholder text.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from material_colors.core.palette import alpha_percent
from material_colors.core.types import FormatData, FormatTemplate

DEFAULT_COPY_FORMAT = FormatTemplate(pattern='$HUE $VALUE', transform='Xx')

DELETE_REPLACER = 'd'
MAX_TRANSFORM_LENGTH = 3

_SENTENCE_START = re.compile(r'(?:^|(?<=[\s-]))\S')
_SEPARATORS = re.compile(r'[- ]')


class Casing(Enum):
    NONE = 'none'
    LOWER = 'x'
    UPPER = 'X'
    SENTENCE = 'Xx'


class SeparatorKind(Enum):
    DEFAULT_SPACE = 'default'
    DELETE = 'delete'
    LITERAL = 'literal'


@dataclass(frozen=True)
class Separator:
    kind: SeparatorKind = SeparatorKind.DEFAULT_SPACE
    char: str = ''

    @property
    def replacement(self) -> str:
        if self.kind is SeparatorKind.DELETE:
            return ''
        if self.kind is SeparatorKind.LITERAL:
            return self.char
        return ' '


@dataclass(frozen=True)
class TextTransform:
    casing: Casing = Casing.NONE
    separator: Separator = Separator()

    @property
    def is_identity(self) -> bool:
        return self.casing is Casing.NONE

    def apply(self, text: str) -> str:
        if self.is_identity:
            return text
        if self.casing is Casing.LOWER:
            text = text.lower()
        elif self.casing is Casing.UPPER:
            text = text.upper()
        elif self.casing is Casing.SENTENCE:
            text = sentence_case(text)
        return _SEPARATORS.sub(lambda _m: self.separator.replacement, text)


IDENTITY = TextTransform()


def sentence_case(text: str) -> str:
    """Upper-case the first character and every character after whitespace or a hyphen.

    Nothing is lower-cased.
    """
    return _SENTENCE_START.sub(lambda m: m.group(0).upper(), text)


def parse_transform(spec: str | None) -> TextTransform:
    """Parse a transform spec; anything invalid gives IDENTITY."""
    if not spec or len(spec) > MAX_TRANSFORM_LENGTH:
        return IDENTITY

    replacer = None
    casing_spec = spec
    if spec[0] not in 'xX':
        replacer, casing_spec = spec[0], spec[1:]

    try:
        casing = Casing(casing_spec)
    except ValueError:
        return IDENTITY
    if casing is Casing.NONE:
        return IDENTITY

    if replacer is None:
        separator = Separator()
    elif replacer == DELETE_REPLACER:
        separator = Separator(SeparatorKind.DELETE)
    else:
        separator = Separator(SeparatorKind.LITERAL, replacer)
    return TextTransform(casing=casing, separator=separator)


def format_alpha(alpha: float | None) -> str:
    """Alpha as a whole percentage string; missing or zero alpha reads as '100'."""
    if alpha:
        return str(alpha_percent(alpha))
    return '100'


def render(template: FormatTemplate, data: FormatData) -> str:
    transform = parse_transform(template.transform)
    hue_name = transform.apply(data.hue_name or '')
    value_name = transform.apply(data.value_name or '')
    # The group qualifier joins with a literal hyphen that the separator rule keeps.
    if data.group_name:
        value_name = f'{transform.apply(data.group_name)}-{value_name}'

    return (
        template.pattern.replace('$HUE', hue_name)
        .replace('$VALUE', value_name)
        .replace('$ALPHA', format_alpha(data.alpha))
    )


def render_all(templates: Iterable[FormatTemplate], data: FormatData) -> list[str]:
    """Render several formats for the same colour, keeping their order."""
    return [render(t, data) for t in templates]
