"""Description/label templates: `str.format` syntax, strict about placeholders."""

from __future__ import annotations

import string
from collections.abc import Mapping, Sequence

from errortree.errors import TemplateError

_FORMATTER = string.Formatter()


def placeholders(template: str) -> list[str]:
    """Return the root field names referenced by a template, in order."""
    names: list[str] = []
    for _, field_name, _, _ in _FORMATTER.parse(template):
        if field_name is None:
            continue
        root = field_name.split(".", 1)[0].split("[", 1)[0]
        names.append(root)
    return names


def expand(
    template: str,
    values: Mapping[str, object],
    positional: Sequence[object] = (),
    *,
    path: str = "",
) -> str:
    """Expand a template; an unresolved placeholder raises TemplateError."""
    try:
        return _FORMATTER.vformat(template, tuple(positional), values)
    except KeyError as e:
        raise TemplateError(path, f"unresolved placeholder {{{e.args[0]}}} in {template!r}") from e
    except IndexError as e:
        raise TemplateError(path, f"unresolved positional placeholder in {template!r}") from e
    except AttributeError as e:
        raise TemplateError(path, f"{e} (in {template!r})") from e
    except ValueError as e:
        raise TemplateError(path, f"malformed template {template!r}: {e}") from e
