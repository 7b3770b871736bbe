"""Render merged resources as a Python module of typed accessors.

For a resource

    <!-- Shown on the case summary screen -->
    <string name="detective_has_suspects">
        {suspects, plural, =0 {{detective} has no suspects} other {{detective} has # suspects}}
    </string>

the writer emits

    def detective_has_suspects(suspects: int | float, detective: object) -> _runtime.FormattedResource:
        \"\"\"Shown on the case summary screen\"\"\"
        return _runtime.FormattedResource(
            id="detective_has_suspects",
            arguments={
                "suspects": suspects,
                "detective": detective,
            },
        )

Resources whose numbered arguments run 0..n-1 pass a positional tuple
instead of a dict. Only PUBLIC accessors are listed in __all__. The runtime
module is bound to a reserved alias so that no accessor or parameter name
can shadow it.

Python 3.13+.
"""

from __future__ import annotations

import json
from collections.abc import Sequence

from icuaccessors.constants import GENERATED_HEADER, RUNTIME_MODULE_ALIAS
from icuaccessors.enums import ArgumentType, Visibility
from icuaccessors.merge.merger import Argument, MergedResource

__all__ = ["PYTHON_TYPES", "AccessorWriter", "write_accessors"]

_INDENT = "    "
_RESULT_TYPE = f"{RUNTIME_MODULE_ALIAS}.FormattedResource"

PYTHON_TYPES: dict[ArgumentType, str] = {
    ArgumentType.ANY: "object",
    ArgumentType.TEXT: "str",
    ArgumentType.NUMBER: "int | float",
    ArgumentType.DURATION: "datetime.timedelta",
    ArgumentType.DATE: "datetime.date",
    ArgumentType.TIME: "datetime.time",
    ArgumentType.TIME_WITH_OFFSET: "datetime.time",
    ArgumentType.DATE_TIME: "datetime.datetime",
    ArgumentType.DATE_TIME_WITH_OFFSET: "datetime.datetime",
    ArgumentType.DATE_TIME_WITH_ZONE: "datetime.datetime",
    ArgumentType.ZONE_OFFSET: "datetime.tzinfo",
    ArgumentType.NOTHING: "None",
}


def _string_literal(value: str) -> str:
    """Double-quoted Python string literal (JSON escapes are valid Python)."""
    return json.dumps(value, ensure_ascii=False)


def _docstring(text: str, indent: str) -> list[str]:
    """Docstring lines for text, escaped so it cannot terminate early."""
    escaped = (
        text.strip()
        .replace("\\", "\\\\")
        .replace("\x00", "\\x00")
        .replace('"""', '\\"\\"\\"')
    )
    # A final quote is unescaped when preceded by an even run of backslashes.
    trailing_backslashes = len(escaped[:-1]) - len(escaped[:-1].rstrip("\\"))
    if escaped.endswith('"') and trailing_backslashes % 2 == 0:
        escaped = escaped[:-1] + '\\"'
    lines = escaped.splitlines()
    if not lines:
        return []
    if len(lines) == 1:
        return [f'{indent}"""{lines[0]}"""']
    body = [f"{indent}{line}".rstrip() for line in lines[1:]]
    return [f'{indent}"""{lines[0]}', *body, f'{indent}"""']


class AccessorWriter:
    """Writer producing the source of an accessor module.

    Stateless: a single instance may be reused and shared across threads.
    """

    def write(self, resources: Sequence[MergedResource], *, module_doc: str | None = None) -> str:
        """Render resources (in the given order) as Python source.

        Args:
            resources: Merged resources, normally sorted by name
            module_doc: Optional module docstring

        Returns:
            Python module source ending with a newline
        """
        output: list[str] = []
        self._write_header(output, resources, module_doc)
        self._write_exports(output, resources)
        for resource in resources:
            output.append("")
            output.append("")
            self._write_accessor(resource, output)
        return "\n".join(output) + "\n"

    def _write_header(
        self, output: list[str], resources: Sequence[MergedResource], module_doc: str | None
    ) -> None:
        output.extend(GENERATED_HEADER.rstrip("\n").splitlines())
        if module_doc:
            output.extend(_docstring(module_doc, ""))
        output.append("")
        output.append("from __future__ import annotations")
        output.append("")
        needs_datetime = any(
            PYTHON_TYPES[argument.type].startswith("datetime.")
            for resource in resources
            for argument in resource.arguments
        )
        if needs_datetime:
            output.append("import datetime")
            output.append("")
        output.append(f"from icuaccessors import runtime as {RUNTIME_MODULE_ALIAS}")
        output.append("")

    def _write_exports(self, output: list[str], resources: Sequence[MergedResource]) -> None:
        public = [r.accessor_name for r in resources if r.visibility is Visibility.PUBLIC]
        if not public:
            output.append("__all__: list[str] = []")
            return
        output.append("__all__ = [")
        output.extend(f"{_INDENT}{_string_literal(name)}," for name in public)
        output.append("]")

    def _write_accessor(self, resource: MergedResource, output: list[str]) -> None:
        parameters = ", ".join(self._parameter(argument) for argument in resource.arguments)
        output.append(f"def {resource.accessor_name}({parameters}) -> {_RESULT_TYPE}:")
        if resource.description:
            output.extend(_docstring(resource.description, _INDENT))
        output.append(f"{_INDENT}return {_RESULT_TYPE}(")
        output.append(f"{_INDENT * 2}id={_string_literal(resource.name)},")
        self._write_arguments(resource, output)
        output.append(f"{_INDENT})")

    @staticmethod
    def _parameter(argument: Argument) -> str:
        return f"{argument.name}: {PYTHON_TYPES[argument.type]}"

    @staticmethod
    def _write_arguments(resource: MergedResource, output: list[str]) -> None:
        indent = _INDENT * 2
        if not resource.arguments:
            output.append(f"{indent}arguments={{}},")
        elif resource.has_contiguous_numbered_tokens:
            output.append(f"{indent}arguments=(")
            output.extend(f"{indent}{_INDENT}{argument.name}," for argument in resource.arguments)
            output.append(f"{indent}),")
        else:
            output.append(f"{indent}arguments={{")
            output.extend(
                f"{indent}{_INDENT}{_string_literal(argument.key)}: {argument.name},"
                for argument in resource.arguments
            )
            output.append(f"{indent}}},")


def write_accessors(resources: Sequence[MergedResource], *, module_doc: str | None = None) -> str:
    """Render merged resources as a Python accessor module.

    Convenience function for AccessorWriter().write().

    Example:
        >>> from icuaccessors.merge import merge_resources
        >>> from icuaccessors.resources import ResourceFolder, StringResource, tokenize_resource
        >>> entry = tokenize_resource(StringResource("greeting", "Hi {name}"))
        >>> merged = merge_resources("greeting", {ResourceFolder.DEFAULT: entry}, None)
        >>> "def greeting(name: object) -> _runtime.FormattedResource:" in write_accessors([merged])
        True
    """
    return AccessorWriter().write(resources, module_doc=module_doc)
