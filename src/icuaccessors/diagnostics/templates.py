"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Sequence

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


def _span_at(pattern: str, start: int, end: int | None = None) -> SourceSpan:
    """Build a SourceSpan for a character range inside a pattern."""
    start = max(0, min(start, len(pattern)))
    end = start if end is None else max(start, min(end, len(pattern)))
    line = pattern.count("\n", 0, start) + 1
    line_start = pattern.rfind("\n", 0, start) + 1
    return SourceSpan(start=start, end=end, line=line, column=start - line_start + 1)


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # -- Pattern syntax --------------------------------------------------------

    @staticmethod
    def unclosed_brace(pattern: str, pos: int) -> Diagnostic:
        """Placeholder opened at pos never closes.

        Args:
            pattern: Pattern text
            pos: Offset of the unclosed '{'

        Returns:
            Diagnostic for UNBALANCED_BRACES
        """
        return Diagnostic(
            code=DiagnosticCode.UNBALANCED_BRACES,
            message=f"Unclosed '{{' at offset {pos}",
            span=_span_at(pattern, pos, len(pattern)),
            hint="Close every '{' with a matching '}' or quote it as '{'",
        )

    @staticmethod
    def unexpected_close_brace(pattern: str, pos: int) -> Diagnostic:
        """A '}' appears with no open placeholder.

        Args:
            pattern: Pattern text
            pos: Offset of the stray '}'

        Returns:
            Diagnostic for UNBALANCED_BRACES
        """
        return Diagnostic(
            code=DiagnosticCode.UNBALANCED_BRACES,
            message=f"Unexpected '}}' at offset {pos}",
            span=_span_at(pattern, pos, pos + 1),
            hint="Quote literal braces with apostrophes: '}'",
        )

    @staticmethod
    def mixed_reference_kinds(pattern: str, pos: int, reference: str) -> Diagnostic:
        """Named and numbered references in one pattern.

        Args:
            pattern: Pattern text
            pos: Offset of the first reference of the second kind
            reference: The offending reference

        Returns:
            Diagnostic for MIXED_REFERENCE_KINDS
        """
        return Diagnostic(
            code=DiagnosticCode.MIXED_REFERENCE_KINDS,
            message=f"Reference '{reference}' mixes named and numbered arguments",
            span=_span_at(pattern, pos, pos + len(reference)),
            hint="Use either {name} or {0} style references throughout a pattern",
        )

    @staticmethod
    def conflicting_argument_type(
        pattern: str, pos: int, reference: str, first: str, second: str
    ) -> Diagnostic:
        """Same reference with incompatible inferred types.

        Args:
            pattern: Pattern text
            pos: Offset of the conflicting occurrence
            reference: The reference used twice
            first: Type inferred from the first occurrence
            second: Type inferred from the conflicting occurrence

        Returns:
            Diagnostic for CONFLICTING_ARGUMENT_TYPE
        """
        return Diagnostic(
            code=DiagnosticCode.CONFLICTING_ARGUMENT_TYPE,
            message=f"Argument '{reference}' used as both {first} and {second}",
            span=_span_at(pattern, pos, pos + len(reference)),
            hint="Give each distinct value its own argument",
        )

    @staticmethod
    def malformed_argument(pattern: str, pos: int, detail: str) -> Diagnostic:
        """Placeholder content is not a valid argument.

        Args:
            pattern: Pattern text
            pos: Offset where the problem was detected
            detail: What was wrong

        Returns:
            Diagnostic for MALFORMED_ARGUMENT
        """
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_ARGUMENT,
            message=f"Malformed argument at offset {pos}: {detail}",
            span=_span_at(pattern, pos),
            hint="Arguments look like {name}, {0}, or {name, type, style}",
        )

    @staticmethod
    def nesting_depth_exceeded(pattern: str, pos: int, max_depth: int) -> Diagnostic:
        """Sub-message nesting exceeded the limit.

        Args:
            pattern: Pattern text
            pos: Offset of the sub-message that exceeded the limit
            max_depth: Configured limit

        Returns:
            Diagnostic for NESTING_DEPTH_EXCEEDED
        """
        return Diagnostic(
            code=DiagnosticCode.NESTING_DEPTH_EXCEEDED,
            message=f"Sub-message nesting exceeds maximum depth ({max_depth})",
            span=_span_at(pattern, pos),
            hint="Flatten nested plural/select arguments",
        )

    @staticmethod
    def pattern_too_long(length: int, max_length: int) -> Diagnostic:
        """Pattern exceeded MAX_PATTERN_LENGTH.

        Args:
            length: Actual pattern length
            max_length: Configured limit

        Returns:
            Diagnostic for PATTERN_TOO_LONG
        """
        return Diagnostic(
            code=DiagnosticCode.PATTERN_TOO_LONG,
            message=f"Pattern length {length} exceeds maximum {max_length}",
        )

    # -- Merge -----------------------------------------------------------------

    @staticmethod
    def inconsistent_shape(
        resource_name: str, reference_folder: str, conflicts: Sequence[tuple[str, str]]
    ) -> Diagnostic:
        """Locale sources disagree on argument shape.

        Args:
            resource_name: Resource being merged
            reference_folder: Folder whose shape was taken as canonical
            conflicts: (folder, reason) pairs for every disagreeing folder

        Returns:
            Diagnostic for INCONSISTENT_SHAPE
        """
        details = "; ".join(f"{folder}: {reason}" for folder, reason in conflicts)
        return Diagnostic(
            code=DiagnosticCode.INCONSISTENT_SHAPE,
            message=(
                f"Resource '{resource_name}' has inconsistent arguments across locales "
                f"(reference {reference_folder}; {details})"
            ),
            hint="Every translation must use the same argument names and types",
            resource_name=resource_name,
        )

    @staticmethod
    def name_collision(resource_name: str, other_name: str, accessor_name: str) -> Diagnostic:
        """Two resources produce the same accessor name.

        Args:
            resource_name: Resource that lost the name
            other_name: Resource that already owns it
            accessor_name: The sanitized accessor name

        Returns:
            Diagnostic for NAME_COLLISION
        """
        return Diagnostic(
            code=DiagnosticCode.NAME_COLLISION,
            message=(
                f"Resource '{resource_name}' and '{other_name}' both generate "
                f"accessor '{accessor_name}'"
            ),
            hint="Rename one of the resources",
            resource_name=resource_name,
        )

    @staticmethod
    def merge_failed(error_count: int) -> Diagnostic:
        """Strict mode run ended with merge errors.

        Args:
            error_count: Number of failed resources

        Returns:
            Diagnostic for MERGE_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.MERGE_FAILED,
            message=f"{error_count} resource(s) failed to merge",
        )

    @staticmethod
    def resource_dropped(resource_name: str, folder_count: int) -> Diagnostic:
        """No locale entry of a resource could be tokenized.

        Args:
            resource_name: Dropped resource
            folder_count: Number of folders that declared it

        Returns:
            Diagnostic for RESOURCE_DROPPED (warning)
        """
        return Diagnostic(
            code=DiagnosticCode.RESOURCE_DROPPED,
            message=(
                f"Resource '{resource_name}' skipped: pattern unparseable in all "
                f"{folder_count} folder(s)"
            ),
            hint="Fix the pattern syntax to generate an accessor",
            resource_name=resource_name,
            severity="warning",
        )

    # -- Input -----------------------------------------------------------------

    @staticmethod
    def public_surface_invalid(detail: str) -> Diagnostic:
        """Public-surface declarations could not be parsed.

        Args:
            detail: Parser error or offending element

        Returns:
            Diagnostic for PUBLIC_SURFACE_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.PUBLIC_SURFACE_INVALID,
            message=f"Invalid public resource declarations: {detail}",
            hint="Entries look like <public name=\"...\" type=\"string\"/>",
        )

    @staticmethod
    def resource_file_invalid(path: str, detail: str) -> Diagnostic:
        """A strings file could not be parsed.

        Args:
            path: File path
            detail: Parser error

        Returns:
            Diagnostic for RESOURCE_FILE_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.RESOURCE_FILE_INVALID,
            message=f"Cannot parse resource file: {detail}",
            location=path,
        )

    @staticmethod
    def resource_directory_missing(path: str) -> Diagnostic:
        """Resource directory does not exist.

        Args:
            path: Directory path

        Returns:
            Diagnostic for RESOURCE_DIRECTORY_MISSING
        """
        return Diagnostic(
            code=DiagnosticCode.RESOURCE_DIRECTORY_MISSING,
            message=f"Resource directory not found: {path}",
            location=path,
        )

    @staticmethod
    def unknown_locale_qualifier(qualifier: str) -> Diagnostic:
        """Folder qualifier does not name a locale Babel knows.

        Args:
            qualifier: Folder qualifier (e.g., "xx-rYY")

        Returns:
            Diagnostic for UNKNOWN_LOCALE_QUALIFIER (warning)
        """
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_LOCALE_QUALIFIER,
            message=f"Folder qualifier '{qualifier}' is not a known locale",
            location=qualifier,
            severity="warning",
        )
