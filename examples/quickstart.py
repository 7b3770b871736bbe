"""Quickstart example for icu-accessors.

This example builds a small res/ directory in a temporary folder, merges its
two locales, and prints the generated accessor module.

Note: Examples print merge errors instead of failing. In a build, run the
CLI with --strict so inconsistent translations break the build.
"""

import tempfile
from pathlib import Path

from icuaccessors import load_resource_directory, merge_all, tokenize, write_accessors

# Example 1: Tokenizing a single pattern
print("=" * 50)
print("Example 1: Tokenizing a Pattern")
print("=" * 50)

for token in tokenize("{detective} has {suspects, plural, =0 {no suspects} other {# suspects}}"):
    print(token)
# Output:
# NamedToken(name='detective', type=<ArgumentType.ANY: 'any'>)
# NamedToken(name='suspects', type=<ArgumentType.NUMBER: 'number'>)

# Example 2: Generating accessors from a res/ directory
print("\n" + "=" * 50)
print("Example 2: Generating Accessors")
print("=" * 50)

with tempfile.TemporaryDirectory() as tmp:
    res = Path(tmp) / "res"
    (res / "values").mkdir(parents=True)
    (res / "values-fr").mkdir()
    (res / "values" / "strings.xml").write_text(
        """<resources>
    <!-- Shown on the case summary screen -->
    <string name="detective_has_suspects">{detective} has {suspects, number} suspects</string>
    <string name="met_at">{0} met {1} at {2, time}</string>
</resources>
""",
        encoding="utf-8",
    )
    (res / "values-fr" / "strings.xml").write_text(
        """<resources>
    <string name="detective_has_suspects">{detective} a {suspects, number} suspects</string>
    <string name="met_at">{1} a rencontré {0} à {2, time}</string>
</resources>
""",
        encoding="utf-8",
    )

    loaded = load_resource_directory(res)
    report = merge_all(loaded.tokenize(), loaded.public_resources)
    for error in report.errors:
        print(f"[ERROR] {error}")
    print(write_accessors(report.resources, module_doc="Detective strings."))

# Example 3: An inconsistent translation
print("=" * 50)
print("Example 3: Inconsistent Translation")
print("=" * 50)

with tempfile.TemporaryDirectory() as tmp:
    res = Path(tmp) / "res"
    (res / "values").mkdir(parents=True)
    (res / "values-de").mkdir()
    (res / "values" / "strings.xml").write_text(
        '<resources><string name="count">{n, plural, other {# items}}</string></resources>',
        encoding="utf-8",
    )
    (res / "values-de" / "strings.xml").write_text(
        '<resources><string name="count">{n} Elemente</string></resources>',
        encoding="utf-8",
    )

    resources, errors = merge_all(load_resource_directory(res).tokenize(), None)
    print(f"Merged: {[resource.name for resource in resources]}")
    for error in errors:
        print(f"[ERROR] {error}")
# Output:
# Merged: []
# [ERROR] Resource 'count' has inconsistent arguments across locales (reference values; ...)
