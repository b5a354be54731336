"""Built-in rule tables mapping directory and file names to exclude reasons.

Each table is a sequence of ``RuleEntry`` values sorted by pattern. The first entry whose
pattern matches a name wins, so table order is also the matching priority. Directory
patterns are matched case-insensitively, file patterns case-sensitively.
"""

from collections import Counter
from typing import Iterable, NamedTuple, Optional, Tuple

from tree2excludes.exceptions import RuleTableError
from tree2excludes.glob_matcher import matches
from tree2excludes.types import ExcludeReason

BUILD_TOOL = ExcludeReason.BUILD_TOOL
DOCUMENTATION = ExcludeReason.DOCUMENTATION
TEST = ExcludeReason.TEST
OTHER = ExcludeReason.OTHER


class RuleEntry(NamedTuple):
    """A single-segment wildcard pattern and the reason assigned to names it matches."""

    pattern: str
    reason: ExcludeReason


def check_rule_table(entries: Iterable[RuleEntry], name: str) -> Tuple[RuleEntry, ...]:
    """Validate that a rule table has unique patterns in lexicographic order.

    Args:
        entries: The rule entries in table order.
        name: A human-readable table name used in error messages.

    Returns:
        The validated entries as a tuple.

    Raises:
        RuleTableError: If a pattern occurs more than once or the patterns are not sorted.

    Example:
        >>> check_rule_table([RuleEntry("b", TEST), RuleEntry("a", TEST)], "example")
        Traceback (most recent call last):
        ...
        tree2excludes.exceptions.RuleTableError: The patterns in the example rules are not sorted alphabetically.
    """
    table = tuple(entries)
    patterns = [entry.pattern for entry in table]

    duplicates = sorted(pattern for pattern, count in Counter(patterns).items() if count > 1)
    if duplicates:
        raise RuleTableError(f"Found duplicate patterns in the {name} rules: {', '.join(duplicates)}.")

    if patterns != sorted(patterns):
        raise RuleTableError(f"The patterns in the {name} rules are not sorted alphabetically.")

    return table


def find_rule(name: str, rules: Iterable[RuleEntry], ignore_case: bool = False) -> Optional[RuleEntry]:
    """Return the first rule in table order whose pattern matches a name, if any.

    Example:
        >>> find_rule("Demo", DIRECTORY_RULES, ignore_case=True)
        RuleEntry(pattern='*demo', reason=<ExcludeReason.DOCUMENTATION: 'DOCUMENTATION_OF'>)
        >>> find_rule("main.c", FILE_RULES) is None
        True
    """
    return next((rule for rule in rules if matches(rule.pattern, name, ignore_case)), None)


DIRECTORY_RULES = check_rule_table(
    [
        RuleEntry("*checkstyle*", BUILD_TOOL),
        RuleEntry("*conformance*", BUILD_TOOL),
        RuleEntry("*demo", DOCUMENTATION),
        RuleEntry("*demos", DOCUMENTATION),
        RuleEntry("*documentation*", DOCUMENTATION),
        RuleEntry("*example*", DOCUMENTATION),
        RuleEntry("*fixtures*", TEST),
        RuleEntry("*mock*", BUILD_TOOL),
        RuleEntry("*performance*", BUILD_TOOL),
        RuleEntry("*profiler*", BUILD_TOOL),
        RuleEntry("*test*", TEST),
        RuleEntry(".github", BUILD_TOOL),
        RuleEntry(".gradle", BUILD_TOOL),
        RuleEntry(".idea", BUILD_TOOL),
        RuleEntry(".mvn", BUILD_TOOL),
        RuleEntry(".teamcity", BUILD_TOOL),
        RuleEntry(".travis", BUILD_TOOL),
        RuleEntry(".yarn", BUILD_TOOL),
        RuleEntry("bench", TEST),
        RuleEntry("benches", TEST),
        RuleEntry("benchmark", TEST),
        RuleEntry("benchmarks", TEST),
        RuleEntry("build", BUILD_TOOL),
        RuleEntry("buildSrc", BUILD_TOOL),
        RuleEntry("ci", BUILD_TOOL),
        RuleEntry("cmake", BUILD_TOOL),
        RuleEntry("codenarc", BUILD_TOOL),
        RuleEntry("debug", BUILD_TOOL),
        RuleEntry("demo", BUILD_TOOL),
        RuleEntry("doc", DOCUMENTATION),
        RuleEntry("doc-files", DOCUMENTATION),
        RuleEntry("docs", DOCUMENTATION),
        RuleEntry("e2e", TEST),
        RuleEntry("javadoc", DOCUMENTATION),
        RuleEntry("jsdoc", DOCUMENTATION),
        RuleEntry("m4", BUILD_TOOL),
        RuleEntry("manual", DOCUMENTATION),
        RuleEntry("scripts", BUILD_TOOL),
        RuleEntry("spec", DOCUMENTATION),
        RuleEntry("srcm4", BUILD_TOOL),
        RuleEntry("tools", BUILD_TOOL),
        RuleEntry("tutorial", DOCUMENTATION),
        RuleEntry("winbuild", BUILD_TOOL),
    ],
    "directory",
)

FILE_RULES = check_rule_table(
    [
        RuleEntry("*.bazel", BUILD_TOOL),
        RuleEntry("*.cmake", BUILD_TOOL),
        RuleEntry("*.cmakein", BUILD_TOOL),
        RuleEntry("*.csproj", BUILD_TOOL),
        RuleEntry("*.gemspec", BUILD_TOOL),
        RuleEntry("*.gradle", BUILD_TOOL),
        RuleEntry("*.m4", BUILD_TOOL),
        RuleEntry("*.mk", BUILD_TOOL),
        RuleEntry("*.nuspec", BUILD_TOOL),
        RuleEntry("*.pdf", DOCUMENTATION),
        RuleEntry("*.podspec", BUILD_TOOL),
        RuleEntry("*.rake", BUILD_TOOL),
        RuleEntry("*_test.go", TEST),
        RuleEntry("*coverage*.sh", BUILD_TOOL),
        RuleEntry(".editorconfig", OTHER),
        RuleEntry(".ort.yml", BUILD_TOOL),
        RuleEntry(".travis.yml", BUILD_TOOL),
        RuleEntry("BUILD", BUILD_TOOL),  # Bazel
        RuleEntry("Build.PL", BUILD_TOOL),
        RuleEntry("CHANGELOG*", BUILD_TOOL),
        RuleEntry("CHANGES", DOCUMENTATION),
        RuleEntry("CHANGES.md", DOCUMENTATION),
        RuleEntry("CHANGES.txt", DOCUMENTATION),
        RuleEntry("CMakeLists.txt", BUILD_TOOL),
        RuleEntry("CODE_OF_CONDUCT", DOCUMENTATION),
        RuleEntry("CODE_OF_CONDUCT.md", DOCUMENTATION),
        RuleEntry("CONTRIBUTING", DOCUMENTATION),
        RuleEntry("CONTRIBUTING.md", DOCUMENTATION),
        RuleEntry("CONTRIBUTING.rst", DOCUMENTATION),
        RuleEntry("CONTRIBUTING.txt", DOCUMENTATION),
        RuleEntry("Cakefile", BUILD_TOOL),
        RuleEntry("Cargo.toml", BUILD_TOOL),
        RuleEntry("ChangeLog*", DOCUMENTATION),
        RuleEntry("Configure", BUILD_TOOL),
        RuleEntry("DOCS.md", DOCUMENTATION),
        RuleEntry("Dockerfile", DOCUMENTATION),
        RuleEntry("HISTORY.md", DOCUMENTATION),
        RuleEntry("History.md", DOCUMENTATION),
        RuleEntry("INSTALL", DOCUMENTATION),
        RuleEntry("Makefile*", BUILD_TOOL),
        RuleEntry("Makefile.*", BUILD_TOOL),
        RuleEntry("NEWS.md", DOCUMENTATION),
        RuleEntry("Package.swift", BUILD_TOOL),
        RuleEntry("RELEASE-NOTES*", DOCUMENTATION),
        RuleEntry("Rakefile*", BUILD_TOOL),
        RuleEntry("SECURITY.md", DOCUMENTATION),
        RuleEntry("build*.sh", BUILD_TOOL),
        RuleEntry("build.gradle", BUILD_TOOL),
        RuleEntry("build.rs", BUILD_TOOL),  # Rust build script
        RuleEntry("build.sbt", BUILD_TOOL),
        RuleEntry("changelog*", BUILD_TOOL),
        RuleEntry("checksrc.bat", BUILD_TOOL),
        RuleEntry("codenarc.groovy", BUILD_TOOL),
        RuleEntry("conanfile.py", BUILD_TOOL),
        RuleEntry("config.guess", BUILD_TOOL),
        RuleEntry("config.sub", BUILD_TOOL),
        RuleEntry("configure", BUILD_TOOL),
        RuleEntry("configure.ac", BUILD_TOOL),
        RuleEntry("depcomp", BUILD_TOOL),
        RuleEntry("generate*.sh", BUILD_TOOL),
        RuleEntry("gradlew.bat", BUILD_TOOL),
        RuleEntry("jitpack.yml", BUILD_TOOL),
        RuleEntry("make-tests.sh", BUILD_TOOL),
        RuleEntry("makefile.*", BUILD_TOOL),
        RuleEntry("mkdocs.yml", BUILD_TOOL),
        RuleEntry("package.json", BUILD_TOOL),
        RuleEntry("proguard-rules.pro", BUILD_TOOL),
        RuleEntry("runsuite.c", TEST),
        RuleEntry("runtest.c", TEST),
        RuleEntry("settings.gradle", BUILD_TOOL),
        RuleEntry("setup.cfg", BUILD_TOOL),
        RuleEntry("setup.py", BUILD_TOOL),
        RuleEntry("test_*.c", BUILD_TOOL),
    ],
    "file",
)
