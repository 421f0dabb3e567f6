from __future__ import annotations

from dataclasses import dataclass
from functools import cmp_to_key, total_ordering

from toolchain_versions.decimals import compare_decimal

# Starting with this minor release, "1.N" names the language version and the
# first release is spelled "1.N.0".
LANGUAGE_VERSION_MINOR = "21"


@total_ordering
@dataclass(frozen=True, slots=True)
class ParsedVersion:
    """
    A parsed toolchain version: major[.minor[.patch]][kind[pre]].

    Numbers are kept as their decimal strings so arbitrarily long components
    never overflow. An empty field means the component is absent, which is
    distinct from "0". The all-empty record is the invalid sentinel.
    """

    major: str = ""
    minor: str = ""
    patch: str = ""
    kind: str = ""  # "", "alpha", "beta", "rc"
    pre: str = ""

    @property
    def is_valid(self) -> bool:
        return self.major != ""

    @property
    def is_language(self) -> bool:
        # "1.21" is the language version; "1.21rc1" and "1.21.0" are releases of it.
        return self.is_valid and self.patch == "" and self.kind == "" and self.pre == ""

    def __str__(self) -> str:
        if not self.is_valid:
            return ""
        out = self.major
        if self.minor:
            out += "." + self.minor
            if self.patch:
                out += "." + self.patch
        return out + self.kind + self.pre

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ParsedVersion):
            return NotImplemented
        return compare_parsed(self, other) < 0


INVALID = ParsedVersion()


def _cut_int(text: str) -> tuple[str, str] | None:
    # Leading decimal number and the remainder; None for no digits or a leading zero.
    i = 0
    while i < len(text) and "0" <= text[i] <= "9":
        i += 1
    if i == 0 or (text[0] == "0" and i != 1):
        return None
    return text[:i], text[i:]


def _parse_prerelease(text: str) -> tuple[str, str] | None:
    i = 0
    while i < len(text) and not ("0" <= text[i] <= "9"):
        if not ("a" <= text[i] <= "z"):
            return None
        i += 1
    if i == 0:
        return None
    kind, rest = text[:i], text[i:]
    cut = _cut_int(rest)
    if cut is None or cut[1] != "":
        return None
    return kind, cut[0]


def parse(text: str) -> ParsedVersion:
    """
    Parse a raw version such as "1.21.3" or "1.22rc2" (no "go" prefix).

    Never raises: malformed input yields INVALID. A bare major ("1") means
    "1.0.0"; a bare "1.N" means "1.N.0" only below 1.21.
    """

    cut = _cut_int(text)
    if cut is None:
        return INVALID
    major, rest = cut
    if rest == "":
        return ParsedVersion(major=major, minor="0", patch="0")

    if rest[0] != ".":
        return INVALID
    cut = _cut_int(rest[1:])
    if cut is None:
        return INVALID
    minor, rest = cut
    if rest == "":
        patch = "0" if compare_decimal(minor, LANGUAGE_VERSION_MINOR) < 0 else ""
        return ParsedVersion(major=major, minor=minor, patch=patch)

    patch = ""
    if rest[0] == ".":
        cut = _cut_int(rest[1:])
        if cut is None:
            return INVALID
        patch, rest = cut
        if rest == "":
            return ParsedVersion(major=major, minor=minor, patch=patch)

    prerelease = _parse_prerelease(rest)
    if prerelease is None:
        return INVALID
    kind, pre = prerelease
    return ParsedVersion(major=major, minor=minor, patch=patch, kind=kind, pre=pre)


def compare_parsed(vx: ParsedVersion, vy: ParsedVersion) -> int:
    """
    Order two parsed versions, returning -1, 0 or +1.

    Components compare in order major, minor, patch, kind, pre. Kinds order
    "" < alpha < beta < rc, except that for a patch release the final release
    ("") follows its prereleases. INVALID sorts before every valid version.
    """

    for a, b in ((vx.major, vy.major), (vx.minor, vy.minor), (vx.patch, vy.patch)):
        c = compare_decimal(a, b)
        if c != 0:
            return c

    if vx.kind != vy.kind:
        c = -1 if vx.kind < vy.kind else 1
        # Major, minor and patch are equal here, so vx.patch speaks for both sides.
        if vx.patch != "":
            if vx.kind == "":
                c = 1
            elif vy.kind == "":
                c = -1
        return c

    return compare_decimal(vx.pre, vy.pre)


def compare(x: str, y: str) -> int:
    """
    Compare raw versions x and y, returning -1, 0 or +1.

    Malformed versions compare less than well-formed ones and equal to each
    other. The language version "1.21" sorts before "1.21rc1" and "1.21.0".
    """

    return compare_parsed(parse(x), parse(y))


def is_valid(text: str) -> bool:
    return parse(text).is_valid


def is_lang(text: str) -> bool:
    return parse(text).is_language


def lang(text: str) -> str:
    """Language version of a raw version, e.g. lang("1.2.3") == "1.2"; "" when invalid."""
    v = parse(text)
    if v.minor == "" or (v.major == "1" and v.minor == "0"):
        return v.major
    return v.major + "." + v.minor


def max_version(x: str, y: str) -> str:
    # Ties go to x.
    if compare(x, y) < 0:
        return y
    return x


sort_key = cmp_to_key(compare)
