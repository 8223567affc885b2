"""Hand-rolled vCard 3.0 generator for profile business cards.

Produces a contact file that phones and desktop address books import
directly.  Properties are emitted in a fixed order and only when the
profile carries the matching field, so output is deterministic for a
given profile.

vCard 3.0 chosen over 4.0 because Outlook rejects v4.0 and iCloud has import
failures with it.
"""

from __future__ import annotations

import re

from bizbuz.profiles import Profile

CRLF = "\r\n"

_FILENAME_UNSAFE = re.compile(r"[^a-zA-Z0-9.-]")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def escape_text(value: str) -> str:
    """Escape a TEXT property value per RFC 2426 section 4.

    Backslashes, commas and semicolons are backslash-escaped.  Newlines also
    become a literal ``\\n``: a raw line break inside a value would end the
    content line early and corrupt the CRLF framing, so multi-line values
    (a bio, say) are kept on one line.  Values without any of these
    characters pass through unchanged.
    """
    return (
        value.replace("\\", "\\\\")
        .replace(",", "\\,")
        .replace(";", "\\;")
        .replace("\r\n", "\\n")
        .replace("\n", "\\n")
    )


def structured_name(name: str) -> str:
    """Build the ``N`` property value (family;given;;;) from a display name.

    The first space-separated token is the given name and the remainder the
    family name.  Single-token names go in the given-name slot.
    """
    parts = name.split(" ")
    if len(parts) >= 2:
        family = " ".join(parts[1:])
        return f"{escape_text(family)};{escape_text(parts[0])};;;"
    return f";{escape_text(name)};;;"


def vcard_filename(profile: Profile) -> str:
    """Return the download filename for a profile's vCard.

    ``<name>.vcf`` (``contact.vcf`` without a name) with every character
    outside ``[A-Za-z0-9.-]`` replaced by ``_``.
    """
    return _FILENAME_UNSAFE.sub("_", f"{profile.name or 'contact'}.vcf")


# ---------------------------------------------------------------------------
# Profile vCard
# ---------------------------------------------------------------------------


def generate_profile_vcard(profile: Profile) -> str:
    """Generate a vCard 3.0 for a profile.

    Args:
        profile: The resolved profile.  Missing or empty fields are skipped.

    Returns:
        Complete vCard 3.0 string, every line terminated by CRLF.
    """
    lines: list[str] = ["BEGIN:VCARD", "VERSION:3.0"]

    if profile.name:
        lines.append(f"FN:{escape_text(profile.name)}")
        lines.append(f"N:{structured_name(profile.name)}")

    if profile.title:
        lines.append(f"TITLE:{escape_text(profile.title)}")

    if profile.company:
        lines.append(f"ORG:{escape_text(profile.company)}")

    if profile.email:
        lines.append(f"EMAIL;TYPE=INTERNET:{profile.email}")

    if profile.phone:
        lines.append(f"TEL;TYPE=CELL:{profile.phone}")

    if profile.website:
        lines.append(f"URL:{profile.website}")

    if profile.location:
        lines.append(f"ADR;TYPE=WORK:;;{escape_text(profile.location)};;;;")

    if profile.bio:
        lines.append(f"NOTE:{escape_text(profile.bio)}")

    social = profile.social
    if social is not None:
        if social.github:
            lines.append(f"URL;TYPE=GitHub:https://github.com/{social.github}")
        if social.twitter:
            lines.append(f"URL;TYPE=Twitter:https://twitter.com/{social.twitter}")
        if social.linkedin:
            lines.append(f"URL;TYPE=LinkedIn:https://linkedin.com/in/{social.linkedin}")

    lines.append("END:VCARD")

    return "".join(line + CRLF for line in lines)
