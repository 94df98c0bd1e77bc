"""Output file naming.

File name templates go through two passes:

1. ``[fontname]`` and ``[ext]`` are substituted case-insensitively
2. the result is interpolated by the content-hash scheme, which knows
   ``[hash]``, ``[contenthash]``, ``[<algo>:hash:<digest>:<length>]``,
   ``[name]``, ``[path]`` and ``[folder]``
"""

import base64
import hashlib
import os
import re
from pathlib import Path

_FONTNAME = re.compile(r"\[fontname\]", re.IGNORECASE)
_EXT = re.compile(r"\[ext\]", re.IGNORECASE)
_HASH = re.compile(
    r"\[(?:([^:\]]+):)?(?:hash|contenthash)(?::([a-z]+\d*))?(?::(\d+))?\]",
    re.IGNORECASE,
)

DEFAULT_HASH_TYPE = "md5"
DEFAULT_DIGEST_TYPE = "hex"


def substitute_placeholders(template: str, font_name: str, ext: str) -> str:
    """Replace ``[fontname]`` and ``[ext]`` in a file name template.

    Args:
        template: File name template
        font_name: Font family name
        ext: Bare extension such as ``woff``, or "" for none

    Returns:
        Template with both placeholders replaced
    """
    result = _FONTNAME.sub(lambda _: font_name, template)
    return _EXT.sub(lambda _: ext, result)


def hash_digest(
    content: bytes,
    hash_type: str = DEFAULT_HASH_TYPE,
    digest_type: str = DEFAULT_DIGEST_TYPE,
    length: int | None = None,
) -> str:
    """Hash ``content`` and encode the digest.

    Args:
        content: Bytes to hash
        hash_type: Any algorithm name known to ``hashlib``
        digest_type: ``hex``, ``base32`` or ``base64``
        length: Truncate the encoded digest to this many characters

    Returns:
        Encoded digest

    Raises:
        ValueError: If the hash or digest type is unknown
    """
    digest = hashlib.new(hash_type.lower(), content).digest()
    digest_type = digest_type.lower()

    if digest_type == "hex":
        encoded = digest.hex()
    elif digest_type == "base32":
        encoded = base64.b32encode(digest).decode("ascii").rstrip("=").lower()
    elif digest_type == "base64":
        encoded = base64.urlsafe_b64encode(digest).decode("ascii").rstrip("=")
    else:
        raise ValueError(f"Unknown digest type: {digest_type}")

    return encoded[:length] if length else encoded


def interpolate_name(
    template: str,
    content: bytes | str,
    resource_path: Path | None = None,
    context: Path | None = None,
) -> str:
    """Interpolate content-hash and resource placeholders.

    Args:
        template: File name with placeholders
        content: Content the hash is computed from
        resource_path: Source file the output derives from, for ``[name]``,
            ``[path]`` and ``[folder]``
        context: Directory ``[path]`` is relative to

    Returns:
        Interpolated file name
    """
    if isinstance(content, str):
        content = content.encode("utf-8")

    def replace_hash(match: re.Match[str]) -> str:
        hash_type, digest_type, length = match.groups()
        return hash_digest(
            content,
            hash_type=hash_type or DEFAULT_HASH_TYPE,
            digest_type=digest_type or DEFAULT_DIGEST_TYPE,
            length=int(length) if length else None,
        )

    name = "file"
    path = ""
    folder = ""
    if resource_path is not None:
        name = resource_path.stem
        directory = resource_path.parent
        folder = directory.name
        if context is not None:
            relative = os.path.relpath(directory, context)
            path = "" if relative == "." else relative.replace("\\", "/") + "/"

    result = _HASH.sub(replace_hash, template)
    result = result.replace("[name]", name)
    result = result.replace("[path]", path)
    return result.replace("[folder]", folder)
