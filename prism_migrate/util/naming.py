"""Name conversion helpers."""


def hyphen_to_camel(name: str) -> str:
    """
    Convert a hyphenated account name to the identifier used in TypeScript.

    Every hyphen-separated segment gets its first character upper-cased and the
    segments are joined, so ``deploy-tools`` becomes ``DeployTools``. The rest
    of each segment is left as-is, which keeps the conversion idempotent.
    """
    return "".join(part[:1].upper() + part[1:] for part in name.split("-"))
