import os
import re

_SEPARATOR_RE = re.compile(r"[-_](\S)")


def camel_case(filename: str, extension: str = ".py") -> str:
    """
    Turns a settings filename into its store key: drops directories and the
    extension, then removes each '-' or '_' and upper-cases the character after it.

    >>> camel_case("config/array-options.py")
    'arrayOptions'
    >>> camel_case("env_options.py")
    'envOptions'
    """
    basename = os.path.basename(filename)
    if extension and basename.endswith(extension):
        basename = basename[: -len(extension)]
    return _SEPARATOR_RE.sub(lambda match: match.group(1).upper(), basename)


def has_extension(filename: str, extension: str) -> bool:
    return filename.endswith(extension)
