"""
fec_config -- named parse-option profiles for FEC imports.

Responsibility:
    Provides ``get_parse_options()``, the way to obtain ``ParseOptions`` from
    a named YAML profile instead of hard-coding separators and encodings at
    call sites.  Profiles live in ``fec_config/profiles/*.yaml``; a different
    directory may be passed for tests or deployments.

Architecture position:
    Configuration -- sits above ``fec_ingestion.domain`` (it builds the
    domain's ``ParseOptions``).  Nothing in ``fec_ingestion`` imports from
    ``fec_config``.

Failure modes:
    - ``UnknownProfileError`` -- no profile with that name.
    - ``ValueError`` -- profile contains unknown keys or invalid values.
    - ``yaml.YAMLError`` -- malformed profile file.
"""

from __future__ import annotations

from pathlib import Path

from fec_kernel.exceptions import UnknownProfileError
from fec_kernel.logging_config import get_logger

from fec_config.loader import load_profile, load_yaml_file, parse_options_from_dict
from fec_ingestion.domain.types import ParseOptions

__all__ = [
    "DEFAULT_PROFILE",
    "available_profiles",
    "get_parse_options",
    "load_yaml_file",
    "parse_options_from_dict",
]

_logger = get_logger("config")

_DEFAULT_PROFILE_DIR = Path(__file__).parent / "profiles"

DEFAULT_PROFILE = "standard"


def _load_profiles(config_dir: Path) -> dict[str, tuple[Path, ParseOptions]]:
    profiles: dict[str, tuple[Path, ParseOptions]] = {}
    for path in sorted(config_dir.glob("*.yaml")):
        name, options = load_profile(path)
        profiles[name] = (path, options)
    return profiles


def available_profiles(config_dir: Path | None = None) -> list[str]:
    """Names of all profiles in the directory, sorted."""
    return sorted(_load_profiles(config_dir or _DEFAULT_PROFILE_DIR))


def get_parse_options(
    profile: str = DEFAULT_PROFILE,
    config_dir: Path | None = None,
) -> ParseOptions:
    """Return the ParseOptions of a named profile.

    Args:
        profile: Profile name (the ``name`` key, or the file stem).
        config_dir: Override path to the profiles directory.
            Defaults to fec_config/profiles/.

    Raises:
        UnknownProfileError: If no profile has that name.
        ValueError: If the profile is invalid.
    """
    profiles = _load_profiles(config_dir or _DEFAULT_PROFILE_DIR)
    if profile not in profiles:
        raise UnknownProfileError(profile, sorted(profiles))
    path, options = profiles[profile]

    _logger.info(
        "fec_parse_profile_loaded",
        extra={
            "profile": profile,
            "path": str(path),
            "separator": options.separator,
            "text_encoding": options.text_encoding,
            "skip_first_line": options.skip_first_line,
        },
    )
    return options
