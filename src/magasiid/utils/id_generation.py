"""ID generation utilities.

Identifiers are assembled from optional segments::

    {prefix}-{timestamp}-{random body}-{checksum}

The checksum is the sum of the code points of every non-dash character,
modulo 36, rendered as one base-36 digit. It is a corruption hint, not a
security control.
"""

import random
from typing import Optional, Union

from ..config import ID_SEGMENT_SEPARATOR, FORMAT_PLACEHOLDER
from ..exceptions import InvalidConfigurationError
from ..models import IDConfiguration
from .datetime import epoch_millis

BASE36_DIGITS = '0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ'

ConfigLike = Union[IDConfiguration, dict, None]


def to_base36(value: int) -> str:
    """Render a non-negative integer as upper-case base-36 digits."""
    if value < 0:
        raise ValueError("value must be non-negative")
    if value == 0:
        return '0'
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(BASE36_DIGITS[rem])
    return ''.join(reversed(digits))


def strip_separators(value: str) -> str:
    return value.replace(ID_SEGMENT_SEPARATOR, '')


def resolve_config(partial: ConfigLike = None) -> IDConfiguration:
    """Merge a partial configuration over the defaults.

    Args:
        partial: IDConfiguration, dict of fields (snake_case or camelCase), or None

    Returns:
        Fully-populated IDConfiguration; explicitly set fields win verbatim
    """
    if partial is None:
        return IDConfiguration.defaults()
    if not isinstance(partial, IDConfiguration):
        partial = IDConfiguration.model_validate(partial)
    return IDConfiguration.defaults().model_copy(update=partial.overrides())


def calculate_checksum(value: str) -> str:
    """Single base-36 checksum character over the dash-stripped value."""
    total = sum(ord(ch) for ch in strip_separators(value))
    return BASE36_DIGITS[total % 36]


def format_id(identifier: str, pattern: str) -> str:
    """Rewrite an identifier into a placeholder pattern.

    Each 'X' in the pattern takes the next identifier character; any other
    pattern character is copied literally. Once the identifier runs out the
    remaining placeholders are emitted as a literal 'X', and identifier
    characters beyond the last placeholder are dropped.

    Example: format_id("ABCDEFGH", "XXXX-XXXX") -> "ABCD-EFGH"
    """
    out = []
    chars = iter(identifier)
    for ch in pattern:
        if ch == FORMAT_PLACEHOLDER:
            out.append(next(chars, FORMAT_PLACEHOLDER))
        else:
            out.append(ch)
    return ''.join(out)


def _check_domain(config: IDConfiguration) -> None:
    if config.length is None:
        raise InvalidConfigurationError("length must be set")
    if config.length < 0:
        raise InvalidConfigurationError(f"length must be non-negative, got {config.length}")
    if not config.custom_char_set:
        raise InvalidConfigurationError("custom_char_set must not be empty")


def generate_advanced_id(config: ConfigLike = None, rng: Optional[random.Random] = None) -> str:
    """Generate an identifier from the given (partial) configuration.

    Segments are appended in order: prefix, timestamp, random body, checksum.
    When the prefix and timestamp already use up ``length`` the random body is
    empty and the id is simply longer than ``length``. ``custom_format`` is
    applied last and may make the checksum unverifiable.

    Args:
        config: Partial configuration (see resolve_config)
        rng: Random source (defaults to the module-level PRNG)

    Returns:
        Identifier string

    Raises:
        InvalidConfigurationError: negative/unset length or empty char set
    """
    cfg = resolve_config(config)
    _check_domain(cfg)
    rng = rng or random

    sep = ID_SEGMENT_SEPARATOR if cfg.use_dashes else ''
    id_ = ''

    if cfg.prefix:
        id_ += cfg.prefix + sep

    if cfg.include_timestamp:
        id_ += to_base36(epoch_millis()) + sep

    remaining = cfg.length - len(strip_separators(id_))
    if remaining > 0:
        charset = cfg.custom_char_set
        id_ += ''.join(rng.choice(charset) for _ in range(remaining))

    if cfg.include_checksum:
        id_ += sep + calculate_checksum(id_)

    if cfg.custom_format:
        id_ = format_id(id_, cfg.custom_format)

    return id_


def validate_id(id: str, config: ConfigLike = None) -> bool:
    """Check prefix and checksum of an identifier.

    With dashes enabled the claimed checksum is the segment after the last
    dash; without them it is the final character. Identifiers rewritten
    through ``custom_format`` are not guaranteed to validate.
    """
    cfg = resolve_config(config)

    if not id:
        return False

    if cfg.prefix and not id.startswith(cfg.prefix):
        return False

    if cfg.include_checksum:
        if cfg.use_dashes:
            body, _, claimed = id.rpartition(ID_SEGMENT_SEPARATOR)
        else:
            body, claimed = id[:-1], id[-1:]
        if calculate_checksum(body) != claimed:
            return False

    return True


def generate_batch(count: int, config: ConfigLike = None, rng: Optional[random.Random] = None) -> list[str]:
    """Generate ``count`` independent identifiers.

    Nothing is registered and the batch may contain duplicates.
    """
    if count < 0:
        raise InvalidConfigurationError(f"count must be non-negative, got {count}")
    cfg = resolve_config(config)
    return [generate_advanced_id(cfg, rng=rng) for _ in range(count)]
