import logging
import re
from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    Dict,
    Iterator,
    List,
    Mapping,
    Optional,
    Tuple,
    TYPE_CHECKING,
)

from .exceptions import InvalidOptionError, InvalidPrecisionError
from .options import CompilerOptions
from .styles import OutputStyle

if TYPE_CHECKING:
    from .context import CompilerContext

log = logging.getLogger(__name__)

ConfigurationBag = Mapping[str, Any]

DEFAULT_PRECISION = 5
DEFAULT_STYLE = OutputStyle.NESTED

_DIGITS = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class OptionRule:
    """One recognized configuration key.

    ``coerce`` validates the raw value and runs before anything is mutated.
    ``apply`` is ``None`` for keys that are accepted but handled elsewhere.
    """

    key: str
    coerce: Callable[[Any], Any]
    apply: Optional[Callable[[CompilerOptions, Any], None]]


def _identity(value: Any) -> Any:
    return value


def _flag(value: Any) -> bool:
    return bool(value)


def _precision(value: Any) -> int:
    if isinstance(value, bool):
        raise InvalidPrecisionError(value)
    if isinstance(value, int):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if not _DIGITS.fullmatch(text):
            raise InvalidPrecisionError(value)
        parsed = int(text, 10)
    else:
        raise InvalidPrecisionError(value)
    if parsed < 0:
        raise InvalidPrecisionError(value)
    return parsed


def _paths(key: str) -> Callable[[Any], Tuple[str, ...]]:
    def coerce(value: Any) -> Tuple[str, ...]:
        values = [value] if isinstance(value, str) else value
        if not isinstance(values, (list, tuple)):
            raise InvalidOptionError(key, value, "a path or a list of paths")
        for item in values:
            if not isinstance(item, str) or not item:
                raise InvalidOptionError(key, item, "a non-empty path")
        return tuple(values)

    return coerce


def _set_style(options: CompilerOptions, style: OutputStyle) -> None:
    options.output_style = style


def _set_precision(options: CompilerOptions, precision: int) -> None:
    options.precision = precision


def _enable(attr: str) -> Callable[[CompilerOptions, bool], None]:
    def apply(options: CompilerOptions, enabled: bool) -> None:
        if enabled:
            setattr(options, attr, True)

    return apply


def _add_include_paths(options: CompilerOptions, paths: Tuple[str, ...]) -> None:
    for path in paths:
        options.add_include_path(path)


def _add_plugin_paths(options: CompilerOptions, paths: Tuple[str, ...]) -> None:
    for path in paths:
        options.add_plugin_path(path)


DEFAULT_RULES: List[OptionRule] = [
    OptionRule("stdin", _identity, None),
    OptionRule("style", OutputStyle.from_name, _set_style),
    OptionRule("lineNumbers", _flag, _enable("source_comments")),
    OptionRule("loadPath", _paths("loadPath"), _add_include_paths),
    OptionRule("pluginPath", _paths("pluginPath"), _add_plugin_paths),
    OptionRule("sourcemap", _identity, None),
    OptionRule("omitMapComment", _flag, _enable("omit_map_comment")),
    OptionRule("precision", _precision, _set_precision),
    OptionRule("sass", _flag, _enable("indented_syntax")),
]


class OptionTranslator:
    """Applies a configuration bag to a :class:`CompilerOptions` handle.

    Unknown keys are ignored. ``stdin`` and ``sourcemap`` are recognized but
    leave the handle unchanged. All values are validated before the first
    native call, so a rejected bag leaves the handle as it was.
    """

    def __init__(self, rules: Optional[List[OptionRule]] = None):
        self.rules: Dict[str, OptionRule] = {
            rule.key: rule for rule in (rules if rules is not None else DEFAULT_RULES)
        }

    def plan(self, bag: ConfigurationBag) -> Iterator[Tuple[OptionRule, Any]]:
        for raw_key, raw_value in bag.items():
            rule = self.rules.get(raw_key)
            if rule is None:
                log.debug("Ignoring unknown option %r", raw_key)
                continue
            yield rule, rule.coerce(raw_value)

    def apply(self, options: CompilerOptions, bag: ConfigurationBag) -> CompilerOptions:
        planned = list(self.plan(bag))

        options.precision = DEFAULT_PRECISION
        options.output_style = DEFAULT_STYLE

        for rule, value in planned:
            if rule.apply is None:
                log.debug("Option %r accepted without native effect", rule.key)
                continue
            rule.apply(options, value)
            log.debug("Applied option %s=%r", rule.key, value)
        return options


def translate(
    context: "CompilerContext",
    bag: ConfigurationBag,
    translator: Optional[OptionTranslator] = None,
) -> CompilerOptions:
    """Create an options handle configured from ``bag``.

    The handle is released if translation fails; on success the caller owns
    it and must dispose it.
    """
    options = context.create_options()
    try:
        return (translator or OptionTranslator()).apply(options, bag)
    except BaseException:
        options.dispose()
        raise
