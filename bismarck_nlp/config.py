from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from .types import PipelineStage

DEFAULT_STAGES = ["tokenize", "pos", "ner", "parse", "coref"]
DEFAULT_LANGUAGE = "de"

# Accepted spellings of the option keys in configuration dicts.
_OPTION_KEYS = {
    "caseSensitive": "case_sensitive",
    "case_sensitive": "case_sensitive",
    "keepPunctuation": "keep_punctuation",
    "keep_punctuation": "keep_punctuation",
    "customDictionary": "custom_dictionary",
    "custom_dictionary": "custom_dictionary",
}

_STAGE_NAMES = {stage.value for stage in PipelineStage}


def _validate_stages(stages: Iterable[Any]) -> List[str]:
    result: List[str] = []
    for stage in stages:
        name = stage.value if isinstance(stage, PipelineStage) else str(stage)
        if name not in _STAGE_NAMES:
            raise ValueError(
                f"Unknown pipeline stage '{name}'. Expected one of: {sorted(_STAGE_NAMES)}"
            )
        if name not in result:
            result.append(name)
    return result


def _option_updates(data: Mapping[str, Any]) -> Dict[str, Any]:
    updates: Dict[str, Any] = {}
    for key, value in data.items():
        if key not in _OPTION_KEYS:
            raise ValueError(f"Unknown pipeline option '{key}'.")
        name = _OPTION_KEYS[key]
        if name == "custom_dictionary" and value is not None:
            value = list(value)
        updates[name] = value
    return updates


@dataclass
class PipelineOptions:
    """Options shared by the stage processors."""

    case_sensitive: bool = True
    keep_punctuation: bool = True
    custom_dictionary: Optional[List[str]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "caseSensitive": self.case_sensitive,
            "keepPunctuation": self.keep_punctuation,
            "customDictionary": (
                list(self.custom_dictionary) if self.custom_dictionary is not None else None
            ),
        }


@dataclass
class PipelineConfig:
    """Top-level pipeline configuration."""

    stages: List[str] = field(default_factory=lambda: list(DEFAULT_STAGES))
    language: str = DEFAULT_LANGUAGE
    options: PipelineOptions = field(default_factory=PipelineOptions)

    def __post_init__(self) -> None:
        self.stages = _validate_stages(self.stages)

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "PipelineConfig":
        return merge_config(PipelineConfig(), data)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "stages": list(self.stages),
            "language": self.language,
            "options": self.options.to_dict(),
        }

    def copy(self) -> "PipelineConfig":
        return PipelineConfig(
            stages=list(self.stages),
            language=self.language,
            options=replace(
                self.options,
                custom_dictionary=(
                    list(self.options.custom_dictionary)
                    if self.options.custom_dictionary is not None
                    else None
                ),
            ),
        )


def merge_config(
    base: PipelineConfig, update: Union[PipelineConfig, Mapping[str, Any], None]
) -> PipelineConfig:
    """
    Layer a partial update onto ``base`` and return a new config.

    Top-level fields present in ``update`` (``stages``, ``language``) replace
    the base values. ``options`` is merged field by field: only the option
    keys present in the update override the base options. ``base`` is never
    modified.

    Args:
        base: Current configuration.
        update: Partial configuration dict (camelCase or snake_case option
            keys) or a full PipelineConfig.

    Returns:
        The merged configuration.
    """
    merged = base.copy()
    if update is None:
        return merged
    if isinstance(update, PipelineConfig):
        update = update.to_dict()

    for key, value in update.items():
        if key == "stages":
            merged.stages = _validate_stages(value)
        elif key == "language":
            merged.language = str(value)
        elif key == "options":
            if value is None:
                continue
            if isinstance(value, PipelineOptions):
                value = value.to_dict()
            merged.options = replace(merged.options, **_option_updates(value))
        else:
            raise ValueError(f"Unknown pipeline config key '{key}'.")
    return merged


@dataclass
class ProcessingOptions:
    """Per-call stage switches. ``None`` means "not specified"."""

    tokenize: Optional[bool] = None
    pos: Optional[bool] = None
    ner: Optional[bool] = None
    parse: Optional[bool] = None
    coref: Optional[bool] = None
    sentiment: Optional[bool] = None

    @staticmethod
    def from_value(
        value: Union["ProcessingOptions", Mapping[str, Any], None]
    ) -> Optional["ProcessingOptions"]:
        if value is None or isinstance(value, ProcessingOptions):
            return value
        known = {f.name for f in fields(ProcessingOptions)}
        unknown = set(value) - known
        if unknown:
            raise ValueError(f"Unknown processing options: {sorted(unknown)}")
        return ProcessingOptions(**dict(value))

    def allows(self, stage: str) -> bool:
        """A stage runs unless it was explicitly switched off."""
        return getattr(self, stage) is not False
